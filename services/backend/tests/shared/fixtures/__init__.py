"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    TEST_DATABASE_URL,
    account_model,
    transaction_models,
)
from tests.shared.fixtures.factories import (
    FIXED_TODAY,
    TestAccountFactory,
    TestPatternFactory,
    TestTransactionFactory,
    fixed_today,
)

__all__ = [
    "FIXED_TODAY",
    "TEST_DATABASE_URL",
    "TestAccountFactory",
    "TestPatternFactory",
    "TestTransactionFactory",
    "account_model",
    "fixed_today",
    "transaction_models",
]
