"""
In-memory SQLite helpers for integration tests.

The database is built through the application's own engine factory so
savepoints and the shared in-memory connection behave as in the app.

Usage:
    # In your conftest.py
    from tests.shared.fixtures.database import TEST_DATABASE_URL, account_model

    session.add(account_model(TestAccountFactory.CHECKING_ID))
"""

from typing import Iterable
from uuid import UUID

from kasboek.domain.recurring.value_objects import LedgerTransaction
from kasboek.infrastructure.persistence.sqlalchemy.models import (
    LedgerAccountModel,
    LedgerTransactionModel,
)
from tests.shared.fixtures.factories import TestAccountFactory

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def account_model(account_id: UUID, name: str = "Betaalrekening") -> LedgerAccountModel:
    """Ledger account row for seeding."""
    return LedgerAccountModel(
        id=account_id,
        name=name,
        iban=TestAccountFactory.CHECKING_IBAN,
        currency="EUR",
    )


def transaction_models(
    transactions: Iterable[LedgerTransaction],
) -> list[LedgerTransactionModel]:
    """Ledger transaction rows mirroring the given value objects."""
    return [
        LedgerTransactionModel(
            id=t.id,
            account_id=t.account_id,
            booking_date=t.booking_date,
            amount=t.amount,
            description=t.description,
            counterparty_iban=t.counterparty_iban,
            transaction_type=t.transaction_type,
            category_id=t.category_id,
            parent_transaction_id=t.parent_transaction_id,
        )
        for t in transactions
    ]
