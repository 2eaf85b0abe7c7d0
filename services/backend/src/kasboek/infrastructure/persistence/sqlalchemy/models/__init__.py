"""SQLAlchemy models for persistence layer."""

from kasboek.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from kasboek.infrastructure.persistence.sqlalchemy.models.ledger_account_model import (
    LedgerAccountModel,
)
from kasboek.infrastructure.persistence.sqlalchemy.models.ledger_transaction_model import (  # NOQA: E501
    LedgerTransactionModel,
)
from kasboek.infrastructure.persistence.sqlalchemy.models.recurring_pattern_model import (  # NOQA: E501
    RecurringPatternModel,
)

__all__ = [
    "Base",
    "LedgerAccountModel",
    "LedgerTransactionModel",
    "RecurringPatternModel",
    "TimestampMixin",
]
