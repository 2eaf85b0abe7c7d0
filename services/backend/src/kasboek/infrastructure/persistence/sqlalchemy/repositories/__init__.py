"""SQLAlchemy repository implementations."""

from kasboek.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from kasboek.infrastructure.persistence.sqlalchemy.repositories.ledger_account_repository import (  # NOQA: E501
    LedgerAccountRepositorySQLAlchemy,
)
from kasboek.infrastructure.persistence.sqlalchemy.repositories.ledger_transaction_repository import (  # NOQA: E501
    LedgerTransactionRepositorySQLAlchemy,
)
from kasboek.infrastructure.persistence.sqlalchemy.repositories.recurring_pattern_repository import (  # NOQA: E501
    RecurringPatternRepositorySQLAlchemy,
)

__all__ = [
    "LedgerAccountRepositorySQLAlchemy",
    "LedgerTransactionRepositorySQLAlchemy",
    "RecurringPatternRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
]
