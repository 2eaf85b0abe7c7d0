"""SQLAlchemy repository factory bound to one session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from kasboek.infrastructure.persistence.sqlalchemy.repositories.ledger_account_repository import (  # NOQA: E501
    LedgerAccountRepositorySQLAlchemy,
)
from kasboek.infrastructure.persistence.sqlalchemy.repositories.ledger_transaction_repository import (  # NOQA: E501
    LedgerTransactionRepositorySQLAlchemy,
)
from kasboek.infrastructure.persistence.sqlalchemy.repositories.recurring_pattern_repository import (  # NOQA: E501
    RecurringPatternRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._account_repo: LedgerAccountRepositorySQLAlchemy | None = None
        self._transaction_repo: LedgerTransactionRepositorySQLAlchemy | None = None
        self._pattern_repo: RecurringPatternRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def ledger_account_repository(self) -> LedgerAccountRepositorySQLAlchemy:
        if self._account_repo is None:
            self._account_repo = LedgerAccountRepositorySQLAlchemy(self._session)
        return self._account_repo

    def ledger_transaction_repository(self) -> LedgerTransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = LedgerTransactionRepositorySQLAlchemy(
                self._session,
            )
        return self._transaction_repo

    def recurring_pattern_repository(self) -> RecurringPatternRepositorySQLAlchemy:
        if self._pattern_repo is None:
            self._pattern_repo = RecurringPatternRepositorySQLAlchemy(self._session)
        return self._pattern_repo
