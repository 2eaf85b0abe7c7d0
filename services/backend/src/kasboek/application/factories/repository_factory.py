"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from kasboek.domain.recurring.repositories import (
    LedgerAccountRepository,
    LedgerTransactionRepository,
    RecurringPatternRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def ledger_account_repository(self) -> LedgerAccountRepository:
        """Get ledger account repository."""
        ...

    def ledger_transaction_repository(self) -> LedgerTransactionRepository:
        """Get ledger transaction repository."""
        ...

    def recurring_pattern_repository(self) -> RecurringPatternRepository:
        """Get recurring pattern repository."""
        ...
