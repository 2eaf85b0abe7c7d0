"""Summary and frequency grouping of an account's recurring patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from kasboek.application.dtos.recurring import RecurringSummary
from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.exceptions import AccountNotFoundError
from kasboek.domain.recurring.repositories import (
    LedgerAccountRepository,
    RecurringPatternRepository,
)
from kasboek.domain.recurring.value_objects import Frequency, TransactionType

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory


class RecurringSummaryQuery:
    """Query aggregated views over an account's patterns."""

    def __init__(
        self,
        account_repository: LedgerAccountRepository,
        pattern_repository: RecurringPatternRepository,
    ):
        self._account_repo = account_repository
        self._pattern_repo = pattern_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RecurringSummaryQuery:
        return cls(
            account_repository=factory.ledger_account_repository(),
            pattern_repository=factory.recurring_pattern_repository(),
        )

    async def summary(self, account_id: UUID) -> RecurringSummary:
        await self._ensure_account(account_id)
        patterns = await self._pattern_repo.find_by_account(account_id)

        active_monthly = [
            p for p in patterns if p.is_active and p.frequency == Frequency.MONTHLY
        ]
        return RecurringSummary(
            total=len(patterns),
            active=sum(1 for p in patterns if p.is_active),
            monthly_debit=sum(
                p.predicted_amount
                for p in active_monthly
                if p.transaction_type == TransactionType.DEBIT
            ),
            monthly_credit=sum(
                p.predicted_amount
                for p in active_monthly
                if p.transaction_type == TransactionType.CREDIT
            ),
        )

    async def grouped_by_frequency(
        self,
        account_id: UUID,
        active_only: bool = True,
    ) -> dict[Frequency, list[RecurringPattern]]:
        """Patterns keyed by frequency; every frequency is present."""
        await self._ensure_account(account_id)
        if active_only:
            patterns = await self._pattern_repo.find_active_by_account(account_id)
        else:
            patterns = await self._pattern_repo.find_by_account(account_id)

        grouped: dict[Frequency, list[RecurringPattern]] = {f: [] for f in Frequency}
        for pattern in patterns:
            grouped[pattern.frequency].append(pattern)
        return grouped

    async def _ensure_account(self, account_id: UUID) -> None:
        if not await self._account_repo.exists(account_id):
            raise AccountNotFoundError(account_id)
