"""Upcoming and overdue recurring payments."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, Callable
from uuid import UUID

from kasboek.application.dtos.recurring import UpcomingPayment
from kasboek.domain.recurring.exceptions import AccountNotFoundError
from kasboek.domain.recurring.repositories import (
    LedgerAccountRepository,
    RecurringPatternRepository,
)
from kasboek.domain.shared.time import today_utc

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory

DEFAULT_UPCOMING_DAYS = 30


class UpcomingRecurringQuery:
    """Query active patterns by their next expected date."""

    def __init__(
        self,
        account_repository: LedgerAccountRepository,
        pattern_repository: RecurringPatternRepository,
        today: Callable[[], date] = today_utc,
    ):
        self._account_repo = account_repository
        self._pattern_repo = pattern_repository
        self._today = today

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        today: Callable[[], date] = today_utc,
    ) -> UpcomingRecurringQuery:
        return cls(
            account_repository=factory.ledger_account_repository(),
            pattern_repository=factory.recurring_pattern_repository(),
            today=today,
        )

    async def upcoming(
        self,
        account_id: UUID,
        days: int = DEFAULT_UPCOMING_DAYS,
    ) -> list[UpcomingPayment]:
        """Patterns expected within ``[today, today + days]``."""
        await self._ensure_account(account_id)
        today = self._today()
        patterns = await self._pattern_repo.find_upcoming(
            account_id,
            today,
            today + timedelta(days=days),
        )
        return [UpcomingPayment.from_pattern(p, today) for p in patterns]

    async def overdue(self, account_id: UUID) -> list[UpcomingPayment]:
        """Patterns whose expected date has already passed."""
        await self._ensure_account(account_id)
        today = self._today()
        patterns = await self._pattern_repo.find_overdue(account_id, today)
        return [UpcomingPayment.from_pattern(p, today) for p in patterns]

    async def _ensure_account(self, account_id: UUID) -> None:
        if not await self._account_repo.exists(account_id):
            raise AccountNotFoundError(account_id)
