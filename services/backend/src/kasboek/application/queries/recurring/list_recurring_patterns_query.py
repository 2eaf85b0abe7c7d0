"""List recurring patterns query - retrieve an account's patterns for display."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.exceptions import AccountNotFoundError
from kasboek.domain.recurring.repositories import (
    LedgerAccountRepository,
    RecurringPatternRepository,
)
from kasboek.domain.recurring.value_objects import Frequency

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory


class ListRecurringPatternsQuery:
    """Query to list recurring patterns ordered by next expected date."""

    def __init__(
        self,
        account_repository: LedgerAccountRepository,
        pattern_repository: RecurringPatternRepository,
    ):
        self._account_repo = account_repository
        self._pattern_repo = pattern_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListRecurringPatternsQuery:
        return cls(
            account_repository=factory.ledger_account_repository(),
            pattern_repository=factory.recurring_pattern_repository(),
        )

    async def execute(
        self,
        account_id: UUID,
        frequency: Optional[Union[str, Frequency]] = None,
        active_only: Optional[bool] = None,
    ) -> list[RecurringPattern]:
        if not await self._account_repo.exists(account_id):
            raise AccountNotFoundError(account_id)

        if frequency is not None:
            parsed = Frequency.parse(frequency)
            patterns = await self._pattern_repo.find_by_account_and_frequency(
                account_id,
                parsed,
            )
            if active_only:
                patterns = [p for p in patterns if p.is_active]
            return patterns

        if active_only:
            return await self._pattern_repo.find_active_by_account(account_id)

        return await self._pattern_repo.find_by_account(account_id)
