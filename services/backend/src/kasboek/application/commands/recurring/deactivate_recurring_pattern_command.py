"""Soft-delete a recurring pattern."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.exceptions import RecurringPatternNotFoundError
from kasboek.domain.recurring.repositories import RecurringPatternRepository

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeactivateRecurringPatternCommand:
    """Deactivate a pattern instead of removing it."""

    def __init__(self, pattern_repository: RecurringPatternRepository):
        self._pattern_repo = pattern_repository

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> DeactivateRecurringPatternCommand:
        return cls(pattern_repository=factory.recurring_pattern_repository())

    async def execute(self, pattern_id: UUID, account_id: UUID) -> RecurringPattern:
        pattern = await self._pattern_repo.find_by_id(pattern_id)
        if pattern is None or pattern.account_id != account_id:
            raise RecurringPatternNotFoundError(pattern_id, account_id)

        pattern.deactivate()
        await self._pattern_repo.save(pattern)
        logger.info("Deactivated recurring pattern %s", pattern.id)
        return pattern
