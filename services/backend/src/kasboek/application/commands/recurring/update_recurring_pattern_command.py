"""Update user-editable fields of a recurring pattern."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.exceptions import (
    DuplicateActivePatternError,
    RecurringPatternNotFoundError,
)
from kasboek.domain.recurring.repositories import RecurringPatternRepository

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class _Unset(Enum):
    """Marker for fields that were not part of the update."""

    UNSET = "UNSET"


UNSET = _Unset.UNSET


class UpdateRecurringPatternCommand:
    """Rename, (de)activate or recategorize a recurring pattern.

    Only fields that are passed are touched; ``category_id=None`` clears
    the category.
    """

    def __init__(self, pattern_repository: RecurringPatternRepository):
        self._pattern_repo = pattern_repository

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> UpdateRecurringPatternCommand:
        return cls(pattern_repository=factory.recurring_pattern_repository())

    async def execute(
        self,
        pattern_id: UUID,
        account_id: UUID,
        display_name: Union[str, _Unset] = UNSET,
        is_active: Union[bool, _Unset] = UNSET,
        category_id: Union[Optional[UUID], _Unset] = UNSET,
    ) -> RecurringPattern:
        pattern = await self._get_pattern(pattern_id, account_id)

        if display_name is not UNSET:
            pattern.rename(display_name)

        if is_active is not UNSET:
            if is_active and not pattern.is_active:
                await self._ensure_no_active_duplicate(pattern)
                pattern.activate()
            elif not is_active and pattern.is_active:
                pattern.deactivate()

        if category_id is not UNSET:
            pattern.assign_category(category_id)

        await self._pattern_repo.save(pattern)
        logger.info("Updated recurring pattern %s", pattern.id)
        return pattern

    async def _get_pattern(self, pattern_id: UUID, account_id: UUID) -> RecurringPattern:
        pattern = await self._pattern_repo.find_by_id(pattern_id)
        if pattern is None or pattern.account_id != account_id:
            raise RecurringPatternNotFoundError(pattern_id, account_id)
        return pattern

    async def _ensure_no_active_duplicate(self, pattern: RecurringPattern) -> None:
        existing = await self._pattern_repo.find_active(
            pattern.account_id,
            pattern.merchant_key,
            pattern.transaction_type,
        )
        if existing is not None and existing.id != pattern.id:
            raise DuplicateActivePatternError(
                pattern.merchant_key,
                pattern.transaction_type.value,
            )
