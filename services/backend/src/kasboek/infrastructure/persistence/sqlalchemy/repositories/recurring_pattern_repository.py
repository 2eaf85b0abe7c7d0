"""SQLAlchemy implementation of RecurringPatternRepository.

Writes only flush. Bulk writes run inside a savepoint so that a failed
batch leaves the surrounding unit of work as it was.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.exceptions import (
    DuplicateActivePatternError,
    PatternPersistenceError,
)
from kasboek.domain.recurring.repositories import RecurringPatternRepository
from kasboek.domain.recurring.value_objects import Frequency, TransactionType
from kasboek.infrastructure.persistence.sqlalchemy.models import (
    RecurringPatternModel,
)

logger = logging.getLogger(__name__)


class RecurringPatternRepositorySQLAlchemy(RecurringPatternRepository):
    """SQLAlchemy implementation of RecurringPatternRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, pattern: RecurringPattern) -> None:
        existing = await self._find_model_by_id(pattern.id)

        try:
            async with self._session.begin_nested():
                if existing:
                    self._update_model(existing, pattern)
                else:
                    self._session.add(self._domain_to_model(pattern))
                await self._session.flush()
        except IntegrityError as e:
            # Partial unique index on the active (account, merchant, type) triple
            raise DuplicateActivePatternError(
                pattern.merchant_key,
                pattern.transaction_type.value,
            ) from e

    async def save_all(self, patterns: Sequence[RecurringPattern]) -> None:
        if not patterns:
            return

        account_id = patterns[0].account_id
        try:
            async with self._session.begin_nested():
                self._session.add_all([self._domain_to_model(p) for p in patterns])
                await self._session.flush()
        except SQLAlchemyError as e:
            logger.exception("Bulk insert of recurring patterns failed")
            raise PatternPersistenceError(account_id, str(e)) from e

        logger.info(
            "Saved %d recurring patterns for account %s",
            len(patterns),
            account_id,
        )

    async def replace_all_for_account(
        self,
        account_id: UUID,
        patterns: Sequence[RecurringPattern],
    ) -> int:
        try:
            async with self._session.begin_nested():
                removed = await self._delete_for_account(account_id)
                self._session.add_all([self._domain_to_model(p) for p in patterns])
                await self._session.flush()
        except SQLAlchemyError as e:
            logger.exception("Replacing recurring patterns failed")
            raise PatternPersistenceError(account_id, str(e)) from e

        logger.info(
            "Replaced %d recurring patterns with %d for account %s",
            removed,
            len(patterns),
            account_id,
        )
        return removed

    async def delete_all_for_account(self, account_id: UUID) -> int:
        removed = await self._delete_for_account(account_id)
        await self._session.flush()
        logger.info("Deleted %d recurring patterns for account %s", removed, account_id)
        return removed

    async def find_by_id(self, pattern_id: UUID) -> Optional[RecurringPattern]:
        model = await self._find_model_by_id(pattern_id)
        if not model:
            return None
        return self._model_to_domain(model)

    async def find_active(
        self,
        account_id: UUID,
        merchant_key: str,
        transaction_type: TransactionType,
    ) -> Optional[RecurringPattern]:
        stmt = select(RecurringPatternModel).where(
            RecurringPatternModel.account_id == account_id,
            RecurringPatternModel.merchant_key == merchant_key,
            RecurringPatternModel.transaction_type == transaction_type,
            RecurringPatternModel.is_active == True,  # NOQA: E712
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if not model:
            return None

        return self._model_to_domain(model)

    async def find_by_account(self, account_id: UUID) -> List[RecurringPattern]:
        stmt = (
            select(RecurringPatternModel)
            .where(RecurringPatternModel.account_id == account_id)
            .order_by(RecurringPatternModel.next_expected_date.asc())
        )
        return await self._fetch(stmt)

    async def find_active_by_account(self, account_id: UUID) -> List[RecurringPattern]:
        stmt = (
            select(RecurringPatternModel)
            .where(
                RecurringPatternModel.account_id == account_id,
                RecurringPatternModel.is_active == True,  # NOQA: E712
            )
            .order_by(RecurringPatternModel.next_expected_date.asc())
        )
        return await self._fetch(stmt)

    async def find_by_account_and_frequency(
        self,
        account_id: UUID,
        frequency: Frequency,
    ) -> List[RecurringPattern]:
        stmt = (
            select(RecurringPatternModel)
            .where(
                RecurringPatternModel.account_id == account_id,
                RecurringPatternModel.frequency == frequency,
            )
            .order_by(RecurringPatternModel.next_expected_date.asc())
        )
        return await self._fetch(stmt)

    async def find_upcoming(
        self,
        account_id: UUID,
        start: date,
        end: date,
    ) -> List[RecurringPattern]:
        stmt = (
            select(RecurringPatternModel)
            .where(
                RecurringPatternModel.account_id == account_id,
                RecurringPatternModel.is_active == True,  # NOQA: E712
                RecurringPatternModel.next_expected_date >= start,
                RecurringPatternModel.next_expected_date <= end,
            )
            .order_by(RecurringPatternModel.next_expected_date.asc())
        )
        return await self._fetch(stmt)

    async def find_overdue(
        self,
        account_id: UUID,
        today: date,
    ) -> List[RecurringPattern]:
        stmt = (
            select(RecurringPatternModel)
            .where(
                RecurringPatternModel.account_id == account_id,
                RecurringPatternModel.is_active == True,  # NOQA: E712
                RecurringPatternModel.next_expected_date < today,
            )
            .order_by(RecurringPatternModel.next_expected_date.asc())
        )
        return await self._fetch(stmt)

    async def _fetch(self, stmt) -> List[RecurringPattern]:
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._model_to_domain(model) for model in models]

    async def _find_model_by_id(
        self,
        pattern_id: UUID,
    ) -> Optional[RecurringPatternModel]:
        stmt = select(RecurringPatternModel).where(
            RecurringPatternModel.id == pattern_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _delete_for_account(self, account_id: UUID) -> int:
        stmt = delete(RecurringPatternModel).where(
            RecurringPatternModel.account_id == account_id,
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    def _update_model(
        self,
        model: RecurringPatternModel,
        pattern: RecurringPattern,
    ) -> None:
        model.display_name = pattern.display_name
        model.predicted_amount = pattern.predicted_amount
        model.amount_variance_percent = pattern.amount_variance_percent
        model.frequency = pattern.frequency
        model.confidence_score = pattern.confidence_score
        model.last_occurrence_date = pattern.last_occurrence_date
        model.next_expected_date = pattern.next_expected_date
        model.occurrence_count = pattern.occurrence_count
        model.interval_consistency = pattern.interval_consistency
        model.category_id = pattern.category_id
        model.is_active = pattern.is_active
        model.updated_at = pattern.updated_at

    def _domain_to_model(self, pattern: RecurringPattern) -> RecurringPatternModel:
        return RecurringPatternModel(
            id=pattern.id,
            account_id=pattern.account_id,
            merchant_key=pattern.merchant_key,
            display_name=pattern.display_name,
            predicted_amount=pattern.predicted_amount,
            amount_variance_percent=pattern.amount_variance_percent,
            frequency=pattern.frequency,
            transaction_type=pattern.transaction_type,
            confidence_score=pattern.confidence_score,
            last_occurrence_date=pattern.last_occurrence_date,
            next_expected_date=pattern.next_expected_date,
            occurrence_count=pattern.occurrence_count,
            interval_consistency=pattern.interval_consistency,
            category_id=pattern.category_id,
            is_active=pattern.is_active,
            created_at=pattern.created_at,
            updated_at=pattern.updated_at,
        )

    def _model_to_domain(self, model: RecurringPatternModel) -> RecurringPattern:
        # Reconstruct the entity without re-running validation
        pattern = RecurringPattern.__new__(RecurringPattern)
        pattern._id = model.id
        pattern._account_id = model.account_id
        pattern._merchant_key = model.merchant_key
        pattern._display_name = model.display_name
        pattern._predicted_amount = model.predicted_amount
        pattern._amount_variance_percent = model.amount_variance_percent
        pattern._frequency = model.frequency
        pattern._confidence_score = model.confidence_score
        pattern._last_occurrence_date = model.last_occurrence_date
        pattern._next_expected_date = model.next_expected_date
        pattern._occurrence_count = model.occurrence_count
        pattern._interval_consistency = model.interval_consistency
        pattern._transaction_type = model.transaction_type
        pattern._category_id = model.category_id
        pattern._is_active = model.is_active
        pattern._created_at = model.created_at
        pattern._updated_at = model.updated_at

        return pattern
