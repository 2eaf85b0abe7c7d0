"""SQLAlchemy implementation of LedgerTransactionRepository."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kasboek.domain.recurring.repositories import LedgerTransactionRepository
from kasboek.domain.recurring.value_objects import LedgerTransaction
from kasboek.infrastructure.persistence.sqlalchemy.models import (
    LedgerTransactionModel,
)

logger = logging.getLogger(__name__)


class LedgerTransactionRepositorySQLAlchemy(LedgerTransactionRepository):
    """SQLAlchemy implementation of LedgerTransactionRepository.

    Split children are filtered out in every query. Rows that do not form
    a valid ``LedgerTransaction`` (for example a negative amount written
    by an importer) are left out of the result.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_for_account_since(
        self,
        account_id: UUID,
        since: date,
    ) -> List[LedgerTransaction]:
        stmt = (
            select(LedgerTransactionModel)
            .where(
                LedgerTransactionModel.account_id == account_id,
                LedgerTransactionModel.parent_transaction_id.is_(None),
                LedgerTransactionModel.booking_date >= since,
            )
            .order_by(
                LedgerTransactionModel.booking_date.asc(),
                LedgerTransactionModel.created_at.asc(),
            )
        )
        result = await self._session.execute(stmt)

        return self._models_to_domain(result.scalars().all())

    async def list_for_account(self, account_id: UUID) -> List[LedgerTransaction]:
        stmt = (
            select(LedgerTransactionModel)
            .where(
                LedgerTransactionModel.account_id == account_id,
                LedgerTransactionModel.parent_transaction_id.is_(None),
            )
            .order_by(
                LedgerTransactionModel.booking_date.desc().nulls_last(),
                LedgerTransactionModel.created_at.desc(),
            )
        )
        result = await self._session.execute(stmt)

        return self._models_to_domain(result.scalars().all())

    def _models_to_domain(
        self,
        models: Sequence[LedgerTransactionModel],
    ) -> List[LedgerTransaction]:
        transactions = []
        for model in models:
            transaction = self._model_to_domain(model)
            if transaction is not None:
                transactions.append(transaction)
        return transactions

    def _model_to_domain(
        self,
        model: LedgerTransactionModel,
    ) -> Optional[LedgerTransaction]:
        try:
            return LedgerTransaction(
                id=model.id,
                account_id=model.account_id,
                booking_date=model.booking_date,
                description=model.description or "",
                counterparty_iban=model.counterparty_iban,
                transaction_type=model.transaction_type,
                amount=model.amount,
                category_id=model.category_id,
                parent_transaction_id=model.parent_transaction_id,
            )
        except ValidationError as e:
            logger.warning(
                "Skipping malformed transaction %s: %d validation errors",
                model.id,
                e.error_count(),
            )
            return None
