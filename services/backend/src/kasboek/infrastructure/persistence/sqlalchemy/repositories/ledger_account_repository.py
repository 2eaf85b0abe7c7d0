"""SQLAlchemy implementation of LedgerAccountRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kasboek.domain.recurring.repositories import LedgerAccountRepository
from kasboek.infrastructure.persistence.sqlalchemy.models import LedgerAccountModel


class LedgerAccountRepositorySQLAlchemy(LedgerAccountRepository):
    """SQLAlchemy implementation of LedgerAccountRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, account_id: UUID) -> bool:
        stmt = select(LedgerAccountModel.id).where(LedgerAccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
