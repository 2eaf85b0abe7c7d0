"""SQLAlchemy model for ledger accounts."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from kasboek.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class LedgerAccountModel(Base, TimestampMixin):
    """
    Ledger account owned by the bookkeeping side.

    Recurring detection only needs to know that an account exists; the
    remaining columns are informational.
    """

    __tablename__ = "ledger_accounts"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    iban: Mapped[Optional[str]] = mapped_column(String(34), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), default="EUR")

    def __repr__(self) -> str:
        return f"<LedgerAccountModel(id={self.id}, name={self.name})>"
