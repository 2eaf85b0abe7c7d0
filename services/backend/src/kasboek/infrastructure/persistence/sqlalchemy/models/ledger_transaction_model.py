"""SQLAlchemy model for booked ledger transactions."""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import BigInteger, Date, ForeignKey, Index, String, Text, Uuid
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from kasboek.domain.recurring.value_objects import TransactionType
from kasboek.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class LedgerTransactionModel(Base, TimestampMixin):
    """
    SQLAlchemy model for ledger transactions.

    Amounts are non-negative magnitudes in minor units; the direction is
    carried by ``transaction_type``. A row with ``parent_transaction_id``
    is a split child of another transaction.
    """

    __tablename__ = "ledger_transactions"

    __table_args__ = (
        Index("ix_ledger_transactions_account_date", "account_id", "booking_date"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)

    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("ledger_accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Imported rows may lack a date or amount
    booking_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    amount: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    description: Mapped[str] = mapped_column(Text, default="")
    counterparty_iban: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
    )
    transaction_type: Mapped[TransactionType] = mapped_column(
        SQLEnum(TransactionType, name="transaction_type"),
        nullable=False,
    )

    category_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)
    parent_transaction_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("ledger_transactions.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<LedgerTransactionModel(id={self.id}, date={self.booking_date}, "
            f"amount={self.amount}, type={self.transaction_type})>"
        )
