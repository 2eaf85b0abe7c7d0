"""SQLAlchemy model for RecurringPattern entity."""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    text,
)
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from kasboek.domain.recurring.value_objects import Frequency, TransactionType
from kasboek.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class RecurringPatternModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting RecurringPattern entities.

    At most one active pattern may exist per account, merchant key and
    transaction type. Inactive patterns are kept as history.
    """

    __tablename__ = "recurring_patterns"

    __table_args__ = (
        Index(
            "uq_recurring_patterns_active_merchant",
            "account_id",
            "merchant_key",
            "transaction_type",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
        Index("ix_recurring_patterns_account_next", "account_id", "next_expected_date"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)

    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("ledger_accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Merchant identity
    merchant_key: Mapped[str] = mapped_column(Text, nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Amount prediction (minor units)
    predicted_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    amount_variance_percent: Mapped[float] = mapped_column(Float, default=0.0)

    # Cadence
    frequency: Mapped[Frequency] = mapped_column(
        SQLEnum(Frequency, name="recurrence_frequency"),
        nullable=False,
    )
    transaction_type: Mapped[TransactionType] = mapped_column(
        SQLEnum(TransactionType, name="transaction_type"),
        nullable=False,
    )
    last_occurrence_date: Mapped[date] = mapped_column(Date, nullable=False)
    next_expected_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Detection quality
    confidence_score: Mapped[float] = mapped_column(Float, nullable=False)
    interval_consistency: Mapped[float] = mapped_column(Float, nullable=False)
    occurrence_count: Mapped[int] = mapped_column(Integer, nullable=False)

    category_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)

    # Status
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<RecurringPatternModel(id={self.id}, display_name={self.display_name}, "
            f"frequency={self.frequency}, active={self.is_active})>"
        )
