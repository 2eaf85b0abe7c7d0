"""Ledger transaction value object (read-only detection input)."""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from kasboek.domain.recurring.value_objects.transaction_type import TransactionType


class LedgerTransaction(BaseModel):
    """Snapshot of a booked transaction as seen by recurring detection.

    ``booking_date`` and ``amount`` are optional because imported rows can
    be incomplete; such rows are skipped by the analysis instead of failing
    the whole run.
    """

    id: UUID
    account_id: UUID
    booking_date: Optional[date] = Field(default=None, description="Booking date")
    description: str = Field(default="", description="Bank description text")
    counterparty_iban: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Counterparty account identifier (IBAN-like or empty)",
    )
    transaction_type: TransactionType
    amount: Optional[int] = Field(
        default=None,
        ge=0,
        description="Magnitude in minor units (cents)",
    )
    category_id: Optional[UUID] = None
    parent_transaction_id: Optional[UUID] = None

    model_config = ConfigDict(
        frozen=True,  # Immutable
        str_strip_whitespace=True,
    )

    @property
    def is_split_child(self) -> bool:
        return self.parent_transaction_id is not None

    @property
    def is_usable(self) -> bool:
        """True when the row carries everything interval analysis needs."""
        return self.booking_date is not None and self.amount is not None
