"""DTO for transactions linked to a recurring pattern."""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID

from kasboek.domain.recurring.value_objects import LedgerTransaction


@dataclass(frozen=True)
class TransactionSummary:
    """Compact view of a booked transaction."""

    id: UUID
    date: date
    description: str
    amount: int
    category_id: Optional[UUID]

    @classmethod
    def from_transaction(cls, transaction: LedgerTransaction) -> "TransactionSummary":
        return cls(
            id=transaction.id,
            date=transaction.booking_date,
            description=transaction.description,
            amount=transaction.amount or 0,
            category_id=transaction.category_id,
        )
