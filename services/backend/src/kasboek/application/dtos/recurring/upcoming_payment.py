"""DTO for expected recurring payments."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.value_objects import Frequency, TransactionType


@dataclass(frozen=True)
class UpcomingPayment:
    """A pattern's next expected occurrence relative to a reference date."""

    pattern_id: UUID
    display_name: str
    predicted_amount: int
    expected_date: date
    days_until: int
    transaction_type: TransactionType
    frequency: Frequency

    @property
    def is_overdue(self) -> bool:
        return self.days_until < 0

    @classmethod
    def from_pattern(cls, pattern: RecurringPattern, today: date) -> "UpcomingPayment":
        return cls(
            pattern_id=pattern.id,
            display_name=pattern.display_name,
            predicted_amount=pattern.predicted_amount,
            expected_date=pattern.next_expected_date,
            days_until=pattern.days_until_expected(today),
            transaction_type=pattern.transaction_type,
            frequency=pattern.frequency,
        )
