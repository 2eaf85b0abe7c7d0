"""Recurring pattern entity."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from kasboek.domain.recurring.value_objects import Frequency, TransactionType
from kasboek.domain.shared.exceptions import ValidationError
from kasboek.domain.shared.time import utc_now

DISPLAY_NAME_MAX_LENGTH = 255


class RecurringPattern:
    """
    A counterparty that is paid or received on a regular cadence.

    Patterns are created by a detection run and afterwards only change
    through explicit updates (display name, active flag, category). They
    are never removed by the system; deactivation takes their place.
    """

    def __init__(  # NOQA: PLR0913
        self,
        account_id: UUID,
        merchant_key: str,
        display_name: str,
        predicted_amount: int,
        amount_variance_percent: float,
        frequency: Frequency,
        confidence_score: float,
        last_occurrence_date: date,
        occurrence_count: int,
        interval_consistency: float,
        transaction_type: TransactionType,
        category_id: Optional[UUID] = None,
        is_active: bool = True,
        # For reconstitution from persistence:
        id: Optional[UUID] = None,
        next_expected_date: Optional[date] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._account_id = account_id
        self._merchant_key = merchant_key
        self._display_name = display_name.strip()
        self._predicted_amount = predicted_amount
        self._amount_variance_percent = amount_variance_percent
        self._frequency = frequency
        self._confidence_score = confidence_score
        self._last_occurrence_date = last_occurrence_date
        self._occurrence_count = occurrence_count
        self._interval_consistency = interval_consistency
        self._transaction_type = transaction_type
        self._category_id = category_id
        self._is_active = is_active
        self._next_expected_date = next_expected_date or self.calculate_next_expected()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

        self._validate()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def account_id(self) -> UUID:
        return self._account_id

    @property
    def merchant_key(self) -> str:
        return self._merchant_key

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def predicted_amount(self) -> int:
        return self._predicted_amount

    @property
    def amount_variance_percent(self) -> float:
        return self._amount_variance_percent

    @property
    def frequency(self) -> Frequency:
        return self._frequency

    @property
    def confidence_score(self) -> float:
        return self._confidence_score

    @property
    def last_occurrence_date(self) -> date:
        return self._last_occurrence_date

    @property
    def next_expected_date(self) -> date:
        return self._next_expected_date

    @property
    def occurrence_count(self) -> int:
        return self._occurrence_count

    @property
    def interval_consistency(self) -> float:
        return self._interval_consistency

    @property
    def transaction_type(self) -> TransactionType:
        return self._transaction_type

    @property
    def category_id(self) -> Optional[UUID]:
        return self._category_id

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _validate(self) -> None:
        if not self._merchant_key:
            msg = "Merchant key cannot be empty"
            raise ValidationError(msg)

        if not self._display_name:
            msg = "Display name cannot be empty"
            raise ValidationError(msg)

        if self._predicted_amount < 0:
            msg = "Predicted amount must be a non-negative magnitude"
            raise ValidationError(msg)

        for name, value in (
            ("confidence_score", self._confidence_score),
            ("interval_consistency", self._interval_consistency),
        ):
            if not 0.0 <= value <= 1.0:
                msg = f"{name} must be between 0 and 1, got {value}"
                raise ValidationError(msg)

        if self._occurrence_count < self._frequency.min_occurrences:
            msg = (
                f"{self._frequency.value} pattern needs at least "
                f"{self._frequency.min_occurrences} occurrences, "
                f"got {self._occurrence_count}"
            )
            raise ValidationError(msg)

    def calculate_next_expected(self) -> date:
        return self._last_occurrence_date + timedelta(
            days=self._frequency.average_days,
        )

    def days_until_expected(self, today: date) -> int:
        return (self._next_expected_date - today).days

    def rename(self, display_name: str) -> None:
        name = display_name.strip() if display_name else ""
        if not name:
            msg = "Display name cannot be empty"
            raise ValidationError(msg)
        if len(name) > DISPLAY_NAME_MAX_LENGTH:
            msg = f"Display name cannot exceed {DISPLAY_NAME_MAX_LENGTH} characters"
            raise ValidationError(msg)
        self._display_name = name
        self._updated_at = utc_now()

    def assign_category(self, category_id: Optional[UUID]) -> None:
        self._category_id = category_id
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        self._is_active = False
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._is_active = True
        self._updated_at = utc_now()

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecurringPattern):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        status = "ACTIVE" if self._is_active else "INACTIVE"
        return (
            f"RecurringPattern[{status}]: {self._display_name} "
            f"({self._frequency.value}, {self._transaction_type.value})"
        )
