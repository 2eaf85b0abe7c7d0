"""Recurrence frequency enumeration.

Each member carries its own thresholds so that adding a cadence only
requires adding a member here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kasboek.domain.recurring.exceptions import InvalidFrequencyError


@dataclass(frozen=True)
class FrequencyProfile:
    """Day ranges and occurrence minimums for one cadence."""

    min_days: int
    max_days: int
    average_days: int
    min_occurrences: int
    min_recent_occurrences: int
    label: str


class Frequency(str, Enum):
    """Cadence of a recurring transaction."""

    WEEKLY = "weekly", FrequencyProfile(6, 8, 7, 6, 4, "Weekly")
    BIWEEKLY = "biweekly", FrequencyProfile(13, 15, 14, 4, 2, "Biweekly")
    MONTHLY = "monthly", FrequencyProfile(28, 31, 30, 3, 2, "Monthly")
    QUARTERLY = "quarterly", FrequencyProfile(85, 95, 90, 2, 1, "Quarterly")
    YEARLY = "yearly", FrequencyProfile(360, 370, 365, 2, 1, "Yearly")

    profile: FrequencyProfile

    def __new__(cls, value: str, profile: FrequencyProfile) -> Frequency:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.profile = profile
        return obj

    @property
    def min_days(self) -> int:
        return self.profile.min_days

    @property
    def max_days(self) -> int:
        return self.profile.max_days

    @property
    def average_days(self) -> int:
        return self.profile.average_days

    @property
    def min_occurrences(self) -> int:
        return self.profile.min_occurrences

    @property
    def min_recent_occurrences(self) -> int:
        return self.profile.min_recent_occurrences

    @property
    def label(self) -> str:
        return self.profile.label

    def accepts_interval(self, days: int) -> bool:
        return self.min_days <= days <= self.max_days

    @classmethod
    def parse(cls, value: str | Frequency) -> Frequency:
        """Parse a frequency from user input (case-insensitive)."""
        if isinstance(value, Frequency):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise InvalidFrequencyError(str(value)) from None
