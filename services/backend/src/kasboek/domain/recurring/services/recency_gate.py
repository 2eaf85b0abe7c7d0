"""Liveness checks for detected patterns."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from kasboek.domain.recurring.value_objects import DetectionConfig, Frequency
from kasboek.domain.shared.time import months_before


class RecencyGate:
    """Rejects patterns that ended or were never active recently.

    ``today`` is always passed in by the caller.
    """

    def __init__(self, config: DetectionConfig | None = None):
        self._config = config or DetectionConfig()

    def recent_count(self, dates: Sequence[date], today: date) -> int:
        cutoff = months_before(today, self._config.recent_months)
        return sum(1 for d in dates if d >= cutoff)

    def has_recent_activity(
        self,
        dates: Sequence[date],
        frequency: Frequency,
        today: date,
    ) -> bool:
        return self.recent_count(dates, today) >= frequency.min_recent_occurrences

    def is_stale(self, last_occurrence: date, frequency: Frequency, today: date) -> bool:
        """True when more than ``max_missed_intervals`` periods were missed."""
        max_days = frequency.average_days * self._config.max_missed_intervals
        return (today - last_occurrence).days > max_days
