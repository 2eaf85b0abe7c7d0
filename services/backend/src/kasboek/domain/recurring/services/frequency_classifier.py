"""Cadence detection for a merchant group.

Intervals far outside a frequency's range (a skipped year, a paused
subscription) are treated as gaps: they do not count against the match
ratio but reduce the final consistency proportionally.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from kasboek.domain.recurring.value_objects import (
    DetectionConfig,
    Frequency,
    FrequencyMatch,
    IntervalConsistency,
)


def day_intervals(dates: Sequence[date]) -> tuple[int, ...]:
    """Day differences between consecutive dates (ascending input)."""
    return tuple((b - a).days for a, b in zip(dates, dates[1:]))


class FrequencyClassifier:
    """Finds the best-fitting frequency for a series of booking dates."""

    def __init__(self, config: DetectionConfig | None = None):
        self._config = config or DetectionConfig()

    def interval_consistency(
        self,
        intervals: Sequence[int],
        frequency: Frequency,
    ) -> IntervalConsistency:
        gap_threshold = frequency.max_days * self._config.gap_threshold_multiplier

        matching = 0
        non_gap = 0
        gaps = 0
        for days in intervals:
            if days > gap_threshold:
                gaps += 1
                continue
            non_gap += 1
            if frequency.accepts_interval(days):
                matching += 1

        if non_gap == 0:
            consistency = 0.0
        else:
            gap_ratio = gaps / len(intervals)
            base = matching / non_gap
            consistency = base * (1 - self._config.gap_penalty * gap_ratio)

        return IntervalConsistency(
            frequency=frequency,
            consistency=consistency,
            matching=matching,
            non_gap=non_gap,
            gaps=gaps,
        )

    def detect_frequency(self, dates: Sequence[date]) -> Optional[FrequencyMatch]:
        """Pick the frequency whose day range fits the intervals best.

        Returns None for fewer than two dates or when no frequency
        reaches the configured minimum consistency. On equal consistency
        the shorter frequency wins.
        """
        if len(dates) < 2:  # NOQA: PLR2004
            return None

        intervals = day_intervals(dates)

        best: Optional[IntervalConsistency] = None
        for frequency in Frequency:
            result = self.interval_consistency(intervals, frequency)
            if result.consistency > (best.consistency if best else 0.0):
                best = result

        if best is None or best.consistency < self._config.min_consistency:
            return None

        return FrequencyMatch(
            frequency=best.frequency,
            consistency=best.consistency,
            intervals=intervals,
        )
