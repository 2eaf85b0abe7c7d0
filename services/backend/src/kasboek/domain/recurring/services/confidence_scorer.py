"""Confidence scoring for detected patterns."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from kasboek.domain.recurring.value_objects import (
    ConfidenceBreakdown,
    DetectionConfig,
    Frequency,
)


def amount_stability(amounts: Sequence[int]) -> float:
    """Score amount stability as ``1 - coefficient of variation``.

    Uses the population standard deviation. A single amount or a zero
    mean counts as perfectly stable.
    """
    if len(amounts) < 2:  # NOQA: PLR2004
        return 1.0

    values = np.asarray(amounts, dtype=float)
    mean = float(np.mean(values))
    if mean == 0:
        return 1.0

    cv = float(np.std(values)) / abs(mean)
    return max(0.0, 1.0 - cv)


class ConfidenceScorer:
    """Blends occurrence count, interval consistency and amount stability."""

    def __init__(self, config: DetectionConfig | None = None):
        self._config = config or DetectionConfig()

    def score(
        self,
        amounts: Sequence[int],
        frequency: Frequency,
        consistency: float,
    ) -> ConfidenceBreakdown:
        ideal_occurrences = frequency.min_occurrences * 2
        occurrence_score = min(1.0, len(amounts) / ideal_occurrences)
        interval_score = min(1.0, max(0.0, consistency))
        amount_score = amount_stability(amounts)

        confidence = (
            occurrence_score * self._config.weight_occurrence
            + interval_score * self._config.weight_interval
            + amount_score * self._config.weight_amount
        )

        return ConfidenceBreakdown(
            occurrence_score=occurrence_score,
            interval_score=interval_score,
            amount_score=amount_score,
            confidence=min(1.0, max(0.0, confidence)),
        )

    def accepts(
        self,
        breakdown: ConfidenceBreakdown,
        occurrences: int,
        frequency: Frequency,
    ) -> bool:
        return (
            occurrences >= frequency.min_occurrences
            and breakdown.confidence >= self._config.min_confidence
        )
