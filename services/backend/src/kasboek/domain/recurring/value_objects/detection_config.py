"""Detection thresholds.

All tunables of the detection pipeline live here so that a run is fully
determined by its input snapshot, this config and the reference date.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from kasboek.domain.recurring.exceptions import InvalidDetectionConfigError


@dataclass(frozen=True)
class DetectionConfig:
    """Immutable set of thresholds for recurring pattern detection."""

    min_confidence: float = 0.70
    min_consistency: float = 0.6
    lookback_months: int = 36
    recent_months: int = 12
    gap_threshold_multiplier: int = 3
    gap_penalty: float = 0.5
    max_missed_intervals: int = 2
    min_transactions: int = 3
    max_group_size: int = 500
    similarity_threshold: float = 0.85
    weight_occurrence: float = 0.30
    weight_interval: float = 0.40
    weight_amount: float = 0.30

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        weights = (self.weight_occurrence, self.weight_interval, self.weight_amount)
        if any(w < 0 for w in weights):
            msg = "scoring weights must not be negative"
            raise InvalidDetectionConfigError(msg)
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-6):
            msg = f"scoring weights must sum to 1.0 (got {sum(weights):.4f})"
            raise InvalidDetectionConfigError(msg)

        for name in ("min_confidence", "min_consistency", "gap_penalty"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"{name} must be between 0 and 1 (got {value})"
                raise InvalidDetectionConfigError(msg)
        if not 0.0 < self.similarity_threshold <= 1.0:
            msg = "similarity_threshold must be in (0, 1]"
            raise InvalidDetectionConfigError(msg)

        for name in (
            "lookback_months",
            "recent_months",
            "gap_threshold_multiplier",
            "max_missed_intervals",
            "max_group_size",
        ):
            if getattr(self, name) < 1:
                msg = f"{name} must be at least 1"
                raise InvalidDetectionConfigError(msg)
        if self.min_transactions < 2:  # NOQA: PLR2004
            msg = "min_transactions must be at least 2"
            raise InvalidDetectionConfigError(msg)
        if self.recent_months > self.lookback_months:
            msg = "recent_months cannot exceed lookback_months"
            raise InvalidDetectionConfigError(msg)
