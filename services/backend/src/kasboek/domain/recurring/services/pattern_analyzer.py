"""Turn one merchant group into a recurring pattern candidate."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.services.confidence_scorer import ConfidenceScorer
from kasboek.domain.recurring.services.frequency_classifier import (
    FrequencyClassifier,
)
from kasboek.domain.recurring.services.merchant_normalizer import MerchantNormalizer
from kasboek.domain.recurring.services.recency_gate import RecencyGate
from kasboek.domain.recurring.value_objects import DetectionConfig, MerchantGroup

logger = logging.getLogger(__name__)


def amount_variance_percent(amounts: Sequence[int], reference: int) -> float:
    """Largest relative deviation from ``reference`` in percent."""
    if reference == 0 or not amounts:
        return 0.0
    deviation = max(abs(amount - reference) / reference for amount in amounts)
    return round(deviation * 100, 2)


class PatternAnalyzer:
    """Runs frequency, confidence and recency checks over a single group.

    Pure: the result depends only on the group, the config and ``today``.
    Whether an equivalent pattern is already stored is not checked here.
    """

    def __init__(
        self,
        config: DetectionConfig | None = None,
        normalizer: MerchantNormalizer | None = None,
    ):
        self._config = config or DetectionConfig()
        self._normalizer = normalizer or MerchantNormalizer(
            self._config.similarity_threshold,
        )
        self._classifier = FrequencyClassifier(self._config)
        self._scorer = ConfidenceScorer(self._config)
        self._gate = RecencyGate(self._config)

    def analyze(
        self,
        account_id: UUID,
        group: MerchantGroup,
        today: date,
    ) -> Optional[RecurringPattern]:
        dates = group.dates
        amounts = group.amounts

        match = self._classifier.detect_frequency(dates)
        if match is None:
            self._reject(group, "no consistent frequency")
            return None

        frequency = match.frequency
        occurrences = len(group)
        if occurrences < frequency.min_occurrences:
            self._reject(group, f"{occurrences} occurrences for {frequency.value}")
            return None

        if not self._gate.has_recent_activity(dates, frequency, today):
            self._reject(group, "no recent activity")
            return None

        breakdown = self._scorer.score(amounts, frequency, match.consistency)
        if not self._scorer.accepts(breakdown, occurrences, frequency):
            self._reject(group, f"confidence {breakdown.confidence:.2f}")
            return None

        latest = group.latest
        if self._gate.is_stale(latest.booking_date, frequency, today):
            self._reject(group, f"last seen {latest.booking_date}")
            return None

        predicted_amount = latest.amount or 0
        return RecurringPattern(
            account_id=account_id,
            merchant_key=group.merchant_key,
            display_name=self._normalizer.extract_display_name(latest),
            predicted_amount=predicted_amount,
            amount_variance_percent=amount_variance_percent(amounts, predicted_amount),
            frequency=frequency,
            confidence_score=breakdown.confidence,
            last_occurrence_date=latest.booking_date,
            occurrence_count=occurrences,
            interval_consistency=match.consistency,
            transaction_type=group.transaction_type,
            category_id=latest.category_id,
        )

    @staticmethod
    def _reject(group: MerchantGroup, reason: str) -> None:
        logger.debug(
            "Rejected %s/%s: %s",
            group.merchant_key,
            group.transaction_type.value,
            reason,
        )
