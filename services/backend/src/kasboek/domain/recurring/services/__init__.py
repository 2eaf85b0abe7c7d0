"""Recurring domain services."""

from kasboek.domain.recurring.services.confidence_scorer import (
    ConfidenceScorer,
    amount_stability,
)
from kasboek.domain.recurring.services.frequency_classifier import (
    FrequencyClassifier,
    day_intervals,
)
from kasboek.domain.recurring.services.merchant_grouper import MerchantGrouper
from kasboek.domain.recurring.services.merchant_normalizer import (
    MerchantNormalizer,
    normalize_description,
)
from kasboek.domain.recurring.services.pattern_analyzer import (
    PatternAnalyzer,
    amount_variance_percent,
)
from kasboek.domain.recurring.services.recency_gate import RecencyGate

__all__ = [
    # Merchant identity
    "MerchantGrouper",
    "MerchantNormalizer",
    "normalize_description",
    # Analysis
    "ConfidenceScorer",
    "FrequencyClassifier",
    "PatternAnalyzer",
    "RecencyGate",
    "amount_stability",
    "amount_variance_percent",
    "day_intervals",
]
