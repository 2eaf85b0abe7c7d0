"""Recurring transaction detection domain."""

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.services import (
    ConfidenceScorer,
    FrequencyClassifier,
    MerchantGrouper,
    MerchantNormalizer,
    PatternAnalyzer,
    RecencyGate,
)
from kasboek.domain.recurring.value_objects import (
    DetectionConfig,
    Frequency,
    LedgerTransaction,
    MerchantGroup,
    TransactionType,
)

__all__ = [
    # Entities
    "RecurringPattern",
    # Services
    "ConfidenceScorer",
    "FrequencyClassifier",
    "MerchantGrouper",
    "MerchantNormalizer",
    "PatternAnalyzer",
    "RecencyGate",
    # Value Objects
    "DetectionConfig",
    "Frequency",
    "LedgerTransaction",
    "MerchantGroup",
    "TransactionType",
]
