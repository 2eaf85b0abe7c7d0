"""Recurring domain value objects."""

from kasboek.domain.recurring.value_objects.analysis import (
    ConfidenceBreakdown,
    FrequencyMatch,
    IntervalConsistency,
    MerchantGroup,
)
from kasboek.domain.recurring.value_objects.detection_config import DetectionConfig
from kasboek.domain.recurring.value_objects.frequency import (
    Frequency,
    FrequencyProfile,
)
from kasboek.domain.recurring.value_objects.ledger_transaction import (
    LedgerTransaction,
)
from kasboek.domain.recurring.value_objects.merchant_key import (
    CATEGORY_SEPARATOR,
    IBAN_PREFIX,
    MerchantKey,
    iban_key,
    is_iban_key,
    with_category,
)
from kasboek.domain.recurring.value_objects.transaction_type import TransactionType

__all__ = [
    "CATEGORY_SEPARATOR",
    "ConfidenceBreakdown",
    "DetectionConfig",
    "Frequency",
    "FrequencyMatch",
    "FrequencyProfile",
    "IBAN_PREFIX",
    "IntervalConsistency",
    "LedgerTransaction",
    "MerchantGroup",
    "MerchantKey",
    "TransactionType",
    "iban_key",
    "is_iban_key",
    "with_category",
]
