"""Intermediate results of the per-group analysis."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from kasboek.domain.recurring.value_objects.frequency import Frequency
from kasboek.domain.recurring.value_objects.ledger_transaction import (
    LedgerTransaction,
)
from kasboek.domain.recurring.value_objects.merchant_key import MerchantKey
from kasboek.domain.recurring.value_objects.transaction_type import TransactionType


@dataclass(frozen=True)
class IntervalConsistency:
    """Gap-aware consistency of a set of intervals against one frequency."""

    frequency: Frequency
    consistency: float
    matching: int
    non_gap: int
    gaps: int

    @property
    def total(self) -> int:
        return self.non_gap + self.gaps

    @property
    def gap_ratio(self) -> float:
        return self.gaps / self.total if self.total else 0.0


@dataclass(frozen=True)
class FrequencyMatch:
    """Best-fitting frequency for a transaction group."""

    frequency: Frequency
    consistency: float
    intervals: tuple[int, ...]


@dataclass(frozen=True)
class ConfidenceBreakdown:
    """Weighted confidence and the component scores behind it."""

    occurrence_score: float
    interval_score: float
    amount_score: float
    confidence: float


@dataclass(frozen=True)
class MerchantGroup:
    """Transactions of one merchant and one direction, oldest first."""

    merchant_key: MerchantKey
    transaction_type: TransactionType
    transactions: tuple[LedgerTransaction, ...]

    def __len__(self) -> int:
        return len(self.transactions)

    @property
    def dates(self) -> tuple[date, ...]:
        return tuple(t.booking_date for t in self.transactions if t.booking_date)

    @property
    def amounts(self) -> tuple[int, ...]:
        return tuple(t.amount for t in self.transactions if t.amount is not None)

    @property
    def latest(self) -> LedgerTransaction:
        return self.transactions[-1]
