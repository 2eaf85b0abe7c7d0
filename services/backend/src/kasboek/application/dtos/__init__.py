"""Data transfer objects returned by application queries."""

from kasboek.application.dtos.recurring import (
    RecurringSummary,
    TransactionSummary,
    UpcomingPayment,
)

__all__ = [
    "RecurringSummary",
    "TransactionSummary",
    "UpcomingPayment",
]
