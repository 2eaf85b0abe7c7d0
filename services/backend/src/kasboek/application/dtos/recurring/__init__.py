"""Recurring DTOs. Read models for pattern overviews and linked transactions."""

from kasboek.application.dtos.recurring.recurring_summary import RecurringSummary
from kasboek.application.dtos.recurring.transaction_summary import (
    TransactionSummary,
)
from kasboek.application.dtos.recurring.upcoming_payment import UpcomingPayment

__all__ = [
    "RecurringSummary",
    "TransactionSummary",
    "UpcomingPayment",
]
