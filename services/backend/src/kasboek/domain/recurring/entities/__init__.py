"""Recurring domain entities."""

from kasboek.domain.recurring.entities.recurring_pattern import RecurringPattern

__all__ = [
    "RecurringPattern",
]
