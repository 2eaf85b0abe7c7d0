"""Shared domain components.

This module exports shared value objects, exceptions, and base classes
used across domain boundaries.
"""

# Re-export all exceptions from the exceptions module
from kasboek.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from kasboek.domain.shared.time import months_before, today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    # Utilities
    "months_before",
    "today_utc",
    "utc_now",
]
