"""Recurring domain exceptions.

This module defines exceptions specific to the recurring bounded context:
frequency validation, pattern lookup, the active-pattern uniqueness rule
and failures while persisting detection results.

These exceptions inherit from the shared DomainException base class and
provide semantic error information that maps to appropriate HTTP responses.
"""

from uuid import UUID

from kasboek.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class RecurringDomainError(DomainException):
    """Base exception for recurring domain errors."""


class InvalidFrequencyError(ValidationError):
    """Raised when an unknown frequency value is supplied."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Invalid frequency: {value}",
            code=ErrorCode.INVALID_FREQUENCY,
            details={"value": value},
        )


class InvalidDetectionConfigError(ValidationError):
    """Raised when detection thresholds are inconsistent."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Invalid detection configuration: {reason}",
            code=ErrorCode.INVALID_CONFIGURATION,
            details={"reason": reason},
        )


class AccountNotFoundError(EntityNotFoundError):
    """Raised when a ledger account cannot be found."""

    def __init__(self, account_id: UUID | str) -> None:
        super().__init__(
            message="Account not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": str(account_id)},
        )


class RecurringPatternNotFoundError(EntityNotFoundError):
    """Raised when a recurring pattern does not exist for the account."""

    def __init__(self, pattern_id: UUID | str, account_id: UUID | str) -> None:
        super().__init__(
            message="Recurring pattern not found",
            code=ErrorCode.PATTERN_NOT_FOUND,
            details={"pattern_id": str(pattern_id), "account_id": str(account_id)},
        )


class DuplicateActivePatternError(ConflictError):
    """Raised when activating a pattern would create a second active one."""

    def __init__(self, merchant_key: str, transaction_type: str) -> None:
        super().__init__(
            message=(
                "Another active recurring pattern already exists for this "
                "merchant and transaction type"
            ),
            code=ErrorCode.DUPLICATE_ACTIVE_PATTERN,
            details={
                "merchant_key": merchant_key,
                "transaction_type": transaction_type,
            },
        )


class PatternPersistenceError(RecurringDomainError):
    """Raised when detected patterns could not be written.

    The unit of work must be rolled back; no partial pattern set is kept.
    """

    def __init__(self, account_id: UUID | str, reason: str) -> None:
        super().__init__(
            message="Failed to persist recurring patterns",
            code=ErrorCode.PERSISTENCE_FAILED,
            details={"account_id": str(account_id), "reason": reason},
        )
