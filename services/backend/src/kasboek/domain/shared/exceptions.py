"""Shared domain exceptions and error codes.

Every error raised by the domain and application layers derives from
DomainException. The presentation layer turns them into responses of
the form ``{"detail": ..., "code": ...}``.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Error codes returned to API clients.

    Clients match on these values, so existing members must keep their
    spelling.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FREQUENCY = "INVALID_FREQUENCY"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    PATTERN_NOT_FOUND = "PATTERN_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_ACTIVE_PATTERN = "DUPLICATE_ACTIVE_PATTERN"

    # 422
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"

    # 500
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class of all kasboek errors.

    Attributes
    ----------
    message
        Text shown to the API client
    code
        Machine readable error code
    details
        Extra context for the logs; never sent to the client
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input that can never be accepted, whatever the stored state."""

    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    """A domain invariant would be broken."""

    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The request clashes with existing state."""

    default_code = ErrorCode.CONFLICT
