"""Translate kasboek errors into JSON error responses.

Every error response has the same body::

    {"detail": "Account not found", "code": "ACCOUNT_NOT_FOUND"}

``setup_exception_handlers(app)`` is called once by ``create_app``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from kasboek.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
STATUS_BY_EXCEPTION_TYPE: tuple[tuple[type[DomainException], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
)

# Codes whose status does not follow from the exception type
STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: DomainException) -> int:
    """HTTP status code of a domain exception."""
    if exc.code in STATUS_BY_CODE:
        return STATUS_BY_CODE[exc.code]
    for exc_type, status_code in STATUS_BY_EXCEPTION_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain and fallback exception handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)

        # details only go to the log
        log = logger.error if status_code >= 500 else logger.info  # NOQA: PLR2004
        log(
            "%s %s failed with %s: %s %s",
            request.method,
            request.url.path,
            exc.code.value,
            exc.message,
            exc.details,
        )
        return error_response(status_code, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
