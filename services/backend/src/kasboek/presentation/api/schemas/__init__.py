"""Pydantic request/response schemas."""

from kasboek.presentation.api.schemas.recurring import (
    DetectionResponse,
    LinkedTransactionResponse,
    RecurringPatternListResponse,
    RecurringPatternResponse,
    RecurringPatternUpdateRequest,
    RecurringSummaryResponse,
    UpcomingPaymentResponse,
)

__all__ = [
    "DetectionResponse",
    "LinkedTransactionResponse",
    "RecurringPatternListResponse",
    "RecurringPatternResponse",
    "RecurringPatternUpdateRequest",
    "RecurringSummaryResponse",
    "UpcomingPaymentResponse",
]
