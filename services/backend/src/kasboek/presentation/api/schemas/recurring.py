"""Recurring pattern schemas for API request/response models."""

from __future__ import annotations

import datetime as dt
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kasboek.application.dtos.recurring import (
    RecurringSummary,
    TransactionSummary,
    UpcomingPayment,
)
from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.value_objects import Frequency, TransactionType


class RecurringPatternResponse(BaseModel):
    """Response schema for a recurring pattern."""

    id: UUID = Field(description="Pattern unique identifier")
    account_id: UUID = Field(description="Ledger account the pattern belongs to")
    merchant_key: str = Field(description="Normalized merchant identity")
    display_name: str = Field(description="Human readable merchant name")
    predicted_amount: int = Field(description="Expected amount in minor units")
    amount_variance_percent: float = Field(
        description="Largest deviation from the predicted amount in percent",
    )
    frequency: Frequency
    frequency_label: str
    confidence_score: float = Field(ge=0, le=1)
    interval_consistency: float = Field(ge=0, le=1)
    occurrence_count: int
    last_occurrence_date: date
    next_expected_date: date
    transaction_type: TransactionType
    category_id: Optional[UUID] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "account_id": "660e8400-e29b-41d4-a716-446655440001",
                "merchant_key": "IBAN:NL91ABNA0417164300",
                "display_name": "Netflix",
                "predicted_amount": 1399,
                "amount_variance_percent": 0.0,
                "frequency": "monthly",
                "frequency_label": "Monthly",
                "confidence_score": 0.93,
                "interval_consistency": 1.0,
                "occurrence_count": 12,
                "last_occurrence_date": "2024-05-01",
                "next_expected_date": "2024-05-31",
                "transaction_type": "debit",
                "category_id": None,
                "is_active": True,
                "created_at": "2024-05-02T08:00:00+00:00",
                "updated_at": "2024-05-02T08:00:00+00:00",
            }
        }
    )

    @classmethod
    def from_domain(cls, pattern: RecurringPattern) -> RecurringPatternResponse:
        return cls(
            id=pattern.id,
            account_id=pattern.account_id,
            merchant_key=pattern.merchant_key,
            display_name=pattern.display_name,
            predicted_amount=pattern.predicted_amount,
            amount_variance_percent=pattern.amount_variance_percent,
            frequency=pattern.frequency,
            frequency_label=pattern.frequency.label,
            confidence_score=pattern.confidence_score,
            interval_consistency=pattern.interval_consistency,
            occurrence_count=pattern.occurrence_count,
            last_occurrence_date=pattern.last_occurrence_date,
            next_expected_date=pattern.next_expected_date,
            transaction_type=pattern.transaction_type,
            category_id=pattern.category_id,
            is_active=pattern.is_active,
            created_at=pattern.created_at,
            updated_at=pattern.updated_at,
        )


class RecurringPatternListResponse(BaseModel):
    """Response for listing recurring patterns."""

    patterns: list[RecurringPatternResponse]
    count: int = Field(description="Number of patterns")


class DetectionResponse(BaseModel):
    """Patterns created by a detection run."""

    patterns: list[RecurringPatternResponse]
    count: int = Field(description="Number of newly detected patterns")
    force: bool = Field(description="Whether the pattern set was replaced")


class RecurringPatternUpdateRequest(BaseModel):
    """Partial update of a recurring pattern.

    Only fields present in the request body are applied. Sending
    ``"category_id": null`` removes the category.
    """

    display_name: Optional[str] = Field(None, max_length=255)
    is_active: Optional[bool] = None
    category_id: Optional[UUID] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "display_name": "Netflix subscription",
                "is_active": True,
            }
        }
    )

    @field_validator("display_name", "is_active")
    @classmethod
    def _reject_null(cls, value):
        # omitted is fine, explicit null is not
        if value is None:
            raise ValueError("must not be null")
        return value


class LinkedTransactionResponse(BaseModel):
    """A transaction that belongs to a recurring pattern."""

    id: UUID
    date: dt.date
    description: str
    amount: int = Field(description="Amount in minor units")
    category_id: Optional[UUID] = None

    @classmethod
    def from_dto(cls, dto: TransactionSummary) -> LinkedTransactionResponse:
        return cls(
            id=dto.id,
            date=dto.date,
            description=dto.description,
            amount=dto.amount,
            category_id=dto.category_id,
        )


class UpcomingPaymentResponse(BaseModel):
    """Next expected occurrence of an active pattern."""

    pattern_id: UUID
    display_name: str
    predicted_amount: int
    expected_date: date
    days_until: int = Field(description="Negative when overdue")
    transaction_type: TransactionType
    frequency: Frequency

    @classmethod
    def from_dto(cls, dto: UpcomingPayment) -> UpcomingPaymentResponse:
        return cls(
            pattern_id=dto.pattern_id,
            display_name=dto.display_name,
            predicted_amount=dto.predicted_amount,
            expected_date=dto.expected_date,
            days_until=dto.days_until,
            transaction_type=dto.transaction_type,
            frequency=dto.frequency,
        )


class RecurringSummaryResponse(BaseModel):
    """Counts and monthly totals of an account's patterns."""

    total: int
    active: int
    monthly_debit: int = Field(description="Active monthly debits, minor units")
    monthly_credit: int = Field(description="Active monthly credits, minor units")

    @classmethod
    def from_dto(cls, dto: RecurringSummary) -> RecurringSummaryResponse:
        return cls(**dto.to_dict())
