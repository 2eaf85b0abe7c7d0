"""Recurring patterns router.

All endpoints are scoped to one ledger account. Write endpoints commit
the request session on success and roll it back on any failure.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from kasboek.application.commands.recurring import (
    UNSET,
    DeactivateRecurringPatternCommand,
    DetectRecurringPatternsCommand,
    UpdateRecurringPatternCommand,
)
from kasboek.application.queries.recurring import (
    GetRecurringPatternQuery,
    LinkedTransactionsQuery,
    ListRecurringPatternsQuery,
    RecurringSummaryQuery,
    UpcomingRecurringQuery,
)
from kasboek.presentation.api.dependencies import Detection, RepoFactory, Today
from kasboek.presentation.api.schemas.recurring import (
    DetectionResponse,
    LinkedTransactionResponse,
    RecurringPatternListResponse,
    RecurringPatternResponse,
    RecurringPatternUpdateRequest,
    RecurringSummaryResponse,
    UpcomingPaymentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List recurring patterns",
    responses={
        200: {"description": "Patterns ordered by next expected date"},
        400: {"description": "Unknown frequency"},
        404: {"description": "Account not found"},
    },
)
async def list_patterns(
    account_id: UUID,
    factory: RepoFactory,
    frequency: Optional[str] = Query(None, description="weekly, monthly, ..."),
    active_only: Optional[bool] = Query(None, description="Only active patterns"),
) -> RecurringPatternListResponse:
    """
    List the recurring patterns of an account.

    Filtering by frequency is applied first, then the active filter.
    """
    query = ListRecurringPatternsQuery.from_factory(factory)
    patterns = await query.execute(
        account_id,
        frequency=frequency,
        active_only=active_only,
    )

    return RecurringPatternListResponse(
        patterns=[RecurringPatternResponse.from_domain(p) for p in patterns],
        count=len(patterns),
    )


@router.post(
    "/detect",
    summary="Detect recurring patterns",
    responses={
        200: {"description": "Newly detected patterns"},
        404: {"description": "Account not found"},
        500: {"description": "Patterns could not be stored"},
    },
)
async def detect_patterns(
    account_id: UUID,
    factory: RepoFactory,
    config: Detection,
    today: Today,
    force: bool = Query(False, description="Replace all existing patterns"),
) -> DetectionResponse:
    """
    Analyze the transaction history and store new recurring patterns.

    Without `force`, merchants that already have an active pattern are
    skipped, so calling this repeatedly is safe. With `force`, the
    account's patterns are deleted and detected from scratch.
    """
    command = DetectRecurringPatternsCommand.from_factory(
        factory,
        config=config,
        today=today,
    )

    try:
        patterns = await command.execute(account_id, force=force)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DetectionResponse(
        patterns=[RecurringPatternResponse.from_domain(p) for p in patterns],
        count=len(patterns),
        force=force,
    )


@router.get("/summary", summary="Recurring overview")
async def get_summary(
    account_id: UUID,
    factory: RepoFactory,
) -> RecurringSummaryResponse:
    """Pattern counts and the monthly totals of active monthly patterns."""
    query = RecurringSummaryQuery.from_factory(factory)
    summary = await query.summary(account_id)
    return RecurringSummaryResponse.from_dto(summary)


@router.get("/grouped", summary="Patterns grouped by frequency")
async def get_grouped(
    account_id: UUID,
    factory: RepoFactory,
    active_only: bool = Query(True),
) -> dict[str, list[RecurringPatternResponse]]:
    """Every frequency is present as a key, possibly with an empty list."""
    query = RecurringSummaryQuery.from_factory(factory)
    grouped = await query.grouped_by_frequency(account_id, active_only=active_only)
    return {
        frequency.value: [RecurringPatternResponse.from_domain(p) for p in patterns]
        for frequency, patterns in grouped.items()
    }


@router.get("/upcoming", summary="Upcoming recurring payments")
async def get_upcoming(
    account_id: UUID,
    factory: RepoFactory,
    today: Today,
    days: int = Query(30, ge=1, le=366),
) -> list[UpcomingPaymentResponse]:
    """Active patterns expected within the next `days` days."""
    query = UpcomingRecurringQuery.from_factory(factory, today=today)
    payments = await query.upcoming(account_id, days=days)
    return [UpcomingPaymentResponse.from_dto(p) for p in payments]


@router.get("/overdue", summary="Overdue recurring payments")
async def get_overdue(
    account_id: UUID,
    factory: RepoFactory,
    today: Today,
) -> list[UpcomingPaymentResponse]:
    """Active patterns whose expected date has passed."""
    query = UpcomingRecurringQuery.from_factory(factory, today=today)
    payments = await query.overdue(account_id)
    return [UpcomingPaymentResponse.from_dto(p) for p in payments]


@router.get(
    "/{pattern_id}",
    summary="Get recurring pattern",
    responses={404: {"description": "Pattern not found"}},
)
async def get_pattern(
    account_id: UUID,
    pattern_id: UUID,
    factory: RepoFactory,
) -> RecurringPatternResponse:
    query = GetRecurringPatternQuery.from_factory(factory)
    pattern = await query.execute(pattern_id, account_id)
    return RecurringPatternResponse.from_domain(pattern)


@router.patch(
    "/{pattern_id}",
    summary="Update recurring pattern",
    responses={
        400: {"description": "Blank display name"},
        404: {"description": "Pattern not found"},
        409: {"description": "Another active pattern exists for this merchant"},
    },
)
async def update_pattern(
    account_id: UUID,
    pattern_id: UUID,
    request: RecurringPatternUpdateRequest,
    factory: RepoFactory,
) -> RecurringPatternResponse:
    """
    Rename, activate/deactivate or recategorize a pattern.

    Fields missing from the body are left unchanged.
    """
    sent = request.model_fields_set
    command = UpdateRecurringPatternCommand.from_factory(factory)

    try:
        pattern = await command.execute(
            pattern_id,
            account_id,
            display_name=request.display_name if "display_name" in sent else UNSET,
            is_active=request.is_active if "is_active" in sent else UNSET,
            category_id=request.category_id if "category_id" in sent else UNSET,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return RecurringPatternResponse.from_domain(pattern)


@router.delete(
    "/{pattern_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Deactivate recurring pattern",
    responses={404: {"description": "Pattern not found"}},
)
async def delete_pattern(
    account_id: UUID,
    pattern_id: UUID,
    factory: RepoFactory,
) -> None:
    """Soft delete: the pattern is deactivated and kept as history."""
    command = DeactivateRecurringPatternCommand.from_factory(factory)

    try:
        await command.execute(pattern_id, account_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise


@router.get(
    "/{pattern_id}/transactions",
    summary="Transactions of a recurring pattern",
    responses={404: {"description": "Pattern not found"}},
)
async def get_linked_transactions(
    account_id: UUID,
    pattern_id: UUID,
    factory: RepoFactory,
    limit: int = Query(20, ge=1, le=100),
) -> list[LinkedTransactionResponse]:
    """Matching transactions, newest first."""
    query = LinkedTransactionsQuery.from_factory(factory)
    transactions = await query.execute(pattern_id, account_id, limit=limit)
    return [LinkedTransactionResponse.from_dto(t) for t in transactions]
