"""Query layer - read operations that never mutate state."""

from kasboek.application.queries.recurring import (
    GetRecurringPatternQuery,
    LinkedTransactionsQuery,
    ListRecurringPatternsQuery,
    RecurringSummaryQuery,
    UpcomingRecurringQuery,
)

__all__ = [
    "GetRecurringPatternQuery",
    "LinkedTransactionsQuery",
    "ListRecurringPatternsQuery",
    "RecurringSummaryQuery",
    "UpcomingRecurringQuery",
]
