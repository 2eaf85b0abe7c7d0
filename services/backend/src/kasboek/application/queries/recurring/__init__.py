"""Recurring queries - read access to detected patterns."""

from kasboek.application.queries.recurring.get_recurring_pattern_query import (
    GetRecurringPatternQuery,
)
from kasboek.application.queries.recurring.linked_transactions_query import (
    LinkedTransactionsQuery,
)
from kasboek.application.queries.recurring.list_recurring_patterns_query import (
    ListRecurringPatternsQuery,
)
from kasboek.application.queries.recurring.recurring_summary_query import (
    RecurringSummaryQuery,
)
from kasboek.application.queries.recurring.upcoming_recurring_query import (
    UpcomingRecurringQuery,
)

__all__ = [
    "GetRecurringPatternQuery",
    "LinkedTransactionsQuery",
    "ListRecurringPatternsQuery",
    "RecurringSummaryQuery",
    "UpcomingRecurringQuery",
]
