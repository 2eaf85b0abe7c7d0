"""Recurring domain repository interfaces."""

from kasboek.domain.recurring.repositories.ledger_account_repository import (
    LedgerAccountRepository,
)
from kasboek.domain.recurring.repositories.ledger_transaction_repository import (
    LedgerTransactionRepository,
)
from kasboek.domain.recurring.repositories.recurring_pattern_repository import (
    RecurringPatternRepository,
)

__all__ = [
    "LedgerAccountRepository",
    "LedgerTransactionRepository",
    "RecurringPatternRepository",
]
