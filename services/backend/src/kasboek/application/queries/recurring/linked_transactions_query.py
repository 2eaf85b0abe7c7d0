"""Find the booked transactions behind a recurring pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from kasboek.application.dtos.recurring import TransactionSummary
from kasboek.application.queries.recurring.get_recurring_pattern_query import (
    GetRecurringPatternQuery,
)
from kasboek.domain.recurring.repositories import (
    LedgerTransactionRepository,
    RecurringPatternRepository,
)
from kasboek.domain.recurring.services import MerchantNormalizer

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory

DEFAULT_LINKED_LIMIT = 20


class LinkedTransactionsQuery:
    """Query transactions that normalize to a pattern's merchant key.

    The merchant key is recomputed for every transaction, so the result
    reflects the current normalization rules rather than a stored link.
    """

    def __init__(
        self,
        pattern_repository: RecurringPatternRepository,
        transaction_repository: LedgerTransactionRepository,
        normalizer: Optional[MerchantNormalizer] = None,
    ):
        self._get_pattern = GetRecurringPatternQuery(pattern_repository)
        self._transaction_repo = transaction_repository
        self._normalizer = normalizer or MerchantNormalizer()

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> LinkedTransactionsQuery:
        return cls(
            pattern_repository=factory.recurring_pattern_repository(),
            transaction_repository=factory.ledger_transaction_repository(),
        )

    async def execute(
        self,
        pattern_id: UUID,
        account_id: UUID,
        limit: int = DEFAULT_LINKED_LIMIT,
    ) -> list[TransactionSummary]:
        pattern = await self._get_pattern.execute(pattern_id, account_id)
        transactions = await self._transaction_repo.list_for_account(account_id)

        matched: list[TransactionSummary] = []
        for transaction in transactions:
            if len(matched) >= limit:
                break
            if transaction.is_split_child or transaction.booking_date is None:
                continue
            if transaction.transaction_type != pattern.transaction_type:
                continue
            if self._normalizer.normalize(transaction) != pattern.merchant_key:
                continue
            matched.append(TransactionSummary.from_transaction(transaction))

        return matched
