"""Detect recurring payment patterns in an account's transaction history."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Callable, Optional
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.exceptions import AccountNotFoundError
from kasboek.domain.recurring.repositories import (
    LedgerAccountRepository,
    LedgerTransactionRepository,
    RecurringPatternRepository,
)
from kasboek.domain.recurring.services import (
    MerchantGrouper,
    MerchantNormalizer,
    PatternAnalyzer,
)
from kasboek.domain.recurring.value_objects import DetectionConfig, LedgerTransaction
from kasboek.domain.shared.time import months_before, today_utc

if TYPE_CHECKING:
    from kasboek.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DetectRecurringPatternsCommand:
    """Run the detection pipeline for one ledger account.

    Transactions of the lookback window are grouped per merchant and
    direction, every group is analyzed independently, and the surviving
    patterns are written in a single bulk operation. Without ``force``
    groups that already have an active pattern are skipped, which makes
    repeated runs over the same history idempotent. With ``force`` the
    account's pattern set is replaced as a whole.

    The command only flushes; the caller commits or rolls back.
    """

    def __init__(  # NOQA: PLR0913
        self,
        account_repository: LedgerAccountRepository,
        transaction_repository: LedgerTransactionRepository,
        pattern_repository: RecurringPatternRepository,
        config: Optional[DetectionConfig] = None,
        today: Callable[[], date] = today_utc,
    ):
        self._account_repo = account_repository
        self._transaction_repo = transaction_repository
        self._pattern_repo = pattern_repository
        self._config = config or DetectionConfig()
        self._today = today

        normalizer = MerchantNormalizer(self._config.similarity_threshold)
        self._grouper = MerchantGrouper(normalizer, self._config.max_group_size)
        self._analyzer = PatternAnalyzer(self._config, normalizer)

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        config: Optional[DetectionConfig] = None,
        today: Callable[[], date] = today_utc,
    ) -> DetectRecurringPatternsCommand:
        return cls(
            account_repository=factory.ledger_account_repository(),
            transaction_repository=factory.ledger_transaction_repository(),
            pattern_repository=factory.recurring_pattern_repository(),
            config=config,
            today=today,
        )

    async def execute(
        self,
        account_id: UUID,
        force: bool = False,
    ) -> list[RecurringPattern]:
        if not await self._account_repo.exists(account_id):
            raise AccountNotFoundError(account_id)

        today = self._today()
        since = months_before(today, self._config.lookback_months)
        snapshot = await self._transaction_repo.list_for_account_since(
            account_id,
            since,
        )
        transactions = self._usable(snapshot)

        if len(transactions) < self._config.min_transactions:
            logger.info(
                "Account %s has %d usable transactions since %s, nothing to detect",
                account_id,
                len(transactions),
                since,
            )
            if force:
                await self._pattern_repo.replace_all_for_account(account_id, [])
            return []

        groups = self._grouper.group(transactions)

        detected: list[RecurringPattern] = []
        for group in groups:
            pattern = self._analyzer.analyze(account_id, group, today)
            if pattern is None:
                continue

            if not force:
                existing = await self._pattern_repo.find_active(
                    account_id,
                    pattern.merchant_key,
                    pattern.transaction_type,
                )
                if existing is not None:
                    logger.debug(
                        "Active pattern %s already covers %s/%s",
                        existing.id,
                        pattern.merchant_key,
                        pattern.transaction_type.value,
                    )
                    continue

            detected.append(pattern)

        if force:
            removed = await self._pattern_repo.replace_all_for_account(
                account_id,
                detected,
            )
            logger.info(
                "Re-detected %d recurring patterns for account %s (%d replaced)",
                len(detected),
                account_id,
                removed,
            )
        else:
            if detected:
                await self._pattern_repo.save_all(detected)
            logger.info(
                "Detected %d new recurring patterns for account %s (%d groups, %d transactions)",
                len(detected),
                account_id,
                len(groups),
                len(transactions),
            )

        return detected

    @staticmethod
    def _usable(snapshot: list[LedgerTransaction]) -> list[LedgerTransaction]:
        usable = []
        for transaction in snapshot:
            if transaction.is_split_child:
                continue
            if not transaction.is_usable:
                logger.debug("Dropping malformed transaction %s", transaction.id)
                continue
            usable.append(transaction)
        return usable
