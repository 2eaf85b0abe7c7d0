"""Partition a transaction snapshot into merchant/direction groups."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from kasboek.domain.recurring.services.merchant_normalizer import MerchantNormalizer
from kasboek.domain.recurring.value_objects import (
    LedgerTransaction,
    MerchantGroup,
    MerchantKey,
    TransactionType,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_GROUP_SIZE = 500


class MerchantGrouper:
    """Groups transactions by merchant key, then by transaction type.

    Debit and credit transactions of the same merchant end up in separate
    groups so that each direction is analyzed on its own.
    """

    def __init__(
        self,
        normalizer: MerchantNormalizer | None = None,
        max_group_size: int = DEFAULT_MAX_GROUP_SIZE,
    ):
        self._normalizer = normalizer or MerchantNormalizer()
        self._max_group_size = max_group_size

    def group(self, transactions: Iterable[LedgerTransaction]) -> list[MerchantGroup]:
        """Build groups from a transaction snapshot.

        Split children, rows without date or amount, and rows without any
        merchant identity are skipped. Each group is ordered oldest first
        and keeps only its most recent ``max_group_size`` transactions.
        Groups are returned in order of first appearance.
        """
        buckets: dict[tuple[MerchantKey, TransactionType], list[LedgerTransaction]]
        buckets = defaultdict(list)

        for transaction in transactions:
            if transaction.is_split_child:
                continue
            if not transaction.is_usable:
                logger.debug("Skipping incomplete transaction %s", transaction.id)
                continue

            key = self._normalizer.normalize(transaction)
            if not key:
                logger.debug("Skipping transaction %s without merchant", transaction.id)
                continue

            buckets[(key, transaction.transaction_type)].append(transaction)

        groups = []
        for (key, transaction_type), members in buckets.items():
            members.sort(key=lambda t: t.booking_date)
            if len(members) > self._max_group_size:
                logger.debug(
                    "Capping group %s/%s from %d to %d transactions",
                    key,
                    transaction_type.value,
                    len(members),
                    self._max_group_size,
                )
                members = members[-self._max_group_size :]
            groups.append(
                MerchantGroup(
                    merchant_key=key,
                    transaction_type=transaction_type,
                    transactions=tuple(members),
                ),
            )
        return groups
