"""Repository interface for the transaction snapshot used by detection."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List
from uuid import UUID

from kasboek.domain.recurring.value_objects import LedgerTransaction


class LedgerTransactionRepository(ABC):
    """Read-only access to booked transactions of a ledger account.

    Split children (transactions with a parent transaction) are never
    returned by this repository.
    """

    @abstractmethod
    async def list_for_account_since(
        self,
        account_id: UUID,
        since: date,
    ) -> List[LedgerTransaction]:
        """
        List transactions booked on or after a date.

        Parameters
        ----------
        account_id
            Ledger account ID
        since
            Inclusive lower bound on the booking date

        Returns
        -------
        Transactions in ascending booking date order
        """

    @abstractmethod
    async def list_for_account(self, account_id: UUID) -> List[LedgerTransaction]:
        """
        List all transactions of an account.

        Parameters
        ----------
        account_id
            Ledger account ID

        Returns
        -------
        Transactions in descending booking date order (newest first)
        """
