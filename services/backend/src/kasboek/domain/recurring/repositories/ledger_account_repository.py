"""Repository interface for ledger account lookups."""

from abc import ABC, abstractmethod
from uuid import UUID


class LedgerAccountRepository(ABC):
    """Read-only view on the ledger accounts owned by the bookkeeping side."""

    @abstractmethod
    async def exists(self, account_id: UUID) -> bool:
        """
        Check whether a ledger account exists.

        Parameters
        ----------
        account_id
            Ledger account ID

        Returns
        -------
        True if the account exists, False otherwise
        """
