"""Repository interface for recurring patterns."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence
from uuid import UUID

from kasboek.domain.recurring.entities import RecurringPattern
from kasboek.domain.recurring.value_objects import Frequency, TransactionType


class RecurringPatternRepository(ABC):
    """Repository interface for persisting and retrieving recurring patterns.

    Writes only flush; committing or rolling back the unit of work is the
    caller's responsibility.
    """

    @abstractmethod
    async def save(self, pattern: RecurringPattern) -> None:
        """
        Insert or update a single pattern.

        Parameters
        ----------
        pattern
            Pattern to save
        """

    @abstractmethod
    async def save_all(self, patterns: Sequence[RecurringPattern]) -> None:
        """
        Insert newly detected patterns as one bulk write.

        Raises
        ------
        PatternPersistenceError
            If the write fails. Nothing of the batch must remain pending.
        """

    @abstractmethod
    async def replace_all_for_account(
        self,
        account_id: UUID,
        patterns: Sequence[RecurringPattern],
    ) -> int:
        """
        Atomically replace every pattern of an account.

        Returns
        -------
        Number of patterns that were removed

        Raises
        ------
        PatternPersistenceError
            If the delete or the insert fails. The previous set is kept.
        """

    @abstractmethod
    async def delete_all_for_account(self, account_id: UUID) -> int:
        """
        Delete all patterns of an account.

        Returns
        -------
        Number of deleted patterns
        """

    @abstractmethod
    async def find_by_id(self, pattern_id: UUID) -> Optional[RecurringPattern]:
        """
        Find a pattern by ID.

        Returns
        -------
        Pattern if found, None otherwise
        """

    @abstractmethod
    async def find_active(
        self,
        account_id: UUID,
        merchant_key: str,
        transaction_type: TransactionType,
    ) -> Optional[RecurringPattern]:
        """
        Find the active pattern for an (account, merchant, type) triple.

        Returns
        -------
        Active pattern if one exists, None otherwise
        """

    @abstractmethod
    async def find_by_account(self, account_id: UUID) -> List[RecurringPattern]:
        """All patterns of an account ordered by next expected date."""

    @abstractmethod
    async def find_active_by_account(self, account_id: UUID) -> List[RecurringPattern]:
        """Active patterns of an account ordered by next expected date."""

    @abstractmethod
    async def find_by_account_and_frequency(
        self,
        account_id: UUID,
        frequency: Frequency,
    ) -> List[RecurringPattern]:
        """Patterns of one frequency ordered by next expected date."""

    @abstractmethod
    async def find_upcoming(
        self,
        account_id: UUID,
        start: date,
        end: date,
    ) -> List[RecurringPattern]:
        """Active patterns expected within ``[start, end]``."""

    @abstractmethod
    async def find_overdue(
        self,
        account_id: UUID,
        today: date,
    ) -> List[RecurringPattern]:
        """Active patterns whose next expected date is before ``today``."""
