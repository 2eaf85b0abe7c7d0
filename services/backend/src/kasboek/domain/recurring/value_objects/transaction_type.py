"""Transaction direction enumeration."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of money relative to the ledger account."""

    DEBIT = "debit"
    CREDIT = "credit"
