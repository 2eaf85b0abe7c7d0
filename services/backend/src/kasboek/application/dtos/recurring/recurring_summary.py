"""DTO for the per-account recurring overview."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecurringSummary:
    """Pattern counts and monthly totals of an account.

    ``monthly_debit`` and ``monthly_credit`` sum the predicted amounts
    (minor units) of active monthly patterns only.
    """

    total: int
    active: int
    monthly_debit: int
    monthly_credit: int

    @property
    def monthly_net(self) -> int:
        return self.monthly_credit - self.monthly_debit

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "active": self.active,
            "monthly_debit": self.monthly_debit,
            "monthly_credit": self.monthly_credit,
        }
