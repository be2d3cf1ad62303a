#============== core/reporting/items.py

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FinancialItem:
    """One comparative reporting line (balance sheet or activity statement)."""

    id: str
    category: str
    name: str
    amount_current: float
    amount_previous: float


class ReceivableStatus(str, Enum):
    UNPAID = "Unpaid"
    PAID = "Paid"


@dataclass(frozen=True)
class Receivable:
    id: str
    payer_name: str
    amount: float
    age_months: int
    status: ReceivableStatus = ReceivableStatus.UNPAID

    def __post_init__(self):
        if not self.amount > 0:
            raise ValueError(f"Receivable {self.id}: amount must be positive, got {self.amount}")
        if isinstance(self.age_months, bool) or not isinstance(self.age_months, int):
            raise ValueError(f"Receivable {self.id}: age_months must be an integer, got {self.age_months!r}")
        if self.age_months < 0:
            raise ValueError(f"Receivable {self.id}: age_months must not be negative, got {self.age_months}")

#============== end core/reporting/items.py
