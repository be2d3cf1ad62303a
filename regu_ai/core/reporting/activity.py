#============== core/reporting/activity.py

from dataclasses import dataclass
from typing import Iterable

from regu_ai.core.reporting.items import FinancialItem

REVENUE = "Revenue"
EXPENSE = "Expense"


@dataclass(frozen=True)
class ActivitySummary:
    revenue: float
    expense: float
    surplus: float

    @property
    def is_surplus(self) -> bool:
        # 0 は黒字側
        return self.surplus >= 0


def items_in_category(items: Iterable[FinancialItem], category: str) -> list:
    return [i for i in items if i.category == category]


def summarize_activity(items: Iterable[FinancialItem]) -> ActivitySummary:
    """Single-step activity statement: revenue minus expense, current year."""
    items = list(items)
    revenue = sum(i.amount_current for i in items_in_category(items, REVENUE))
    expense = sum(i.amount_current for i in items_in_category(items, EXPENSE))
    return ActivitySummary(revenue=revenue, expense=expense, surplus=revenue - expense)

#============== end core/reporting/activity.py
