# ===========================================
# core/reporting/provision.py
# 売掛金の年齢調べと貸倒引当（Penyisihan Piutang）
# ===========================================

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from regu_ai.core.reporting.items import Receivable

POLICY_DESCRIPTION = "Logic: 6-12 months (50%), >12 months (100%)"

FULL_PROVISION_AFTER_MONTHS = 12
HALF_PROVISION_AFTER_MONTHS = 6


def provision_rate(age_months: int) -> float:
    """
    Provision rate for a receivable of the given age.

    Both thresholds are strict: 6 months is still 0%, 12 months is still 50%.
    """
    if age_months > FULL_PROVISION_AFTER_MONTHS:
        return 1.0
    if age_months > HALF_PROVISION_AFTER_MONTHS:
        return 0.5
    return 0.0


def aging_bucket(age_months: int) -> str:
    if age_months > FULL_PROVISION_AFTER_MONTHS:
        return "loss"
    if age_months > HALF_PROVISION_AFTER_MONTHS:
        return "doubtful"
    return "current"


@dataclass(frozen=True)
class AnalyzedReceivable:
    receivable: Receivable
    provision_rate: float
    provision_amount: float

    @property
    def payer_name(self) -> str:
        return self.receivable.payer_name

    @property
    def amount(self) -> float:
        return self.receivable.amount

    @property
    def age_months(self) -> int:
        return self.receivable.age_months


@dataclass(frozen=True)
class ProvisionAnalysis:
    items: tuple
    total_receivable: float
    total_provision: float
    net_receivable: float

    def to_df(self) -> pd.DataFrame:
        columns = ["payer", "age_months", "bucket", "amount", "provision_rate", "provision_amount"]
        if not self.items:
            return pd.DataFrame(columns=columns)

        rows = [
            {
                "payer": item.payer_name,
                "age_months": item.age_months,
                "bucket": aging_bucket(item.age_months),
                "amount": item.amount,
                "provision_rate": item.provision_rate,
                "provision_amount": item.provision_amount,
            }
            for item in self.items
        ]
        return pd.DataFrame(rows, columns=columns)


def analyze_receivables(receivables: Iterable[Receivable]) -> ProvisionAnalysis:
    """
    Annotate each receivable with its provision and total the set.

    Paid items are not filtered out; every record passed in is provisioned by
    age alone.
    """
    analyzed = []
    total_receivable = 0.0
    total_provision = 0.0

    for item in receivables:
        rate = provision_rate(item.age_months)
        provision_amount = item.amount * rate

        total_receivable += item.amount
        total_provision += provision_amount

        analyzed.append(AnalyzedReceivable(item, rate, provision_amount))

    return ProvisionAnalysis(
        items=tuple(analyzed),
        total_receivable=total_receivable,
        total_provision=total_provision,
        net_receivable=total_receivable - total_provision,
    )

# ===========================================
# END provision.py
# ===========================================
