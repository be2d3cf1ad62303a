# ===========================================
# core/reporting/balance_sheet.py
# 比較貸借対照表
# ===========================================

from typing import Iterable

import numpy as np
import pandas as pd

from regu_ai.core.reporting.items import FinancialItem

COMPARATIVE_COLUMNS = ["category", "account", "current_year", "previous_year", "change", "change_pct"]


def comparative_df(items: Iterable[FinancialItem]) -> pd.DataFrame:
    """
    Statement of financial position, current vs previous year.

    ``change_pct`` is NaN where the previous year is zero.
    """
    rows = [
        {
            "category": i.category,
            "account": i.name,
            "current_year": i.amount_current,
            "previous_year": i.amount_previous,
        }
        for i in items
    ]
    if not rows:
        return pd.DataFrame(columns=COMPARATIVE_COLUMNS)

    df = pd.DataFrame(rows)
    df["change"] = df["current_year"] - df["previous_year"]

    previous = df["previous_year"].astype(float)
    safe_previous = previous.where(previous != 0, 1.0)
    df["change_pct"] = np.where(previous != 0, df["change"] / safe_previous, np.nan)

    return df[COMPARATIVE_COLUMNS]


def chart_df(items: Iterable[FinancialItem]) -> pd.DataFrame:
    """Bar chart source: one row per account, previous and current year columns."""
    df = pd.DataFrame(
        [
            {
                "account": i.name,
                "Previous Year": i.amount_previous,
                "Current Year": i.amount_current,
            }
            for i in items
        ],
        columns=["account", "Previous Year", "Current Year"],
    )
    return df.set_index("account")


def category_totals(items: Iterable[FinancialItem]) -> pd.DataFrame:
    df = comparative_df(items)
    if df.empty:
        return pd.DataFrame(columns=["current_year", "previous_year"])
    return df.groupby("category", sort=False)[["current_year", "previous_year"]].sum()

# ===========================================
# END balance_sheet.py
# ===========================================
