"""
Tests for the activity statement and the comparative balance sheet.
"""

import math

from regu_ai.config.reference_data import ACTIVITY, BALANCE_SHEET
from regu_ai.core.reporting.activity import (
    EXPENSE,
    REVENUE,
    items_in_category,
    summarize_activity,
)
from regu_ai.core.reporting.balance_sheet import category_totals, chart_df, comparative_df
from regu_ai.core.reporting.items import FinancialItem


def _item(category, current, previous=0, name="line"):
    return FinancialItem(f"{category}-{current}", category, name, current, previous)


class TestActivitySummary:

    def test_staged_activity(self):
        summary = summarize_activity(ACTIVITY)

        assert summary.revenue == 6_000_000_000
        assert summary.expense == 4_000_000_000
        assert summary.surplus == 2_000_000_000
        assert summary.is_surplus

    def test_surplus_is_revenue_minus_expense(self):
        summary = summarize_activity([_item(REVENUE, 100), _item(EXPENSE, 30), _item(EXPENSE, 20)])

        assert summary.surplus == summary.revenue - summary.expense == 50

    def test_zero_surplus_takes_non_negative_path(self):
        summary = summarize_activity([_item(REVENUE, 100), _item(EXPENSE, 100)])

        assert summary.surplus == 0
        assert summary.is_surplus

    def test_deficit(self):
        summary = summarize_activity([_item(REVENUE, 10), _item(EXPENSE, 11)])

        assert not summary.is_surplus

    def test_other_categories_are_ignored(self):
        summary = summarize_activity([_item("Assets", 500), _item(REVENUE, 5)])

        assert summary.revenue == 5
        assert summary.expense == 0

    def test_uses_current_year_only(self):
        summary = summarize_activity([_item(REVENUE, 10, previous=999)])

        assert summary.revenue == 10

    def test_empty(self):
        summary = summarize_activity([])

        assert (summary.revenue, summary.expense, summary.surplus) == (0, 0, 0)

    def test_items_in_category(self):
        revenues = items_in_category(ACTIVITY, REVENUE)

        assert [i.id for i in revenues] == ["a1", "a2"]


class TestBalanceSheet:

    def test_comparative_change(self):
        df = comparative_df(BALANCE_SHEET)

        cash = df[df["account"] == "Cash & Cash Equivalents"].iloc[0]
        assert cash["change"] == 300_000_000
        assert math.isclose(cash["change_pct"], 0.25)

    def test_zero_previous_has_no_percentage(self):
        df = comparative_df([_item("Assets", 100, previous=0)])

        assert math.isnan(df.iloc[0]["change_pct"])

    def test_empty(self):
        assert comparative_df([]).empty
        assert category_totals([]).empty

    def test_chart_df_columns(self):
        df = chart_df(BALANCE_SHEET)

        assert list(df.columns) == ["Previous Year", "Current Year"]
        assert df.loc["Net Assets", "Current Year"] == 2_550_000_000

    def test_category_totals(self):
        totals = category_totals(BALANCE_SHEET)

        assert list(totals.index) == ["Assets", "Liabilities", "Equity"]
        assert totals.loc["Assets", "current_year"] == 2_750_000_000
