"""
Tests for the journal entry validator and the in-memory ledger.

Validates:
- Validation order and error types
- Rejection leaves the ledger untouched
- Accepted entries are prepended (newest first)
- DataFrame views and balances
"""

from dataclasses import FrozenInstanceError, replace
from datetime import date

import pytest

from regu_ai.core.ledger.accounts import Account, AccountType, ChartOfAccounts
from regu_ai.core.ledger.journal_entry import JournalEntry
from regu_ai.core.ledger.ledger import LedgerManager
from regu_ai.core.ledger.validator import (
    REFERENCE_PLACEHOLDER,
    EntryValidationError,
    InvalidAmountError,
    InvalidDateError,
    MissingFieldError,
    SameAccountError,
    UnknownAccountError,
    validate_entry,
)


# =============================================================================
# Validator
# =============================================================================


class TestValidateEntry:

    def test_valid_form(self, valid_form, chart):
        validated = validate_entry(valid_form, chart)

        assert validated.amount == 1_500_000.0
        assert validated.date == date(2023, 10, 5)
        assert validated.reference == "REF-002"

    @pytest.mark.parametrize("field_name", ["debit_account", "credit_account"])
    def test_missing_account(self, valid_form, field_name):
        form = replace(valid_form, **{field_name: ""})

        with pytest.raises(MissingFieldError) as exc:
            validate_entry(form)
        assert exc.value.field_name == field_name

    def test_same_account(self, valid_form):
        form = replace(valid_form, credit_account=valid_form.debit_account)

        with pytest.raises(SameAccountError, match="must be different"):
            validate_entry(form)

    def test_same_account_wins_over_other_invalid_fields(self, valid_form):
        form = replace(
            valid_form,
            credit_account=valid_form.debit_account,
            description="",
            amount="abc",
            date="not-a-date",
        )

        with pytest.raises(SameAccountError):
            validate_entry(form)

    @pytest.mark.parametrize("field_name", ["date", "description", "amount"])
    def test_missing_required_field(self, valid_form, field_name):
        form = replace(valid_form, **{field_name: None if field_name == "date" else "  "})

        with pytest.raises(MissingFieldError):
            validate_entry(form)

    @pytest.mark.parametrize("amount", ["abc", "0", "-5", 0, "nan", "inf", "1e400", float("inf")])
    def test_invalid_amount(self, valid_form, amount):
        with pytest.raises(InvalidAmountError):
            validate_entry(replace(valid_form, amount=amount))

    def test_iso_string_date(self, valid_form):
        validated = validate_entry(replace(valid_form, date="2024-01-31"))

        assert validated.date == date(2024, 1, 31)

    def test_invalid_date(self, valid_form):
        with pytest.raises(InvalidDateError):
            validate_entry(replace(valid_form, date="31/01/2024"))

    def test_unknown_account_with_chart(self, valid_form, chart):
        with pytest.raises(UnknownAccountError) as exc:
            validate_entry(replace(valid_form, credit_account="9999"), chart)
        assert exc.value.code == "9999"

    def test_unknown_account_without_chart_passes(self, valid_form):
        validated = validate_entry(replace(valid_form, credit_account="9999"))

        assert validated.credit_account == "9999"

    def test_empty_reference_gets_placeholder(self, valid_form):
        validated = validate_entry(replace(valid_form, reference=""))

        assert validated.reference == REFERENCE_PLACEHOLDER

    def test_errors_are_value_errors(self):
        assert issubclass(EntryValidationError, ValueError)


# =============================================================================
# Journal entry
# =============================================================================


class TestJournalEntry:

    def test_same_account_rejected(self):
        with pytest.raises(SameAccountError):
            JournalEntry("x", date(2024, 1, 1), "d", "-", "1101", "1101", 10, "Admin")

    def test_non_positive_amount_rejected(self):
        with pytest.raises(InvalidAmountError):
            JournalEntry("x", date(2024, 1, 1), "d", "-", "1101", "1102", 0, "Admin")

    @pytest.mark.parametrize("amount", [float("inf"), float("nan")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            JournalEntry("x", date(2024, 1, 1), "d", "-", "1101", "1102", amount, "Admin")

    def test_immutable(self, ledger):
        with pytest.raises(FrozenInstanceError):
            ledger.entries[0].amount = 1


# =============================================================================
# Ledger
# =============================================================================


class TestLedgerManager:

    def test_seed_entries_keep_given_order(self, ledger):
        assert [e.id for e in ledger.entries] == ["j1", "j2"]

    def test_submit_prepends(self, ledger, valid_form):
        e1 = ledger.submit_entry(valid_form, posted_by="Current User")
        e2 = ledger.submit_entry(replace(valid_form, description="Second"), posted_by="Current User")

        assert ledger.entries[:2] == [e2, e1]
        assert [e.id for e in ledger.entries[2:]] == ["j1", "j2"]

    def test_submit_builds_entry(self, ledger, valid_form):
        entry = ledger.submit_entry(replace(valid_form, reference=""), posted_by="Dr. Budi")

        assert entry.posted_by == "Dr. Budi"
        assert entry.reference == "-"
        assert entry.amount == 1_500_000.0
        assert entry.debit_account == "1101"
        assert entry.credit_account == "4101"

    def test_ids_are_unique(self, empty_ledger, valid_form):
        ids = {empty_ledger.submit_entry(valid_form, "u").id for _ in range(20)}

        assert len(ids) == 20

    def test_duplicate_reference_allowed(self, empty_ledger, valid_form):
        empty_ledger.submit_entry(valid_form, "u")
        empty_ledger.submit_entry(valid_form, "u")

        assert len(empty_ledger) == 2

    def test_same_account_rejected_without_mutation(self, ledger, valid_form):
        before = list(ledger.entries)

        with pytest.raises(SameAccountError):
            ledger.submit_entry(replace(valid_form, credit_account="1101"), posted_by="u")

        assert ledger.entries == before

    def test_infinite_amount_rejected_without_mutation(self, ledger, valid_form):
        before = list(ledger.entries)

        with pytest.raises(InvalidAmountError):
            ledger.submit_entry(replace(valid_form, amount="inf"), posted_by="u")

        assert ledger.entries == before

    def test_unknown_account_rejected(self, ledger, valid_form):
        with pytest.raises(UnknownAccountError):
            ledger.submit_entry(replace(valid_form, debit_account="0000"), posted_by="u")

        assert len(ledger) == 2

    def test_rejection_is_logged(self, ledger, valid_form, caplog):
        with caplog.at_level("WARNING", logger="regu_ai"):
            with pytest.raises(SameAccountError):
                ledger.submit_entry(replace(valid_form, credit_account="1101"), posted_by="u")

        assert "rejected" in caplog.text

    def test_add_entry_type_check(self, ledger):
        with pytest.raises(TypeError):
            ledger.add_entry({"debit_account": "1101"})

    def test_get_df(self, ledger):
        df = ledger.get_df()

        assert list(df["id"]) == ["j1", "j2"]
        assert df.iloc[0]["debit_name"] == "Kas (Cash)"
        assert df.iloc[0]["credit_name"] == "Piutang Pelayanan (AR)"

    def test_get_df_empty(self, empty_ledger):
        df = empty_ledger.get_df()

        assert df.empty
        assert "amount" in df.columns

    def test_unknown_code_falls_back_to_code(self):
        chart = ChartOfAccounts([Account("1101", "Kas", AccountType.ASSET)])
        legacy = JournalEntry("x", date(2024, 1, 1), "d", "-", "1101", "7777", 5, "Admin")
        df = LedgerManager(chart, [legacy]).get_df()

        assert df.iloc[0]["credit_name"] == "7777"

    def test_posting_df_has_two_rows_per_entry(self, ledger):
        df = ledger.get_posting_df()

        assert len(df) == 4
        assert list(df["dr_cr"]) == ["debit", "credit", "debit", "credit"]

    def test_account_balance(self, ledger):
        # j1: Dr 1101 250m / Cr 1102, j2: Dr 1201 50m / Cr 1101
        assert ledger.get_account_balance("1101") == 200_000_000
        assert ledger.get_account_balance("1102") == -250_000_000
        assert ledger.get_account_balance("5101") == 0

    def test_balance_check(self, ledger, valid_form):
        ledger.submit_entry(valid_form, "u")

        check = ledger.balance_check()

        assert check["is_balanced"]
        assert check["debit_total"] == check["credit_total"] == 301_500_000

    def test_balance_check_empty(self, empty_ledger):
        check = empty_ledger.balance_check()

        assert check["is_balanced"]
        assert check["debit_total"] == 0


class TestChartOfAccounts:

    def test_name_of(self, chart):
        assert chart.name_of("4201") == "Pendapatan APBN"
        assert chart.name_of("nope") == "nope"

    def test_options(self, chart):
        assert chart.options()[0] == "1101 - Kas (Cash)"
        assert len(chart.options()) == len(chart) == 9

    def test_duplicate_codes_rejected(self):
        with pytest.raises(ValueError):
            ChartOfAccounts([
                Account("1", "a", AccountType.ASSET),
                Account("1", "b", AccountType.ASSET),
            ])
