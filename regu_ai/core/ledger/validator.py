# ================================
# core/ledger/validator.py
# ================================

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from regu_ai.core.ledger.accounts import ChartOfAccounts

REFERENCE_PLACEHOLDER = "-"


# =======================================
# エラー
# =======================================

class EntryValidationError(ValueError):
    """Base class for rejected journal entry forms."""


class MissingFieldError(EntryValidationError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} is required.")


class SameAccountError(EntryValidationError):
    def __init__(self, account: str = ""):
        self.account = account
        super().__init__("Debit and Credit accounts must be different.")


class InvalidAmountError(EntryValidationError):
    def __init__(self, raw_amount):
        self.raw_amount = raw_amount
        super().__init__(f"Amount must be a positive number, got {raw_amount!r}.")


class InvalidDateError(EntryValidationError):
    def __init__(self, raw_date):
        self.raw_date = raw_date
        super().__init__(f"Date must be a calendar date (YYYY-MM-DD), got {raw_date!r}.")


class UnknownAccountError(EntryValidationError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown account code: {code}.")


# =======================================
# フォーム
# =======================================

@dataclass
class EntryForm:
    """Raw values of the General Journal form, as typed."""

    date: Union[date, str, None] = None
    description: str = ""
    reference: str = ""
    debit_account: str = ""
    credit_account: str = ""
    amount: Union[str, float, int, None] = ""


@dataclass(frozen=True)
class ValidatedEntry:
    date: date
    description: str
    reference: str
    debit_account: str
    credit_account: str
    amount: float


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(raw) -> date:
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw).strip())
    except ValueError:
        raise InvalidDateError(raw)


def _parse_amount(raw) -> float:
    if isinstance(raw, bool):
        raise InvalidAmountError(raw)
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        raise InvalidAmountError(raw)
    if not (math.isfinite(amount) and amount > 0):
        raise InvalidAmountError(raw)
    return amount


def check_accounts(debit_account: str, credit_account: str) -> None:
    """Both sides present and different."""
    if _is_blank(debit_account):
        raise MissingFieldError("debit_account")
    if _is_blank(credit_account):
        raise MissingFieldError("credit_account")
    if debit_account == credit_account:
        raise SameAccountError(debit_account)


def validate_entry(form: EntryForm, chart: Optional[ChartOfAccounts] = None) -> ValidatedEntry:
    """
    Check a journal form and return normalized values.

    The account pair is checked first, so a same-account form is rejected
    with SameAccountError whatever else is wrong with it. Nothing is
    mutated here; the ledger only appends after this returns.
    """
    check_accounts(form.debit_account, form.credit_account)

    for field_name in ("date", "description", "amount"):
        if _is_blank(getattr(form, field_name)):
            raise MissingFieldError(field_name)

    entry_date = _parse_date(form.date)
    amount = _parse_amount(form.amount)

    if chart is not None:
        for code in (form.debit_account, form.credit_account):
            if code not in chart:
                raise UnknownAccountError(code)

    reference = form.reference.strip() if form.reference else ""

    return ValidatedEntry(
        date=entry_date,
        description=form.description.strip(),
        reference=reference or REFERENCE_PLACEHOLDER,
        debit_account=form.debit_account,
        credit_account=form.credit_account,
        amount=amount,
    )
