# ===============================
# core/ledger/ledger.py
# ===============================

from typing import Iterable

import pandas as pd

from regu_ai.config.logging_setup import get_logger
from regu_ai.core.ledger.accounts import ChartOfAccounts
from regu_ai.core.ledger.journal_entry import JournalEntry, make_entry
from regu_ai.core.ledger.validator import EntryForm, EntryValidationError, validate_entry

logger = get_logger("ledger")

JOURNAL_COLUMNS = [
    "id",
    "date",
    "description",
    "reference",
    "debit_account",
    "debit_name",
    "credit_account",
    "credit_name",
    "amount",
    "posted_by",
]

POSTING_COLUMNS = ["entry_id", "date", "account", "account_name", "dr_cr", "amount", "description"]


class LedgerManager:
    """
    LedgerManager
    --------------
    ・検証済みの JournalEntry を受け取り
    ・新しいものを先頭にしてメモリ上に保持し（永続化なし）
    ・勘定科目別残高などの台帳集計を行い
    ・DataFrame として吐き出す
    """

    def __init__(self, chart: ChartOfAccounts, entries: Iterable[JournalEntry] = ()):
        self.chart = chart
        # JournalEntry のリスト（新しい順）。初期仕訳は渡された順で並べる
        self.entries: list[JournalEntry] = []
        for entry in reversed(list(entries)):
            self.add_entry(entry)

    def __len__(self) -> int:
        return len(self.entries)

    # -------------------------------------------------
    # フォーム起票
    # -------------------------------------------------
    def submit_entry(self, form: EntryForm, posted_by: str) -> JournalEntry:
        """
        Validate a journal form and prepend the resulting entry.

        Raises an EntryValidationError subclass on rejection; the entry list
        is untouched in that case.
        """
        try:
            validated = validate_entry(form, self.chart)
        except EntryValidationError as e:
            logger.warning("Journal entry rejected: %s", e)
            raise

        entry = make_entry(validated, posted_by)
        self.entries.insert(0, entry)
        logger.info(
            "Posted journal entry %s: Dr %s / Cr %s %.2f by %s",
            entry.id,
            entry.debit_account,
            entry.credit_account,
            entry.amount,
            posted_by,
        )
        return entry

    # -------------------------------------------------
    # JournalEntry 追加
    # -------------------------------------------------
    def add_entry(self, entry: JournalEntry) -> None:
        """
        JournalEntry を1件先頭に追加する
        """
        if not isinstance(entry, JournalEntry):
            raise TypeError(
                f"LedgerManager.add_entry expects JournalEntry, got {type(entry)}"
            )

        self.entries.insert(0, entry)

    # -------------------------------------------------
    # 勘定科目別残高取得
    # （借方＋ / 貸方−）
    # -------------------------------------------------
    def get_account_balance(self, account_code: str) -> float:
        balance = 0.0

        for e in self.entries:
            if e.debit_account == account_code:
                balance += e.amount
            if e.credit_account == account_code:
                balance -= e.amount

        return balance

    # -------------------------------------------------
    # Ledger → DataFrame 変換（仕訳帳）
    # -------------------------------------------------
    def get_df(self) -> pd.DataFrame:
        """
        One row per entry, newest first, with account names resolved.
        """
        if not self.entries:
            return pd.DataFrame(columns=JOURNAL_COLUMNS)

        rows = []
        for e in self.entries:
            rows.append({
                "id": e.id,
                "date": e.date,
                "description": e.description,
                "reference": e.reference,
                "debit_account": e.debit_account,
                "debit_name": self.chart.name_of(e.debit_account),
                "credit_account": e.credit_account,
                "credit_name": self.chart.name_of(e.credit_account),
                "amount": e.amount,
                "posted_by": e.posted_by,
            })

        return pd.DataFrame(rows, columns=JOURNAL_COLUMNS)

    # -------------------------------------------------
    # Ledger → DataFrame 変換（借方行・貸方行）
    # -------------------------------------------------
    def get_posting_df(self) -> pd.DataFrame:
        if not self.entries:
            return pd.DataFrame(columns=POSTING_COLUMNS)

        rows = []
        for e in self.entries:
            # 借方
            rows.append({
                "entry_id": e.id,
                "date": e.date,
                "account": e.debit_account,
                "account_name": self.chart.name_of(e.debit_account),
                "dr_cr": "debit",
                "amount": e.amount,
                "description": e.description,
            })
            # 貸方
            rows.append({
                "entry_id": e.id,
                "date": e.date,
                "account": e.credit_account,
                "account_name": self.chart.name_of(e.credit_account),
                "dr_cr": "credit",
                "amount": e.amount,
                "description": e.description,
            })

        return pd.DataFrame(rows, columns=POSTING_COLUMNS)

    # -------------------------------------------------
    # 簿記検証（借方＝貸方）
    # -------------------------------------------------
    def balance_check(self) -> dict:
        df = self.get_posting_df()
        debit_total = float(df[df["dr_cr"] == "debit"]["amount"].sum())
        credit_total = float(df[df["dr_cr"] == "credit"]["amount"].sum())
        diff = debit_total - credit_total

        return {
            "debit_total": debit_total,
            "credit_total": credit_total,
            "balance_diff": diff,
            "is_balanced": abs(diff) < 1.0,
        }
