# ================================
# core/ledger/journal_entry.py
# ================================

import math
from dataclasses import dataclass
from datetime import date
from uuid import uuid4

from regu_ai.core.ledger.validator import (
    REFERENCE_PLACEHOLDER,
    InvalidAmountError,
    ValidatedEntry,
    check_accounts,
)


def new_entry_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class JournalEntry:
    """
    One double-entry journal record.

    A single JournalEntry pairs one debit account with one credit account for
    the same amount. LedgerManager.get_posting_df() expands it into a debit
    row and a credit row.
    """

    id: str                 # 一意のトークン
    date: date              # 仕訳日
    description: str        # 摘要
    reference: str          # 証憑番号
    debit_account: str      # 借方科目コード
    credit_account: str     # 貸方科目コード
    amount: float           # 金額
    posted_by: str          # 起票者

    def __post_init__(self):
        check_accounts(self.debit_account, self.credit_account)
        if not (math.isfinite(self.amount) and self.amount > 0):
            raise InvalidAmountError(self.amount)


# =======================================
# 仕訳生成ユーティリティ
# =======================================

def make_entry(validated: ValidatedEntry, posted_by: str) -> JournalEntry:
    return JournalEntry(
        id=new_entry_id(),
        date=validated.date,
        description=validated.description,
        reference=validated.reference or REFERENCE_PLACEHOLDER,
        debit_account=validated.debit_account,
        credit_account=validated.credit_account,
        amount=validated.amount,
        posted_by=posted_by,
    )

# ================================
# END journal_entry.py
# ================================
