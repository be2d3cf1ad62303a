# ================================
# core/ledger/accounts.py
# ================================

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class AccountType(str, Enum):
    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Account:
    code: str           # 科目コード
    name: str           # 科目名
    type: AccountType   # 区分


class ChartOfAccounts:
    """
    ChartOfAccounts
    ---------------
    ・勘定科目マスター（静的な参照データ）
    ・コードから科目を引く
    ・未登録コードは名前の代わりにコードをそのまま返す
    """

    def __init__(self, accounts: Iterable[Account]):
        self._accounts: dict[str, Account] = {}
        for account in accounts:
            if account.code in self._accounts:
                raise ValueError(f"Duplicate account code: {account.code}")
            self._accounts[account.code] = account

    def __contains__(self, code) -> bool:
        return code in self._accounts

    def __iter__(self):
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def get(self, code: str) -> Optional[Account]:
        return self._accounts.get(code)

    def name_of(self, code: str) -> str:
        account = self._accounts.get(code)
        return account.name if account is not None else code

    def options(self) -> list[str]:
        """Select-box labels, ``"<code> - <name>"``."""
        return [f"{a.code} - {a.name}" for a in self._accounts.values()]

    def codes(self) -> list[str]:
        return list(self._accounts)
