#=========== regu_ai/config/reference_data.py
# デモ用の参照データ（勘定科目・財務諸表・売掛金・患者）

from datetime import date

from regu_ai.core.clinical.patients import HumanName, Identifier, Patient
from regu_ai.core.ledger.accounts import Account, AccountType, ChartOfAccounts
from regu_ai.core.ledger.journal_entry import JournalEntry
from regu_ai.core.reporting.items import FinancialItem, Receivable, ReceivableStatus


# ----------------------------
# 勘定科目
# ----------------------------
ACCOUNT_CHART = ChartOfAccounts([
    Account("1101", "Kas (Cash)", AccountType.ASSET),
    Account("1102", "Piutang Pelayanan (AR)", AccountType.ASSET),
    Account("1201", "Persediaan Obat (Inventory)", AccountType.ASSET),
    Account("2101", "Utang Usaha (AP)", AccountType.LIABILITY),
    Account("4101", "Pendapatan Layanan (BLU Revenue)", AccountType.REVENUE),
    Account("4201", "Pendapatan APBN", AccountType.REVENUE),
    Account("5101", "Beban Pegawai", AccountType.EXPENSE),
    Account("5201", "Beban Persediaan/Obat", AccountType.EXPENSE),
    Account("5301", "Beban Operasional Lainnya", AccountType.EXPENSE),
])


# ----------------------------
# 貸借対照表（比較）
# ----------------------------
BALANCE_SHEET = [
    FinancialItem("1", "Assets", "Cash & Cash Equivalents", 1_500_000_000, 1_200_000_000),
    FinancialItem("2", "Assets", "Short Term Investments", 500_000_000, 300_000_000),
    FinancialItem("3", "Assets", "Accounts Receivable (Net)", 750_000_000, 800_000_000),
    FinancialItem("4", "Liabilities", "Short Term Debt", 200_000_000, 250_000_000),
    FinancialItem("5", "Equity", "Net Assets", 2_550_000_000, 2_050_000_000),
]


# ----------------------------
# 活動計算書
# ----------------------------
ACTIVITY = [
    FinancialItem("a1", "Revenue", "Service Revenue (BLU)", 5_000_000_000, 4_800_000_000),
    FinancialItem("a2", "Revenue", "APBN Grant", 1_000_000_000, 1_000_000_000),
    FinancialItem("a3", "Expense", "Personnel Expenses", 2_500_000_000, 2_400_000_000),
    FinancialItem("a4", "Expense", "Operational Supplies", 1_200_000_000, 1_100_000_000),
    FinancialItem("a5", "Expense", "Depreciation", 300_000_000, 280_000_000),
]


# ----------------------------
# 売掛金
# ----------------------------
RECEIVABLES = [
    Receivable("r1", "BPJS Kesehatan", 500_000_000, 2, ReceivableStatus.UNPAID),
    Receivable("r2", "Insurer A", 100_000_000, 7, ReceivableStatus.UNPAID),
    Receivable("r3", "General Patient X", 20_000_000, 13, ReceivableStatus.UNPAID),
    Receivable("r4", "Ministry of Health", 300_000_000, 1, ReceivableStatus.UNPAID),
]


# ----------------------------
# 初期仕訳（表示順）
# ----------------------------
INITIAL_ENTRIES = [
    JournalEntry("j1", date(2023, 10, 1), "Pembayaran BPJS cair", "REF-001", "1101", "1102", 250_000_000, "Admin"),
    JournalEntry("j2", date(2023, 10, 2), "Pembelian Obat", "INV-992", "1201", "1101", 50_000_000, "Admin"),
]


# ----------------------------
# 患者
# ----------------------------
PATIENTS = [
    Patient(
        id="P001",
        name=(HumanName(family="Santoso", given=("Budi",)),),
        gender="male",
        birth_date="1980-05-12",
        identifier=(Identifier("nik", "320101010101"),),
    ),
    Patient(
        id="P002",
        name=(HumanName(family="Wijaya", given=("Siti", "Amina")),),
        gender="female",
        birth_date="1992-11-20",
        identifier=(Identifier("nik", "320202020202"),),
    ),
]

#=========== end reference_data.py
