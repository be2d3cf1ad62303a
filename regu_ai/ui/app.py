# ============== regu_ai/ui/app.py ==============

import streamlit as st
import pandas as pd
import asyncio
import datetime
import traceback
import sys
import os

# ----------------------------------------------------------------------
# パス解決（streamlit run regu_ai/ui/app.py でも import できるように）
# ----------------------------------------------------------------------
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(os.path.dirname(current_dir))
if project_root not in sys.path:
    sys.path.append(project_root)

from regu_ai.config.logging_setup import configure_logging
from regu_ai.config.params import load_params
from regu_ai.config.reference_data import ACCOUNT_CHART, ACTIVITY, BALANCE_SHEET, PATIENTS, RECEIVABLES
from regu_ai.core.clinical.patients import filter_patients
from regu_ai.core.clinical.summary_client import SummaryClient
from regu_ai.core.clinical.workspace import RequestInFlightError
from regu_ai.core.ledger.validator import EntryForm, EntryValidationError
from regu_ai.core.reporting.activity import EXPENSE, REVENUE, items_in_category, summarize_activity
from regu_ai.core.reporting.balance_sheet import category_totals, chart_df, comparative_df
from regu_ai.core.reporting.provision import POLICY_DESCRIPTION, analyze_receivables
from regu_ai.core.session.app_state import AppState, Area, Role, access_denied_message, new_app_state
from regu_ai.ui.formatting import format_idr, format_rate

NAV_LABELS = {
    Area.FINANCIAL: "📊 Financial Engine (BLU)",
    Area.CLINICAL: "🩺 Clinical Gateway (FHIR)",
}

BUCKET_BADGES = {
    "current": "🟢",
    "doubtful": "🟡",
    "loss": "🔴",
}

# ----------------------------------------------------------------------
# 1. 表示用DataFrame生成
# ----------------------------------------------------------------------
def money_columns(df: pd.DataFrame, columns) -> pd.DataFrame:
    df = df.copy()
    for col in columns:
        if col in df.columns:
            df[col] = df[col].apply(format_idr)
    return df


def journal_display_df(state: AppState) -> pd.DataFrame:
    df = state.ledger.get_df()
    if df.empty:
        return df
    df["Description / Ref"] = df["description"] + " (" + df["reference"] + ")"
    df["Debit"] = df["debit_account"] + " " + df["debit_name"]
    df["Credit"] = df["credit_account"] + " " + df["credit_name"]
    df["Amount"] = df["amount"].apply(format_idr)
    df = df.rename(columns={"date": "Date", "posted_by": "Posted By"})
    return df[["Date", "Description / Ref", "Debit", "Credit", "Amount", "Posted By"]]


def summary_card(label, value, color="#2c3e50"):
    return f"""
    <div class="regu-card" style="border-left-color:{color};">
        <div class="regu-label">{label}</div>
        <div class="regu-value" style="color:{color};">{value}</div>
    </div>
    """

# ----------------------------------------------------------------------
# 2. セッション
# ----------------------------------------------------------------------
def get_session():
    if "app_state" not in st.session_state:
        params = load_params()
        configure_logging(params.log_level)
        st.session_state.app_state = new_app_state(params)
        st.session_state.summary_client = SummaryClient(params.summary)
    return st.session_state.app_state, st.session_state.summary_client

# ----------------------------------------------------------------------
# 3. サイドバー（ナビゲーション・ロール切替）
# ----------------------------------------------------------------------
def setup_sidebar(state: AppState) -> None:
    st.sidebar.markdown("## REGU-AI")
    st.sidebar.caption("BLU Compliance & Clinical Ops")

    areas = list(Area)
    area = st.sidebar.radio(
        "Navigation",
        areas,
        index=areas.index(state.area),
        format_func=lambda a: NAV_LABELS[a],
    )
    state.select_area(area)

    st.sidebar.divider()
    roles = list(Role)
    role = st.sidebar.selectbox(
        "Simulate Role",
        roles,
        index=roles.index(state.role),
        format_func=lambda r: r.label,
    )
    if role != state.role:
        state.select_role(role)

# ----------------------------------------------------------------------
# 4. 財務ダッシュボード
# ----------------------------------------------------------------------
def render_balance_sheet():
    st.subheader("Statement of Financial Position (Comparative)")
    st.caption("Audited Standard")

    st.bar_chart(chart_df(BALANCE_SHEET), stack=False, color=["#94a3b8", "#0f766e"])

    totals = category_totals(BALANCE_SHEET)
    for col, (category, row) in zip(st.columns(len(totals)), totals.iterrows()):
        with col:
            st.metric(
                category,
                format_idr(row["current_year"]),
                delta=format_idr(row["current_year"] - row["previous_year"]),
            )

    df = comparative_df(BALANCE_SHEET)
    df = money_columns(df, ["current_year", "previous_year", "change"])
    df["change_pct"] = df["change_pct"].apply(lambda v: "" if pd.isna(v) else f"{v:+.1%}")
    df = df.rename(columns={
        "category": "Category",
        "account": "Account",
        "current_year": "Current Year",
        "previous_year": "Previous Year",
        "change": "Change",
        "change_pct": "Change %",
    })
    st.dataframe(df, use_container_width=True, hide_index=True)


def _line_item(name: str, amount_text: str):
    col_name, col_amount = st.columns([3, 1])
    col_name.write(name)
    col_amount.markdown(f"`{amount_text}`")


def render_activity():
    summary = summarize_activity(ACTIVITY)

    col_title, col_surplus = st.columns([3, 1])
    with col_title:
        st.subheader("Laporan Aktivitas (Single Step)")
    with col_surplus:
        color = "#16a34a" if summary.is_surplus else "#dc2626"
        st.markdown(summary_card("Surplus/Deficit", format_idr(summary.surplus), color), unsafe_allow_html=True)

    st.markdown("#### Revenues (Pendapatan)")
    for item in items_in_category(ACTIVITY, REVENUE):
        _line_item(item.name, format_idr(item.amount_current))
    st.markdown(f"**Total Revenue: {format_idr(summary.revenue)}**")

    st.markdown("#### Expenses (Beban)")
    for item in items_in_category(ACTIVITY, EXPENSE):
        _line_item(item.name, f"({format_idr(item.amount_current)})")
    st.markdown(f"**Total Expenses: ({format_idr(summary.expense)})**")


def render_receivables():
    analysis = analyze_receivables(RECEIVABLES)

    st.subheader("Provision for Doubtful Accounts (Penyisihan Piutang)")
    st.caption(POLICY_DESCRIPTION)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown(summary_card("Gross Receivables", format_idr(analysis.total_receivable), "#1e3a8a"), unsafe_allow_html=True)
    with col2:
        st.markdown(summary_card("Provision Allowance", format_idr(analysis.total_provision), "#7f1d1d"), unsafe_allow_html=True)
    with col3:
        st.markdown(summary_card("Net Receivables (NRV)", format_idr(analysis.net_receivable), "#14532d"), unsafe_allow_html=True)

    df = analysis.to_df()
    df["age_months"] = df.apply(lambda r: f"{BUCKET_BADGES[r['bucket']]} {r['age_months']} mo", axis=1)
    df["provision_rate"] = df["provision_rate"].apply(format_rate)
    df = money_columns(df, ["amount", "provision_amount"])
    df = df.drop(columns=["bucket"]).rename(columns={
        "payer": "Payer",
        "age_months": "Aging (Months)",
        "amount": "Amount",
        "provision_rate": "Provision %",
        "provision_amount": "Provision Value",
    })
    st.dataframe(df, use_container_width=True, hide_index=True)


def render_journal(state: AppState):
    col_form, col_list = st.columns([1, 2])

    with col_form:
        st.markdown("#### ➕ Record Transaction")
        codes = [""] + ACCOUNT_CHART.codes()

        def account_label(code):
            return "Select..." if not code else f"{code} - {ACCOUNT_CHART.name_of(code)}"

        with st.form("journal_entry"):
            entry_date = st.date_input("Date", value=datetime.date.today())
            description = st.text_input("Description", placeholder="e.g. Pembelian Obat, Terima BPJS")
            reference = st.text_input("Ref ID", placeholder="Invoice # or Doc Ref")
            debit_account = st.selectbox("Debit Account", codes, format_func=account_label)
            credit_account = st.selectbox("Credit Account", codes, format_func=account_label)
            amount = st.number_input("Amount (IDR)", min_value=1.0, value=None, step=1000.0, format="%.0f")
            submitted = st.form_submit_button("Post Entry", use_container_width=True)

        if submitted:
            form = EntryForm(
                date=entry_date,
                description=description,
                reference=reference,
                debit_account=debit_account,
                credit_account=credit_account,
                amount=amount,
            )
            try:
                entry = state.ledger.submit_entry(form, posted_by=state.actor)
                st.success(f"Posted {entry.description} ({format_idr(entry.amount)})")
            except EntryValidationError as e:
                st.error(str(e))

    with col_list:
        st.markdown("#### Recent Transactions")
        st.dataframe(journal_display_df(state), use_container_width=True, hide_index=True)

        check = state.ledger.balance_check()
        message = (
            f"Debit {format_idr(check['debit_total'])} / "
            f"Credit {format_idr(check['credit_total'])} / "
            f"Diff {format_idr(check['balance_diff'])}"
        )
        if check["is_balanced"]:
            st.success(f"✅ Bookkeeping check: balanced ({message})")
        else:
            st.error(f"❌ Bookkeeping check: out of balance ({message})")


def render_financial(state: AppState):
    tabs = st.tabs(["Balance Sheet", "Activity Report", "Receivables Aging", "✏️ General Journal (Input)"])

    with tabs[0]:
        render_balance_sheet()
    with tabs[1]:
        render_activity()
    with tabs[2]:
        render_receivables()
    with tabs[3]:
        render_journal(state)

# ----------------------------------------------------------------------
# 5. 臨床アシスタント
# ----------------------------------------------------------------------
def render_clinical(state: AppState, client: SummaryClient):
    workspace = state.workspace
    col_dir, col_work = st.columns([1, 2])

    with col_dir:
        st.markdown("##### PATIENT DIRECTORY (FHIR)")
        term = st.text_input("Search", placeholder="Search Name or MRN...", label_visibility="collapsed")
        for patient in filter_patients(PATIENTS, term):
            selected = workspace.selected_patient is not None and workspace.selected_patient.id == patient.id
            label = f"{patient.display_name} · {patient.id}\n\nDOB: {patient.birth_date} ({patient.gender})"
            if st.button(label, key=f"patient_{patient.id}", use_container_width=True,
                         type="primary" if selected else "secondary"):
                workspace.select_patient(patient)
                st.rerun()

    with col_work:
        patient = workspace.selected_patient
        if patient is None:
            st.info("Select a patient to begin documentation.")
            return

        st.subheader(patient.full_name)
        st.caption(f"Resource: {patient.resource_path}")

        text = st.text_area(
            "Voice Transcript / Rough Notes",
            value=workspace.note.raw_text,
            height=220,
            placeholder=(
                "Paste raw transcript or type notes here... e.g., 'Patient complains of headache "
                "for 3 days, bp 120/80, recommend rest and paracetamol'"
            ),
        )
        workspace.set_note_text(text)
        st.caption("🔒 PHI is encrypted in transit. Do not enter extremely sensitive data in this demo.")

        if st.button("Generate AI Summary", type="primary", disabled=not workspace.can_generate):
            try:
                with st.spinner("Thinking..."):
                    asyncio.run(workspace.generate_summary(client))
            except RequestInFlightError as e:
                st.warning(str(e))

        summary = workspace.note.summary
        if summary:
            with st.container(border=True):
                st.markdown(f"**AI Draft Suggestion** · `{client.params.model}`")
                st.markdown(summary)
                if st.button("Discard"):
                    workspace.discard_summary()
                    st.rerun()
            st.warning(
                "Mandatory Review: This text was generated by AI. You must verify its accuracy "
                "before saving to the permanent medical record."
            )

# ----------------------------------------------------------------------
# 6. メイン
# ----------------------------------------------------------------------
def main():
    st.set_page_config(layout="wide", page_title="REGU-AI | BLU Compliance & Clinical Ops")

    st.markdown(
        """
        <style>
        .regu-card {
            background-color:#f8f9fa;
            border-left:6px solid #2c3e50;
            padding:14px 18px;
            margin-bottom:12px;
            border-radius:8px;
        }
        .regu-label { font-size:0.85rem; color:#666; font-weight:bold; }
        .regu-value {
            font-size:1.4rem;
            font-weight:800;
            font-variant-numeric: tabular-nums;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )

    state, client = get_session()
    setup_sidebar(state)

    st.header(state.area.header)
    st.caption("🟢 System Secure • BLU Standard")

    # ロールによる表示制御（画面上のみ）
    if not state.can_view():
        st.info(access_denied_message(state.area))
        return

    try:
        if state.area == Area.FINANCIAL:
            render_financial(state)
        else:
            render_clinical(state, client)
    except Exception as e:
        st.error(f"Dashboard error: {str(e)}")
        st.code(traceback.format_exc())


if __name__ == "__main__":
    main()
