import streamlit as st
from pathlib import Path
import sys

# Add current directory to path
sys.path.append(str(Path(__file__).parent))

from database import init_db
from logging_setup import configure_logging
from expense_store import ExpenseStore
from aggregates import to_frame, summary, category_totals, category_totals_ranked, daily_totals
from dashboard import (
    category_bar,
    category_pie,
    daily_trend,
    render_expense_form,
    render_expense_list,
    render_kpis,
)

# --- Configuration ---
st.set_page_config(page_title="Personal Expenses Dashboard", layout="wide", page_icon="💰")
configure_logging()

# --- Database ---
init_db()

def _rerender(_expenses):
    st.rerun()

# --- Expense Store ---
if "store" not in st.session_state:
    store = ExpenseStore()
    store.load()
    store.subscribe(_rerender)
    st.session_state.store = store

def get_store() -> ExpenseStore:
    return st.session_state.store


store = get_store()
df = to_frame(store.snapshot())

st.title("Personal Expenses Dashboard")

# --- Summary Cards ---
render_kpis(summary(df))

# --- Charts ---
totals = category_totals(df)
col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(category_pie(totals), use_container_width=True)
with col2:
    st.plotly_chart(category_bar(category_totals_ranked(df)), use_container_width=True)

st.plotly_chart(daily_trend(daily_totals(df)), use_container_width=True)

# --- Entry Form & List ---
col1, col2 = st.columns(2)
with col1:
    render_expense_form(store)
with col2:
    render_expense_list(store)
