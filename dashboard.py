# dashboard.py — summary cards, charts, entry form and expense list

from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from expenses import CATEGORIES

COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8", "#82ca9d", "#ffc658"]
MONEY_HOVER = "%{label}: $%{value:.2f}<extra></extra>"


def _palette(n):
    return [COLORS[i % len(COLORS)] for i in range(n)]


def _empty_figure(title, height):
    fig = go.Figure()
    fig.update_layout(title=title, height=height)
    return fig


def category_pie(totals: pd.DataFrame):
    """
    Pie chart of spending by category, labelled with each slice's share.
    """
    title = "Expenses by Category"
    if totals.empty:
        return _empty_figure(title, 300)

    fig = go.Figure(
        go.Pie(
            labels=totals["Category"].tolist(),
            values=totals["Amount"].tolist(),
            marker=dict(colors=_palette(len(totals))),
            texttemplate="%{label}: %{percent:.0%}",
            hovertemplate=MONEY_HOVER,
            sort=False,
        )
    )
    fig.update_layout(title=title, height=300, showlegend=False)
    return fig


def category_bar(ranked: pd.DataFrame):
    """
    Bar chart of category totals, largest first.
    """
    title = "Category Breakdown"
    if ranked.empty:
        return _empty_figure(title, 300)

    fig = go.Figure(
        go.Bar(
            x=ranked["Category"].tolist(),
            y=ranked["Amount"].tolist(),
            marker_color=_palette(len(ranked)),
            hovertemplate="%{x}: $%{y:.2f}<extra></extra>",
        )
    )
    fig.update_layout(title=title, height=300)
    return fig


def daily_trend(daily: pd.DataFrame):
    """
    Line chart of the most recent daily totals.
    """
    title = "Daily Expenses Trend (Last 7 Days)"
    if daily.empty:
        return _empty_figure(title, 250)

    fig = go.Figure(
        go.Scatter(
            x=daily["Date"].tolist(),
            y=daily["Amount"].tolist(),
            mode="lines+markers",
            name="Amount",
            line=dict(color="#8884d8", width=2, shape="spline"),
            hovertemplate="%{x}: $%{y:.2f}<extra></extra>",
        )
    )
    # Keep the stored date strings in their sorted order.
    fig.update_xaxes(type="category")
    fig.update_layout(title=title, height=250, showlegend=True)
    return fig


def render_kpis(numbers: dict):
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Expenses", f"${numbers['total']:.2f}")
    col2.metric("Total Transactions", f"{numbers['count']}")
    col3.metric("Average per Transaction", f"${numbers['average']:.2f}")


def render_expense_form(store):
    """
    Entry form; non-positive amounts are dropped by the store without a message.
    """
    st.subheader("Add New Expense")
    with st.form("add_expense", clear_on_submit=True):
        expense_date = st.date_input("Date", value=date.today())
        category = st.selectbox("Category", CATEGORIES, index=0)
        amount = st.number_input("Amount ($)", min_value=0.0, step=0.01, value=None, placeholder="0.00")
        description = st.text_input("Description", placeholder="Enter description")

        if st.form_submit_button("Add Expense", use_container_width=True):
            store.add(date=expense_date, category=category, amount=amount, description=description)


def render_expense_list(store):
    st.subheader("Recent Expenses")
    expenses = store.snapshot()
    if not expenses:
        st.info("No expenses yet. Add your first expense!")
        return

    with st.container(height=400):
        for expense in reversed(expenses):
            with st.container(border=True):
                col1, col2 = st.columns([5, 1])
                col1.markdown(f"**${expense.amount:.2f}** `{expense.category}`")
                if expense.description:
                    col1.write(expense.description)
                col1.caption(expense.date)
                if col2.button("Delete", key=f"delete-{expense.id}"):
                    store.delete(expense.id)
