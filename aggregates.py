from typing import Iterable

import pandas as pd

from expenses import CATEGORIES, Expense

COLUMNS = ["ID", "Date", "Category", "Amount", "Description"]


def to_frame(expenses: Iterable[Expense]) -> pd.DataFrame:
    """
    Builds the dataframe every aggregate works on.
    Dates stay as the stored strings so grouping is by exact match.
    """
    rows = [
        {
            "ID": e.id,
            "Date": e.date,
            "Category": e.category,
            "Amount": e.amount,
            "Description": e.description,
        }
        for e in expenses
    ]
    if not rows:
        return pd.DataFrame(columns=COLUMNS).astype({"Amount": float})
    return pd.DataFrame(rows, columns=COLUMNS)


def total(df: pd.DataFrame) -> float:
    return float(df["Amount"].sum()) if not df.empty else 0.0


def count(df: pd.DataFrame) -> int:
    return len(df)


def average(df: pd.DataFrame) -> float:
    n = count(df)
    return total(df) / n if n > 0 else 0.0


def summary(df: pd.DataFrame) -> dict:
    """Numbers for the three summary cards."""
    return {"total": total(df), "count": count(df), "average": average(df)}


def category_totals(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sum per category in CATEGORIES order, dropping categories with nothing spent.
    """
    by_cat = (
        df.groupby("Category")["Amount"]
        .sum()
        .reindex(pd.Index(CATEGORIES, name="Category"), fill_value=0.0)
        .astype(float)
    )
    by_cat = by_cat[by_cat > 0]
    return by_cat.reset_index()


def category_totals_ranked(df: pd.DataFrame) -> pd.DataFrame:
    """Category totals, largest first; ties keep CATEGORIES order."""
    totals = category_totals(df)
    return totals.sort_values("Amount", ascending=False, kind="stable").reset_index(drop=True)


def daily_totals(df: pd.DataFrame, days: int = 7) -> pd.DataFrame:
    """
    Sum per recorded date, sorted by date string, last ``days`` dates only.

    The window counts distinct dates that have expenses, not calendar days,
    so gaps between entries widen the span it covers.
    """
    if df.empty:
        return pd.DataFrame({"Date": pd.Series(dtype=str), "Amount": pd.Series(dtype=float)})
    daily = df.groupby("Date", sort=True)["Amount"].sum().reset_index()
    return daily.tail(days).reset_index(drop=True)
