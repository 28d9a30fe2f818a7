"""
expenses.py
-----------
The expense record, the fixed category list and the sample data the
dashboard starts with.
"""

from __future__ import annotations

import math
import time
from datetime import date as date_type
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter

CATEGORIES = ("Food", "Transport", "Shopping", "Entertainment", "Bills", "Healthcare", "Other")


class InvalidExpenseError(ValueError):
    """Raised when form input cannot become an expense."""


class Expense(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: str
    category: str
    amount: float
    description: str = ""


ExpenseList = TypeAdapter(List[Expense])


SAMPLE_EXPENSES = [
    Expense(id="1", date="2025-12-01", category="Food", amount=45.50, description="Groceries"),
    Expense(id="2", date="2025-12-02", category="Transport", amount=15.00, description="Uber"),
    Expense(id="3", date="2025-12-03", category="Shopping", amount=120.00, description="Clothes"),
    Expense(id="4", date="2025-12-04", category="Entertainment", amount=30.00, description="Movie tickets"),
    Expense(id="5", date="2025-12-05", category="Bills", amount=150.00, description="Electricity"),
    Expense(id="6", date="2025-12-06", category="Food", amount=25.00, description="Restaurant"),
    Expense(id="7", date="2025-12-07", category="Transport", amount=50.00, description="Gas"),
]


def dumps(expenses: Iterable[Expense]) -> str:
    return ExpenseList.dump_json(list(expenses)).decode("utf-8")


def loads(text: str) -> List[Expense]:
    return ExpenseList.validate_json(text)


def parse_amount(value: Union[str, float, int, None]) -> float:
    """Coerce a form amount to a positive, finite float."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidExpenseError("amount is required")
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidExpenseError(f"amount {value!r} is not a number") from exc
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidExpenseError(f"amount must be positive, got {value!r}")
    return amount


def new_id(existing: Iterable[str] = ()) -> str:
    """Millisecond timestamp id, bumped past any id already in use."""
    taken = set(existing)
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def build_expense(
    date: Union[str, date_type],
    category: str,
    amount: Union[str, float, int, None],
    description: Optional[str] = "",
    existing_ids: Iterable[str] = (),
) -> Expense:
    """
    Validate form input and return a new Expense.

    Raises InvalidExpenseError for an empty date, a category outside
    CATEGORIES or an amount that is not strictly positive.
    """
    date_str = date.isoformat() if isinstance(date, date_type) else str(date or "").strip()
    if not date_str:
        raise InvalidExpenseError("date is required")
    if category not in CATEGORIES:
        raise InvalidExpenseError(f"unknown category {category!r}")

    return Expense(
        id=new_id(existing_ids),
        date=date_str,
        category=category,
        amount=parse_amount(amount),
        description=description or "",
    )
