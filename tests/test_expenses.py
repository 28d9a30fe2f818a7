import math
from datetime import date

import pytest

from expenses import (
    CATEGORIES,
    SAMPLE_EXPENSES,
    Expense,
    InvalidExpenseError,
    build_expense,
    dumps,
    loads,
    new_id,
    parse_amount,
)


def test_categories_are_fixed_and_ordered():
    assert CATEGORIES == ("Food", "Transport", "Shopping", "Entertainment", "Bills", "Healthcare", "Other")


@pytest.mark.parametrize("raw, expected", [("12.34", 12.34), (0.01, 0.01), (5, 5.0), (" 7.5 ", 7.5)])
def test_parse_amount_accepts_positive_numbers(raw, expected):
    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", 0, "0", -1.5, "-3", math.nan, math.inf])
def test_parse_amount_rejects_everything_else(raw):
    with pytest.raises(InvalidExpenseError):
        parse_amount(raw)


def test_invalid_expense_error_is_a_value_error():
    assert issubclass(InvalidExpenseError, ValueError)


def test_build_expense_copies_fields():
    expense = build_expense(date(2025, 12, 24), "Shopping", "19.99", "Gift")
    assert expense.date == "2025-12-24"
    assert expense.category == "Shopping"
    assert expense.amount == pytest.approx(19.99)
    assert expense.description == "Gift"
    assert expense.id.isdigit()


def test_build_expense_defaults_description():
    assert build_expense("2025-12-24", "Food", 3, None).description == ""


@pytest.mark.parametrize(
    "kwargs",
    [
        {"date": "", "category": "Food", "amount": 1},
        {"date": "2025-12-01", "category": "Travel", "amount": 1},
        {"date": "2025-12-01", "category": "Food", "amount": 0},
    ],
)
def test_build_expense_rejects_bad_input(kwargs):
    with pytest.raises(InvalidExpenseError):
        build_expense(**kwargs)


def test_new_id_skips_ids_in_use(monkeypatch):
    monkeypatch.setattr("expenses.time.time", lambda: 1700000000.0)
    assert new_id() == "1700000000000"
    assert new_id({"1700000000000", "1700000000001"}) == "1700000000002"


def test_expense_is_immutable():
    with pytest.raises(Exception):
        SAMPLE_EXPENSES[0].amount = 1.0


def test_json_layout_matches_stored_format():
    text = dumps([Expense(id="1", date="2025-12-01", category="Food", amount=45.5, description="Groceries")])
    assert text == '[{"id":"1","date":"2025-12-01","category":"Food","amount":45.5,"description":"Groceries"}]'


def test_loads_reads_integer_amounts_and_missing_description():
    [expense] = loads('[{"id":"9","date":"2025-12-09","category":"Bills","amount":150}]')
    assert expense.amount == 150.0
    assert expense.description == ""


def test_sample_expenses():
    assert [e.id for e in SAMPLE_EXPENSES] == [str(i) for i in range(1, 8)]
    assert [e.date for e in SAMPLE_EXPENSES] == [f"2025-12-0{i}" for i in range(1, 8)]
    assert all(e.amount > 0 and e.category in CATEGORIES for e in SAMPLE_EXPENSES)
