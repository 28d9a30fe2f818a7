"""
expense_store.py
----------------
Owns the in-memory expense list and mirrors it to a single named blob.

Every successful ``add``/``delete`` rewrites the whole blob and then calls
the registered subscribers with a fresh snapshot.
"""

from __future__ import annotations

import os
from typing import Callable, List, Optional, Sequence

import storage
from expenses import SAMPLE_EXPENSES, Expense, InvalidExpenseError, build_expense, dumps, loads
from logging_setup import get_logger

logger = get_logger("expense_tracker.expense_store")

STORAGE_KEY = os.environ.get("EXPENSES_STORAGE_KEY", "expenses")

Loader = Callable[[str], Optional[str]]
Saver = Callable[[str, str], bool]
Subscriber = Callable[[List[Expense]], None]


class ExpenseStore:
    def __init__(
        self,
        key: str = STORAGE_KEY,
        loader: Optional[Loader] = None,
        saver: Optional[Saver] = None,
        sample: Sequence[Expense] = SAMPLE_EXPENSES,
    ):
        self.key = key
        self._load_text = loader or storage.load_text
        self._save_text = saver or storage.save_text
        self._sample = list(sample)
        self._expenses: List[Expense] = []
        self._subscribers: List[Subscriber] = []

    def load(self) -> List[Expense]:
        """Read the blob, seeding the sample set the first time."""
        text = self._load_text(self.key)
        if text is None:
            logger.info("No stored expenses under %r; seeding %d samples", self.key, len(self._sample))
            self._expenses = list(self._sample)
            self._persist()
        else:
            self._expenses = loads(text)
            logger.info("Loaded %d expenses from %r", len(self._expenses), self.key)
        return self.snapshot()

    def exists(self) -> bool:
        """True once the blob has been written at least once."""
        return self._load_text(self.key) is not None

    def snapshot(self) -> List[Expense]:
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback run after each mutation; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def add(self, date, category: str, amount, description: str = "") -> Optional[Expense]:
        """Append a new expense, or return None when the input is rejected."""
        try:
            expense = build_expense(
                date, category, amount, description, existing_ids=(e.id for e in self._expenses)
            )
        except InvalidExpenseError as exc:
            logger.debug("Rejected expense: %s", exc)
            return None

        self._replace(self._expenses + [expense])
        logger.info("Added expense %s (%s %.2f)", expense.id, expense.category, expense.amount)
        self._notify()
        return expense

    def delete(self, expense_id: str) -> bool:
        remaining = [e for e in self._expenses if e.id != expense_id]
        if len(remaining) == len(self._expenses):
            return False
        self._replace(remaining)
        logger.info("Deleted expense %s", expense_id)
        self._notify()
        return True

    def _replace(self, expenses: List[Expense]) -> None:
        self._expenses = expenses
        self._persist()

    def _notify(self) -> None:
        # Must run last: st.rerun raises out of the subscriber.
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)

    def _persist(self) -> None:
        if not self._save_text(self.key, dumps(self._expenses)):
            logger.warning("Could not save %d expenses under %r", len(self._expenses), self.key)
