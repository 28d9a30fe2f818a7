from database import init_db
from expense_store import ExpenseStore
from logging_setup import configure_logging

def seed_expenses(store=None):
    init_db()
    if store is None:
        store = ExpenseStore()

    # Check if a list already exists
    if store.exists():
        print(f"Expenses already stored under '{store.key}'. Skipping seed.")
        return False

    expenses = store.load()
    print(f"Stored {len(expenses)} sample expenses under '{store.key}'.")
    return True

if __name__ == "__main__":
    configure_logging()
    seed_expenses()
