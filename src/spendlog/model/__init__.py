from .expense import Expense, ExpenseRow
from .expense_io import (
    dump_expenses_json,
    load_expenses,
    parse_expenses_json,
    save_expenses,
)

__all__ = [
    # models
    "Expense",
    "ExpenseRow",
    # IO helpers
    "dump_expenses_json",
    "load_expenses",
    "parse_expenses_json",
    "save_expenses",
]
