from .expense_store import ExpenseStore, format_amount, next_expense_id

__all__ = ["ExpenseStore", "format_amount", "next_expense_id"]
