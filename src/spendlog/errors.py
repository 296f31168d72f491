"""
Error kinds raised by the expense store and its I/O helpers.

Every failure path has its own exception type so the command layer can
report a distinct message per cause. None of these are retried.
"""

from __future__ import annotations


class ExpenseError(Exception):
    """Base class for all spendlog errors."""


class ValidationError(ExpenseError):
    """Caller supplied an invalid description, amount, month or update."""


class NotFoundError(ExpenseError):
    """An operation referenced an expense id that does not exist."""

    def __init__(self, expense_id: int):
        super().__init__(f"Expense with ID {expense_id} not found.")
        self.expense_id = expense_id


class CorruptStateError(ExpenseError):
    """The persisted expense file could not be parsed into expense records."""


class PersistenceError(ExpenseError):
    """Writing the expense file failed; the previous file is left intact."""


class ConfigError(ExpenseError):
    """The settings file exists but is not valid."""


__all__ = [
    "ConfigError",
    "CorruptStateError",
    "ExpenseError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
]
