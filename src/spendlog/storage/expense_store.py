"""
Expense store - the persisted collection and the operations over it.

Every mutating operation loads the whole collection, applies one change and
writes the whole collection back. There is no in-process cache: each call
sees the file as the last completed write left it.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer

The file location and the clock are injected. Functions return data
structures or raise spendlog.errors exceptions.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from pydantic import ValidationError as PydanticValidationError

from spendlog.config import DEFAULT_DATE_FORMAT
from spendlog.errors import NotFoundError, ValidationError
from spendlog.model.expense import Expense, ExpenseRow
from spendlog.model.expense_io import load_expenses, save_expenses

logger = logging.getLogger(__name__)

# User-facing messages per invalid field, keyed by the on-disk field name.
_FIELD_MESSAGES = {
    "description": "Description must not be empty.",
    "amount": "Amount must be a non-negative number.",
}


def _local_now() -> datetime:
    return datetime.now().astimezone()


def next_expense_id(expenses: Iterable[Expense]) -> int:
    """Return the smallest positive integer not used as an id.

    Ids freed by deletion are reused, so {1, 2, 4} yields 3 and {1, 2, 3}
    yields 4.
    """
    next_id = 1
    for expense_id in sorted(e.id for e in expenses):
        if expense_id != next_id:
            break
        next_id += 1
    return next_id


def format_amount(amount: float) -> str:
    return f"{amount:,.2f}"


def _build_expense(data: dict[str, Any]) -> Expense:
    """Validate caller-supplied values into an Expense, or raise ValidationError."""
    try:
        return Expense.model_validate(data)
    except PydanticValidationError as e:
        field = e.errors()[0]["loc"][0]
        message = _FIELD_MESSAGES.get(str(field), f"Invalid {field}.")
        raise ValidationError(message) from e


class ExpenseStore:
    """Load, mutate and persist the expense collection held in one JSON file.

    Usage:
        store = ExpenseStore(workspace.expenses_path)
        expense_id = store.add("Lunch", 20)
        store.update(expense_id, amount=25)
        total = store.summarize(month=8)
    """

    def __init__(
        self,
        path: Path,
        clock: Callable[[], datetime] = _local_now,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        """Initialize the store.

        Args:
            path: Location of the JSON expense file; need not exist yet
            clock: Returns the current time for createdAt/updatedAt stamps
            date_format: strftime format for the date column of list_expenses()
        """
        self.path = Path(path)
        self.clock = clock
        self.date_format = date_format

    def load(self) -> list[Expense]:
        """Read the collection in ascending-id order (empty if no file)."""
        return sorted(load_expenses(self.path), key=lambda e: e.id)

    def save(self, expenses: Iterable[Expense]) -> None:
        """Replace the persisted collection, sorted by ascending id."""
        save_expenses(self.path, expenses)

    def add(self, description: str, amount: float) -> int:
        """Record a new expense and return its id.

        Raises:
            ValidationError: description is empty or amount is not a
                non-negative number
        """
        expenses = self.load()
        expense = _build_expense(
            {
                "id": next_expense_id(expenses),
                "description": description,
                "amount": amount,
                "createdAt": self.clock(),
                "updatedAt": None,
            }
        )
        expenses.append(expense)
        self.save(expenses)
        logger.info("Added expense %d", expense.id)
        return expense.id

    def update(
        self,
        expense_id: int,
        description: Optional[str] = None,
        amount: Optional[float] = None,
    ) -> Expense:
        """Change the description and/or amount of an expense.

        All supplied values are validated before anything is written, so a
        rejected update leaves the stored expense untouched.

        Returns:
            The updated expense

        Raises:
            NotFoundError: no expense has this id
            ValidationError: nothing to update, or a supplied value is invalid
        """
        if description is None and amount is None:
            raise ValidationError("Nothing to update: supply a description and/or an amount.")

        expenses = self.load()
        index = next((i for i, e in enumerate(expenses) if e.id == expense_id), None)
        if index is None:
            raise NotFoundError(expense_id)

        record = expenses[index].to_record()
        if description is not None:
            record["description"] = description
        if amount is not None:
            record["amount"] = amount
        record["updatedAt"] = self.clock()
        # createdAt stays as originally stored
        record["createdAt"] = expenses[index].created_at

        updated = _build_expense(record)
        expenses[index] = updated
        self.save(expenses)
        logger.info("Updated expense %d", expense_id)
        return updated

    def delete(self, expense_id: int) -> None:
        """Remove an expense.

        Raises:
            NotFoundError: no expense has this id; nothing is written
        """
        expenses = self.load()
        remaining = [e for e in expenses if e.id != expense_id]
        if len(remaining) == len(expenses):
            raise NotFoundError(expense_id)
        self.save(remaining)
        logger.info("Deleted expense %d", expense_id)

    def list_expenses(self) -> list[ExpenseRow]:
        """Return every expense as a display row, ascending by id."""
        return [
            ExpenseRow(
                id=e.id,
                date=e.created_at.strftime(self.date_format),
                description=e.description,
                amount=format_amount(e.amount),
            )
            for e in self.load()
        ]

    def summarize(self, month: Optional[int] = None) -> float:
        """Total amount spent, optionally limited to one calendar month.

        The month filter matches that month in every year present.

        Raises:
            ValidationError: month is not an integer in 1..12
        """
        if month is not None and (
            isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12
        ):
            raise ValidationError(f"Month must be between 1 and 12 (got {month}).")

        expenses = self.load()
        if month is not None:
            expenses = [e for e in expenses if e.created_at.month == month]
        return sum((e.amount for e in expenses), 0.0)


__all__ = ["ExpenseStore", "format_amount", "next_expense_id"]
