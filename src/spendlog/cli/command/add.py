from __future__ import annotations

from spendlog.errors import ExpenseError
from spendlog.workspace import Workspace

from .util import console, open_store, print_error


def run(*, description: str, amount: float, workspace: Workspace) -> int:
    """Record a new expense and report its id."""
    try:
        store, _ = open_store(workspace)
        expense_id = store.add(description, amount)
    except ExpenseError as e:
        return print_error(e)

    console.print(f"[green]Expense added successfully (ID: {expense_id})[/green]", highlight=False)
    return 0
