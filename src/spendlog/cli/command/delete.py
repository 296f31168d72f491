from __future__ import annotations

from spendlog.errors import ExpenseError
from spendlog.workspace import Workspace

from .util import console, open_store, print_error


def run(*, expense_id: int, workspace: Workspace) -> int:
    try:
        store, _ = open_store(workspace)
        store.delete(expense_id)
    except ExpenseError as e:
        return print_error(e)

    console.print(f"[green]Expense ID {expense_id} deleted successfully![/green]", highlight=False)
    return 0
