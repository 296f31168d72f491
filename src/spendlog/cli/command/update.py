from __future__ import annotations

from typing import Optional

from spendlog.errors import ExpenseError
from spendlog.workspace import Workspace

from .util import console, open_store, print_error


def run(
    *,
    expense_id: int,
    description: Optional[str] = None,
    amount: Optional[float] = None,
    workspace: Workspace,
) -> int:
    """Change the description and/or amount of an existing expense.

    Returns an exit code (0 for success, 1 when the expense is missing or a
    value is rejected).
    """
    try:
        store, _ = open_store(workspace)
        store.update(expense_id, description=description, amount=amount)
    except ExpenseError as e:
        return print_error(e)

    console.print(f"[green]Expense ID {expense_id} updated successfully![/green]", highlight=False)
    return 0
