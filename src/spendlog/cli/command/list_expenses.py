from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from spendlog.errors import ExpenseError
from spendlog.workspace import Workspace

from .util import console, open_store, print_error


def run(*, workspace: Workspace) -> int:
    """Show all expenses as a Rich table, ascending by id.

    Returns an exit code (0 for success, including an empty list).
    """
    try:
        store, _ = open_store(workspace)
        rows = store.list_expenses()
    except ExpenseError as e:
        return print_error(e)

    if not rows:
        console.print("[yellow]No expense found.[/yellow]")
        return 0

    table = Table(title="Expenses", show_lines=False)
    table.add_column("ID", justify="right", style="dim", no_wrap=True)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for row in rows:
        table.add_row(str(row.id), row.date, escape(row.description), row.amount)

    console.print(table)
    return 0
