from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from spendlog.config import Settings, load_settings
from spendlog.errors import ExpenseError
from spendlog.storage.expense_store import ExpenseStore, format_amount
from spendlog.workspace import Workspace

console = Console()


def open_store(workspace: Workspace) -> tuple[ExpenseStore, Settings]:
    """Build the expense store for a workspace using its display settings.

    Raises:
        ConfigError: settings file exists but is invalid
    """
    settings = load_settings(workspace.settings_config)
    store = ExpenseStore(workspace.expenses_path, date_format=settings.date_format)
    return store, settings


def print_error(error: ExpenseError) -> int:
    """Report a store error and return the failing exit code."""
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    return 1


def fmt_amount(amt: float, symbol: str = "") -> Text:
    s = f"{symbol}{format_amount(amt)}"
    if amt > 0:
        return Text(s, style="bold green")
    return Text(s)
