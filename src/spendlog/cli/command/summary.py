from __future__ import annotations

"""
Spending summary: total of all expenses, or of one calendar month.
"""

import calendar
from typing import Optional

from spendlog.errors import ExpenseError
from spendlog.workspace import Workspace

from .util import console, fmt_amount, open_store, print_error


def run(*, month: Optional[int] = None, workspace: Workspace) -> int:
    """Print the total amount spent.

    Args:
        month: Restrict to this calendar month (1-12) across all years
        workspace: Workspace providing the expense file and settings

    Returns:
        Exit code (0 for success, 1 for an invalid month or unreadable data)
    """
    try:
        store, settings = open_store(workspace)
        total = store.summarize(month)
    except ExpenseError as e:
        return print_error(e)

    label = "Total expenses"
    if month is not None:
        label += f" for {calendar.month_name[month]}"

    console.print(f"{label}: ", fmt_amount(total, settings.currency_symbol), sep="", highlight=False)
    return 0
