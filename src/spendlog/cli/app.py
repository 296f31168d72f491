from __future__ import annotations

"""
spendlog CLI Wrapper (Typer + Rich)

Local-only personal expense tracker.

All paths are resolved from a single workspace root:
  --data-dir / SPENDLOG_DATA env var / current working directory
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from spendlog.workspace import Workspace

APP_HELP = "spendlog - personal expense tracker (local-only)"
HELP_ID = "ID of the expense (see 'spendlog list')"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar="SPENDLOG_DATA",
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
):
    """spendlog — all paths resolved from a single workspace root."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with the data directory and starter settings.

    Safe to run on an existing workspace — skips anything that already exists.

    Examples:
      spendlog --data-dir ~/expenses init
      spendlog init
    """
    from spendlog.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def add(
    ctx: typer.Context,
    description: str = typer.Option(..., "--description", "-d", help="What the money was spent on"),
    amount: float = typer.Option(..., "--amount", "-a", help="Amount spent (non-negative)"),
):
    """Record a new expense.

    Examples:
      spendlog add --description "Lunch" --amount 20
      spendlog add -d "Coffee" -a 4.5
    """
    from spendlog.cli.command import add as cmd_add

    code = cmd_add.run(description=description, amount=amount, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def update(
    ctx: typer.Context,
    expense_id: int = typer.Option(..., "--id", help=HELP_ID),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    amount: Optional[float] = typer.Option(None, "--amount", "-a", help="New amount (non-negative)"),
):
    """Change the description and/or amount of an expense.

    Examples:
      spendlog update --id 2 --amount 12.5
      spendlog update --id 2 --description "Team lunch"
    """
    from spendlog.cli.command import update as cmd_update

    code = cmd_update.run(
        expense_id=expense_id,
        description=description,
        amount=amount,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def delete(
    ctx: typer.Context,
    expense_id: int = typer.Option(..., "--id", help=HELP_ID),
):
    """Delete an expense.

    Examples:
      spendlog delete --id 2
    """
    from spendlog.cli.command import delete as cmd_delete

    code = cmd_delete.run(expense_id=expense_id, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command(name="list")
def list_expenses(ctx: typer.Context):
    """List all expenses (ID, date, description, amount)."""
    from spendlog.cli.command import list_expenses as cmd_list

    code = cmd_list.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def summary(
    ctx: typer.Context,
    month: Optional[int] = typer.Option(None, "--month", "-m", help="Month number 1-12 (any year)"),
):
    """Show the total amount spent, overall or for one month.

    Examples:
      spendlog summary
      spendlog summary --month 8
    """
    from spendlog.cli.command import summary as cmd_summary

    code = cmd_summary.run(month=month, workspace=_ws(ctx))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
