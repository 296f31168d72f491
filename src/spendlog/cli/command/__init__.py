from __future__ import annotations

# Command implementations for spendlog CLI.
# Each command module exposes a `run(...)` function that performs the action,
# prints to the console and returns an exit code. Typer wrappers in
# spendlog.cli.app delegate here.

__all__ = [
    "init",
    "add",
    "update",
    "delete",
    "list_expenses",
    "summary",
]
