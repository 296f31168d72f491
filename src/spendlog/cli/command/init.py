"""Initialize a new spendlog workspace directory."""

from __future__ import annotations

from spendlog.config import Settings, save_settings
from spendlog.workspace import Workspace

from .util import console


def run(*, workspace: Workspace) -> int:
    """Create the data directory and a settings file holding the defaults.

    Skips anything that already exists (safe to run on an existing workspace).
    The expense file itself is created by the first 'add'.

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    console.print(f"[bold cyan]Initializing workspace:[/] {workspace.root}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.config_dir]:
        if directory.exists():
            skipped.append(directory)
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(directory)

    settings_path = workspace.settings_config
    if settings_path.exists():
        skipped.append(settings_path)
    else:
        save_settings(settings_path, Settings())
        created.append(settings_path)

    for path in created:
        console.print(f"  [green]created[/]  {path.relative_to(workspace.root)}")
    for path in skipped:
        console.print(f"  [dim]exists[/]   {path.relative_to(workspace.root)}")

    console.print("\n[bold green]Workspace ready.[/] Next: spendlog add -d \"Lunch\" -a 20")
    return 0
