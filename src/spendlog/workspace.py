"""
Workspace - centralized data path resolution for spendlog.

A Workspace represents the root directory holding the expense file and the
optional settings file. All paths are computed relative to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. SPENDLOG_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_VAR = "SPENDLOG_DATA"


@dataclass
class Workspace:
    """Root directory for all spendlog data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            return cls(root=explicit)
        env = os.environ.get(ENV_VAR)
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def expenses_path(self) -> Path:
        return self.data_dir / "expenses.json"

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def settings_config(self) -> Path:
        return self.config_dir / "settings.yml"


__all__ = ["ENV_VAR", "Workspace"]
