"""
Central configuration for spendlog.

Path resolution lives in spendlog.workspace.Workspace. This module holds the
optional per-workspace display settings read from config/settings.yml.

Privacy
- All operations are local file I/O only
- No network access
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from spendlog.errors import ConfigError

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_CURRENCY_SYMBOL = "$"


class Settings(BaseModel):
    """Display settings for a workspace."""

    model_config = ConfigDict(extra="forbid")

    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        min_length=1,
        description="strftime format for the Date column of the expense list",
    )
    currency_symbol: str = Field(
        default=DEFAULT_CURRENCY_SYMBOL,
        description="Prefix shown before totals; display only, no conversion",
    )


def load_settings(path: Path) -> Settings:
    """Load settings from YAML (safe loader).

    A missing file yields default settings. A file that is not valid YAML or
    does not match the Settings shape raises ConfigError.
    """
    if not path.exists():
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Settings file {path} is not valid YAML: {e}") from e

    try:
        return Settings.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Settings file {path} is invalid: {e}") from e


def save_settings(path: Path, settings: Settings) -> None:
    """Write settings to YAML, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            settings.model_dump(mode="json"),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = [
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_DATE_FORMAT",
    "Settings",
    "load_settings",
    "save_settings",
]
