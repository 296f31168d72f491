# Ensure the package under src/ is importable during tests without installing the package,
# and share the fixtures used by the store and command specs.
from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


class SteppingClock:
    """Clock returning a fixed start time, advancing one minute per call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2024, 8, 6, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def workspace(tmp_path: Path):
    from spendlog.workspace import Workspace

    return Workspace(root=tmp_path)
