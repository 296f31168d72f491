from __future__ import annotations

"""
Expense file I/O (JSON parsing, dumping, atomic saving).

The persisted collection is a JSON array of expense records sorted by id.
Saving writes a temporary file next to the target and renames it into place,
so an interrupted write never leaves a truncated file behind.

Privacy
- All operations are local file I/O only
- No logging of descriptions or amounts; callers decide what to print
"""

import contextlib
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from spendlog.errors import CorruptStateError, PersistenceError
from spendlog.model.expense import Expense

logger = logging.getLogger(__name__)

_EXPENSE_LIST = TypeAdapter(list[Expense])


def _describe_validation_error(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    loc = first.get("loc", ())
    if not loc:
        return first["msg"]
    where = f"record {loc[0]}"
    if len(loc) > 1:
        where += f" field '{loc[1]}'"
    return f"{where}: {first['msg']}"


def parse_expenses_json(text: str, source: str = "<string>") -> list[Expense]:
    """Parse a JSON array of expense records.

    Empty or whitespace-only text is an empty collection.

    Raises:
        CorruptStateError: text is not JSON, not an array, contains a record
            of the wrong shape, or repeats an id
    """
    if not text.strip():
        return []

    try:
        expenses = _EXPENSE_LIST.validate_json(text)
    except PydanticValidationError as e:
        raise CorruptStateError(
            f"Expense file {source} is corrupt: {_describe_validation_error(e)}"
        ) from e

    seen: set[int] = set()
    for expense in expenses:
        if expense.id in seen:
            raise CorruptStateError(
                f"Expense file {source} is corrupt: duplicate id {expense.id}"
            )
        seen.add(expense.id)

    return expenses


def dump_expenses_json(expenses: Iterable[Expense]) -> str:
    """Serialize expenses as an indented JSON array ordered by ascending id."""
    records = [e.to_record() for e in sorted(expenses, key=lambda e: e.id)]
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def load_expenses(path: Path) -> list[Expense]:
    """Load the expense collection; a missing file is an empty collection."""
    if not path.exists():
        logger.debug("No expense file at %s; starting empty", path)
        return []

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorruptStateError(f"Expense file {path} is corrupt: not UTF-8 text") from e
    except OSError as e:
        raise PersistenceError(f"Failed to read expenses from {path}: {e}") from e

    expenses = parse_expenses_json(text, source=str(path))
    logger.debug("Loaded %d expenses from %s", len(expenses), path)
    return expenses


def _target_mode(path: Path) -> int:
    """Permission bits the rewritten file should carry.

    An existing file keeps its mode; a new file gets the umask default, as a
    plain open() would give it.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _atomic_write_text(path: Path, text: str) -> None:
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}-", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def save_expenses(path: Path, expenses: Iterable[Expense]) -> None:
    """Replace the expense file with the given collection, sorted by id.

    Raises:
        PersistenceError: the write did not complete; the previous file is
            left as it was
    """
    expenses = list(expenses)
    text = dump_expenses_json(expenses)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _atomic_write_text(path, text)
    except OSError as e:
        raise PersistenceError(f"Failed to write expenses to {path}: {e}") from e
    logger.debug("Wrote %d expenses to %s", len(expenses), path)


__all__ = [
    "dump_expenses_json",
    "load_expenses",
    "parse_expenses_json",
    "save_expenses",
]
