# file: gui_recorder/history.py
import json
import os
import sys
import tempfile
from pathlib import Path
from typing import List, TypedDict, Union


class HistoryEntry(TypedDict):
    """One recorded session, as persisted in history.json."""
    id: str          # milliseconds since epoch
    url: str
    device: str      # "pc" or "mobile"
    createdAt: str   # ISO-8601, UTC
    feedback: str
    scriptPath: str
    tracePath: str


class HistoryParseError(ValueError):
    pass


def parse_history(data: Union[bytes, str]) -> List[HistoryEntry]:
    """Parse the contents of a history file.

    Raises HistoryParseError unless the data is a JSON array of objects.
    """
    try:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        parsed = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise HistoryParseError(f"History is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise HistoryParseError(f"History must be a JSON array, got {type(parsed).__name__}")
    for i, entry in enumerate(parsed):
        if not isinstance(entry, dict):
            raise HistoryParseError(f"History entry {i} must be an object")
    return parsed


def load_history(path: Path) -> List[HistoryEntry]:
    """Return the stored sessions, or [] if the file is missing or unusable."""
    path = Path(path)
    if not path.exists():
        return []

    try:
        return parse_history(path.read_bytes())
    except (OSError, HistoryParseError) as e:
        print(f"⚠️  Ignoring unreadable history file {path}: {e}", file=sys.stderr)
        return []


def save_history(path: Path, entries: List[HistoryEntry]) -> None:
    """Overwrite the history file with the full list of entries."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write to a temporary sibling first so a crash never leaves half a file
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=".history_temp_",
        suffix=".json",
        text=True,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(entries, f, indent=2, ensure_ascii=False)
        os.replace(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise


def append_entry(path: Path, entry: HistoryEntry) -> List[HistoryEntry]:
    history = load_history(path)
    history.append(entry)
    save_history(path, history)
    return history
