#!/usr/bin/env python3
"""
Key-Value Store - persistence for the editor state.

The editor keeps four strings between runs: the raw ledger text, the raw
account-options text, and the fixed and highlighted account preferences.
Values are stored verbatim under fixed keys; nothing here interprets them.
"""

from datetime import datetime
from pathlib import Path
from typing import Protocol

from .json_utils import read_json, write_json

LEDGER_TEXT_KEY = "ledger_text"
ACCOUNT_OPTIONS_KEY = "account_options"
FIXED_ACCOUNT_KEY = "fixed_account"
HIGHLIGHTED_ACCOUNT_KEY = "highlighted_account"


class KeyValueStore(Protocol):
    """
    Protocol for string persistence keyed by fixed names.

    Implementations must return exactly what was stored; the ledger text is
    the source of truth and must survive a save/load cycle byte for byte.
    """

    def get(self, key: str) -> str | None:
        """
        Look up a value.

        Returns:
            The stored string, or None if the key has never been set
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key; removing a missing key is not an error."""
        ...

    def keys(self) -> list[str]:
        """List the keys currently stored."""
        ...


class MemoryKeyValueStore:
    """Dict-backed store, for library use and tests."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)


class JsonKeyValueStore:
    """
    Store backed by a single JSON object on disk.

    The whole file is rewritten on every change. Files are small (one personal
    ledger) so there is no caching beyond the current process.
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: JSON file holding the state (data/editor_state.json by default)
        """
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        data = read_json(self.path)
        if not isinstance(data, dict):
            raise ValueError(f"Editor state file is not a JSON object: {self.path}")
        return data

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Value for '{key}' in {self.path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        write_json(self.path, data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            write_json(self.path, data)

    def keys(self) -> list[str]:
        return list(self._load())

    def exists(self) -> bool:
        """Check if the state file exists."""
        return self.path.exists()

    def last_modified(self) -> datetime | None:
        """Get timestamp of the state file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """Get age in days of the state file."""
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def size_bytes(self) -> int | None:
        """Get size of the state file."""
        if not self.exists():
            return None
        return self.path.stat().st_size

    def summary_text(self) -> str:
        """Get human-readable summary of current store state."""
        if not self.exists():
            return "No editor state saved yet"

        stored = self.keys()
        age = self.age_days()
        age_text = "today" if age == 0 else f"{age} days ago"
        return f"{len(stored)} values saved, updated {age_text}"
