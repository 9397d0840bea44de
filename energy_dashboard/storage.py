"""Key-value stores used to persist the dashboard configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String to string store with the localStorage API."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value or None."""

    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""

    def remove_item(self, key: str) -> None:
        """Delete key if present."""


class MemoryStore:
    """Store that lives as long as the process."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        """Return the stored value or None."""
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""
        self.items[key] = str(value)

    def remove_item(self, key: str) -> None:
        """Delete key if present."""
        self.items.pop(key, None)


class JsonFileStore:
    """Store backed by a JSON object in a single file.

    The file is rewritten on every change through a temporary file, so a crash
    never leaves a half written store behind.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file, created on first write.
        """
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        """Return the stored object, empty when the file is missing or unreadable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            _LOGGER.error("Ignoring unreadable store file %s", self.path)
            return {}
        if not isinstance(data, dict):
            _LOGGER.error("Ignoring store file %s without a JSON object", self.path)
            return {}
        return data

    def _write(self, data: dict[str, str]) -> None:
        """Replace the file contents with data."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> str | None:
        """Return the stored value or None."""
        value = self._read().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        """Store value under key and rewrite the file."""
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def remove_item(self, key: str) -> None:
        """Delete key if present and rewrite the file."""
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
