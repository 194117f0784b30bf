# src/storage/local_store.py

"""Durable string key/value storage backed by a JSON file."""

import json
import logging
from pathlib import Path

from src.config.settings import Settings

logger = logging.getLogger("catalog_admin.storage")


class LocalStore:
    """Independent string entries that survive restarts.

    Every write rewrites the whole file; there is a single writer per
    process.  An unreadable or corrupt file reads as empty storage.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path or Settings.STATE_PATH
        logger.debug("LocalStore initialised: path=%s", self.path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning(
                "Ignoring unreadable state file %s: %s", self.path, exc
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "Ignoring state file %s: top level is %s",
                self.path,
                type(data).__name__,
            )
            return {}
        return {
            str(k): v for k, v in data.items() if isinstance(v, str)
        }

    def _write_all(self, entries: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(entries, f, ensure_ascii=False, indent=2)

    def get(self, key: str) -> str | None:
        """Return the stored value for *key*, or ``None``."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        entries = self._read_all()
        entries[key] = value
        self._write_all(entries)
        logger.debug("Stored key '%s' in %s", key, self.path)

    def remove(self, key: str) -> None:
        entries = self._read_all()
        if entries.pop(key, None) is None:
            return
        self._write_all(entries)
        logger.debug("Removed key '%s' from %s", key, self.path)

    def keys(self) -> list[str]:
        return sorted(self._read_all())
