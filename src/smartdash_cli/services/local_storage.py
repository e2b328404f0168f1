"""Persistent string key/value store backed by a JSON file.

Plays the part browser ``localStorage`` plays for a web client: values are
plain strings, survive restarts, and there is no schema. The file is re-read
on every access so a change made by another process is seen immediately.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from json import JSONDecodeError
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalStorage:
    """Durable key/value store of strings."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable local storage %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring local storage %s: not a JSON object", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".local_storage.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> str | None:
        """Return the value stored under *key*, or None."""
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*."""
        if not isinstance(value, str):
            raise TypeError(f"LocalStorage values must be str, got {type(value).__name__}")
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        """Delete *key*; a missing key is ignored."""
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        """Delete every key."""
        self._write({})

    def keys(self) -> list[str]:
        return list(self._read())
