"""String key-value stores backing the save service."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Mapping, Protocol

from .errors import DataLoadError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Opaque persistence backend: string keys to string values."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def set_many(self, values: Mapping[str, str]) -> None:
        """Write several keys as one update."""
        ...

    def clear(self) -> None:
        ...


class InMemoryStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def set_many(self, values: Mapping[str, str]) -> None:
        self._values.update(values)

    def clear(self) -> None:
        self._values.clear()

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of every stored key."""
        return dict(self._values)


class JsonFileStore:
    """Keeps every key inside a single JSON object file on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            raise DataLoadError(f"Stored value for '{key}' in {self._path} is not a string.")
        return value

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, str]) -> None:
        merged = self._read()
        merged.update(values)
        self._write(json.dumps(merged, indent=2, sort_keys=True))
        logger.debug("Wrote keys %s to %s", sorted(values), self._path)

    def clear(self) -> None:
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
        logger.debug("Cleared store %s", self._path)

    def _write(self, content: str) -> None:
        # Temp file in the same directory so the rename stays on one filesystem.
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.stem}_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
            Path(temp_path).replace(self._path)
        except OSError:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def _read(self) -> Dict[str, object]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise DataLoadError(f"Unable to read save file: {self._path}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataLoadError(f"Invalid JSON in {self._path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise DataLoadError(f"Save file {self._path} must contain a JSON object.")
        return raw
