"""Persistence for the single market snapshot blob."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from remodelcost.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Get/set of one JSON-shaped blob at a fixed location.

    ``load`` returns None when nothing has been stored yet and raises
    ``DataUnavailableError`` when stored data exists but cannot be read.
    ``save`` raises ``DataUnavailableError`` when the write fails.
    """

    def load(self) -> dict[str, Any] | None: ...

    def save(self, blob: dict[str, Any]) -> None: ...


class InMemorySnapshotStore:
    """Snapshot store held in process memory. Used in tests and demos."""

    def __init__(self, blob: dict[str, Any] | None = None) -> None:
        self._blob = json.loads(json.dumps(blob)) if blob is not None else None

    def load(self) -> dict[str, Any] | None:
        if self._blob is None:
            return None
        # Round-trip so callers never share mutable state with the store
        return json.loads(json.dumps(self._blob))

    def save(self, blob: dict[str, Any]) -> None:
        self._blob = json.loads(json.dumps(blob))


class JsonFileSnapshotStore:
    """Snapshot store backed by a JSON file.

    Writes go to a temporary file in the same directory and are moved into
    place, so a reader never sees a half-written snapshot.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            msg = f"Cannot read market snapshot from {self._path}: {exc}"
            raise DataUnavailableError(msg) from exc
        if not isinstance(data, dict):
            msg = f"Market snapshot in {self._path} is not a JSON object"
            raise DataUnavailableError(msg)
        return data

    def save(self, blob: dict[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(blob, fh, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            msg = f"Cannot write market snapshot to {self._path}: {exc}"
            raise DataUnavailableError(msg) from exc
        logger.debug("Saved market snapshot to %s", self._path)
