"""Providers for the historical project corpus."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from remodelcost.exceptions import DataUnavailableError
from remodelcost.models.comparables import HistoricalProjectRecord

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[HistoricalProjectRecord])


class CorpusProvider(Protocol):
    """Read-only source of historical project records."""

    def load(self) -> list[HistoricalProjectRecord]: ...


class InMemoryCorpus:
    """Corpus backed by a list held in memory."""

    def __init__(self, records: list[HistoricalProjectRecord]) -> None:
        self._records = list(records)

    def load(self) -> list[HistoricalProjectRecord]:
        return list(self._records)


class JsonFileCorpus:
    """Corpus read from a JSON array of camelCase project records.

    The file is re-read on every ``load`` so edits show up without a restart.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[HistoricalProjectRecord]:
        """Load and validate the corpus.

        Raises:
            DataUnavailableError: If the file is missing, unreadable, or does
                not contain a valid list of records.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read past projects from {self._path}: {exc}"
            raise DataUnavailableError(msg) from exc

        try:
            records = _RECORDS_ADAPTER.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            msg = f"Invalid past projects data in {self._path}: {exc}"
            raise DataUnavailableError(msg) from exc

        logger.debug("Loaded %d past projects from %s", len(records), self._path)
        return records
