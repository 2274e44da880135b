"""Keyed-map record storage.

Stands in for a database behind a small create/get/list contract. Ids are
incrementing integers and ``list`` returns records newest first; any
replacement store must keep both properties.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StoredRecord(Generic[T]):
    """A payload with its assigned id and creation time."""

    id: int
    payload: T
    created_at: datetime


class InMemoryRecordStore(Generic[T]):
    """Map-backed store with incrementing integer ids."""

    def __init__(self) -> None:
        self._records: dict[int, StoredRecord[T]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, payload: T) -> StoredRecord[T]:
        with self._lock:
            record = StoredRecord(
                id=next(self._ids),
                payload=payload,
                created_at=datetime.now(UTC),
            )
            self._records[record.id] = record
        return record

    def get(self, record_id: int) -> StoredRecord[T] | None:
        return self._records.get(record_id)

    def list(self) -> list[StoredRecord[T]]:
        """All records, newest first. Ids break ties in creation time."""
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)

    def __len__(self) -> int:
        return len(self._records)
