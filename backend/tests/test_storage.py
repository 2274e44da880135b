"""Tests for the in-memory record store."""

from __future__ import annotations

import threading

from remodelcost.storage import InMemoryRecordStore


class TestInMemoryRecordStore:
    def test_ids_increment_from_one(self) -> None:
        store: InMemoryRecordStore[str] = InMemoryRecordStore()
        assert store.create("a").id == 1
        assert store.create("b").id == 2
        assert len(store) == 2

    def test_get(self) -> None:
        store: InMemoryRecordStore[dict[str, int]] = InMemoryRecordStore()
        record = store.create({"total": 5})

        fetched = store.get(record.id)
        assert fetched is not None
        assert fetched.payload == {"total": 5}
        assert fetched.created_at.tzinfo is not None

    def test_get_missing(self) -> None:
        assert InMemoryRecordStore[str]().get(42) is None

    def test_list_newest_first(self) -> None:
        store: InMemoryRecordStore[str] = InMemoryRecordStore()
        for name in ("first", "second", "third"):
            store.create(name)

        assert [r.payload for r in store.list()] == ["third", "second", "first"]

    def test_concurrent_creates_get_unique_ids(self) -> None:
        store: InMemoryRecordStore[int] = InMemoryRecordStore()

        def _worker(start: int) -> None:
            for i in range(start, start + 50):
                store.create(i)

        threads = [threading.Thread(target=_worker, args=(n * 50,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [r.id for r in store.list()]
        assert sorted(ids) == list(range(1, 201))
