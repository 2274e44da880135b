"""Tests for MarketDataCache freshness and failure handling."""

from __future__ import annotations

import random
import threading
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import pytest

from remodelcost.exceptions import DataUnavailableError
from remodelcost.market.cache import MarketDataCache
from remodelcost.market.generator import RandomizedMarketDataGenerator
from remodelcost.market.store import InMemorySnapshotStore, JsonFileSnapshotStore
from remodelcost.models.market import MarketSnapshot

if TYPE_CHECKING:
    from pathlib import Path

START = datetime(2026, 3, 2, 9, 30, tzinfo=UTC)
INTERVAL = timedelta(days=2)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Clock:
    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class _CountingGenerator:
    def __init__(self) -> None:
        self.calls = 0
        self._inner = RandomizedMarketDataGenerator(rng=random.Random(1234))

    def generate(self, now: datetime, refresh_interval: timedelta) -> MarketSnapshot:
        self.calls += 1
        return self._inner.generate(now, refresh_interval)


class _UnreadableStore:
    def __init__(self) -> None:
        self.saved: list[dict[str, Any]] = []

    def load(self) -> dict[str, Any] | None:
        msg = "disk on fire"
        raise DataUnavailableError(msg)

    def save(self, blob: dict[str, Any]) -> None:
        self.saved.append(blob)


class _ReadOnlyStore:
    def load(self) -> dict[str, Any] | None:
        return None

    def save(self, blob: dict[str, Any]) -> None:
        msg = "read-only filesystem"
        raise DataUnavailableError(msg)


@pytest.fixture()
def clock() -> _Clock:
    return _Clock()


@pytest.fixture()
def generator() -> _CountingGenerator:
    return _CountingGenerator()


@pytest.fixture()
def store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture()
def cache(
    store: InMemorySnapshotStore, generator: _CountingGenerator, clock: _Clock
) -> MarketDataCache:
    return MarketDataCache(store, generator=generator, refresh_interval=INTERVAL, clock=clock)


# ---------------------------------------------------------------------------
# Freshness
# ---------------------------------------------------------------------------


class TestFreshness:
    def test_first_call_generates_and_persists(
        self, cache: MarketDataCache, store: InMemorySnapshotStore, generator: _CountingGenerator
    ) -> None:
        snapshot = cache.get_market_data()

        assert generator.calls == 1
        assert snapshot.last_refresh_date == START
        assert snapshot.next_refresh_date == START + INTERVAL
        assert store.load() == snapshot.model_dump(mode="json", by_alias=True)

    def test_fresh_snapshot_is_served_unchanged(
        self, cache: MarketDataCache, clock: _Clock, generator: _CountingGenerator
    ) -> None:
        first = cache.get_market_data()
        clock.advance(INTERVAL - timedelta(seconds=1))
        second = cache.get_market_data()

        assert second == first
        assert generator.calls == 1

    def test_stale_at_exactly_the_interval(
        self, cache: MarketDataCache, clock: _Clock, generator: _CountingGenerator
    ) -> None:
        first = cache.get_market_data()
        clock.advance(INTERVAL)
        second = cache.get_market_data()

        assert generator.calls == 2
        assert second.last_refresh_date > first.last_refresh_date
        assert second.last_refresh_date == START + INTERVAL

    def test_refresh_overwrites_store(
        self, cache: MarketDataCache, clock: _Clock, store: InMemorySnapshotStore
    ) -> None:
        cache.get_market_data()
        clock.advance(INTERVAL * 3)
        refreshed = cache.get_market_data()

        assert MarketSnapshot.model_validate(store.load()) == refreshed

    def test_existing_fresh_blob_is_used(
        self, store: InMemorySnapshotStore, generator: _CountingGenerator, clock: _Clock
    ) -> None:
        seeded = RandomizedMarketDataGenerator(rng=random.Random(5)).generate(
            START - timedelta(hours=1), INTERVAL
        )
        store.save(seeded.model_dump(mode="json", by_alias=True))
        cache = MarketDataCache(store, generator=generator, refresh_interval=INTERVAL, clock=clock)

        assert cache.get_market_data() == MarketSnapshot.model_validate(
            seeded.model_dump(mode="json", by_alias=True)
        )
        assert generator.calls == 0

    def test_naive_stored_timestamps_are_utc(
        self, cache: MarketDataCache, store: InMemorySnapshotStore, generator: _CountingGenerator
    ) -> None:
        blob = cache.get_market_data().model_dump(mode="json", by_alias=True)
        blob["lastRefreshDate"] = START.replace(tzinfo=None).isoformat()
        store.save(blob)

        cache.get_market_data()
        assert generator.calls == 1

    def test_non_positive_interval_rejected(self, store: InMemorySnapshotStore) -> None:
        with pytest.raises(ValueError, match="refresh_interval"):
            MarketDataCache(store, refresh_interval=timedelta(0))


# ---------------------------------------------------------------------------
# Failure handling
# ---------------------------------------------------------------------------


class TestFailures:
    def test_malformed_blob_is_regenerated(
        self, generator: _CountingGenerator, clock: _Clock
    ) -> None:
        store = InMemorySnapshotStore({"materialPrices": "not a list"})
        cache = MarketDataCache(store, generator=generator, refresh_interval=INTERVAL, clock=clock)

        snapshot = cache.get_market_data()

        assert generator.calls == 1
        assert store.load() == snapshot.model_dump(mode="json", by_alias=True)

    def test_unreadable_store_serves_unpersisted_data(
        self, generator: _CountingGenerator, clock: _Clock
    ) -> None:
        store = _UnreadableStore()
        cache = MarketDataCache(store, generator=generator, refresh_interval=INTERVAL, clock=clock)

        snapshot = cache.get_market_data()

        assert snapshot.last_refresh_date == START
        assert store.saved == []

    def test_undecodable_snapshot_file_serves_unpersisted_data(
        self, generator: _CountingGenerator, clock: _Clock, tmp_path: Path
    ) -> None:
        path = tmp_path / "marketData.json"
        path.write_bytes(b'{"x": "\xff\xfe"}')
        cache = MarketDataCache(
            JsonFileSnapshotStore(path), generator=generator, refresh_interval=INTERVAL, clock=clock
        )

        snapshot = cache.get_market_data()

        assert snapshot.last_refresh_date == START
        assert path.read_bytes() == b'{"x": "\xff\xfe"}'

    def test_write_failure_still_returns_snapshot(
        self, generator: _CountingGenerator, clock: _Clock
    ) -> None:
        cache = MarketDataCache(
            _ReadOnlyStore(), generator=generator, refresh_interval=INTERVAL, clock=clock
        )

        snapshot = cache.get_market_data()

        assert len(snapshot.material_prices) > 0
        assert generator.calls == 1


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestConcurrency:
    def test_concurrent_callers_regenerate_once(
        self, cache: MarketDataCache, generator: _CountingGenerator
    ) -> None:
        results: list[MarketSnapshot] = []
        barrier = threading.Barrier(8)

        def _worker() -> None:
            barrier.wait()
            results.append(cache.get_market_data())

        threads = [threading.Thread(target=_worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert generator.calls == 1
        assert len(results) == 8
        assert all(r == results[0] for r in results)
