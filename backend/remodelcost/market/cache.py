"""Time-windowed cache of market material price snapshots."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from pydantic import ValidationError

from remodelcost.exceptions import DataUnavailableError
from remodelcost.market.generator import RandomizedMarketDataGenerator
from remodelcost.models.market import MarketSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from remodelcost.market.generator import MarketDataGenerator
    from remodelcost.market.store import SnapshotStore

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = timedelta(days=2)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


class MarketDataCache:
    """Serves the persisted market snapshot, regenerating it when stale.

    States:

    - nothing stored: generate, persist, return
    - stored and younger than ``refresh_interval``: return as stored
    - stored and at least ``refresh_interval`` old: generate, overwrite, return

    A stored blob that no longer matches the snapshot schema is treated as
    absent and overwritten. If the store itself cannot be read, a fresh
    snapshot is returned without being persisted; if it cannot be written,
    the fresh snapshot is still returned. Neither failure reaches the caller.

    The read-check-generate-write sequence runs under an instance lock, so
    concurrent callers sharing one cache regenerate at most once per
    staleness window. Separate processes sharing a store are last-writer-wins.
    """

    def __init__(
        self,
        store: SnapshotStore,
        generator: MarketDataGenerator | None = None,
        refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if refresh_interval <= timedelta(0):
            msg = f"refresh_interval must be positive, got {refresh_interval}"
            raise ValueError(msg)
        self._store = store
        self._generator = generator or RandomizedMarketDataGenerator()
        self._refresh_interval = refresh_interval
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def refresh_interval(self) -> timedelta:
        return self._refresh_interval

    def get_market_data(self) -> MarketSnapshot:
        """Return the current market snapshot."""
        with self._lock:
            now = _as_aware(self._clock())

            try:
                blob = self._store.load()
            except (DataUnavailableError, OSError):
                logger.warning(
                    "Market snapshot unreadable; serving unpersisted fresh data",
                    exc_info=True,
                )
                return self._generate(now)

            if blob is not None:
                cached = self._parse(blob)
                if cached is not None and self.is_fresh(cached, now):
                    logger.debug(
                        "Using cached market data. Next refresh: %s",
                        cached.next_refresh_date.isoformat(),
                    )
                    return cached

            logger.info(
                "Generating fresh market data (refresh interval %s)", self._refresh_interval
            )
            return self._refresh(now)

    def is_fresh(self, snapshot: MarketSnapshot, now: datetime) -> bool:
        """True while the snapshot is younger than the refresh interval."""
        age = _as_aware(now) - _as_aware(snapshot.last_refresh_date)
        return age < self._refresh_interval

    def _generate(self, now: datetime) -> MarketSnapshot:
        return self._generator.generate(now, self._refresh_interval)

    def _refresh(self, now: datetime) -> MarketSnapshot:
        snapshot = self._generate(now)
        blob = snapshot.model_dump(mode="json", by_alias=True)
        # Serve exactly what later reads will see
        snapshot = MarketSnapshot.model_validate(blob)
        try:
            self._store.save(blob)
        except (DataUnavailableError, OSError):
            logger.warning("Failed to persist market snapshot", exc_info=True)
        return snapshot

    @staticmethod
    def _parse(blob: dict[str, object]) -> MarketSnapshot | None:
        try:
            return MarketSnapshot.model_validate(blob)
        except ValidationError:
            logger.warning("Stored market snapshot is malformed; regenerating")
            return None
