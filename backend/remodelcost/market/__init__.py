"""Market material price snapshots and their cache."""

from remodelcost.market.cache import DEFAULT_REFRESH_INTERVAL, MarketDataCache
from remodelcost.market.generator import (
    MarketDataGenerator,
    RandomizedMarketDataGenerator,
    calculate_trend,
)
from remodelcost.market.store import (
    InMemorySnapshotStore,
    JsonFileSnapshotStore,
    SnapshotStore,
)

__all__ = [
    "DEFAULT_REFRESH_INTERVAL",
    "InMemorySnapshotStore",
    "JsonFileSnapshotStore",
    "MarketDataCache",
    "MarketDataGenerator",
    "RandomizedMarketDataGenerator",
    "SnapshotStore",
    "calculate_trend",
]
