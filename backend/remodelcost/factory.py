"""Factory functions for creating pre-configured engine components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from remodelcost.comparables import ComparableProjectScorer
from remodelcost.data.corpus import InMemoryCorpus, JsonFileCorpus
from remodelcost.data.past_projects import SEED_PAST_PROJECTS
from remodelcost.data.pricing_tables import DEFAULT_PRICING_TABLES
from remodelcost.engine import CostBreakdownCalculator
from remodelcost.market.cache import MarketDataCache
from remodelcost.market.store import JsonFileSnapshotStore

if TYPE_CHECKING:
    from remodelcost.settings import Settings


def create_default_calculator() -> CostBreakdownCalculator:
    """Create a calculator wired to the built-in pricing tables.

    Example::

        from remodelcost import ProjectParameters, create_default_calculator

        calculator = create_default_calculator()
        breakdown = calculator.estimate(params)
    """
    return CostBreakdownCalculator(DEFAULT_PRICING_TABLES)


def create_default_scorer(settings: Settings | None = None) -> ComparableProjectScorer:
    """Create a scorer over the configured corpus.

    Uses the JSON file at ``settings.past_projects_path`` when set,
    otherwise the built-in seed corpus.
    """
    if settings is not None and settings.past_projects_path is not None:
        return ComparableProjectScorer(JsonFileCorpus(settings.past_projects_path))
    return ComparableProjectScorer(InMemoryCorpus(SEED_PAST_PROJECTS))


def create_default_market_cache(settings: Settings | None = None) -> MarketDataCache:
    """Create a market cache persisted to the configured JSON file."""
    if settings is None:
        from remodelcost.settings import Settings

        settings = Settings.from_env()
    return MarketDataCache(
        store=JsonFileSnapshotStore(settings.market_data_path),
        refresh_interval=settings.refresh_interval,
    )
