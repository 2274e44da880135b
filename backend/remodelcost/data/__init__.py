"""Pricing and reference data layer for the remodelcost engine."""

from remodelcost.data.corpus import CorpusProvider, InMemoryCorpus, JsonFileCorpus
from remodelcost.data.pricing_tables import DEFAULT_PRICING_TABLES, PricingTables
from remodelcost.data.repository import PricingRepository

__all__ = [
    "DEFAULT_PRICING_TABLES",
    "CorpusProvider",
    "InMemoryCorpus",
    "JsonFileCorpus",
    "PricingRepository",
    "PricingTables",
]
