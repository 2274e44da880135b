"""Domain models for the remodelcost engine."""

from remodelcost.models.comparables import (
    ComparablesResult,
    ComparisonCriteria,
    HistoricalProjectRecord,
    SimilarityScore,
)
from remodelcost.models.enums import (
    FinishLevel,
    PriceTrend,
    ProjectCategory,
    QualityTier,
    TimelineBucket,
)
from remodelcost.models.estimate import CategoryCost, CostBreakdown, WhatIfScenarios
from remodelcost.models.market import MarketSnapshot, MaterialPrice, PricePoint
from remodelcost.models.project import ProjectParameters

__all__ = [
    "CategoryCost",
    "ComparablesResult",
    "ComparisonCriteria",
    "CostBreakdown",
    "FinishLevel",
    "HistoricalProjectRecord",
    "MarketSnapshot",
    "MaterialPrice",
    "PricePoint",
    "PriceTrend",
    "ProjectCategory",
    "ProjectParameters",
    "QualityTier",
    "SimilarityScore",
    "TimelineBucket",
    "WhatIfScenarios",
]
