"""remodelcost: cost estimation for residential remodeling projects.

Usage::

    from remodelcost import ProjectParameters, create_default_calculator

    calculator = create_default_calculator()
    breakdown = calculator.estimate(
        ProjectParameters(
            project_type="kitchen-remodel",
            area=200,
            material_quality="standard",
            timeline="4-8 weeks",
            zip_code="20814",
        )
    )
"""

from remodelcost.comparables import ComparableProjectScorer, find_similar
from remodelcost.engine import CostBreakdownCalculator
from remodelcost.exceptions import (
    BenchmarkAnalysisError,
    ConfigurationMissingError,
    DataUnavailableError,
    InvalidInputError,
    InvalidNumericInputError,
    InvalidProjectTypeError,
    InvalidQualityTierError,
    InvalidTimelineBucketError,
    RemodelCostError,
)
from remodelcost.factory import (
    create_default_calculator,
    create_default_market_cache,
    create_default_scorer,
)
from remodelcost.market.cache import MarketDataCache
from remodelcost.models.comparables import (
    ComparablesResult,
    ComparisonCriteria,
    HistoricalProjectRecord,
)
from remodelcost.models.enums import QualityTier, TimelineBucket
from remodelcost.models.estimate import CategoryCost, CostBreakdown, WhatIfScenarios
from remodelcost.models.market import MarketSnapshot, MaterialPrice, PricePoint
from remodelcost.models.project import ProjectParameters

__all__ = [
    "BenchmarkAnalysisError",
    "CategoryCost",
    "ComparableProjectScorer",
    "ComparablesResult",
    "ComparisonCriteria",
    "ConfigurationMissingError",
    "CostBreakdown",
    "CostBreakdownCalculator",
    "DataUnavailableError",
    "HistoricalProjectRecord",
    "InvalidInputError",
    "InvalidNumericInputError",
    "InvalidProjectTypeError",
    "InvalidQualityTierError",
    "InvalidTimelineBucketError",
    "MarketDataCache",
    "MarketSnapshot",
    "MaterialPrice",
    "PricePoint",
    "ProjectParameters",
    "QualityTier",
    "RemodelCostError",
    "TimelineBucket",
    "WhatIfScenarios",
    "create_default_calculator",
    "create_default_market_cache",
    "create_default_scorer",
    "find_similar",
]
