"""Base cost-per-square-foot tables and pricing multipliers.

Base costs are 2024 Q4 Montgomery County figures. Every value here is a
default that can be replaced by passing alternate ``PricingTables`` to the
calculator.
"""

from __future__ import annotations

from remodelcost.models.enums import QualityTier, TimelineBucket

# project type -> quality tier -> $/SF
BASE_COSTS_PER_SQFT: dict[str, dict[QualityTier, float]] = {
    "kitchen-remodel": {
        QualityTier.BUDGET: 160.0,
        QualityTier.STANDARD: 195.0,
        QualityTier.PREMIUM: 280.0,
        QualityTier.LUXURY: 420.0,
    },
    "bathroom-remodel": {
        QualityTier.BUDGET: 220.0,
        QualityTier.STANDARD: 285.0,
        QualityTier.PREMIUM: 410.0,
        QualityTier.LUXURY: 650.0,
    },
    "home-addition": {
        QualityTier.BUDGET: 180.0,
        QualityTier.STANDARD: 240.0,
        QualityTier.PREMIUM: 340.0,
        QualityTier.LUXURY: 480.0,
    },
    "deck-construction": {
        QualityTier.BUDGET: 35.0,
        QualityTier.STANDARD: 55.0,
        QualityTier.PREMIUM: 85.0,
        QualityTier.LUXURY: 120.0,
    },
    "flooring-installation": {
        QualityTier.BUDGET: 8.0,
        QualityTier.STANDARD: 15.0,
        QualityTier.PREMIUM: 25.0,
        QualityTier.LUXURY: 45.0,
    },
    "roofing-replacement": {
        QualityTier.BUDGET: 8.0,
        QualityTier.STANDARD: 12.0,
        QualityTier.PREMIUM: 18.0,
        QualityTier.LUXURY: 28.0,
    },
    "siding-installation": {
        QualityTier.BUDGET: 6.0,
        QualityTier.STANDARD: 11.0,
        QualityTier.PREMIUM: 16.0,
        QualityTier.LUXURY: 24.0,
    },
}

TIMELINE_MULTIPLIERS: dict[TimelineBucket, float] = {
    TimelineBucket.ONE_TO_TWO_WEEKS: 1.25,  # rush premium
    TimelineBucket.TWO_TO_FOUR_WEEKS: 1.15,  # fast track
    TimelineBucket.FOUR_TO_EIGHT_WEEKS: 1.0,
    TimelineBucket.EIGHT_TO_TWELVE_WEEKS: 0.95,
    TimelineBucket.THREE_TO_SIX_MONTHS: 0.90,
    TimelineBucket.SIX_PLUS_MONTHS: 0.85,
}

QUALITY_ADJUSTMENTS: dict[QualityTier, float] = {
    QualityTier.BUDGET: 0.8,
    QualityTier.STANDARD: 1.0,
    QualityTier.PREMIUM: 1.4,
    QualityTier.LUXURY: 2.0,
}

# Share of (base x area x region) charged as labor when no explicit
# workers/hours/rate are given. Business policy, not a derived figure.
DEFAULT_LABOR_RATIO = 0.35

# Shares of (materials + labor).
DEFAULT_PERMIT_RATIO = 0.05
DEFAULT_EQUIPMENT_RATIO = 0.08
DEFAULT_OVERHEAD_RATIO = 0.15
