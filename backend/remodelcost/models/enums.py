"""Enums for the remodelcost domain models.

Quality tiers and timeline buckets are ordered: declaration order is the
order a contractor would list them in, cheapest or fastest first.
"""

from enum import StrEnum


class QualityTier(StrEnum):
    """Construction-material grade, from cheapest to most expensive."""

    BUDGET = "budget"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class TimelineBucket(StrEnum):
    """Project duration ranges. Rush timelines cost more, long ones discount."""

    ONE_TO_TWO_WEEKS = "1-2 weeks"
    TWO_TO_FOUR_WEEKS = "2-4 weeks"
    FOUR_TO_EIGHT_WEEKS = "4-8 weeks"
    EIGHT_TO_TWELVE_WEEKS = "8-12 weeks"
    THREE_TO_SIX_MONTHS = "3-6 months"
    SIX_PLUS_MONTHS = "6+ months"


class FinishLevel(StrEnum):
    """Finish level recorded on historical projects."""

    BUDGET = "budget"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class PriceTrend(StrEnum):
    """Direction of recent material price movement."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ProjectCategory(StrEnum):
    """Broad market segment used for industry benchmark ranges."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
