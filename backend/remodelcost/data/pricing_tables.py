"""Immutable pricing configuration injected into the calculator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from remodelcost.data.base_costs import (
    BASE_COSTS_PER_SQFT,
    DEFAULT_EQUIPMENT_RATIO,
    DEFAULT_LABOR_RATIO,
    DEFAULT_OVERHEAD_RATIO,
    DEFAULT_PERMIT_RATIO,
    QUALITY_ADJUSTMENTS,
    TIMELINE_MULTIPLIERS,
)
from remodelcost.data.regional_multipliers import (
    DEFAULT_REGIONAL_MULTIPLIER,
    REGIONAL_MULTIPLIERS,
)
from remodelcost.models.enums import QualityTier, TimelineBucket


class PricingTables(BaseModel):
    """Static reference data for cost estimation. Loaded once, never mutated.

    The ratio fields are policy constants. ``labor_ratio`` in particular is
    the share of the area-based base cost charged as labor when a request
    carries no explicit labor inputs; override it rather than editing the
    defaults.
    """

    model_config = ConfigDict(frozen=True)

    base_cost_per_sqft: dict[str, dict[QualityTier, float]]
    regional_multipliers: dict[str, float] = Field(default_factory=dict)
    default_regional_multiplier: float = Field(default=DEFAULT_REGIONAL_MULTIPLIER, gt=0)
    timeline_multipliers: dict[TimelineBucket, float]
    quality_adjustments: dict[QualityTier, float]
    labor_ratio: float = Field(default=DEFAULT_LABOR_RATIO, ge=0)
    permit_ratio: float = Field(default=DEFAULT_PERMIT_RATIO, ge=0)
    equipment_ratio: float = Field(default=DEFAULT_EQUIPMENT_RATIO, ge=0)
    overhead_ratio: float = Field(default=DEFAULT_OVERHEAD_RATIO, ge=0)
    version: str = "2024.4"


DEFAULT_PRICING_TABLES = PricingTables(
    base_cost_per_sqft=BASE_COSTS_PER_SQFT,
    regional_multipliers=REGIONAL_MULTIPLIERS,
    timeline_multipliers=TIMELINE_MULTIPLIERS,
    quality_adjustments=QUALITY_ADJUSTMENTS,
)
