"""Cost breakdown calculator for the remodelcost engine.

The calculator implements an area-based estimation methodology:

1. **Base cost lookup**: Find the $/SF for the project type and quality
   tier in the pricing tables.
2. **Regional adjustment**: Multiply by the ZIP-code multiplier (1.0 for
   unknown codes) to get the area-based base cost.
3. **Labor**: Use explicit workers x hours x rate when all three are
   supplied, otherwise charge a configured share of the base cost.
4. **Materials**: Apply the quality adjustment and timeline multiplier to
   the base cost.
5. **Soft costs**: Permits, equipment, and overhead are configured shares
   of materials + labor; equipment and overhead overrides win verbatim.
6. **Percentages**: Each category is its amount over the total, rounded to
   one decimal on its own. Only when the rounded shares drift more than
   0.1 from 100 is the most over-rounded share nudged back by 0.1.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from remodelcost.data.repository import PricingRepository, parse_quality_tier
from remodelcost.models.enums import QualityTier, TimelineBucket
from remodelcost.models.estimate import (
    CATEGORY_NAMES,
    CategoryCost,
    CostBreakdown,
    WhatIfScenarios,
)
from remodelcost.validation import validate_numeric, validate_positive, validate_zip_code

if TYPE_CHECKING:
    from remodelcost.data.pricing_tables import PricingTables
    from remodelcost.models.project import ProjectParameters

logger = logging.getLogger(__name__)

# Upper bounds keep every derived amount finite
_MAX_AREA_SQFT = 1_000_000.0
_MAX_LABOR_WORKERS = 10_000.0
_MAX_LABOR_HOURS = 100_000.0
_MAX_LABOR_RATE = 10_000.0
_MAX_COST_OVERRIDE = 1_000_000_000.0
_PERCENT_STEP = 0.1

# Regional insight bands, checked in order
_PREMIUM_MARKET_THRESHOLD = 1.15
_ABOVE_AVERAGE_THRESHOLD = 1.05
_VALUE_MARKET_THRESHOLD = 0.92


class CostBreakdownCalculator:
    """Turns project parameters into a five-category cost breakdown.

    Args:
        tables: Pricing tables to price against. The calculator holds no
            other state, so one instance can serve concurrent requests.

    Example::

        from remodelcost.data.pricing_tables import DEFAULT_PRICING_TABLES

        calculator = CostBreakdownCalculator(DEFAULT_PRICING_TABLES)
        breakdown = calculator.estimate(params)
    """

    def __init__(self, tables: PricingTables) -> None:
        self._repository = PricingRepository(tables)

    @property
    def repository(self) -> PricingRepository:
        return self._repository

    def estimate(self, params: ProjectParameters) -> CostBreakdown:
        """Compute the cost breakdown for a project.

        Raises:
            InvalidNumericInputError: If area, labor inputs, or overrides are
                non-finite or out of bounds.
            InvalidProjectTypeError: If the project type is not priced.
            InvalidQualityTierError: If the quality tier is unknown.
            InvalidTimelineBucketError: If the timeline bucket is unknown.
            InvalidInputError: If a ZIP code is supplied but malformed.
        """
        area = validate_positive(params.area, "area", max_value=_MAX_AREA_SQFT)
        workers = validate_positive(
            params.labor_workers, "labor_workers", required=False, max_value=_MAX_LABOR_WORKERS
        )
        hours = validate_positive(
            params.labor_hours, "labor_hours", required=False, max_value=_MAX_LABOR_HOURS
        )
        rate = validate_positive(
            params.labor_rate, "labor_rate", required=False, max_value=_MAX_LABOR_RATE
        )
        equipment_override = validate_numeric(
            params.equipment_cost, "equipment_cost", required=False,
            min_value=0.0, max_value=_MAX_COST_OVERRIDE,
        )
        overhead_override = validate_numeric(
            params.overhead_cost, "overhead_cost", required=False,
            min_value=0.0, max_value=_MAX_COST_OVERRIDE,
        )
        zip_code = validate_zip_code(params.zip_code) if params.zip_code else None

        tables = self._repository.tables

        # 1. Base $/SF
        self._repository.require_project_type(params.project_type)
        quality = parse_quality_tier(params.material_quality)
        base_cost_per_sqft = self._repository.get_base_cost_per_sqft(
            params.project_type, quality
        )

        # 2. Regional factor (never an error)
        regional_factor = self._repository.get_regional_multiplier(zip_code)

        # 3. Area-based base cost
        raw_base = base_cost_per_sqft * area * regional_factor

        # 4. Labor
        if params.has_explicit_labor:
            labor = workers * hours * rate  # type: ignore[operator]
            logger.debug(
                "Explicit labor: %s workers x %s hours x $%s/hr = $%.2f",
                workers, hours, rate, labor,
            )
        else:
            labor = raw_base * tables.labor_ratio

        # 5. Timeline factor
        timeline_factor = self._repository.get_timeline_multiplier(params.timeline)

        # 6. Materials
        quality_adjustment = self._repository.get_quality_adjustment(quality)
        materials = raw_base * quality_adjustment * timeline_factor

        # 7. Soft costs
        direct = materials + labor
        permits = direct * tables.permit_ratio
        equipment = (
            equipment_override if equipment_override is not None
            else direct * tables.equipment_ratio
        )
        overhead = (
            overhead_override if overhead_override is not None
            else direct * tables.overhead_ratio
        )

        logger.debug(
            "Priced %s (%s, %s SF): base $%.2f/SF, region %.2f, timeline %.2f",
            params.project_type, quality.value, area, base_cost_per_sqft,
            regional_factor, timeline_factor,
        )

        return self._build_breakdown(
            {
                "materials": materials,
                "labor": labor,
                "permits": permits,
                "equipment": equipment,
                "overhead": overhead,
            }
        )

    def what_if_scenarios(self, params: ProjectParameters) -> WhatIfScenarios:
        """Price the same project under alternative quality and timeline choices."""
        return WhatIfScenarios(
            budget_option=self.estimate(
                params.model_copy(update={"material_quality": QualityTier.BUDGET.value})
            ),
            premium_option=self.estimate(
                params.model_copy(update={"material_quality": QualityTier.PREMIUM.value})
            ),
            rush_timeline=self.estimate(
                params.model_copy(update={"timeline": TimelineBucket.TWO_TO_FOUR_WEEKS.value})
            ),
            extended_timeline=self.estimate(
                params.model_copy(update={"timeline": TimelineBucket.THREE_TO_SIX_MONTHS.value})
            ),
        )

    def regional_insight(self, zip_code: str | None) -> str:
        """Describe the local market implied by a ZIP code's multiplier."""
        cleaned = validate_zip_code(zip_code) if zip_code else None
        multiplier = self._repository.get_regional_multiplier(cleaned)

        if multiplier >= _PREMIUM_MARKET_THRESHOLD:
            return (
                "Premium market area - Higher material and labor costs due to "
                "affluent location and strict building standards."
            )
        if multiplier >= _ABOVE_AVERAGE_THRESHOLD:
            return (
                "Above-average market - Moderate premium for quality materials "
                "and skilled contractors."
            )
        if multiplier <= _VALUE_MARKET_THRESHOLD:
            return (
                "Value market area - Lower baseline costs with good contractor "
                "availability."
            )
        return "Standard market rates - Typical pricing for materials and labor."

    @staticmethod
    def _build_breakdown(amounts: dict[str, float]) -> CostBreakdown:
        """Round amounts, derive percentages, and assemble the breakdown."""
        rounded = {name: round(amounts[name], 2) for name in CATEGORY_NAMES}
        total = sum(rounded[name] for name in CATEGORY_NAMES)

        if total <= 0:
            return CostBreakdown.zero()

        shares = {name: rounded[name] / total * 100 for name in CATEGORY_NAMES}
        percentages = {name: round(shares[name], 1) for name in CATEGORY_NAMES}

        # Five independent roundings can drift up to 0.2 from 100
        drift = round(sum(percentages.values()) - 100.0, 1)
        while abs(drift) > _PERCENT_STEP:
            step = _PERCENT_STEP if drift > 0 else -_PERCENT_STEP
            worst = max(
                CATEGORY_NAMES,
                key=lambda name: (percentages[name] - shares[name]) * step,
            )
            percentages[worst] = round(percentages[worst] - step, 1)
            drift = round(drift - step, 1)

        return CostBreakdown(
            total=total,
            **{
                name: CategoryCost(amount=rounded[name], percentage=percentages[name])
                for name in CATEGORY_NAMES
            },
        )
