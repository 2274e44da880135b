"""Pricing repository for looking up cost data."""

from __future__ import annotations

from typing import TYPE_CHECKING

from remodelcost.exceptions import (
    InvalidProjectTypeError,
    InvalidQualityTierError,
    InvalidTimelineBucketError,
)
from remodelcost.models.enums import QualityTier, TimelineBucket

if TYPE_CHECKING:
    from remodelcost.data.pricing_tables import PricingTables


def parse_quality_tier(value: str, field: str = "material_quality") -> QualityTier:
    """Normalize and validate a quality tier string."""
    try:
        return QualityTier(value.strip().lower())
    except (AttributeError, ValueError) as exc:
        allowed = ", ".join(t.value for t in QualityTier)
        raise InvalidQualityTierError(
            field,
            f"must be one of: {allowed}",
            f"Unknown quality tier '{value}'; expected one of: {allowed}",
        ) from exc


class PricingRepository:
    """Repository for looking up pricing data.

    Wraps a ``PricingTables`` instance and provides lookups that raise
    field-specific errors for unknown keys. The one lookup that never
    fails is the regional multiplier, which falls back to the baseline.
    """

    def __init__(self, tables: PricingTables) -> None:
        self._tables = tables
        self._base_costs = {
            key.lower(): dict(costs) for key, costs in tables.base_cost_per_sqft.items()
        }
        self._regional = dict(tables.regional_multipliers)

    @property
    def tables(self) -> PricingTables:
        return self._tables

    @property
    def project_types(self) -> list[str]:
        return sorted(self._base_costs)

    def require_project_type(self, project_type: str) -> dict[QualityTier, float]:
        """Return the per-tier price table for a project type.

        Raises InvalidProjectTypeError if the project type is unknown.
        """
        costs = self._base_costs.get(str(project_type).strip().lower())
        if costs is None:
            raise InvalidProjectTypeError(
                "project_type",
                "must be a known project type",
                f"Unsupported project type '{project_type}'; "
                f"expected one of: {', '.join(self.project_types)}",
            )
        return costs

    def get_base_cost_per_sqft(self, project_type: str, quality: QualityTier) -> float:
        """Look up the base $/SF for a project type and quality tier.

        Raises InvalidProjectTypeError if the project type is unknown and
        InvalidQualityTierError if the table has no price for the tier.
        """
        costs = self.require_project_type(project_type)
        cost = costs.get(quality)
        if cost is None:
            raise InvalidQualityTierError(
                "material_quality",
                "must have a price for the project type",
                f"No base cost for {project_type} at quality '{quality}'",
            )
        return cost

    def get_regional_multiplier(self, zip_code: str | None) -> float:
        """Get the regional multiplier for a ZIP code.

        Unknown or missing codes return the baseline multiplier.
        """
        if not zip_code:
            return self._tables.default_regional_multiplier
        return self._regional.get(
            zip_code.strip(), self._tables.default_regional_multiplier
        )

    def get_timeline_multiplier(self, timeline: str) -> float:
        """Get the multiplier for a timeline bucket."""
        try:
            bucket = TimelineBucket(timeline.strip())
        except (AttributeError, ValueError) as exc:
            allowed = ", ".join(b.value for b in TimelineBucket)
            raise InvalidTimelineBucketError(
                "timeline",
                f"must be one of: {allowed}",
                f"Unknown timeline '{timeline}'; expected one of: {allowed}",
            ) from exc
        multiplier = self._tables.timeline_multipliers.get(bucket)
        if multiplier is None:
            raise InvalidTimelineBucketError(
                "timeline",
                "must have a configured multiplier",
                f"No multiplier configured for timeline '{bucket}'",
            )
        return multiplier

    def get_quality_adjustment(self, quality: QualityTier) -> float:
        """Get the material quality adjustment factor."""
        adjustment = self._tables.quality_adjustments.get(quality)
        if adjustment is None:
            raise InvalidQualityTierError(
                "material_quality",
                "must have a configured quality adjustment",
                f"No quality adjustment configured for '{quality}'",
            )
        return adjustment
