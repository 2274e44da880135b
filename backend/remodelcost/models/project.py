"""Project input models for the remodelcost engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProjectParameters(BaseModel):
    """Input to the cost breakdown calculator.

    ``material_quality`` and ``timeline`` are kept as plain strings so that
    unrecognized values reach the calculator and are rejected there with a
    field-specific error instead of a generic schema failure. Numeric bounds
    are checked by the calculator for the same reason.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    project_type: str
    area: float
    material_quality: str
    timeline: str
    zip_code: str | None = None
    labor_workers: float | None = None
    labor_hours: float | None = None
    labor_rate: float | None = None
    equipment_cost: float | None = None
    overhead_cost: float | None = None

    @property
    def has_explicit_labor(self) -> bool:
        """True when workers, hours, and rate are all supplied."""
        return (
            self.labor_workers is not None
            and self.labor_hours is not None
            and self.labor_rate is not None
        )
