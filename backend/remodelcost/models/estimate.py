"""Cost breakdown output models for the remodelcost engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_AMOUNT_TOLERANCE = 0.01
_PERCENT_TOLERANCE = 0.1

CATEGORY_NAMES: tuple[str, ...] = (
    "materials",
    "labor",
    "permits",
    "equipment",
    "overhead",
)


class CategoryCost(BaseModel):
    """Amount and share of total for a single cost category."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(ge=0)
    percentage: float = Field(ge=0, le=100)


class CostBreakdown(BaseModel):
    """Five-category cost breakdown with an authoritative total.

    Amounts are derived first, then percentages are computed from
    ``amount / total``. An all-zero breakdown is the only shape allowed
    to have percentages that do not sum to 100.
    """

    model_config = ConfigDict(frozen=True)

    materials: CategoryCost
    labor: CategoryCost
    permits: CategoryCost
    equipment: CategoryCost
    overhead: CategoryCost
    total: float = Field(ge=0)

    @model_validator(mode="after")
    def categories_add_up(self) -> CostBreakdown:
        amounts = sum(c.amount for c in self.categories().values())
        if abs(amounts - self.total) > _AMOUNT_TOLERANCE:
            msg = f"Category amounts sum to {amounts}, expected total {self.total}"
            raise ValueError(msg)
        if self.total > 0:
            percentages = sum(c.percentage for c in self.categories().values())
            if round(abs(percentages - 100.0), 6) > _PERCENT_TOLERANCE:
                msg = f"Category percentages sum to {percentages}, expected 100"
                raise ValueError(msg)
        return self

    @classmethod
    def zero(cls) -> CostBreakdown:
        """Degenerate breakdown returned when the total would be zero."""
        empty = CategoryCost(amount=0.0, percentage=0.0)
        return cls(
            materials=empty,
            labor=empty,
            permits=empty,
            equipment=empty,
            overhead=empty,
            total=0.0,
        )

    def categories(self) -> dict[str, CategoryCost]:
        """Return the five categories keyed by name, in display order."""
        return {name: getattr(self, name) for name in CATEGORY_NAMES}

    def to_summary_dict(self) -> dict[str, Any]:
        """Flat, display-ready summary with formatted amounts."""
        from remodelcost.formatting import format_currency, format_percent

        return {
            "total_formatted": format_currency(self.total),
            "categories": [
                {
                    "name": name,
                    "amount_formatted": format_currency(cost.amount),
                    "percentage_formatted": format_percent(cost.percentage),
                }
                for name, cost in self.categories().items()
            ],
        }


class WhatIfScenarios(BaseModel):
    """Alternative breakdowns for the same project under different choices."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    budget_option: CostBreakdown
    premium_option: CostBreakdown
    rush_timeline: CostBreakdown
    extended_timeline: CostBreakdown
