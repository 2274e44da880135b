"""Market snapshot models for the material price cache."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from remodelcost.models.enums import PriceTrend


class PricePoint(BaseModel):
    """Price of a material on a single day."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    price: float


class MaterialPrice(BaseModel):
    """Current price, recent history, and trend for one material."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    current_price: float = Field(ge=0)
    unit: str
    category: str
    price_history: list[PricePoint] = Field(default_factory=list)
    trend: PriceTrend = PriceTrend.STABLE
    change_percent: float = 0.0
    last_updated: dt.datetime | None = None


class MarketSnapshot(BaseModel):
    """A wholesale snapshot of material prices. Replaced, never patched."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    material_prices: list[MaterialPrice]
    last_refresh_date: dt.datetime
    next_refresh_date: dt.datetime
