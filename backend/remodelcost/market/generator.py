"""Pluggable market data generators.

The cache only decides *when* to regenerate; a generator decides *what*
the new snapshot contains. The default generator simulates price movement
around reference prices until a real price feed is wired in.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Protocol

from remodelcost.data.material_prices import BASE_MATERIAL_PRICES
from remodelcost.models.enums import PriceTrend
from remodelcost.models.market import MarketSnapshot, MaterialPrice, PricePoint

if TYPE_CHECKING:
    from collections.abc import Sequence

    from remodelcost.data.material_prices import BaseMaterialPrice

# Trend compares today's price with the price this many points back
_TREND_LOOKBACK = 7
_TREND_THRESHOLD_PERCENT = 2.0


class MarketDataGenerator(Protocol):
    """Produces a complete, fresh market snapshot."""

    def generate(self, now: datetime, refresh_interval: timedelta) -> MarketSnapshot: ...


def calculate_trend(history: Sequence[PricePoint]) -> tuple[PriceTrend, float]:
    """Derive trend and percent change from an oldest-to-newest price history."""
    if len(history) < 2:
        return PriceTrend.STABLE, 0.0

    recent = history[-1].price
    if len(history) >= _TREND_LOOKBACK:
        previous = history[-_TREND_LOOKBACK].price
    else:
        previous = history[0].price
    if previous == 0:
        return PriceTrend.STABLE, 0.0

    change_percent = round((recent - previous) / previous * 100, 2)
    if abs(change_percent) > _TREND_THRESHOLD_PERCENT:
        trend = PriceTrend.UP if change_percent > 0 else PriceTrend.DOWN
    else:
        trend = PriceTrend.STABLE
    return trend, change_percent


class RandomizedMarketDataGenerator:
    """Simulates material price movement around reference prices.

    Args:
        base_prices: Reference prices to vary.
        rng: Random source; pass a seeded ``random.Random`` for repeatable output.
        volatility: Maximum relative deviation of today's price from the base.
        history_days: Days of daily history to produce before today.
        history_volatility: Maximum relative day-over-day move in the history.
    """

    def __init__(
        self,
        base_prices: Sequence[BaseMaterialPrice] = BASE_MATERIAL_PRICES,
        rng: random.Random | None = None,
        volatility: float = 0.08,
        history_days: int = 30,
        history_volatility: float = 0.03,
    ) -> None:
        self._base_prices = list(base_prices)
        self._rng = rng or random.Random()
        self._volatility = volatility
        self._history_days = history_days
        self._history_volatility = history_volatility

    def generate(self, now: datetime, refresh_interval: timedelta) -> MarketSnapshot:
        material_prices: list[MaterialPrice] = []
        for material in self._base_prices:
            current_price = self._vary(material.base_price, self._volatility)
            history = self._price_history(current_price, now)
            trend, change_percent = calculate_trend(history)
            material_prices.append(
                MaterialPrice(
                    id=material.id,
                    name=material.name,
                    current_price=current_price,
                    unit=material.unit,
                    category=material.category,
                    price_history=history,
                    trend=trend,
                    change_percent=change_percent,
                    last_updated=now,
                )
            )

        return MarketSnapshot(
            material_prices=material_prices,
            last_refresh_date=now,
            next_refresh_date=now + refresh_interval,
        )

    def _vary(self, price: float, volatility: float) -> float:
        variation = (self._rng.random() - 0.5) * 2 * volatility
        return round(price * (1 + variation), 2)

    def _price_history(self, current_price: float, now: datetime) -> list[PricePoint]:
        """Random walk ending exactly at today's price, oldest first."""
        history: list[PricePoint] = []
        price = current_price
        for days_ago in range(self._history_days, -1, -1):
            if days_ago > 0:
                price = self._vary(price, self._history_volatility)
            else:
                price = current_price
            history.append(
                PricePoint(date=(now - timedelta(days=days_ago)).date(), price=price)
            )
        return history
