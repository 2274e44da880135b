"""Tests for the randomized market data generator and trend calculation."""

from __future__ import annotations

import datetime as dt
import random

from remodelcost.data.material_prices import BASE_MATERIAL_PRICES
from remodelcost.market.generator import RandomizedMarketDataGenerator, calculate_trend
from remodelcost.models.enums import PriceTrend
from remodelcost.models.market import PricePoint

NOW = dt.datetime(2026, 5, 14, 8, 0, tzinfo=dt.UTC)
INTERVAL = dt.timedelta(days=2)


def _history(*prices: float) -> list[PricePoint]:
    start = dt.date(2026, 1, 1)
    return [
        PricePoint(date=start + dt.timedelta(days=i), price=price)
        for i, price in enumerate(prices)
    ]


class TestCalculateTrend:
    def test_up(self) -> None:
        trend, change = calculate_trend(_history(100, 100, 100, 100, 100, 100, 103))
        assert trend == PriceTrend.UP
        assert change == 3.0

    def test_down(self) -> None:
        trend, change = calculate_trend(_history(100, 101, 99, 100, 98, 99, 97))
        assert trend == PriceTrend.DOWN
        assert change == -3.0

    def test_two_percent_is_stable(self) -> None:
        trend, change = calculate_trend(_history(100, 100, 100, 100, 100, 100, 102))
        assert trend == PriceTrend.STABLE
        assert change == 2.0

    def test_compares_with_seven_points_back(self) -> None:
        # The first point is outside the lookback window
        trend, _ = calculate_trend(_history(50, 100, 100, 100, 100, 100, 100, 100))
        assert trend == PriceTrend.STABLE

    def test_short_history_uses_oldest(self) -> None:
        trend, change = calculate_trend(_history(100, 110))
        assert trend == PriceTrend.UP
        assert change == 10.0

    def test_single_point(self) -> None:
        assert calculate_trend(_history(100)) == (PriceTrend.STABLE, 0.0)


class TestRandomizedGenerator:
    def test_covers_every_material(self) -> None:
        snapshot = RandomizedMarketDataGenerator(rng=random.Random(3)).generate(NOW, INTERVAL)

        assert [m.id for m in snapshot.material_prices] == [b.id for b in BASE_MATERIAL_PRICES]
        assert snapshot.last_refresh_date == NOW
        assert snapshot.next_refresh_date == NOW + INTERVAL

    def test_prices_stay_within_volatility(self) -> None:
        snapshot = RandomizedMarketDataGenerator(rng=random.Random(3)).generate(NOW, INTERVAL)

        for material, base in zip(snapshot.material_prices, BASE_MATERIAL_PRICES, strict=True):
            # Up to 8% either way, plus half a cent of rounding
            assert abs(material.current_price - base.base_price) <= base.base_price * 0.08 + 0.005
            assert material.current_price == round(material.current_price, 2)

    def test_history_ends_at_current_price(self) -> None:
        snapshot = RandomizedMarketDataGenerator(rng=random.Random(3)).generate(NOW, INTERVAL)

        for material in snapshot.material_prices:
            history = material.price_history
            assert len(history) == 31
            assert history[-1].price == material.current_price
            assert history[-1].date == NOW.date()
            assert history[0].date == NOW.date() - dt.timedelta(days=30)
            assert [p.date for p in history] == sorted(p.date for p in history)

    def test_trend_matches_history(self) -> None:
        snapshot = RandomizedMarketDataGenerator(rng=random.Random(11)).generate(NOW, INTERVAL)

        for material in snapshot.material_prices:
            assert (material.trend, material.change_percent) == calculate_trend(
                material.price_history
            )

    def test_seeded_output_is_repeatable(self) -> None:
        first = RandomizedMarketDataGenerator(rng=random.Random(99)).generate(NOW, INTERVAL)
        second = RandomizedMarketDataGenerator(rng=random.Random(99)).generate(NOW, INTERVAL)
        assert first == second

    def test_zero_volatility_returns_base_prices(self) -> None:
        generator = RandomizedMarketDataGenerator(volatility=0.0, history_volatility=0.0)
        snapshot = generator.generate(NOW, INTERVAL)

        for material, base in zip(snapshot.material_prices, BASE_MATERIAL_PRICES, strict=True):
            assert material.current_price == base.base_price
            assert material.trend == PriceTrend.STABLE
