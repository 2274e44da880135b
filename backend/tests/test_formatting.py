"""Tests for formatting utilities."""

from __future__ import annotations

from remodelcost.formatting import format_currency, format_per_sqft, format_percent
from remodelcost.models.estimate import CategoryCost, CostBreakdown


class TestFormatCurrency:
    def test_large_amounts_drop_cents(self) -> None:
        assert format_currency(387_504.0) == "$387,504"
        assert format_currency(10_000) == "$10,000"

    def test_small_amounts_keep_cents(self) -> None:
        assert format_currency(9_876.54) == "$9,876.54"
        assert format_currency(0) == "$0.00"


class TestFormatPerSqft:
    def test_rounds_to_dollars(self) -> None:
        assert format_per_sqft(228.89) == "$229/SF"
        assert format_per_sqft(1_250) == "$1,250/SF"


class TestFormatPercent:
    def test_one_decimal(self) -> None:
        assert format_percent(57.87) == "57.9%"
        assert format_percent(0) == "0.0%"


class TestSummaryDict:
    def test_summary(self) -> None:
        breakdown = CostBreakdown(
            materials=CategoryCost(amount=6_000.0, percentage=60.0),
            labor=CategoryCost(amount=2_000.0, percentage=20.0),
            permits=CategoryCost(amount=500.0, percentage=5.0),
            equipment=CategoryCost(amount=500.0, percentage=5.0),
            overhead=CategoryCost(amount=1_000.0, percentage=10.0),
            total=10_000.0,
        )
        summary = breakdown.to_summary_dict()

        assert summary["total_formatted"] == "$10,000"
        assert summary["categories"][0] == {
            "name": "materials",
            "amount_formatted": "$6,000.00",
            "percentage_formatted": "60.0%",
        }
        assert [c["name"] for c in summary["categories"]] == [
            "materials",
            "labor",
            "permits",
            "equipment",
            "overhead",
        ]
