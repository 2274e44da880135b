"""Formatting helpers for cost output.

Provides human-readable formatting for currency amounts, per-SF rates, and
percentages the way contractors quote them to homeowners.
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$1,234,567')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_per_sqft(amount: float) -> str:
    """Format a per-square-foot rate as '$XXX/SF'."""
    return f"${amount:,.0f}/SF"


def format_percent(value: float) -> str:
    """Format a 0-100 share with one decimal, e.g. '42.5%'."""
    return f"{value:.1f}%"
