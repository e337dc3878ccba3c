"""Formatting helpers for cost estimate output.

Provides whole-dollar rounding and human-readable currency strings for the
figures the estimate wizard displays (e.g. '$506,250' and '$203/SF').
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in ``round`` uses banker's rounding; estimates are
    presented with conventional half-up rounding instead.
    """
    return math.floor(value + 0.5)


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$1,234,567')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_compact_currency(amount: float) -> str:
    """Format an amount in thousands or millions, e.g. '$29K' or '$1.2M'."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.0f}K"
    return f"${amount:,.0f}"


def format_sf_cost(cost_per_sf: float) -> str:
    """Format a per-SF cost as '$XXX/SF'."""
    return f"${round_half_up(cost_per_sf):,}/SF"


def format_multiplier(multiplier: float) -> str:
    """Format a regional multiplier the way the wizard badges it ('1.35x')."""
    return f"{multiplier:g}x"
