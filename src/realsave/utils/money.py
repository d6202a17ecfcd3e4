"""Rounding and currency formatting for money figures."""

from __future__ import annotations

import math

import numpy as np


def round_money(value: float) -> int:
    """Round to the nearest whole unit, halves rounded up."""
    return int(math.floor(value + 0.5))


def round_money_array(values: np.ndarray) -> list[int]:
    """Apply :func:`round_money` elementwise.

    Returns Python ints so very large balances are not truncated to int64.
    """
    return [round_money(float(v)) for v in values]


def format_currency(value: float) -> str:
    """Format as whole dollars, e.g. ``$12,345`` or ``-$80``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_short(value: float) -> str:
    """Compact label for axes and KPI tiles: ``$1.23M``, ``$4.5K``, ``$950``."""
    magnitude = abs(value)
    if magnitude >= 1_000_000:
        return f"${value / 1_000_000:.2f}M"
    if magnitude >= 1_000:
        return f"${value / 1_000:.1f}K"
    return f"${value:.0f}"
