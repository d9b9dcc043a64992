#!/usr/bin/env python3
"""
Value Formatting Functions

Centralized number, delta and date formatting shared by the trend calculator,
the chart builder and the card components.

Rounding is half-up (away from zero) on the exact value, so 0.25 renders
as "0.3" rather than banker's-rounded "0.2".
"""

import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

MISSING_VALUE = "—"


def is_integral(value: Any) -> bool:
    """
    Check whether a numeric value has no fractional part.

    Args:
        value: Number to check (bools are not numbers here)

    Returns:
        True for ints and for finite floats with no fractional part

    Examples:
        >>> is_integral(5)
        True
        >>> is_integral(5.0)
        True
        >>> is_integral(5.5)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return False


def _to_fixed(value: float, digits: int, grouping: bool = False) -> str:
    """Round half-up to a fixed number of decimals"""
    if not math.isfinite(value):
        return str(value)

    exponent = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)  # no "-0.0"
    return f"{rounded:,f}" if grouping else f"{rounded:f}"


def _trim_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_delta(delta: float) -> str:
    """
    Format a change between two samples with an explicit sign.

    Integral deltas render without decimals; others are rounded to one decimal.

    Args:
        delta: current - previous

    Returns:
        Signed delta text ("+" for positive, "-" for negative, none for zero)

    Examples:
        >>> format_delta(5)
        '+5'
        >>> format_delta(-2.34)
        '-2.3'
        >>> format_delta(-0.04)
        '-0.0'
        >>> format_delta(0)
        '0'
    """
    # Sign follows the raw delta: -0.04 reads "-0.0"
    sign = "+" if delta > 0 else "-" if delta < 0 else ""
    magnitude = abs(delta)
    if is_integral(magnitude):
        return f"{sign}{int(magnitude)}"
    return f"{sign}{_to_fixed(magnitude, 1)}"


def format_number(value: float, suffix: str = "") -> str:
    """
    Format an axis value: integers plainly, otherwise two decimals with trailing zeros trimmed.

    Examples:
        >>> format_number(3)
        '3'
        >>> format_number(2.5, "%")
        '2.5%'
        >>> format_number(1.257)
        '1.26'
    """
    if is_integral(value):
        return f"{int(value)}{suffix}"
    return f"{_trim_zeros(_to_fixed(value, 2))}{suffix}"


def format_integer(value: float) -> str:
    """
    Format an axis value rounded to an integer.

    Examples:
        >>> format_integer(4)
        '4'
        >>> format_integer(2.5)
        '3'
    """
    return _to_fixed(value, 0)


def format_metric(value: Any, suffix: str = "") -> str:
    """
    Format a metric value for display (headline numbers and tooltips).

    Numbers get thousands separators and at most three decimals; missing
    values render as an em dash; anything else is shown as-is.

    Args:
        value: Metric value (number, string, or None)
        suffix: Unit appended to numeric values

    Returns:
        Display text

    Examples:
        >>> format_metric(1234.5, "%")
        '1,234.5%'
        >>> format_metric(None)
        '—'
        >>> format_metric("A")
        'A'
    """
    if value is None:
        return MISSING_VALUE
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _trim_zeros(_to_fixed(value, 3, grouping=True)) + suffix
    return str(value)


def format_date(value: date) -> str:
    """
    Format a date the way tooltips show it (M/D/YYYY, no zero padding).

    Examples:
        >>> format_date(date(2026, 2, 7))
        '2/7/2026'
    """
    return f"{value.month}/{value.day}/{value.year}"
