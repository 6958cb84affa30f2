"""Lenient number parsing for values typed into the projection form."""

from __future__ import annotations

import math
from typing import Any


def coerce_number(value: Any) -> float:
    """
    Parse a form value into a float.

    Empty, missing or non-numeric values (and NaN / infinity) count as zero,
    so a half-typed field never breaks the projection. Negative numbers are
    kept as-is; rejecting them is the engine's job.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_years(value: Any) -> int:
    """Parse a horizon value into whole years, truncating toward zero."""
    return int(coerce_number(value))
