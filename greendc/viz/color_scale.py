"""Green -> yellow -> red color scale for emission values.

Lower values are always cooler (green); higher values are hotter (red).
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from greendc.models.carbon_models import RGB, ColorAssignment, EmissionResult

GREEN = RGB(100, 180, 80)
YELLOW = RGB(255, 255, 80)
RED = RGB(255, 155, 0)


def _channel(value: float) -> int:
    # Round half up, then clamp to a byte
    return max(0, min(255, math.floor(value + 0.5)))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """Map ``value`` into [0, 1] relative to the range.

    A degenerate range (``minimum == maximum``) maps everything to 0.
    """
    if maximum == minimum:
        return 0.0
    t = (value - minimum) / (maximum - minimum)
    return max(0.0, min(1.0, t))


def color_for(value: float, minimum: float, maximum: float) -> RGB:
    """Color for ``value`` on the scale spanning ``minimum``..``maximum``.

    Parameters
    ----------
    value : float
        Value to color.
    minimum : float
        Lowest value of the scale (green).
    maximum : float
        Highest value of the scale (red).

    Returns
    -------
    RGB
        Interpolated color. The midpoint of the range is pure yellow.
    """
    t = normalize(value, minimum, maximum)

    if t < 0.5:
        ratio = t * 2
        return RGB(
            _channel(100 + ratio * 155),
            _channel(180 + ratio * 75),
            _channel(80),
        )

    ratio = (t - 0.5) * 2
    return RGB(
        _channel(255),
        _channel(255 - ratio * 100),
        _channel(80 - ratio * 80),
    )


def value_range(results: Iterable[EmissionResult]) -> tuple[float, float] | None:
    """Unrounded (min, max) of a result set, or None when empty."""
    values = [r.annual_co2_kg for r in results]
    if not values:
        return None
    return min(values), max(values)


def assign_colors(results: Iterable[EmissionResult]) -> list[ColorAssignment]:
    """Color every result relative to the whole set."""
    results = list(results)
    bounds = value_range(results)
    if bounds is None:
        return []
    low, high = bounds
    return [
        ColorAssignment(
            region_name=r.region_name,
            color=color_for(r.annual_co2_kg, low, high),
        )
        for r in results
    ]
