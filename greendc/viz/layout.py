"""Heatmap layout: fixed region geometry, colors, labels and legend.

The rectangles are an illustrative arrangement of the GB regions on a
500x700 canvas, not real boundaries.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from greendc.models.carbon_models import (
    EmissionResult,
    Geometry,
    LayoutResult,
    Legend,
    RegionLayout,
)
from greendc.viz.color_scale import color_for, value_range

CANVAS_WIDTH = 500
CANVAS_HEIGHT = 700

REGION_GEOMETRY: dict[str, Geometry] = {
    "North Scotland": Geometry(200, 30, 180, 120),
    "South Scotland": Geometry(200, 150, 180, 100),
    "North West England": Geometry(180, 280, 120, 100),
    "North East England": Geometry(320, 250, 100, 100),
    "South Yorkshire": Geometry(300, 350, 100, 80),
    "North Wales, Merseyside and Cheshire": Geometry(150, 360, 130, 80),
    "South Wales": Geometry(150, 440, 100, 80),
    "West Midlands": Geometry(240, 430, 90, 90),
    "East Midlands": Geometry(330, 430, 90, 90),
    "East England": Geometry(380, 490, 100, 100),
    "South West England": Geometry(180, 540, 120, 100),
    "South England": Geometry(280, 590, 100, 70),
    "London": Geometry(340, 560, 70, 50),
    "South East England": Geometry(380, 590, 100, 70),
}


def legend_for(results: Iterable[EmissionResult]) -> Legend | None:
    """Legend ticks for the observed range, or None when empty."""
    bounds = value_range(results)
    if bounds is None:
        return None
    low, high = bounds
    return Legend(minimum=low, midpoint=(low + high) / 2, maximum=high)


def layout(
    results: Iterable[EmissionResult],
    on_select: Callable[[str], Any] | None = None,
    geometry: Mapping[str, Geometry] = REGION_GEOMETRY,
) -> LayoutResult:
    """Compose drawable regions for a result set.

    Colors are scaled over every result, including those that have no
    geometry and are therefore left out of the drawing.

    Parameters
    ----------
    results : Iterable[EmissionResult]
        Estimates to draw.
    on_select : Callable[[str], Any] | None
        Called with a region name when the user selects a region.
    geometry : Mapping[str, Geometry]
        Region name to rectangle lookup.

    Returns
    -------
    LayoutResult
        Drawable regions in input order, plus the legend.
    """
    results = list(results)
    legend = legend_for(results)
    if legend is None:
        return LayoutResult(regions=[], legend=None, on_select=on_select)

    regions = []
    for result in results:
        rect = geometry.get(result.region_name)
        if rect is None:
            continue
        regions.append(
            RegionLayout(
                region=result.region_name,
                geometry=rect,
                color=color_for(result.annual_co2_kg, legend.minimum, legend.maximum),
                label_text=result.region_name,
                value_text=f"{result.display_co2_kg:.2f} kg",
            )
        )

    return LayoutResult(regions=regions, legend=legend, on_select=on_select)
