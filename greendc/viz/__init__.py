"""Visualization of emission results: color scale, layout and SVG."""

from greendc.viz.color_scale import GREEN, RED, YELLOW, assign_colors, color_for
from greendc.viz.layout import REGION_GEOMETRY, layout, legend_for
from greendc.viz.svg import render_svg, write_svg

__all__ = [
    "GREEN",
    "RED",
    "REGION_GEOMETRY",
    "YELLOW",
    "assign_colors",
    "color_for",
    "layout",
    "legend_for",
    "render_svg",
    "write_svg",
]
