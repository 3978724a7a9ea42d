"""Render a heatmap layout as a standalone SVG document."""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from greendc.models.carbon_models import LayoutResult, RegionLayout
from greendc.viz.color_scale import GREEN, RED, YELLOW
from greendc.viz.layout import CANVAS_HEIGHT, CANVAS_WIDTH

_LEGEND_HEIGHT = 70
_FILL_OPACITY = 0.75


def _region_group(region: RegionLayout) -> str:
    rect = region.geometry
    cx, cy = rect.center
    tooltip = escape(f"{region.label_text}: {region.value_text} CO₂/year")
    return (
        f'  <g class="region" data-region={quoteattr(region.region)}>\n'
        f'    <rect x="{rect.x:g}" y="{rect.y:g}" width="{rect.width:g}" '
        f'height="{rect.height:g}" rx="8" fill="{region.color.css()}" '
        f'fill-opacity="{_FILL_OPACITY}" stroke="#393939" stroke-width="2">'
        f"<title>{tooltip}</title></rect>\n"
        f'    <text x="{cx:g}" y="{cy - 10:g}" text-anchor="middle" '
        f'font-size="12" font-weight="600">{escape(region.label_text)}</text>\n'
        f'    <text x="{cx:g}" y="{cy + 10:g}" text-anchor="middle" '
        f'font-size="11">{escape(region.value_text)}</text>\n'
        "  </g>\n"
    )


def _legend(layout_result: LayoutResult) -> str:
    if layout_result.legend is None:
        return ""
    low, mid, high = layout_result.legend.labels()
    top = CANVAS_HEIGHT + 10
    bar_y = top + 20
    return (
        "  <defs>\n"
        '    <linearGradient id="co2-scale" x1="0" x2="1" y1="0" y2="0">\n'
        f'      <stop offset="0%" stop-color="{GREEN.css()}"/>\n'
        f'      <stop offset="50%" stop-color="{YELLOW.css()}"/>\n'
        f'      <stop offset="100%" stop-color="{RED.css()}"/>\n'
        "    </linearGradient>\n"
        "  </defs>\n"
        '  <g class="legend">\n'
        f'    <text x="50" y="{top + 12}" font-size="12" font-weight="600">'
        "CO₂ Emissions (kg/year)</text>\n"
        f'    <rect x="50" y="{bar_y}" width="400" height="14" '
        'fill="url(#co2-scale)"/>\n'
        f'    <text x="50" y="{bar_y + 30}" font-size="11">{low}</text>\n'
        f'    <text x="250" y="{bar_y + 30}" font-size="11" '
        f'text-anchor="middle">{mid}</text>\n'
        f'    <text x="450" y="{bar_y + 30}" font-size="11" '
        f'text-anchor="end">{high}</text>\n'
        "  </g>\n"
    )


def render_svg(layout_result: LayoutResult) -> str:
    """Render ``layout_result`` as SVG markup."""
    height = CANVAS_HEIGHT + (_LEGEND_HEIGHT if layout_result.legend else 0)
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>\n',
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {CANVAS_WIDTH} '
        f'{height}" role="img" aria-label="GB regions heatmap of CO2 emissions">\n',
        "  <title>GB CO₂ Emissions Heatmap</title>\n",
    ]
    parts.extend(_region_group(region) for region in layout_result.regions)
    parts.append(_legend(layout_result))
    parts.append("</svg>\n")
    return "".join(parts)


def write_svg(layout_result: LayoutResult, path: str | Path) -> Path:
    """Write the rendered SVG to ``path`` and return it."""
    target = Path(path)
    target.write_text(render_svg(layout_result), encoding="utf-8")
    return target
