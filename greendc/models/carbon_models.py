"""Data models for workload carbon estimation."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from greendc.models.constants import (
    DISPLAY_DECIMALS,
    G_PER_KG,
    MAX_CORES,
    MAX_MEMORY_GB,
    MIN_CORES,
    MIN_MEMORY_GB,
)


@dataclass(frozen=True)
class Region:
    """A disjoint grid region known to the Carbon Intensity API.

    Attributes
    ----------
    id : int
        Numeric region identifier used by the API.
    display_name : str
        Canonical display name (e.g. "London").
    """

    id: int
    display_name: str


class WorkloadSpec(BaseModel):
    """A hypothetical compute workload, running 24/7."""

    model_config = ConfigDict(frozen=True, strict=True)

    cores: int = Field(
        ..., description="Number of CPU cores", ge=MIN_CORES, le=MAX_CORES
    )
    memory_gb: int = Field(
        ..., description="Memory size in GB", ge=MIN_MEMORY_GB, le=MAX_MEMORY_GB
    )


@dataclass(frozen=True)
class IntensityObservation:
    """One forecast intensity snapshot for a region.

    Attributes
    ----------
    region_id : int
        Numeric region identifier as reported upstream.
    forecast_g_kwh : float
        Forecast carbon intensity in gCO2/kWh.
    """

    region_id: int
    forecast_g_kwh: float

    @property
    def kg_per_kwh(self) -> float:
        """Forecast intensity in kgCO2/kWh."""
        return self.forecast_g_kwh / G_PER_KG


@dataclass(frozen=True)
class EmissionResult:
    """Annual CO2 estimate for a workload in one region.

    Attributes
    ----------
    region_name : str
        Region display name.
    annual_co2_kg : float
        Unrounded annual emissions in kilograms.
    intensity_kg_kwh : float | None
        Intensity the estimate was computed from.
    annual_kwh : float | None
        Annual energy the estimate was computed from.
    """

    region_name: str
    annual_co2_kg: float
    intensity_kg_kwh: float | None = None
    annual_kwh: float | None = None

    @property
    def display_co2_kg(self) -> float:
        """Emissions rounded for display."""
        return round(self.annual_co2_kg, DISPLAY_DECIMALS)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "region": self.region_name,
            "annual_co2_kg": self.display_co2_kg,
            "intensity_kg_kwh": self.intensity_kg_kwh,
            "annual_kwh": (
                round(self.annual_kwh, 4) if self.annual_kwh is not None else None
            ),
        }


@dataclass(frozen=True)
class GenerationMixEntry:
    """Share of generation for one fuel type, as reported upstream."""

    fuel_type: str
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"fuel": self.fuel_type, "percentage": self.percentage}


@dataclass(frozen=True)
class RGB:
    """An 8-bit RGB color."""

    r: int
    g: int
    b: int

    def css(self) -> str:
        """Return the CSS functional notation, e.g. ``rgb(100, 180, 80)``."""
        return f"rgb({self.r}, {self.g}, {self.b})"

    def hex(self) -> str:
        """Return the hex notation, e.g. ``#64b450``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class ColorAssignment:
    """Color derived for a region from a particular result set."""

    region_name: str
    color: RGB


@dataclass(frozen=True)
class Geometry:
    """Illustrative rectangle on the 500x700 map canvas."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        """Center point of the rectangle."""
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class RegionLayout:
    """A colored, labeled region ready for drawing."""

    region: str
    geometry: Geometry
    color: RGB
    label_text: str
    value_text: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "region": self.region,
            "x": self.geometry.x,
            "y": self.geometry.y,
            "width": self.geometry.width,
            "height": self.geometry.height,
            "color": self.color.css(),
            "label": self.label_text,
            "value": self.value_text,
        }


def _whole(value: float) -> str:
    return str(math.floor(value + 0.5))


@dataclass(frozen=True)
class Legend:
    """Scale tick values for the observed range."""

    minimum: float
    midpoint: float
    maximum: float

    def labels(self) -> tuple[str, str, str]:
        """Tick labels rounded half up to whole kilograms."""
        return (
            _whole(self.minimum),
            _whole(self.midpoint),
            _whole(self.maximum),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "min": round(self.minimum, DISPLAY_DECIMALS),
            "mid": round(self.midpoint, DISPLAY_DECIMALS),
            "max": round(self.maximum, DISPLAY_DECIMALS),
        }


@dataclass
class LayoutResult:
    """Composed visualization output.

    Attributes
    ----------
    regions : list[RegionLayout]
        Drawable regions (results without geometry are left out).
    legend : Legend | None
        Scale ticks, or None for an empty result set.
    on_select : Callable[[str], Any] | None
        Selection callback supplied by the controller.
    """

    regions: list[RegionLayout] = field(default_factory=list)
    legend: Legend | None = None
    on_select: Callable[[str], Any] | None = None

    def select(self, region_name: str) -> None:
        """Forward a region selection to the controller."""
        if self.on_select is not None:
            self.on_select(region_name)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "regions": [r.to_dict() for r in self.regions],
            "legend": self.legend.to_dict() if self.legend else None,
        }
