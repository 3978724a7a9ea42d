"""Data models for workloads, estimates, layouts and API payloads."""

from greendc.models.api_models import RegionalResponse, RegionDetailResponse
from greendc.models.carbon_models import (
    RGB,
    ColorAssignment,
    EmissionResult,
    GenerationMixEntry,
    Geometry,
    IntensityObservation,
    LayoutResult,
    Legend,
    Region,
    RegionLayout,
    WorkloadSpec,
)
from greendc.models.constants import OutputFormat

__all__ = [
    "RGB",
    "ColorAssignment",
    "EmissionResult",
    "GenerationMixEntry",
    "Geometry",
    "IntensityObservation",
    "LayoutResult",
    "Legend",
    "OutputFormat",
    "Region",
    "RegionLayout",
    "RegionDetailResponse",
    "RegionalResponse",
    "WorkloadSpec",
]
