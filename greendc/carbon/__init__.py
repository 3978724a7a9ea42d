"""Regional carbon intensity, generation mix and emission estimates."""

from greendc.carbon.calculator import EmissionEstimator, best, estimate, rank
from greendc.carbon.errors import (
    FetchFailedError,
    GreendcError,
    IntensityServiceError,
    InvalidWorkloadError,
    ParseFailedError,
    RegionNotFoundError,
)
from greendc.carbon.generation_mix import GenerationMixFetcher
from greendc.carbon.grid_intensity import IntensityFetcher, fetch_intensities
from greendc.carbon.regions import DEFAULT_REGISTRY, RegionRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "EmissionEstimator",
    "FetchFailedError",
    "GenerationMixFetcher",
    "GreendcError",
    "IntensityFetcher",
    "IntensityServiceError",
    "InvalidWorkloadError",
    "ParseFailedError",
    "RegionNotFoundError",
    "RegionRegistry",
    "best",
    "estimate",
    "fetch_intensities",
    "rank",
]
