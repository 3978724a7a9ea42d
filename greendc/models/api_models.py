"""Pydantic models for Carbon Intensity API payloads.

Only the fields greendc reads are declared; everything else in the
response is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

# /regional


class Intensity(BaseModel):
    """Intensity block of a regional entry."""

    model_config = ConfigDict(extra="ignore")

    forecast: float = Field(..., description="Forecast intensity in gCO2/kWh", ge=0)


class RegionalEntry(BaseModel):
    """One region inside a /regional snapshot."""

    model_config = ConfigDict(extra="ignore")

    regionid: int = Field(..., description="Numeric region identifier")
    shortname: str | None = Field(None, description="API short name")
    intensity: Intensity


class RegionalSnapshot(BaseModel):
    """A half-hour window listing all regions."""

    model_config = ConfigDict(extra="ignore")

    regions: list[RegionalEntry]


class RegionalResponse(BaseModel):
    """Top-level /regional response."""

    model_config = ConfigDict(extra="ignore")

    data: list[RegionalSnapshot] = Field(..., min_length=1)


# /regional/regionid/{id}


class FuelShare(BaseModel):
    """One generation mix entry."""

    model_config = ConfigDict(extra="ignore")

    fuel: str
    perc: float = Field(..., description="Share of generation in percent", ge=0)


class RegionWindow(BaseModel):
    """A forecast window for a single region."""

    model_config = ConfigDict(extra="ignore")

    generationmix: list[FuelShare]


class RegionDetail(BaseModel):
    """Single region with its forecast windows."""

    model_config = ConfigDict(extra="ignore")

    regionid: int | None = None
    shortname: str | None = None
    data: list[RegionWindow] = Field(..., min_length=1)


class RegionDetailResponse(BaseModel):
    """Top-level /regional/regionid/{id} response."""

    model_config = ConfigDict(extra="ignore")

    data: list[RegionDetail] = Field(..., min_length=1)
