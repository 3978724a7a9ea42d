"""Live regional carbon intensity from the Carbon Intensity API.

The API reports a forecast in grams of CO2 per kilowatt-hour for every
region, including the aggregate ones. Values here are returned in
kilograms per kWh and joined against the region registry; ids the
registry does not know (the aggregates) are dropped.

Every call is a fresh request. The data is a live forecast, so two calls
can legitimately disagree.
"""

from __future__ import annotations

import httpx

from greendc.carbon.http import client_scope, get_model
from greendc.carbon.regions import DEFAULT_REGISTRY, RegionRegistry
from greendc.config import Settings
from greendc.models.api_models import RegionalResponse
from greendc.models.carbon_models import IntensityObservation
from greendc.models.constants import REGIONAL_PATH
from greendc.utils.logger import Logger

log = Logger.library("carbon.grid_intensity")


class IntensityFetcher:
    """Fetch forecast intensity for all regions in one round trip.

    Parameters
    ----------
    client : httpx.AsyncClient | None
        Client to borrow. If None, a client is created and closed per call.
    registry : RegionRegistry
        Registry used to name regions and filter out aggregates.
    settings : Settings | None
        Connection settings. Defaults to ``Settings()``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        registry: RegionRegistry = DEFAULT_REGISTRY,
        settings: Settings | None = None,
    ) -> None:
        self.client = client
        self.registry = registry
        self.settings = settings or Settings()

    async def fetch_observations(self) -> list[IntensityObservation]:
        """Fetch the raw per-region forecast, aggregates included.

        Returns
        -------
        list[IntensityObservation]
            One observation per region listed in ``data[0].regions``.

        Raises
        ------
        FetchFailedError
            On transport failure or non-2xx status.
        ParseFailedError
            If the payload lacks ``data[0].regions[].{regionid, intensity.forecast}``.
        """
        url = self.settings.url(REGIONAL_PATH)
        async with client_scope(self.client, self.settings) as client:
            response = await get_model(client, url, RegionalResponse)

        return [
            IntensityObservation(
                region_id=entry.regionid,
                forecast_g_kwh=entry.intensity.forecast,
            )
            for entry in response.data[0].regions
        ]

    async def fetch_all(self) -> dict[str, float]:
        """Fetch intensity per registered region in kgCO2/kWh.

        Returns
        -------
        dict[str, float]
            Region display name to kgCO2/kWh, in upstream order. Regions
            missing upstream are simply absent.
        """
        intensities: dict[str, float] = {}
        for obs in await self.fetch_observations():
            if not self.registry.contains_id(obs.region_id):
                log.debug(f"Skipping unregistered region id {obs.region_id}")
                continue
            intensities[self.registry.name_of(obs.region_id)] = obs.kg_per_kwh

        log.debug(f"Fetched intensity for {len(intensities)} region(s)")
        return intensities


async def fetch_intensities(
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> dict[str, float]:
    """Fetch kgCO2/kWh per region using the default registry."""
    return await IntensityFetcher(client=client, settings=settings).fetch_all()
