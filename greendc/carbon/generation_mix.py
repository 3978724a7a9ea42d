"""Live fuel-source breakdown for a single region."""

from __future__ import annotations

import httpx

from greendc.carbon.http import client_scope, get_model
from greendc.carbon.regions import DEFAULT_REGISTRY, RegionRegistry
from greendc.config import Settings
from greendc.models.api_models import RegionDetailResponse
from greendc.models.carbon_models import GenerationMixEntry
from greendc.models.constants import REGION_BY_ID_PATH
from greendc.utils.logger import Logger

log = Logger.library("carbon.generation_mix")


class GenerationMixFetcher:
    """Fetch the current generation mix for a named region.

    Parameters
    ----------
    client : httpx.AsyncClient | None
        Client to borrow. If None, a client is created and closed per call.
    registry : RegionRegistry
        Registry used to resolve display names to API ids.
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

    async def fetch_mix(self, region_name: str) -> list[GenerationMixEntry]:
        """Fetch the generation mix for ``region_name``.

        Percentages are returned exactly as reported; they usually sum to
        about 100 but this is not checked.

        Raises
        ------
        RegionNotFoundError
            If the name is not registered. No request is made.
        FetchFailedError
            On transport failure or non-2xx status.
        ParseFailedError
            If the payload lacks ``data[0].data[0].generationmix``.
        """
        region_id = self.registry.id_of(region_name)
        url = self.settings.url(REGION_BY_ID_PATH.format(region_id=region_id))

        async with client_scope(self.client, self.settings) as client:
            response = await get_model(client, url, RegionDetailResponse)

        mix = response.data[0].data[0].generationmix
        log.debug(f"{region_name}: {len(mix)} fuel type(s)")
        return [GenerationMixEntry(fuel_type=f.fuel, percentage=f.perc) for f in mix]
