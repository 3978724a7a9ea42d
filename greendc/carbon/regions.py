"""Grid regions reported by the Carbon Intensity API.

Only the fourteen disjoint DNO regions are exposed. The aggregate regions
(15 England, 16 Scotland, 17 Wales, 18 GB) overlap the others and would
double count, so the registry refuses them.

See https://carbon-intensity.github.io/api-definitions/#region-list
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from greendc.carbon.errors import RegionNotFoundError
from greendc.models.carbon_models import Region

AGGREGATE_REGION_IDS: frozenset[int] = frozenset({15, 16, 17, 18})

# Region id -> display name
REGION_NAMES: dict[int, str] = {
    1: "North Scotland",
    2: "South Scotland",
    3: "North West England",
    4: "North East England",
    5: "South Yorkshire",
    6: "North Wales, Merseyside and Cheshire",
    7: "South Wales",
    8: "West Midlands",
    9: "East Midlands",
    10: "East England",
    11: "South West England",
    12: "South England",
    13: "London",
    14: "South East England",
}


class RegionRegistry:
    """Immutable two-way lookup between region ids and display names.

    Parameters
    ----------
    regions : Iterable[Region]
        Regions to register. Ids and names must each be unique.

    Raises
    ------
    ValueError
        If an id or name repeats, or an aggregate region id is given.
    """

    def __init__(self, regions: Iterable[Region]) -> None:
        by_id: dict[int, str] = {}
        by_name: dict[str, int] = {}
        for region in regions:
            if region.id in AGGREGATE_REGION_IDS:
                raise ValueError(f"Aggregate region id not allowed: {region.id}")
            if region.id in by_id:
                raise ValueError(f"Duplicate region id: {region.id}")
            if region.display_name in by_name:
                raise ValueError(f"Duplicate region name: {region.display_name!r}")
            by_id[region.id] = region.display_name
            by_name[region.display_name] = region.id

        self._by_id = MappingProxyType(by_id)
        self._by_name = MappingProxyType(by_name)

    @classmethod
    def from_mapping(cls, names: dict[int, str]) -> RegionRegistry:
        """Build a registry from an id -> name mapping."""
        return cls(Region(id=i, display_name=n) for i, n in names.items())

    def name_of(self, region_id: int) -> str:
        """Resolve a region id to its display name.

        Raises
        ------
        RegionNotFoundError
            If the id is not registered (including aggregate ids).
        """
        try:
            return self._by_id[region_id]
        except KeyError:
            raise RegionNotFoundError(region_id=region_id) from None

    def id_of(self, name: str) -> int:
        """Resolve a display name to its region id.

        Raises
        ------
        RegionNotFoundError
            If the name is not registered.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise RegionNotFoundError(name=name) from None

    def contains_id(self, region_id: int) -> bool:
        """Check if a region id is registered."""
        return region_id in self._by_id

    def contains_name(self, name: str) -> bool:
        """Check if a display name is registered."""
        return name in self._by_name

    def regions(self) -> list[Region]:
        """Return all regions ordered by id."""
        return [Region(id=i, display_name=n) for i, n in sorted(self._by_id.items())]

    def names(self) -> list[str]:
        """Return all display names ordered by id."""
        return [r.display_name for r in self.regions()]

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions())

    def __len__(self) -> int:
        return len(self._by_id)


DEFAULT_REGISTRY = RegionRegistry.from_mapping(REGION_NAMES)
