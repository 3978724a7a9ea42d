"""Shared fixtures: canned Carbon Intensity API payloads and fake clients."""

import copy
import logging

import httpx
import pytest

from greendc.utils.logger import Logger

REGIONAL_PAYLOAD = {
    "data": [
        {
            "from": "2026-10-19T10:00Z",
            "to": "2026-10-19T10:30Z",
            "regions": [
                {
                    "regionid": 1,
                    "dnoregion": "Scottish Hydro Electric Power Distribution",
                    "shortname": "North Scotland",
                    "intensity": {"forecast": 20, "index": "very low"},
                },
                {
                    "regionid": 3,
                    "dnoregion": "Electricity North West",
                    "shortname": "North West England",
                    "intensity": {"forecast": 150, "index": "moderate"},
                },
                {
                    "regionid": 13,
                    "dnoregion": "UKPN London",
                    "shortname": "London",
                    "intensity": {"forecast": 150, "index": "moderate"},
                },
                {
                    "regionid": 7,
                    "dnoregion": "WPD South Wales",
                    "shortname": "South Wales",
                    "intensity": {"forecast": 300, "index": "high"},
                },
                {
                    "regionid": 15,
                    "dnoregion": "England",
                    "shortname": "England",
                    "intensity": {"forecast": 180, "index": "moderate"},
                },
                {
                    "regionid": 16,
                    "dnoregion": "Scotland",
                    "shortname": "Scotland",
                    "intensity": {"forecast": 25, "index": "very low"},
                },
                {
                    "regionid": 17,
                    "dnoregion": "Wales",
                    "shortname": "Wales",
                    "intensity": {"forecast": 280, "index": "high"},
                },
                {
                    "regionid": 18,
                    "dnoregion": "GB",
                    "shortname": "GB",
                    "intensity": {"forecast": 160, "index": "moderate"},
                },
            ],
        }
    ]
}


def region_detail_payload(region_id, shortname, mix):
    """Build a /regional/regionid/{id} payload with the given mix."""
    return {
        "data": [
            {
                "regionid": region_id,
                "dnoregion": shortname,
                "shortname": shortname,
                "data": [
                    {
                        "from": "2026-10-19T10:00Z",
                        "to": "2026-10-19T10:30Z",
                        "intensity": {"forecast": 150, "index": "moderate"},
                        "generationmix": [
                            {"fuel": fuel, "perc": perc} for fuel, perc in mix
                        ],
                    }
                ],
            }
        ]
    }


LONDON_MIX = [
    ("biomass", 4.1),
    ("coal", 0.0),
    ("imports", 12.3),
    ("gas", 35.2),
    ("nuclear", 15.0),
    ("other", 0.4),
    ("hydro", 0.9),
    ("solar", 6.1),
    ("wind", 26.0),
]

NORTH_SCOTLAND_MIX = [
    ("gas", 0.0),
    ("hydro", 18.5),
    ("wind", 81.5),
]


@pytest.fixture(autouse=True)
def reset_logger():
    """Each test starts with an unconfigured Logger."""
    Logger._configured = False
    yield
    Logger._configured = False
    root = logging.getLogger("greendc")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def regional_payload():
    """A fresh copy of the /regional payload."""
    return copy.deepcopy(REGIONAL_PAYLOAD)


@pytest.fixture
def api_handler():
    """Handler serving /regional and /regional/regionid/{1,13}."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/regional":
            return httpx.Response(200, json=REGIONAL_PAYLOAD)
        if path == "/regional/regionid/13":
            return httpx.Response(
                200, json=region_detail_payload(13, "London", LONDON_MIX)
            )
        if path == "/regional/regionid/1":
            return httpx.Response(
                200,
                json=region_detail_payload(1, "North Scotland", NORTH_SCOTLAND_MIX),
            )
        return httpx.Response(404, json={"error": {"code": "404"}})

    return handler


@pytest.fixture
def make_client():
    """Factory for AsyncClients backed by an httpx.MockTransport."""

    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def london_mix():
    """(fuel, perc) pairs served for London."""
    return list(LONDON_MIX)


@pytest.fixture
def detail_payload():
    """Factory for /regional/regionid/{id} payloads."""
    return region_detail_payload
