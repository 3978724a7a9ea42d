"""Tests for the live regional intensity fetcher."""

import asyncio

import httpx
import pytest

from greendc.carbon.errors import (
    FetchFailedError,
    IntensityServiceError,
    ParseFailedError,
)
from greendc.carbon.grid_intensity import IntensityFetcher, fetch_intensities
from greendc.config import Settings


def _fetch_all(client, **kwargs):
    return asyncio.run(IntensityFetcher(client=client, **kwargs).fetch_all())


def test_fetch_all_converts_to_kg(api_handler, make_client):
    """Grams per kWh become kilograms per kWh."""
    intensities = _fetch_all(make_client(api_handler))
    assert intensities["London"] == pytest.approx(0.150)
    assert intensities["North Scotland"] == pytest.approx(0.020)
    assert intensities["South Wales"] == pytest.approx(0.300)


def test_fetch_all_drops_aggregate_regions(api_handler, make_client):
    """Ids outside the registry are silently skipped."""
    intensities = _fetch_all(make_client(api_handler))
    assert set(intensities) == {
        "North Scotland",
        "North West England",
        "London",
        "South Wales",
    }
    for aggregate in ("England", "Scotland", "Wales", "GB"):
        assert aggregate not in intensities


def test_fetch_all_keeps_upstream_order(api_handler, make_client):
    intensities = _fetch_all(make_client(api_handler))
    assert list(intensities) == [
        "North Scotland",
        "North West England",
        "London",
        "South Wales",
    ]


def test_fetch_observations_include_aggregates(api_handler, make_client):
    """Raw observations are not filtered."""
    fetcher = IntensityFetcher(client=make_client(api_handler))
    observations = asyncio.run(fetcher.fetch_observations())
    assert [o.region_id for o in observations] == [1, 3, 13, 7, 15, 16, 17, 18]
    assert observations[0].forecast_g_kwh == 20
    assert observations[0].kg_per_kwh == pytest.approx(0.02)


def test_requests_regional_endpoint(make_client, regional_payload):
    """A single GET of {base}/regional."""
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=regional_payload)

    settings = Settings(api_base_url="https://example.test/api/")
    _fetch_all(make_client(handler), settings=settings)
    assert seen == ["https://example.test/api/regional"]


def test_each_call_fetches_fresh_data(make_client, regional_payload):
    """No caching between calls."""
    forecasts = iter([100, 200])

    def handler(request):
        regional_payload["data"][0]["regions"][2]["intensity"]["forecast"] = next(
            forecasts
        )
        return httpx.Response(200, json=regional_payload)

    fetcher = IntensityFetcher(client=make_client(handler))
    first = asyncio.run(fetcher.fetch_all())
    second = asyncio.run(fetcher.fetch_all())
    assert first["London"] == pytest.approx(0.1)
    assert second["London"] == pytest.approx(0.2)


@pytest.mark.parametrize("status", [404, 500, 503])
def test_non_success_status_is_fetch_failed(make_client, status):
    client = make_client(lambda request: httpx.Response(status))
    with pytest.raises(FetchFailedError) as excinfo:
        _fetch_all(client)
    assert excinfo.value.status_code == status
    assert isinstance(excinfo.value, IntensityServiceError)


def test_transport_error_is_fetch_failed(make_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchFailedError) as excinfo:
        _fetch_all(make_client(handler))
    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": []},
        {"data": [{}]},
        {"data": [{"regions": [{"regionid": 13}]}]},
        {"data": [{"regions": [{"regionid": 13, "intensity": {}}]}]},
        {"data": [{"regions": [{"regionid": 13, "intensity": {"forecast": "x"}}]}]},
        {"data": [{"regions": [{"regionid": 13, "intensity": {"forecast": -5}}]}]},
        [1, 2, 3],
    ],
)
def test_unexpected_shape_is_parse_failed(make_client, payload):
    client = make_client(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(ParseFailedError):
        _fetch_all(client)


def test_invalid_json_is_parse_failed(make_client):
    client = make_client(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(ParseFailedError, match="not valid JSON"):
        _fetch_all(client)


def test_only_aggregates_gives_empty_mapping(make_client):
    """Partial data is not an error, even when nothing maps."""
    payload = {
        "data": [{"regions": [{"regionid": 18, "intensity": {"forecast": 160}}]}]
    }
    client = make_client(lambda request: httpx.Response(200, json=payload))
    assert _fetch_all(client) == {}


def test_module_helper(api_handler, make_client):
    intensities = asyncio.run(fetch_intensities(client=make_client(api_handler)))
    assert "London" in intensities


def test_malformed_base_url_is_fetch_failed(make_client, regional_payload):
    settings = Settings(api_base_url="https://bad\x01host")
    client = make_client(lambda request: httpx.Response(200, json=regional_payload))
    with pytest.raises(FetchFailedError) as excinfo:
        _fetch_all(client, settings=settings)
    assert excinfo.value.status_code is None
