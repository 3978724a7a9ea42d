"""HTTP plumbing shared by the intensity and generation-mix fetchers."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from greendc.carbon.errors import FetchFailedError, ParseFailedError
from greendc.config import Settings
from greendc.utils.logger import Logger

ModelT = TypeVar("ModelT", bound=BaseModel)

log = Logger.library("carbon.http")


def build_async_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with greendc defaults."""
    settings = settings or Settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_s),
        follow_redirects=True,
        headers={
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        },
    )


@asynccontextmanager
async def client_scope(
    client: httpx.AsyncClient | None, settings: Settings
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client, or a fresh one closed on exit."""
    if client is not None:
        yield client
        return
    async with build_async_client(settings) as owned:
        yield owned


async def get_model(
    client: httpx.AsyncClient, url: str, model: type[ModelT]
) -> ModelT:
    """GET ``url`` and validate the JSON body against ``model``.

    Raises:
        FetchFailedError: On transport errors or a non-2xx status.
        ParseFailedError: If the body is not JSON or does not match ``model``.
    """
    log.debug(f"GET {url}")
    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchFailedError(url, reason=str(e) or type(e).__name__) from e

    if not response.is_success:
        raise FetchFailedError(url, status_code=response.status_code)

    try:
        payload: Any = response.json()
    except ValueError as e:
        raise ParseFailedError(url, "response body is not valid JSON") from e

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ParseFailedError(url, _summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into one line."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"
