"""Exceptions raised by the greendc carbon engine."""

from __future__ import annotations


class GreendcError(Exception):
    """Base exception for greendc errors."""

    pass


class IntensityServiceError(GreendcError):
    """Recoverable failure talking to the Carbon Intensity API."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class FetchFailedError(IntensityServiceError):
    """Raised when the transport fails or the API returns a non-2xx status."""

    def __init__(
        self, url: str, status_code: int | None = None, reason: str | None = None
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"API request to {url} failed with status {status_code}"
        else:
            message = f"API request to {url} failed: {reason or 'transport error'}"
        super().__init__(message, url=url)


class ParseFailedError(IntensityServiceError):
    """Raised when an API response does not have the expected shape."""

    def __init__(self, url: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unexpected response from {url}: {reason}", url=url)


class RegionNotFoundError(GreendcError, LookupError):
    """Raised when a region name or id is not in the registry."""

    def __init__(self, name: str | None = None, region_id: int | None = None) -> None:
        self.name = name
        self.region_id = region_id
        if name is not None:
            message = f"Unknown region name: {name!r}"
        else:
            message = f"Unknown region id: {region_id}"
        super().__init__(message)


class InvalidWorkloadError(GreendcError, ValueError):
    """Raised when a workload is outside the supported bounds."""

    pass
