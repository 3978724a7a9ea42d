"""Runtime settings for greendc, read from the environment."""

from __future__ import annotations

from dataclasses import dataclass

from greendc.models.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_HTTP_TIMEOUT_S,
    DEFAULT_USER_AGENT,
)
from greendc.utils.env import get_env
from greendc.utils.logger import LogLevel


@dataclass(frozen=True)
class Settings:
    """Connection and logging settings.

    Attributes
    ----------
    api_base_url : str
        Carbon Intensity API root, without trailing slash.
    http_timeout_s : float
        Per-request timeout applied by the HTTP client.
    user_agent : str
        User-Agent header sent with every request.
    log_level : str
        Level used by the CLI when configuring Logger.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    http_timeout_s: float = DEFAULT_HTTP_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.http_timeout_s <= 0:
            raise ValueError(
                f"http_timeout_s must be positive, got {self.http_timeout_s}"
            )
        if self.log_level.upper() not in LogLevel.__members__:
            raise ValueError(f"Unknown log level: {self.log_level}")
        # Normalize so paths can be appended directly
        object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from GREENDC_* environment variables."""
        return cls(
            api_base_url=get_env("GREENDC_API_BASE_URL", default=DEFAULT_API_BASE_URL),
            http_timeout_s=get_env(
                "GREENDC_HTTP_TIMEOUT", default=DEFAULT_HTTP_TIMEOUT_S, as_type=float
            ),
            user_agent=get_env("GREENDC_USER_AGENT", default=DEFAULT_USER_AGENT),
            log_level=get_env("GREENDC_LOG_LEVEL", default="WARNING"),
        )

    def url(self, path: str) -> str:
        """Join an API path onto the base URL."""
        return f"{self.api_base_url}{path}"
