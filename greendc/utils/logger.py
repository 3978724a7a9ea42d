"""Centralized logging for greendc.

The CLI configures logging once at startup. Library modules never
configure anything themselves: they use ``Logger.library(name)``, which
hands back a logger under the ``greendc`` namespace that stays silent
until an application configures it.

Usage:
    from greendc.utils.logger import Logger

    # Configure once at startup (required before Logger.get)
    Logger.configure(level="INFO", timestamps=True)

    # Application code
    log = Logger.get("cli")
    log.info("Fetching regional intensity...")

    # Library code
    log = Logger.library("carbon.grid_intensity")
    log.debug("GET /regional")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger.get before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for greendc.

    Example:
        >>> Logger.configure(level="DEBUG", output="stderr")
        >>> log = Logger.get("controller")
        >>> log.warning("Generation mix unavailable")
    """

    _configured: bool = False
    _root_name: str = "greendc"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
        include_location: bool = False,
    ) -> None:
        """Configure the greendc logger tree.

        Args:
            level: Log level name or LogLevel value.
            output: Where to send logs:
                - None or "stderr": sys.stderr (default, keeps stdout for reports)
                - "stdout": sys.stdout
                - str/Path: File path
                - TextIO: Any file-like object
            timestamps: Include timestamps in messages (default True).
            include_location: Include [filename:lineno] (default False).

        Raises:
            ValueError: If the level name or output is not recognized.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None or output == "stderr":
            new_handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            new_handler = logging.StreamHandler(sys.stdout)
        elif isinstance(output, str | Path):
            new_handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        parts = []
        if timestamps:
            parts.append("%(asctime)s")
        parts.append("%(levelname)s")
        parts.append("[%(name)s]")
        if include_location:
            parts.append("[%(filename)s:%(lineno)d]")
        parts.append("%(message)s")

        new_handler.setFormatter(logging.Formatter(" ".join(parts)))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger for application code.

        Args:
            name: Logger name (appended to "greendc."). If None, returns the root.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()
        return cls.library(name)

    @classmethod
    def library(cls, name: str | None = None) -> logging.Logger:
        """Get a logger for library code, without requiring configuration."""
        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured


# Library loggers emit nothing unless an application adds handlers
logging.getLogger(Logger._root_name).addHandler(logging.NullHandler())
