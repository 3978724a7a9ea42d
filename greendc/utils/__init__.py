"""greendc utilities - environment access and logging."""

from greendc.utils.env import EnvVarError, EnvVarTypeError, get_env
from greendc.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
