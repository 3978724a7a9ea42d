"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from greendc.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Application loggers require configuration."""
    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")
    with pytest.raises(LoggerNotConfiguredError):
        Logger.set_level("DEBUG")


def test_library_logger_needs_no_configuration():
    log = Logger.library("carbon.http")
    assert log.name == "greendc.carbon.http"
    log.warning("dropped silently")


def test_logger_configuration():
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    Logger.get("test_config").debug("Debug message")

    content = output.getvalue()
    assert "DEBUG [greendc.test_config] Debug message" in content


def test_library_logger_uses_configured_handler():
    output = StringIO()
    Logger.configure(level="WARNING", output=output, timestamps=False)

    Logger.library("controller").warning("Generation mix unavailable")
    Logger.library("controller").info("hidden")

    assert "[greendc.controller] Generation mix unavailable" in output.getvalue()
    assert "hidden" not in output.getvalue()


def test_logger_set_level():
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_invalid_level():
    with pytest.raises(ValueError):
        Logger.configure(level="LOUD", output=StringIO())
