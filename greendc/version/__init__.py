"""greendc version information."""

from greendc.version.greendc_version import GREENDC_VERSION, Version

__all__ = ["GREENDC_VERSION", "Version"]
