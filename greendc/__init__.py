"""greendc - pick the lowest-carbon GB grid region for a compute workload."""

from greendc.version.greendc_version import GREENDC_VERSION, Version

__version__ = str(GREENDC_VERSION)
__version_info__ = GREENDC_VERSION

__all__ = [
    "GREENDC_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
