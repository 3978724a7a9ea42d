"""Constants for greendc models and commands."""

from enum import StrEnum


class OutputFormat(StrEnum):
    """Supported output formats for reports."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout


# Power model for a typical server (watts)
WATTS_PER_CORE = 10
WATTS_PER_GB = 2

# Non-leap year, continuous 24/7 operation
HOURS_PER_YEAR = 8760

# Workload bounds accepted by the estimator
MIN_CORES = 1
MAX_CORES = 128
MIN_MEMORY_GB = 1
MAX_MEMORY_GB = 1024

# Defaults used by the CLI
DEFAULT_CORES = 4
DEFAULT_MEMORY_GB = 16

# Carbon Intensity API
DEFAULT_API_BASE_URL = "https://api.carbonintensity.org.uk"
REGIONAL_PATH = "/regional"
REGION_BY_ID_PATH = "/regional/regionid/{region_id}"
DEFAULT_HTTP_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "greendc"

# Grams per kilogram
G_PER_KG = 1000.0

# Decimal places used when displaying emissions
DISPLAY_DECIMALS = 2
