#!/usr/bin/env python3
"""greendc CLI - Command-line interface for greendc."""

import click

from greendc.config import Settings
from greendc.models.constants import (
    DEFAULT_CORES,
    DEFAULT_MEMORY_GB,
    MAX_CORES,
    MAX_MEMORY_GB,
    MIN_CORES,
    MIN_MEMORY_GB,
    OutputFormat,
)
from greendc.utils.env import EnvVarError
from greendc.utils.logger import Logger


@click.group()
@click.pass_context
def greendc(ctx):
    """Find the GB grid region where a workload emits the least CO2."""
    try:
        settings = Settings.from_env()
        if not Logger.is_configured():
            Logger.configure(level=settings.log_level, timestamps=True)
    except (EnvVarError, ValueError) as e:
        raise click.UsageError(f"Invalid environment configuration: {e}") from e
    ctx.obj = settings


@greendc.command()
@click.option(
    "--cores",
    "-c",
    type=click.IntRange(MIN_CORES, MAX_CORES),
    default=DEFAULT_CORES,
    show_default=True,
    help="Number of CPU cores",
)
@click.option(
    "--memory-gb",
    "-m",
    type=click.IntRange(MIN_MEMORY_GB, MAX_MEMORY_GB),
    default=DEFAULT_MEMORY_GB,
    show_default=True,
    help="Memory size in GB",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.TEXT.value,
    help="Stdout format when no --output specified",
)
@click.option(
    "--output",
    "-o",
    "outputs",
    multiple=True,
    help="Output file(s) - format auto-detected (.json/.yaml/.txt). Repeatable.",
)
@click.option(
    "--svg",
    "svg_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write an illustrative heatmap of the regions to this SVG file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_obj
def estimate(settings, cores, memory_gb, fmt, outputs, svg_path, verbose):
    r"""Estimate annual CO2 for a workload in every GB region.

    \b
    Examples:
      greendc estimate                       # 4 cores, 16 GB
      greendc estimate -c 32 -m 256          # Bigger server
      greendc estimate -f json               # JSON to stdout
      greendc estimate -o run.json -o run.yaml
      greendc estimate --svg heatmap.svg     # Heatmap export
    """
    from greendc.commands.carbon_cmd import run_estimate

    if verbose:
        Logger.set_level("DEBUG")

    run_estimate(
        cores=cores,
        memory_gb=memory_gb,
        fmt=OutputFormat(fmt.lower()),
        outputs=outputs,
        svg_path=svg_path,
        settings=settings,
    )


@greendc.command()
@click.argument("region")
@click.option("--json", "output_json", is_flag=True, help="Output JSON")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_obj
def mix(settings, region, output_json, verbose):
    r"""Show the live generation mix for REGION.

    \b
    Examples:
      greendc mix London
      greendc mix "North Scotland" --json
    """
    from greendc.commands.carbon_cmd import run_mix

    if verbose:
        Logger.set_level("DEBUG")

    run_mix(region=region, output_json=output_json, settings=settings)


@greendc.command()
@click.option("--json", "output_json", is_flag=True, help="Output JSON")
def regions(output_json):
    """List the grid regions greendc compares."""
    from greendc.commands.carbon_cmd import show_regions

    show_regions(output_json)


@greendc.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display greendc version information."""
    from greendc.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    greendc()
