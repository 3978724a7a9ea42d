"""Carbon estimation CLI command implementation."""

from __future__ import annotations

import asyncio
import json
import sys

from greendc.carbon.calculator import EmissionEstimator
from greendc.carbon.errors import IntensityServiceError, RegionNotFoundError
from greendc.carbon.generation_mix import GenerationMixFetcher
from greendc.carbon.grid_intensity import IntensityFetcher
from greendc.carbon.http import build_async_client
from greendc.carbon.regions import DEFAULT_REGISTRY
from greendc.config import Settings
from greendc.models.carbon_models import (
    EmissionResult,
    GenerationMixEntry,
    WorkloadSpec,
)
from greendc.models.constants import OutputFormat
from greendc.report import EstimateReport, MixReport
from greendc.utils.logger import Logger
from greendc.viz.layout import layout
from greendc.viz.svg import write_svg

_SECTION_SEP = "=" * 40
_HEADING_UNDERLINE = "---"


def run_estimate(
    cores: int,
    memory_gb: int,
    fmt: OutputFormat,
    outputs: tuple[str, ...],
    svg_path: str | None,
    settings: Settings,
) -> None:
    """Fetch live intensities and report annual emissions per region.

    Parameters
    ----------
    cores : int
        Number of CPU cores.
    memory_gb : int
        Memory size in GB.
    fmt : OutputFormat
        Format used for stdout when no output file is given.
    outputs : tuple[str, ...]
        Report files; the format is chosen from each file's extension.
    svg_path : str | None
        Where to write the heatmap SVG, if anywhere.
    settings : Settings
        Connection settings.
    """
    log = Logger.get("cli.estimate")
    workload = WorkloadSpec(cores=cores, memory_gb=memory_gb)

    try:
        results = asyncio.run(_fetch_estimate(workload, settings))
    except IntensityServiceError as exc:
        print(f"Error: Failed to fetch carbon intensity data. {exc}", file=sys.stderr)
        sys.exit(1)

    log.info(f"Estimated emissions for {len(results)} region(s)")
    report = EstimateReport(workload, results)

    if outputs:
        for path in outputs:
            report.emit(path, _format_for_path(path))
            print(f"Report written to {path}")
    else:
        report.emit(sys.stdout, fmt)

    if svg_path:
        write_svg(layout(results), svg_path)
        print(f"Heatmap written to {svg_path}")


def run_mix(region: str, output_json: bool, settings: Settings) -> None:
    """Show the live generation mix for one region."""
    try:
        entries = asyncio.run(_fetch_mix(region, settings))
    except RegionNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("\nKnown regions:", file=sys.stderr)
        for name in DEFAULT_REGISTRY.names():
            print(f"  {name}", file=sys.stderr)
        sys.exit(2)
    except IntensityServiceError as exc:
        print(f"Error: Failed to fetch generation mix data. {exc}", file=sys.stderr)
        sys.exit(1)

    report = MixReport(region, entries)
    report.emit(sys.stdout, OutputFormat.JSON if output_json else OutputFormat.TEXT)


def show_regions(output_json: bool) -> None:
    """Display the regions greendc compares."""
    regions = DEFAULT_REGISTRY.regions()

    if output_json:
        rows = [{"id": r.id, "name": r.display_name} for r in regions]
        print(json.dumps(rows, indent=2))
        return

    print(_SECTION_SEP)
    print("  GB grid regions")
    print(_SECTION_SEP)
    print(f"\n  {'ID':>3}  {'Region'}")
    print(f"  {_HEADING_UNDERLINE * 3}")
    for region in regions:
        print(f"  {region.id:>3}  {region.display_name}")
    print("\n  Aggregate regions (England, Scotland, Wales, GB) are excluded.")


async def _fetch_estimate(
    workload: WorkloadSpec, settings: Settings
) -> list[EmissionResult]:
    async with build_async_client(settings) as client:
        fetcher = IntensityFetcher(client=client, settings=settings)
        intensities = await fetcher.fetch_all()
    return EmissionEstimator().estimate(workload, intensities)


async def _fetch_mix(region: str, settings: Settings) -> list[GenerationMixEntry]:
    async with build_async_client(settings) as client:
        fetcher = GenerationMixFetcher(client=client, settings=settings)
        return await fetcher.fetch_mix(region)


def _format_for_path(path: str) -> OutputFormat:
    """Pick an output format from a file extension (default JSON)."""
    lowered = path.lower()
    if lowered.endswith((".yaml", ".yml")):
        return OutputFormat.YAML
    if lowered.endswith(".txt"):
        return OutputFormat.TEXT
    return OutputFormat.JSON
