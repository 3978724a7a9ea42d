"""Estimate and generation-mix reports.

Supports multiple output formats: JSON, YAML, and text.

Usage:
    from greendc.report import EstimateReport
    from greendc.models.constants import OutputFormat

    report = EstimateReport(workload, results)
    report.emit("estimate.json", OutputFormat.JSON)
    report.emit("estimate.yaml", OutputFormat.YAML)
    report.emit(sys.stdout, OutputFormat.TEXT)
"""

from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml

from greendc.carbon.calculator import EmissionEstimator, rank
from greendc.models.carbon_models import (
    EmissionResult,
    GenerationMixEntry,
    WorkloadSpec,
)
from greendc.models.constants import OutputFormat
from greendc.viz.color_scale import color_for, value_range
from greendc.viz.layout import legend_for

_SECTION_SEP = "=" * 60
_RULE = "-" * 60


def _get_version() -> str:
    """Get greendc version string."""
    try:
        from greendc import __version__

        return str(__version__)
    except (ImportError, AttributeError):
        return "unknown"


def _write_output(output: str | Path | TextIO, content: str) -> None:
    """Write content to a file path or stream."""
    if isinstance(output, str | Path):
        Path(output).write_text(content, encoding="utf-8")
    else:
        output.write(content)
        if output is not sys.stdout and output is not sys.stderr:
            output.flush()


class _Report:
    """Shared emission logic; subclasses provide to_dict() and _to_text()."""

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def _to_text(self) -> str:
        raise NotImplementedError

    def render(self, format: OutputFormat = OutputFormat.TEXT, indent: int = 2) -> str:
        """Render the report as a string.

        Raises:
            ValueError: If the format is unknown.
        """
        if format == OutputFormat.JSON:
            return json.dumps(self.to_dict(), indent=indent, default=str) + "\n"
        if format == OutputFormat.YAML:
            result: str = yaml.safe_dump(
                self.to_dict(),
                indent=indent,
                default_flow_style=False,
                sort_keys=False,
            )
            return result
        if format == OutputFormat.TEXT:
            return self._to_text()
        raise ValueError(f"Unknown format: {format}")

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.TEXT,
        indent: int = 2,
    ) -> None:
        """Emit the report to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        _write_output(output, self.render(format, indent))


class EstimateReport(_Report):
    """Ranked emission estimates for one workload.

    Example:
        >>> report = EstimateReport(WorkloadSpec(cores=4, memory_gb=16), results)
        >>> report.emit(sys.stdout, OutputFormat.TEXT)
    """

    def __init__(
        self,
        workload: WorkloadSpec,
        results: list[EmissionResult],
        estimator: EmissionEstimator | None = None,
    ) -> None:
        self.workload = workload
        self.results = list(results)
        self.estimator = estimator or EmissionEstimator()
        self.timestamp = datetime.now(UTC).isoformat()

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a dictionary for serialization."""
        ranked = rank(self.results)
        legend = legend_for(self.results)
        return {
            "metadata": {
                "timestamp": self.timestamp,
                "greendc_version": _get_version(),
                "workload": self.workload.model_dump(),
                "power_watts": self.estimator.power_watts(self.workload),
                "annual_kwh": round(self.estimator.annual_kwh(self.workload), 4),
            },
            "results": [r.to_dict() for r in ranked],
            "legend": legend.to_dict() if legend else None,
            "summary": self._generate_summary(ranked),
        }

    def _generate_summary(self, ranked: list[EmissionResult]) -> dict[str, Any]:
        bounds = value_range(ranked)
        summary: dict[str, Any] = {
            "regions": len(ranked),
            "best_region": ranked[0].region_name if ranked else None,
            "worst_region": ranked[-1].region_name if ranked else None,
        }
        if bounds is not None:
            low, high = bounds
            summary["spread_kg"] = round(high - low, 2)
        return summary

    def _to_text(self) -> str:
        output = StringIO()
        data = self.to_dict()
        meta = data["metadata"]

        output.write(f"\n{_SECTION_SEP}\n")
        output.write("  CO2 EMISSIONS BY GB REGION\n")
        output.write(f"{_SECTION_SEP}\n\n")
        output.write(
            f"  Workload:  {self.workload.cores} cores, "
            f"{self.workload.memory_gb} GB memory\n"
        )
        output.write(f"  Power:     {meta['power_watts']:.0f} W\n")
        output.write(f"  Energy:    {meta['annual_kwh']:.2f} kWh/year\n\n")

        ranked = rank(self.results)
        if not ranked:
            output.write("  No regional intensity data available.\n")
            output.write(f"{_SECTION_SEP}\n")
            return output.getvalue()

        low, high = value_range(ranked) or (0.0, 0.0)
        output.write(f"  {'#':>2}  {'Region':<38} {'kg CO2/yr':>10}  {'Color':<7}\n")
        output.write(f"  {_RULE}\n")
        for i, result in enumerate(ranked, start=1):
            color = color_for(result.annual_co2_kg, low, high).hex()
            output.write(
                f"  {i:>2}  {result.region_name:<38} "
                f"{result.display_co2_kg:>10.2f}  {color:<7}\n"
            )

        low_label, mid_label, high_label = legend_for(ranked).labels()
        summary = data["summary"]
        output.write(f"  {_RULE}\n")
        output.write(
            f"  Scale:     {low_label} / {mid_label} / {high_label} kg "
            "(min / mid / max)\n"
        )
        output.write(f"  Best:      {summary['best_region']}\n")
        output.write(f"{_SECTION_SEP}\n")
        return output.getvalue()


class MixReport(_Report):
    """Generation mix for one region."""

    def __init__(self, region_name: str, entries: list[GenerationMixEntry]) -> None:
        self.region_name = region_name
        self.entries = list(entries)

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a dictionary for serialization."""
        return {
            "region": self.region_name,
            "generation_mix": [e.to_dict() for e in self.entries],
            "total_percentage": round(sum(e.percentage for e in self.entries), 1),
        }

    def _to_text(self) -> str:
        output = StringIO()
        output.write(f"\n{_SECTION_SEP}\n")
        output.write(f"  GENERATION MIX - {self.region_name}\n")
        output.write(f"{_SECTION_SEP}\n\n")
        output.write(f"  {'Fuel Type':<14} {'Percentage (%)':>15}\n")
        output.write(f"  {'-' * 30}\n")
        for entry in self.entries:
            output.write(f"  {entry.fuel_type:<14} {entry.percentage:>14.1f}%\n")
        output.write(f"{_SECTION_SEP}\n")
        return output.getvalue()
