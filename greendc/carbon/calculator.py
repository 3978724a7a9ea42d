"""Annual energy and CO2 estimation for a hypothetical workload."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from greendc.carbon.errors import InvalidWorkloadError
from greendc.models.carbon_models import EmissionResult, WorkloadSpec
from greendc.models.constants import HOURS_PER_YEAR, WATTS_PER_CORE, WATTS_PER_GB


def as_workload(workload: WorkloadSpec | Mapping[str, Any]) -> WorkloadSpec:
    """Validate a workload given as a model or a plain mapping.

    Raises
    ------
    InvalidWorkloadError
        If cores or memory are missing, not integers, or out of range.
    """
    if isinstance(workload, WorkloadSpec):
        return workload
    try:
        return WorkloadSpec.model_validate(workload)
    except ValidationError as e:
        raise InvalidWorkloadError(f"Invalid workload {workload!r}: {e}") from e


class EmissionEstimator:
    """Convert a workload into annual energy and per-region CO2.

    The power model is a rule of thumb for a typical server: a fixed draw
    per core plus a fixed draw per GB of memory, running all year.

    Parameters
    ----------
    watts_per_core : float
        Power draw per CPU core in watts.
    watts_per_gb : float
        Power draw per GB of memory in watts.
    hours_per_year : float
        Operating hours per year.
    """

    def __init__(
        self,
        watts_per_core: float = WATTS_PER_CORE,
        watts_per_gb: float = WATTS_PER_GB,
        hours_per_year: float = HOURS_PER_YEAR,
    ) -> None:
        self.watts_per_core = watts_per_core
        self.watts_per_gb = watts_per_gb
        self.hours_per_year = hours_per_year

    def power_watts(self, workload: WorkloadSpec | Mapping[str, Any]) -> float:
        """Steady-state power draw in watts."""
        spec = as_workload(workload)
        return spec.cores * self.watts_per_core + spec.memory_gb * self.watts_per_gb

    def annual_kwh(self, workload: WorkloadSpec | Mapping[str, Any]) -> float:
        """Energy consumed over a year of continuous operation, in kWh."""
        power_kw = self.power_watts(workload) / 1000
        return power_kw * self.hours_per_year

    def estimate(
        self,
        workload: WorkloadSpec | Mapping[str, Any],
        intensities: Mapping[str, float],
    ) -> list[EmissionResult]:
        """Estimate annual CO2 for each region in ``intensities``.

        Parameters
        ----------
        workload : WorkloadSpec | Mapping[str, Any]
            Cores and memory of the workload.
        intensities : Mapping[str, float]
            Region display name to kgCO2/kWh.

        Returns
        -------
        list[EmissionResult]
            One unrounded result per region, in the mapping's order.

        Raises
        ------
        InvalidWorkloadError
            If the workload is out of range.
        ValueError
            If an intensity is negative.
        """
        annual_kwh = self.annual_kwh(workload)

        results = []
        for region_name, kg_per_kwh in intensities.items():
            if kg_per_kwh < 0:
                raise ValueError(
                    f"Negative intensity for {region_name}: {kg_per_kwh}"
                )
            results.append(
                EmissionResult(
                    region_name=region_name,
                    annual_co2_kg=annual_kwh * kg_per_kwh,
                    intensity_kg_kwh=kg_per_kwh,
                    annual_kwh=annual_kwh,
                )
            )
        return results


def rank(results: Iterable[EmissionResult]) -> list[EmissionResult]:
    """Sort results from lowest to highest emissions (ties by name)."""
    return sorted(results, key=lambda r: (r.annual_co2_kg, r.region_name))


def best(results: Iterable[EmissionResult]) -> EmissionResult | None:
    """Return the lowest-emission result, or None if there are none."""
    ranked = rank(results)
    return ranked[0] if ranked else None


def estimate(
    workload: WorkloadSpec | Mapping[str, Any], intensities: Mapping[str, float]
) -> list[EmissionResult]:
    """Estimate with the default power model."""
    return EmissionEstimator().estimate(workload, intensities)
