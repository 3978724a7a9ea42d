"""Tests for the emission estimator."""

import pytest

from greendc.carbon.calculator import (
    EmissionEstimator,
    as_workload,
    best,
    estimate,
    rank,
)
from greendc.carbon.errors import InvalidWorkloadError
from greendc.models.carbon_models import EmissionResult, WorkloadSpec


class TestPowerModel:
    """Tests for power and annual energy."""

    def test_power_watts(self):
        """4 cores * 10W + 16 GB * 2W = 72W."""
        calc = EmissionEstimator()
        assert calc.power_watts(WorkloadSpec(cores=4, memory_gb=16)) == 72

    def test_annual_kwh(self):
        """72W for 8760h = 630.72 kWh."""
        calc = EmissionEstimator()
        annual = calc.annual_kwh(WorkloadSpec(cores=4, memory_gb=16))
        assert annual == pytest.approx(630.72)

    def test_accepts_mapping(self):
        """Workloads can be given as plain mappings."""
        calc = EmissionEstimator()
        assert calc.power_watts({"cores": 1, "memory_gb": 1}) == 12

    def test_custom_coefficients(self):
        """Coefficients can be overridden."""
        calc = EmissionEstimator(watts_per_core=5, watts_per_gb=1, hours_per_year=1000)
        annual = calc.annual_kwh(WorkloadSpec(cores=2, memory_gb=10))
        assert annual == pytest.approx(20.0)


class TestEstimate:
    """Tests for per-region estimates."""

    def test_london_scenario(self):
        """4 cores / 16 GB at 0.150 kg/kWh = 94.608 kg, shown as 94.61."""
        results = estimate(WorkloadSpec(cores=4, memory_gb=16), {"London": 0.150})
        assert len(results) == 1
        assert results[0].region_name == "London"
        assert results[0].annual_co2_kg == pytest.approx(94.608)
        assert results[0].display_co2_kg == 94.61
        assert results[0].to_dict()["annual_co2_kg"] == 94.61

    def test_keeps_unrounded_value(self):
        """Only the display value is rounded."""
        results = estimate({"cores": 4, "memory_gb": 16}, {"London": 0.150})
        assert results[0].annual_co2_kg != results[0].display_co2_kg

    def test_empty_intensities(self):
        """No regions in, no results out."""
        assert estimate(WorkloadSpec(cores=4, memory_gb=16), {}) == []

    def test_one_result_per_region_in_input_order(self):
        """Results follow the intensity mapping."""
        intensities = {"B": 0.3, "A": 0.1, "C": 0.2}
        results = estimate(WorkloadSpec(cores=8, memory_gb=32), intensities)
        assert [r.region_name for r in results] == ["B", "A", "C"]

    def test_zero_intensity(self):
        """Zero intensity gives zero emissions."""
        results = estimate(WorkloadSpec(cores=8, memory_gb=32), {"A": 0.0})
        assert results[0].annual_co2_kg == 0.0

    def test_negative_intensity_rejected(self):
        with pytest.raises(ValueError, match="Negative intensity"):
            estimate(WorkloadSpec(cores=1, memory_gb=1), {"A": -0.1})

    @pytest.mark.parametrize(
        "workload",
        [
            {"cores": 0, "memory_gb": 16},
            {"cores": 129, "memory_gb": 16},
            {"cores": 4, "memory_gb": 0},
            {"cores": 4, "memory_gb": 1025},
            {"cores": 4.5, "memory_gb": 16},
            {"cores": True, "memory_gb": 16},
            {"cores": 4},
        ],
    )
    def test_invalid_workload(self, workload):
        """Out-of-range workloads are rejected, not estimated."""
        with pytest.raises(InvalidWorkloadError):
            estimate(workload, {"London": 0.15})

    def test_invalid_workload_is_value_error(self):
        with pytest.raises(ValueError):
            as_workload({"cores": -1, "memory_gb": 1})

    def test_monotonic_in_cores_and_memory(self):
        """More cores or memory never lowers emissions."""
        intensities = {"X": 0.2}
        calc = EmissionEstimator()
        for memory_gb in (1, 64, 1024):
            previous = -1.0
            for cores in range(1, 129, 7):
                value = calc.estimate(
                    {"cores": cores, "memory_gb": memory_gb}, intensities
                )[0].annual_co2_kg
                assert value >= previous
                previous = value
        for cores in (1, 64, 128):
            previous = -1.0
            for memory_gb in range(1, 1025, 61):
                value = calc.estimate(
                    {"cores": cores, "memory_gb": memory_gb}, intensities
                )[0].annual_co2_kg
                assert value >= previous
                previous = value


class TestRanking:
    """Tests for rank() and best()."""

    def test_rank_ascending(self):
        """A (0.10) < C (0.20) < B (0.30)."""
        results = estimate(
            WorkloadSpec(cores=4, memory_gb=16), {"A": 0.10, "B": 0.30, "C": 0.20}
        )
        assert [r.region_name for r in rank(results)] == ["A", "C", "B"]

    def test_rank_ties_by_name(self):
        results = [EmissionResult("Z", 1.0), EmissionResult("M", 1.0)]
        assert [r.region_name for r in rank(results)] == ["M", "Z"]

    def test_rank_does_not_mutate(self):
        results = [EmissionResult("B", 2.0), EmissionResult("A", 1.0)]
        rank(results)
        assert results[0].region_name == "B"

    def test_best(self):
        results = [EmissionResult("B", 2.0), EmissionResult("A", 1.0)]
        assert best(results).region_name == "A"
        assert best([]) is None
