"""Selector session: the workflow that owns results and selection state.

A session runs calculations and region selections and remembers their
outcome for display. Failures are recorded on the session rather than
raised, so a caller can show a message and let the user try again. A
failed generation-mix lookup never clears emission results.
"""

from __future__ import annotations

import asyncio
from enum import StrEnum
from typing import Any

from greendc.carbon.calculator import EmissionEstimator, as_workload, rank
from greendc.carbon.errors import (
    IntensityServiceError,
    InvalidWorkloadError,
    RegionNotFoundError,
)
from greendc.carbon.generation_mix import GenerationMixFetcher
from greendc.carbon.grid_intensity import IntensityFetcher
from greendc.models.carbon_models import (
    EmissionResult,
    GenerationMixEntry,
    LayoutResult,
    WorkloadSpec,
)
from greendc.utils.logger import Logger
from greendc.viz.layout import layout

log = Logger.library("controller")


class ErrorKind(StrEnum):
    """Category of the last failure recorded on a session."""

    INVALID_WORKLOAD = "invalid_workload"
    FETCH_FAILED = "fetch_failed"
    NOT_FOUND = "not_found"


class SelectorSession:
    """Calculation and selection state for one user.

    Parameters
    ----------
    intensity_fetcher : IntensityFetcher | None
        Source of regional intensities.
    mix_fetcher : GenerationMixFetcher | None
        Source of per-region generation mix.
    estimator : EmissionEstimator | None
        Power and emissions model.
    """

    def __init__(
        self,
        intensity_fetcher: IntensityFetcher | None = None,
        mix_fetcher: GenerationMixFetcher | None = None,
        estimator: EmissionEstimator | None = None,
    ) -> None:
        self.intensity_fetcher = intensity_fetcher or IntensityFetcher()
        self.mix_fetcher = mix_fetcher or GenerationMixFetcher()
        self.estimator = estimator or EmissionEstimator()

        self.workload: WorkloadSpec | None = None
        self.results: list[EmissionResult] | None = None
        self.selected_region: str | None = None
        self.generation_mix: list[GenerationMixEntry] | None = None
        self.pending_selection: str | None = None
        self.error: str | None = None
        self.error_kind: ErrorKind | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    # -------------------------------------------------------------------------
    # Calculation
    # -------------------------------------------------------------------------

    async def calculate(
        self, workload: WorkloadSpec | dict[str, Any]
    ) -> list[EmissionResult] | None:
        """Fetch live intensities and estimate emissions for ``workload``.

        Returns the new results, or the previous ones if the calculation
        failed (see ``error``).
        """
        self._clear_error()
        try:
            spec = as_workload(workload)
            intensities = await self.intensity_fetcher.fetch_all()
        except InvalidWorkloadError as e:
            self._record_error(ErrorKind.INVALID_WORKLOAD, str(e))
            return self.results
        except IntensityServiceError as e:
            self._record_error(
                ErrorKind.FETCH_FAILED,
                f"Failed to fetch carbon intensity data: {e}",
            )
            return self.results

        self.workload = spec
        self.results = self.estimator.estimate(spec, intensities)
        log.info(
            f"Estimated {len(self.results)} region(s) for "
            f"{spec.cores} cores / {spec.memory_gb} GB"
        )
        return self.results

    def ranked(self) -> list[EmissionResult]:
        """Current results from lowest to highest emissions."""
        return rank(self.results or [])

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    async def select_region(
        self, region_name: str
    ) -> list[GenerationMixEntry] | None:
        """Fetch and store the generation mix for ``region_name``.

        Concurrent calls are not serialized: whichever response arrives
        last is the one left on the session.
        """
        self._clear_error()
        try:
            mix = await self.mix_fetcher.fetch_mix(region_name)
        except RegionNotFoundError as e:
            self._record_error(ErrorKind.NOT_FOUND, str(e))
            return None
        except IntensityServiceError as e:
            self._record_error(
                ErrorKind.FETCH_FAILED,
                f"Failed to fetch generation mix data: {e}",
            )
            return None

        # An overlapping call may have failed while this one was in flight
        self._clear_error()
        self.selected_region = region_name
        self.generation_mix = mix
        return mix

    def request_selection(self, region_name: str) -> None:
        """Selection hook handed to the layout.

        Schedules ``select_region`` on the running loop. Without a running
        loop the name is kept in ``pending_selection`` for the caller.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.pending_selection = region_name
            return

        task = loop.create_task(self.select_region(region_name))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_for_selections(self) -> None:
        """Wait for selections scheduled by ``request_selection``."""
        if self._tasks:
            await asyncio.gather(*self._tasks)

    def clear_selection(self) -> None:
        """Forget the selected region and its generation mix."""
        self.selected_region = None
        self.generation_mix = None
        self.pending_selection = None

    def layout(self) -> LayoutResult:
        """Heatmap layout for the current results, wired to this session."""
        return layout(self.results or [], on_select=self.request_selection)

    # -------------------------------------------------------------------------
    # Errors
    # -------------------------------------------------------------------------

    def _record_error(self, kind: ErrorKind, message: str) -> None:
        self.error_kind = kind
        self.error = message
        log.warning(message)

    def _clear_error(self) -> None:
        self.error = None
        self.error_kind = None
