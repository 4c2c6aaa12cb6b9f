"""Simulation run lifecycle: idle, running, settled."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from atlasintercept.core.estimator import OutcomeEstimator
from atlasintercept.core.mission import EstimateResult, MissionOutcome, MissionParameters

logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SETTLED = "settled"


class SimulationBusyError(RuntimeError):
    """Raised when ``simulate`` is called while a run is in flight."""


@dataclass(frozen=True)
class SimulationRun:
    """A settled simulation.

    Attributes:
        parameters: Inputs the run was started with.
        result: Remote or fallback outcome.
    """

    parameters: MissionParameters
    result: EstimateResult

    @property
    def outcome(self) -> MissionOutcome:
        return self.result.outcome

    @property
    def degraded(self) -> bool:
        return self.result.degraded


class SimulationOrchestrator:
    """Runs at most one simulation at a time and holds the latest result.

    All properties can be read at any time without awaiting.

    Args:
        estimator: Outcome estimator; defaults to a local-only estimator.
    """

    def __init__(self, estimator: OutcomeEstimator | None = None) -> None:
        self.estimator = estimator or OutcomeEstimator()
        self._state = RunState.IDLE
        self._run: SimulationRun | None = None
        self._in_flight = False
        self._generation = 0

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def busy(self) -> bool:
        """True while an estimate is in flight, even after a reset."""
        return self._in_flight

    @property
    def run(self) -> SimulationRun | None:
        """The settled run, or None while idle or running."""
        return self._run

    @property
    def outcome(self) -> MissionOutcome:
        if self._run is None:
            return MissionOutcome.pending()
        return self._run.outcome

    @property
    def degraded(self) -> bool:
        return self._run is not None and self._run.degraded

    @property
    def advisory(self) -> str | None:
        """User-facing notice when the outcome was computed offline."""
        if self._run is None:
            return None
        return self._run.result.advisory

    async def simulate(self, parameters: MissionParameters) -> SimulationRun:
        """Estimate the outcome of a mission and settle on it.

        Args:
            parameters: Validated mission inputs.

        Returns:
            The run. If ``reset()`` was called while it was in flight, the
            run is returned but not stored and the orchestrator stays idle.

        Raises:
            SimulationBusyError: If another run is still in flight.
        """
        if self._in_flight:
            logger.warning("Simulation already running; rejecting new request")
            raise SimulationBusyError("A simulation is already running")

        self._in_flight = True
        self._state = RunState.RUNNING
        self._run = None
        generation = self._generation
        logger.debug("Simulation started: %s", parameters)
        try:
            result = await self.estimator.estimate(parameters)
        except BaseException:
            if generation == self._generation:
                self._state = RunState.IDLE
            raise
        finally:
            self._in_flight = False

        run = SimulationRun(parameters=parameters, result=result)
        if generation != self._generation:
            logger.debug("Discarding outcome of a run reset while in flight")
            return run

        self._run = run
        self._state = RunState.SETTLED
        logger.info(
            "Simulation settled: status=%s degraded=%s",
            result.outcome.status.value,
            result.degraded,
        )
        return run

    def reset(self) -> None:
        """Discard the current outcome and return to idle.

        A run still in flight keeps the single-flight slot until it
        resolves; its outcome is then dropped.
        """
        self._generation += 1
        self._state = RunState.IDLE
        self._run = None
