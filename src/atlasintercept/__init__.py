"""
Atlas Intercept — feasibility estimates for a mission to 3I/ATLAS.

Derives stylized positions of Earth and the interstellar object for a
launch date, draws a propulsion-specific flight path between them, and
estimates transit time, delta-v, success likelihood and propellant cost,
from a remote service when reachable and locally otherwise.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from atlasintercept.core.mission import (
    MissionParameters,
    MissionOutcome,
    MissionStatus,
    PropulsionVariant,
    PayloadClass,
    RemoteOutcome,
    FallbackOutcome,
    InvalidMissionParameters,
)
from atlasintercept.core.positions import positions
from atlasintercept.core.trajectory import curve, TrajectoryPoint, point_at_progress, trajectory_color
from atlasintercept.core.estimator import OutcomeEstimator, fallback_outcome
from atlasintercept.core.orchestrator import SimulationOrchestrator, SimulationRun, RunState, SimulationBusyError
from atlasintercept.api.client import MissionAPIClient
from atlasintercept.data.atlas import AtlasInfo

__all__ = [
    "__version__",
    "MissionParameters",
    "MissionOutcome",
    "MissionStatus",
    "PropulsionVariant",
    "PayloadClass",
    "RemoteOutcome",
    "FallbackOutcome",
    "InvalidMissionParameters",
    "positions",
    "curve",
    "TrajectoryPoint",
    "point_at_progress",
    "trajectory_color",
    "OutcomeEstimator",
    "fallback_outcome",
    "SimulationOrchestrator",
    "SimulationRun",
    "RunState",
    "SimulationBusyError",
    "MissionAPIClient",
    "AtlasInfo",
]
