"""Fixed parameters of the mission model.

Scene coordinates are arbitrary visualization units, not physical units.
"""

from __future__ import annotations

from datetime import datetime

# --- Time ---
REFERENCE_EPOCH: datetime = datetime(2025, 10, 30)
"""Perihelion date of 3I/ATLAS (UTC, naive). All phase angles are measured from here."""

DAYS_PER_YEAR: float = 365.25
"""Length of one sidereal year in days, as used by the position model."""

SECONDS_PER_DAY: float = 86400.0
"""Seconds in one day, for converting time offsets to days."""

# --- Origin body (Earth) ---
ORIGIN_ANCHOR: tuple[float, float, float] = (-3.0, 0.0, 0.0)
"""Scene point the origin body wobbles around."""

ORIGIN_WOBBLE_RADIUS: float = 0.3
"""Radius of the circular wobble around the origin anchor."""

# --- Target body (3I/ATLAS) ---
PERIHELION_DISTANCE_AU: float = 1.4
"""Closest solar distance of the target in AU."""

RECESSION_RATE_AU_PER_YEAR: float = 2.0
"""Linear growth of solar distance per year away from perihelion."""

SCENE_UNITS_PER_AU: float = 2.0
"""Scale factor from AU to scene units."""

TARGET_BASE_HEIGHT: float = 3.0
"""Secondary-axis height of the target at perihelion."""

TARGET_HEIGHT_RATE: float = 0.5
"""Secondary-axis drift of the target per signed year from perihelion."""

# --- Trajectory shapes ---
DEFAULT_SEGMENTS: int = 50
"""Number of curve segments drawn by default."""

CHEMICAL_ARC_AMPLITUDE: float = 0.5
"""Height of the sinusoidal bump on a chemical burn path."""

ION_CONTROL_LIFT: float = 1.5
"""Lift of the quadratic control point above the higher endpoint."""

SAIL_CONTROL_FRACTIONS: tuple[float, float] = (0.3, 0.7)
"""Horizontal placement of the two cubic control points along the span."""

SAIL_CONTROL_LIFTS: tuple[float, float] = (3.0, 2.0)
"""Lift of the two cubic control points above the origin."""

TRAJECTORY_COLORS: dict[str, str] = {
    "chemical": "#ff4444",
    "ion": "#44ff44",
    "solar-sail": "#4444ff",
}
"""Display colour per propulsion wire value."""

DEFAULT_TRAJECTORY_COLOR: str = "#00ff88"
"""Display colour for an unrecognized propulsion type."""

# --- Fallback estimate ---
BASE_DELTA_V_KM_S: float = 15.0
"""Reference delta-v before propulsion and payload adjustments, km/s."""

BASE_TRANSIT_YEARS: float = 5.0
"""Reference transit time before adjustments, years."""

PROPULSION_FACTORS: dict[str, tuple[float, float, float]] = {
    "chemical": (1.2, 0.8, 0.6),
    "ion": (0.8, 1.2, 0.8),
    "solar-sail": (0.3, 2.0, 0.5),
}
"""(delta-v multiplier, time multiplier, success base) per propulsion."""

PAYLOAD_FACTORS: dict[str, tuple[float, float, float]] = {
    "small": (0.9, 0.9, 0.1),
    "medium": (1.0, 1.0, 0.0),
    "large": (1.3, 1.3, -0.1),
}
"""(delta-v scale, time scale, success offset) per payload class."""

SUCCESS_FLOOR: float = 0.1
"""Lowest success probability the fallback estimate reports."""

SUCCESS_CEILING: float = 0.95
"""Highest success probability the fallback estimate reports."""

SUCCESS_THRESHOLD: float = 0.7
"""Fallback success probability above which a mission is reported as a success."""

PROPELLANT_PER_DELTA_V: float = 0.8
"""Propellant cost units per km/s of delta-v."""

# --- Remote service ---
DEFAULT_API_URL: str = "http://localhost:8000"
"""Estimation service root used when no URL is configured."""

API_URL_ENV_VAR: str = "ATLAS_API_URL"
"""Environment variable that overrides the service root."""

DEFAULT_TIMEOUT_S: float = 10.0
"""Timeout applied to every request to the estimation service, seconds."""
