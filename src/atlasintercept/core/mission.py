"""Mission parameters, outcomes, and the remote/fallback result variants."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Union

logger = logging.getLogger(__name__)

OFFLINE_ADVISORY = "Failed to connect to simulation API. Using offline mode..."
INVALID_RESPONSE_ADVISORY = "Simulation API returned an unusable result. Using offline mode..."

_RESPONSE_FIELDS = (
    "travel_time",
    "delta_v",
    "success_probability",
    "mission_log",
    "fuel_cost",
    "mission_status",
)


class InvalidMissionParameters(ValueError):
    """Raised when user-supplied mission parameters cannot be interpreted."""


class PropulsionVariant(Enum):
    """Propulsion technology classes. Values are the service wire strings."""

    CHEMICAL = "chemical"
    ION = "ion"
    SOLAR_SAIL = "solar-sail"

    @classmethod
    def parse(cls, value: str | PropulsionVariant) -> PropulsionVariant:
        """Accept the wire value or the camel/snake spelling (``solarSail``, ``solar_sail``)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "-")
        if key == "solarsail":
            key = cls.SOLAR_SAIL.value
        try:
            return cls(key)
        except ValueError:
            raise InvalidMissionParameters(f"Unknown propulsion type: {value!r}") from None


class PayloadClass(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, value: str | PayloadClass) -> PayloadClass:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidMissionParameters(f"Unknown payload size: {value!r}") from None


class MissionStatus(Enum):
    PENDING = "pending"
    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


def parse_launch_epoch(value: str | datetime) -> datetime:
    """Normalize a launch timestamp to a naive UTC datetime.

    Naive inputs are taken as UTC; aware inputs are converted.

    Args:
        value: ISO-8601 string (``2025-10-30T10:00``) or datetime.

    Returns:
        Naive datetime in UTC.

    Raises:
        InvalidMissionParameters: If the string is not a parseable timestamp.
    """
    if isinstance(value, datetime):
        epoch = value
    else:
        text = str(value).strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            epoch = datetime.fromisoformat(text)
        except ValueError:
            logger.error("Unparseable launch date: %r", value)
            raise InvalidMissionParameters(f"Unparseable launch date: {value!r}") from None
    if epoch.tzinfo is not None:
        epoch = epoch.astimezone(timezone.utc).replace(tzinfo=None)
    return epoch


@dataclass(frozen=True)
class MissionParameters:
    """Inputs of one simulation run.

    Attributes:
        launch_epoch: Launch time as a naive UTC datetime.
        propulsion: Propulsion technology.
        payload: Payload size class.
    """

    launch_epoch: datetime
    propulsion: PropulsionVariant
    payload: PayloadClass

    @classmethod
    def from_inputs(
        cls,
        launch_date: str | datetime,
        propulsion: str | PropulsionVariant,
        payload: str | PayloadClass,
    ) -> MissionParameters:
        """Validate raw form values and build parameters.

        Raises:
            InvalidMissionParameters: If any value cannot be interpreted.
        """
        return cls(
            launch_epoch=parse_launch_epoch(launch_date),
            propulsion=PropulsionVariant.parse(propulsion),
            payload=PayloadClass.parse(payload),
        )

    def to_request(self) -> dict[str, str]:
        """Serialize to the estimation service request body."""
        return {
            "launch_date": self.launch_epoch.isoformat(timespec="minutes"),
            "propulsion_type": self.propulsion.value,
            "payload_size": self.payload.value,
        }


@dataclass(frozen=True)
class MissionOutcome:
    """Metrics of a simulated mission.

    Attributes:
        transit_years: Travel time to intercept in years.
        delta_v_km_s: Required velocity change in km/s.
        success_probability: Likelihood of success in [0, 1].
        propellant_cost: Propellant cost in arbitrary units.
        log: Human-readable mission narrative, in order.
        status: Overall verdict.
    """

    transit_years: float
    delta_v_km_s: float
    success_probability: float
    propellant_cost: float
    log: tuple[str, ...] = field(default_factory=tuple)
    status: MissionStatus = MissionStatus.PENDING

    def __post_init__(self) -> None:
        for name in ("transit_years", "delta_v_km_s", "propellant_cost"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and non-negative, got {value!r}")
        if not 0.0 <= self.success_probability <= 1.0:
            raise ValueError(
                f"success_probability must lie in [0, 1], got {self.success_probability!r}"
            )

    @classmethod
    def pending(cls) -> MissionOutcome:
        """Outcome shown before any run has settled."""
        return cls(0.0, 0.0, 0.0, 0.0, (), MissionStatus.PENDING)

    @classmethod
    def from_response(cls, data: dict) -> MissionOutcome:
        """Map an estimation service response onto an outcome.

        Fields are renamed only; values are taken as-is.

        Raises:
            ValueError: If a field is missing or a value violates an invariant.
        """
        missing = [name for name in _RESPONSE_FIELDS if name not in data]
        if missing:
            raise ValueError(f"Estimation response missing fields: {', '.join(missing)}")
        mission_log = data["mission_log"]
        if isinstance(mission_log, str) or not isinstance(mission_log, (list, tuple)):
            raise ValueError("mission_log must be a list of strings")
        return cls(
            transit_years=float(data["travel_time"]),
            delta_v_km_s=float(data["delta_v"]),
            success_probability=float(data["success_probability"]),
            propellant_cost=float(data["fuel_cost"]),
            log=tuple(str(line) for line in mission_log),
            status=MissionStatus(data["mission_status"]),
        )

    def to_response(self) -> dict:
        """Inverse of :meth:`from_response`."""
        return {
            "travel_time": self.transit_years,
            "delta_v": self.delta_v_km_s,
            "success_probability": self.success_probability,
            "mission_log": list(self.log),
            "fuel_cost": self.propellant_cost,
            "mission_status": self.status.value,
        }


@dataclass(frozen=True)
class RemoteOutcome:
    """Outcome computed by the estimation service."""

    outcome: MissionOutcome
    degraded: ClassVar[bool] = False
    advisory: ClassVar[str | None] = None


@dataclass(frozen=True)
class FallbackOutcome:
    """Outcome computed locally because delegation failed.

    Attributes:
        outcome: The locally estimated metrics.
        reason: Short description of why delegation failed.
        invalid_response: True if the service answered but its response
            could not be used, False if it could not be reached.
    """

    outcome: MissionOutcome
    reason: str = ""
    invalid_response: bool = False
    degraded: ClassVar[bool] = True

    @property
    def advisory(self) -> str:
        return INVALID_RESPONSE_ADVISORY if self.invalid_response else OFFLINE_ADVISORY


EstimateResult = Union[RemoteOutcome, FallbackOutcome]
