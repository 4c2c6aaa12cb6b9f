"""Mission outcome estimation: remote delegation with a local fallback.

The estimator asks the remote service first. Any failure on that path
(transport, HTTP status, malformed body) is logged and replaced by a
deterministic local estimate, so :meth:`OutcomeEstimator.estimate`
always returns a usable outcome.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from atlasintercept.core.mission import (
    EstimateResult,
    FallbackOutcome,
    MissionOutcome,
    MissionParameters,
    MissionStatus,
    RemoteOutcome,
)
from atlasintercept.utils.constants import (
    BASE_DELTA_V_KM_S,
    BASE_TRANSIT_YEARS,
    PAYLOAD_FACTORS,
    PROPELLANT_PER_DELTA_V,
    PROPULSION_FACTORS,
    SUCCESS_CEILING,
    SUCCESS_FLOOR,
    SUCCESS_THRESHOLD,
)

logger = logging.getLogger(__name__)

OFFLINE_NOTICE = "⚠️ Offline mode - API unavailable"
INVALID_RESPONSE_NOTICE = "⚠️ Offline mode - API response unusable"


class EstimationService(Protocol):
    """Anything that turns a request body into a response body, e.g. ``MissionAPIClient``."""

    def simulate(self, request: dict) -> dict: ...


def fallback_outcome(parameters: MissionParameters, notice: str = OFFLINE_NOTICE) -> MissionOutcome:
    """Estimate mission metrics locally.

    Delta-v and transit time scale a fixed base by propulsion and payload
    multipliers; success likelihood is a propulsion base shifted by payload
    and clamped to [0.1, 0.95].

    Args:
        parameters: Mission inputs.
        notice: First log line, stating why the estimate is local.

    Returns:
        Outcome with status ``success`` if likelihood > 0.7, else ``warning``.
    """
    dv_mult, time_mult, success = PROPULSION_FACTORS[parameters.propulsion.value]
    dv_scale, time_scale, success_offset = PAYLOAD_FACTORS[parameters.payload.value]
    dv_mult *= dv_scale
    time_mult *= time_scale
    success += success_offset

    delta_v = BASE_DELTA_V_KM_S * dv_mult
    transit_years = BASE_TRANSIT_YEARS * time_mult
    success = max(SUCCESS_FLOOR, min(SUCCESS_CEILING, success))

    log = (
        notice,
        f"Mission parameters: {parameters.propulsion.value} propulsion, "
        f"{parameters.payload.value} payload",
        f"Calculated ΔV requirement: {delta_v:.1f} km/s",
        f"Estimated travel time: {transit_years:.1f} years",
        f"Mission success probability: {success * 100:.0f}%",
    )
    return MissionOutcome(
        transit_years=transit_years,
        delta_v_km_s=delta_v,
        success_probability=success,
        propellant_cost=delta_v * PROPELLANT_PER_DELTA_V,
        log=log,
        status=MissionStatus.SUCCESS if success > SUCCESS_THRESHOLD else MissionStatus.WARNING,
    )


class OutcomeEstimator:
    """Produces mission outcomes, preferring the remote service.

    Args:
        service: Remote collaborator. ``None`` means always estimate locally.
    """

    def __init__(self, service: EstimationService | None = None) -> None:
        self.service = service

    async def _request(self, parameters: MissionParameters) -> dict:
        if self.service is None:
            raise ConnectionError("No estimation service configured")
        return await asyncio.to_thread(self.service.simulate, parameters.to_request())

    def _fallback(self, parameters: MissionParameters, error: Exception, invalid_response: bool) -> FallbackOutcome:
        reason = f"{type(error).__name__}: {error}"
        if invalid_response:
            logger.warning("Estimation service returned an unusable result, using offline estimate (%s)", reason)
            outcome = fallback_outcome(parameters, INVALID_RESPONSE_NOTICE)
        else:
            logger.warning("Estimation service unavailable, using offline estimate (%s)", reason)
            outcome = fallback_outcome(parameters)
        logger.info(
            "Offline estimate: dv=%.2f km/s, transit=%.2f yr, p=%.2f",
            outcome.delta_v_km_s,
            outcome.transit_years,
            outcome.success_probability,
        )
        return FallbackOutcome(outcome=outcome, reason=reason, invalid_response=invalid_response)

    async def estimate(self, parameters: MissionParameters) -> EstimateResult:
        """Compute the outcome for a mission.

        Never raises for delegation failures; the result's ``degraded`` flag
        tells whether the local fallback was used, and ``invalid_response``
        whether the service was reached but answered with unusable data.

        Args:
            parameters: Validated mission inputs.

        Returns:
            ``RemoteOutcome`` on success, otherwise ``FallbackOutcome``.
        """
        try:
            response = await self._request(parameters)
        except Exception as e:
            return self._fallback(parameters, e, invalid_response=False)

        try:
            outcome = MissionOutcome.from_response(response)
        except Exception as e:
            return self._fallback(parameters, e, invalid_response=True)

        logger.debug("Remote estimate received: status=%s", outcome.status.value)
        return RemoteOutcome(outcome=outcome)
