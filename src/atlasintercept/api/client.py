"""Mission estimation service client.

Thin wrapper over the REST service that computes authoritative mission
metrics. Transport errors are raised as ``requests`` exceptions; callers
that want a guaranteed result go through
:class:`atlasintercept.core.estimator.OutcomeEstimator` instead.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

import requests

from atlasintercept.data.atlas import AtlasInfo
from atlasintercept.utils.constants import API_URL_ENV_VAR, DEFAULT_API_URL, DEFAULT_TIMEOUT_S

logger = logging.getLogger(__name__)


def resolve_base_url() -> str:
    """Service URL from ``ATLAS_API_URL``, or the local development server."""
    return os.environ.get(API_URL_ENV_VAR) or DEFAULT_API_URL


@dataclass
class MissionAPIClient:
    """Client for the mission estimation REST API.

    Attributes:
        base_url: Service root URL. Defaults to ``$ATLAS_API_URL`` or
            ``http://localhost:8000``.
        timeout: Per-request timeout in seconds.

    Example::

        client = MissionAPIClient()
        results = client.simulate(params.to_request())
    """

    base_url: str = field(default_factory=resolve_base_url)
    timeout: float = DEFAULT_TIMEOUT_S
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        self._session.headers.update({"Content-Type": "application/json"})

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _json(self, response: requests.Response) -> dict:
        """Decode a JSON object body.

        Raises:
            requests.HTTPError: If the status is not 2xx.
            ValueError: If the body is not a JSON object.
        """
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as e:
            raise ValueError(f"Invalid JSON from {response.url}: {e}") from e
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object from {response.url}")
        return payload

    def simulate(self, request: dict) -> dict:
        """Request mission metrics for serialized mission parameters.

        Args:
            request: Body as produced by ``MissionParameters.to_request()``.

        Returns:
            Response body with ``travel_time``, ``delta_v``,
            ``success_probability``, ``mission_log``, ``fuel_cost`` and
            ``mission_status``.

        Raises:
            requests.RequestException: On any transport or HTTP failure.
            ValueError: If the response body is malformed.
        """
        logger.debug("POST /simulate %s", request)
        response = self._session.post(self._url("/simulate"), json=request, timeout=self.timeout)
        return self._json(response)

    def atlas_info(self) -> AtlasInfo:
        """Fetch the description of the target object.

        Raises:
            requests.RequestException: On any transport or HTTP failure.
            ValueError: If the response body is malformed.
        """
        response = self._session.get(self._url("/atlas-info"), timeout=self.timeout)
        return AtlasInfo.from_dict(self._json(response))

    def health_check(self) -> dict:
        """Return the service health payload.

        Raises:
            requests.RequestException: If the service is unreachable or unhealthy.
        """
        response = self._session.get(self._url("/health"), timeout=self.timeout)
        return self._json(response)
