"""Reference information about the interstellar target."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AtlasInfo:
    """Description of the target object as published by the estimation service.

    Attributes:
        name: Object designation (e.g. ``3I/ATLAS``).
        discovery_date: Discovery date as reported.
        description: Free-text summary.
        characteristics: Named physical or orbital characteristics.
        scientific_value: Why intercepting it matters.
    """

    name: str
    discovery_date: str
    description: str
    characteristics: dict[str, str] = field(default_factory=dict)
    scientific_value: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> AtlasInfo:
        """Parse the ``/atlas-info`` payload.

        Raises:
            ValueError: If ``name`` is missing or ``characteristics`` is not a mapping.
        """
        if not data.get("name"):
            raise ValueError("Atlas info is missing 'name'")
        characteristics = data.get("characteristics") or {}
        if not isinstance(characteristics, dict):
            raise ValueError("Atlas info 'characteristics' must be an object")
        info = cls(
            name=str(data["name"]),
            discovery_date=str(data.get("discovery_date", "")),
            description=str(data.get("description", "")),
            characteristics={str(k): str(v) for k, v in characteristics.items()},
            scientific_value=str(data.get("scientific_value", "")),
        )
        logger.debug("Parsed atlas info for %s (%d characteristics)", info.name, len(info.characteristics))
        return info
