"""Stylized positions of Earth and 3I/ATLAS for a launch epoch.

This is a visualization model, not an ephemeris: Earth wobbles on a small
circle around a fixed anchor and the interstellar object recedes linearly
from perihelion.
"""

from __future__ import annotations

import math
from datetime import datetime

import numpy as np
from numpy.typing import NDArray

from atlasintercept.core.mission import parse_launch_epoch
from atlasintercept.utils.constants import (
    DAYS_PER_YEAR,
    ORIGIN_ANCHOR,
    ORIGIN_WOBBLE_RADIUS,
    PERIHELION_DISTANCE_AU,
    RECESSION_RATE_AU_PER_YEAR,
    REFERENCE_EPOCH,
    SCENE_UNITS_PER_AU,
    SECONDS_PER_DAY,
    TARGET_BASE_HEIGHT,
    TARGET_HEIGHT_RATE,
)


def years_from_perihelion(launch_epoch: str | datetime) -> float:
    """Signed years between the launch epoch and the target's perihelion."""
    epoch = parse_launch_epoch(launch_epoch)
    days = (epoch - REFERENCE_EPOCH).total_seconds() / SECONDS_PER_DAY
    return days / DAYS_PER_YEAR


def target_distance_au(launch_epoch: str | datetime) -> float:
    """Solar distance of the target in AU at the launch epoch."""
    return PERIHELION_DISTANCE_AU + abs(years_from_perihelion(launch_epoch)) * RECESSION_RATE_AU_PER_YEAR


def positions(launch_epoch: str | datetime) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Scene positions of the origin and target bodies at the launch epoch.

    Args:
        launch_epoch: Launch time (datetime or ISO-8601 string).

    Returns:
        Tuple of (origin_position, target_position), each a read-only
        array of shape (3,).

    Raises:
        InvalidMissionParameters: If ``launch_epoch`` is not a parseable timestamp.
    """
    years = years_from_perihelion(launch_epoch)
    phase = years * 2 * math.pi

    ax, ay, az = ORIGIN_ANCHOR
    origin = np.array(
        [
            ax + ORIGIN_WOBBLE_RADIUS * math.cos(phase),
            ay + ORIGIN_WOBBLE_RADIUS * math.sin(phase),
            az,
        ],
        dtype=np.float64,
    )

    distance_au = PERIHELION_DISTANCE_AU + abs(years) * RECESSION_RATE_AU_PER_YEAR
    target = np.array(
        [
            distance_au * SCENE_UNITS_PER_AU,
            TARGET_BASE_HEIGHT + years * TARGET_HEIGHT_RATE,
            0.0,
        ],
        dtype=np.float64,
    )

    origin.flags.writeable = False
    target.flags.writeable = False
    return origin, target
