"""Flight-path curves between origin and target, shaped by propulsion type."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from atlasintercept.core.mission import PropulsionVariant
from atlasintercept.utils.constants import (
    CHEMICAL_ARC_AMPLITUDE,
    DEFAULT_SEGMENTS,
    DEFAULT_TRAJECTORY_COLOR,
    ION_CONTROL_LIFT,
    SAIL_CONTROL_FRACTIONS,
    SAIL_CONTROL_LIFTS,
    TRAJECTORY_COLORS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrajectoryPoint:
    """A point on the flight path.

    Attributes:
        position: [x, y, z] in scene units (read-only, shape (3,)).
        t: Progress fraction along the path, 0 at origin and 1 at target.
    """

    position: NDArray[np.float64]
    t: float


def _as_point(value: ArrayLike, name: str) -> NDArray[np.float64]:
    point = np.asarray(value, dtype=np.float64)
    if point.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {point.shape}")
    return point


def _resolve_variant(variant: PropulsionVariant | str) -> PropulsionVariant | None:
    if isinstance(variant, PropulsionVariant):
        return variant
    try:
        return PropulsionVariant.parse(variant)
    except ValueError:
        logger.debug("Unrecognized propulsion %r, using straight-line path", variant)
        return None


def _linear(a: float, b: float, t: NDArray) -> NDArray:
    return a + (b - a) * t


def _quadratic_bezier(p0: float, p1: float, p2: float, t: NDArray) -> NDArray:
    u = 1 - t
    return u**2 * p0 + 2 * u * t * p1 + t**2 * p2


def _cubic_bezier(p0: float, p1: float, p2: float, p3: float, t: NDArray) -> NDArray:
    u = 1 - t
    return u**3 * p0 + 3 * u**2 * t * p1 + 3 * u * t**2 * p2 + t**3 * p3


def curve_array(
    origin: ArrayLike,
    target: ArrayLike,
    variant: PropulsionVariant | str,
    segments: int = DEFAULT_SEGMENTS,
) -> NDArray[np.float64]:
    """Sample the flight path as an array.

    Args:
        origin: Start position [x, y, z].
        target: End position [x, y, z].
        variant: Propulsion type; unrecognized values give a straight line.
        segments: Number of segments (>= 1).

    Returns:
        Read-only array of shape (segments + 1, 3).

    Raises:
        ValueError: If ``segments`` < 1 or a position is not 3-dimensional.
    """
    if (
        isinstance(segments, bool)
        or not math.isfinite(segments)
        or int(segments) != segments
        or segments < 1
    ):
        raise ValueError(f"segments must be a positive integer, got {segments!r}")
    o = _as_point(origin, "origin")
    g = _as_point(target, "target")
    ox, oy, oz = o
    gx, gy, gz = g
    t = np.linspace(0.0, 1.0, int(segments) + 1)

    kind = _resolve_variant(variant)
    if np.array_equal(o, g):
        x = np.full_like(t, ox)
        y = np.full_like(t, oy)
    elif kind is PropulsionVariant.CHEMICAL:
        # Direct burn with a shallow arc
        x = _linear(ox, gx, t)
        y = _linear(oy, gy, t) + np.sin(t * math.pi) * CHEMICAL_ARC_AMPLITUDE
    elif kind is PropulsionVariant.ION:
        cx = (ox + gx) / 2
        cy = max(oy, gy) + ION_CONTROL_LIFT
        x = _quadratic_bezier(ox, cx, gx, t)
        y = _quadratic_bezier(oy, cy, gy, t)
    elif kind is PropulsionVariant.SOLAR_SAIL:
        (f1, f2), (lift1, lift2) = SAIL_CONTROL_FRACTIONS, SAIL_CONTROL_LIFTS
        x = _cubic_bezier(ox, ox + (gx - ox) * f1, ox + (gx - ox) * f2, gx, t)
        y = _cubic_bezier(oy, oy + lift1, oy + lift2, gy, t)
    else:
        x = _linear(ox, gx, t)
        y = _linear(oy, gy, t)
    z = _linear(oz, gz, t)

    points = np.column_stack([x, y, z])
    # Endpoints are exactly origin and target
    points[0] = o
    points[-1] = g
    points.flags.writeable = False
    return points


def curve(
    origin: ArrayLike,
    target: ArrayLike,
    variant: PropulsionVariant | str,
    segments: int = DEFAULT_SEGMENTS,
) -> tuple[TrajectoryPoint, ...]:
    """Generate the flight path from origin to target.

    Chemical paths are straight with a sinusoidal bump, ion paths a
    quadratic Bézier arc, and solar-sail paths a wide cubic Bézier sweep.
    The depth axis is always interpolated linearly. When origin and
    target coincide every point is that position.

    Args:
        origin: Start position [x, y, z].
        target: End position [x, y, z].
        variant: Propulsion type; unrecognized values give a straight line.
        segments: Number of segments (>= 1).

    Returns:
        Tuple of ``segments + 1`` TrajectoryPoints, first at the origin
        (t=0) and last at the target (t=1).
    """
    points = curve_array(origin, target, variant, segments)
    n = len(points) - 1
    return tuple(TrajectoryPoint(position=points[i], t=i / n) for i in range(n + 1))


def point_at_progress(points: Sequence[TrajectoryPoint], progress: float) -> TrajectoryPoint:
    """Point the animation marker sits on at a progress fraction in [0, 1]."""
    if not points:
        raise ValueError("points must not be empty")
    progress = min(max(progress, 0.0), 1.0)
    index = min(int(math.floor(len(points) * progress)), len(points) - 1)
    return points[index]


def trajectory_color(variant: PropulsionVariant | str) -> str:
    """Display colour of the path for a propulsion type."""
    kind = _resolve_variant(variant)
    if kind is None:
        return DEFAULT_TRAJECTORY_COLOR
    return TRAJECTORY_COLORS.get(kind.value, DEFAULT_TRAJECTORY_COLOR)
