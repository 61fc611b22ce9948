"""Pure geometry helpers for wall segments.

Endpoints are always derived from centre, length and rotation; nothing in the
planner stores them.
"""

from __future__ import annotations

import math

from ..value_objects import Endpoint, WorldPoint

__all__ = [
    "center_from_anchor",
    "clamp",
    "degrees_to_rotation",
    "direction",
    "distance",
    "endpoint",
    "normalize_angle",
    "normalize_degrees",
    "rotation_to_degrees",
    "screen_normal",
    "wall_endpoints",
]


def direction(theta: float) -> tuple[float, float]:
    """Unit vector of a wall's local forward axis, ``(cos θ, sin θ)``."""
    return (math.cos(theta), math.sin(theta))


def screen_normal(theta: float) -> tuple[float, float]:
    """Screen-space normal of a wall, ``(sin θ, -cos θ)``."""
    return (math.sin(theta), -math.cos(theta))


def _half_length(width: float) -> float:
    return width / 2 if width > 0 else 0.0


def wall_endpoints(
    x: float, z: float, width: float, theta: float
) -> tuple[WorldPoint, WorldPoint]:
    """Compute both endpoints of a wall centred at ``(x, z)``.

    Args:
        x: Centre X in world cm.
        z: Centre Z in world cm.
        width: Wall length in cm. Non-positive widths collapse both
            endpoints onto the centre.
        theta: Rotation in radians from +X toward +Z.

    Returns:
        Tuple of (a, b) where ``a`` lies behind the centre along the wall's
        forward axis and ``b`` ahead of it.
    """
    tx, tz = direction(theta)
    half = _half_length(width)
    a = WorldPoint(x - tx * half, z - tz * half)
    b = WorldPoint(x + tx * half, z + tz * half)
    return (a, b)


def endpoint(
    x: float, z: float, width: float, theta: float, which: Endpoint
) -> WorldPoint:
    """Compute a single endpoint of a wall."""
    a, b = wall_endpoints(x, z, width, theta)
    return a if which is Endpoint.A else b


def center_from_anchor(
    anchor: WorldPoint, width: float, theta: float, which: Endpoint
) -> WorldPoint:
    """Centre that places endpoint ``which`` exactly on ``anchor``.

    Inverse of :func:`endpoint` for a fixed length and rotation.
    """
    tx, tz = direction(theta)
    half = _half_length(width)
    if which is Endpoint.A:
        return WorldPoint(anchor.x + tx * half, anchor.z + tz * half)
    return WorldPoint(anchor.x - tx * half, anchor.z - tz * half)


def distance(ax: float, az: float, bx: float, bz: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(ax - bx, az - bz)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def normalize_angle(theta: float) -> float:
    """Wrap an angle in radians into ``(-π, π]``."""
    wrapped = math.fmod(theta + math.pi, 2 * math.pi)
    if wrapped <= 0:
        wrapped += 2 * math.pi
    return wrapped - math.pi


def normalize_degrees(degrees: float) -> float:
    """Wrap an angle in degrees into ``[0, 360)``."""
    return ((degrees % 360) + 360) % 360


def rotation_to_degrees(theta: float) -> float:
    """Display angle in degrees ``[0, 360)`` for a rotation in radians."""
    return normalize_degrees(math.degrees(theta))


def degrees_to_rotation(degrees: float) -> float:
    """Rotation in radians for a degree value typed into the planner.

    The value is wrapped into ``[0, 360)`` first, so the result always reads
    back unchanged through :func:`rotation_to_degrees`.
    """
    return math.radians(normalize_degrees(degrees))
