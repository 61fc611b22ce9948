"""View-space overlay geometry for walls.

Computes where the planner draws each wall's annotations: the length
dimension, the shelf-side marker, endpoint markers and the rotation handle.
Nothing here draws; a renderer consumes the returned value objects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

from ..constants import (
    DIMENSION_EXTENSION_LENGTH,
    DIMENSION_OFFSET,
    ROTATION_HANDLE_GAP,
    SHELF_MARKER_OFFSET,
    SNAP_MARKER_TOLERANCE,
)
from ..value_objects import (
    DimensionSide,
    Endpoint,
    ShelfSide,
    SnapCandidate,
    ViewPoint,
)
from .geometry import screen_normal

if TYPE_CHECKING:
    from ..entities import Wall
    from .view_transform import ViewTransform

__all__ = [
    "DimensionAnnotation",
    "EndpointMarker",
    "ShelfSideMarker",
    "dimension_annotation",
    "dimension_side",
    "endpoint_markers",
    "rotation_handle_position",
    "shelf_side_marker",
]

_FAR = 1e9


@dataclass(frozen=True)
class DimensionAnnotation:
    """Placement of a wall's length annotation.

    Attributes:
        side: Which side of the wall the annotation sits on.
        start: Dimension line start (offset from endpoint ``a``).
        end: Dimension line end (offset from endpoint ``b``).
        extension_length: Length of the extension lines in px.
        label: Text such as ``"400 cm"``.
    """

    side: DimensionSide
    start: ViewPoint
    end: ViewPoint
    extension_length: float
    label: str


@dataclass(frozen=True)
class ShelfSideMarker:
    """Clickable arrow showing which side of a wall carries shelves."""

    position: ViewPoint
    angle_degrees: float
    side: ShelfSide


@dataclass(frozen=True)
class EndpointMarker:
    endpoint: Endpoint
    position: ViewPoint
    is_snap_target: bool


def _distance_to_edge(
    origin: ViewPoint, sx: float, sy: float, width: float, height: float
) -> float:
    """Distance from ``origin`` along ``(sx, sy)`` to the container edge."""
    tx = ty = _FAR
    if sx > 0:
        tx = (width - origin.left) / sx
    elif sx < 0:
        tx = (0 - origin.left) / sx
    if sy > 0:
        ty = (height - origin.top) / sy
    elif sy < 0:
        ty = (0 - origin.top) / sy
    t = min(tx, ty)
    return t if t > 0 else 0.0


def dimension_side(
    wall: Wall,
    transform: ViewTransform,
    overrides: Mapping[str, DimensionSide | None] | None = None,
) -> DimensionSide:
    """Pick the side of a wall on which to draw its length.

    An explicit override wins. Otherwise a ray is cast from the wall's
    view-space centre along both directions of its normal, and the side
    with more room before the container edge is chosen (FRONT on ties).

    Args:
        wall: Wall to annotate.
        transform: Current view transform.
        overrides: Per-wall overrides supplied by the host; ``None`` values
            mean automatic.

    Returns:
        The resolved DimensionSide.
    """
    if overrides:
        override = overrides.get(wall.id)
        if override is not None:
            return DimensionSide(override)

    container = transform.container
    if container.width <= 0 or container.height <= 0:
        return DimensionSide.FRONT

    center = transform.world_to_view(wall.position.x, wall.position.z)
    nx, ny = screen_normal(wall.rotation_y)
    plus = _distance_to_edge(center, nx, ny, container.width, container.height)
    minus = _distance_to_edge(center, -nx, -ny, container.width, container.height)
    return DimensionSide.FRONT if plus >= minus else DimensionSide.BACK


def dimension_annotation(
    wall: Wall,
    transform: ViewTransform,
    overrides: Mapping[str, DimensionSide | None] | None = None,
) -> DimensionAnnotation:
    """Full placement of a wall's length annotation."""
    side = dimension_side(wall, transform, overrides)
    nx, ny = screen_normal(wall.rotation_y)
    offset = DIMENSION_OFFSET * side.value
    a, b = wall.endpoints()
    a_view = transform.world_to_view(a.x, a.z)
    b_view = transform.world_to_view(b.x, b.z)
    return DimensionAnnotation(
        side=side,
        start=ViewPoint(a_view.left + nx * offset, a_view.top + ny * offset),
        end=ViewPoint(b_view.left + nx * offset, b_view.top + ny * offset),
        extension_length=DIMENSION_EXTENSION_LENGTH,
        label=f"{round(wall.width if wall.width > 0 else 0)} cm",
    )


def shelf_side_marker(
    wall: Wall, transform: ViewTransform, side: ShelfSide | None = None
) -> ShelfSideMarker:
    """Placement of the shelf-side arrow next to a wall.

    The arrow sits on the normal's negative side for FRONT and the positive
    side for BACK; near-vertical walls are mirrored so both orientations read
    the same way on screen.
    """
    resolved = side or ShelfSide.FRONT
    sign = 1 if resolved is ShelfSide.BACK else -1
    theta = wall.rotation_y
    if abs(math.cos(theta)) < abs(math.sin(theta)):
        sign *= -1

    center = transform.world_to_view(wall.position.x, wall.position.z)
    nx, ny = screen_normal(theta)
    position = ViewPoint(
        center.left + sign * SHELF_MARKER_OFFSET * nx,
        center.top + sign * SHELF_MARKER_OFFSET * ny,
    )
    angle = math.degrees(theta) + (90 if sign > 0 else -90)
    return ShelfSideMarker(position=position, angle_degrees=angle, side=resolved)


def endpoint_markers(
    wall: Wall,
    transform: ViewTransform,
    snap_candidate: SnapCandidate | None = None,
) -> tuple[EndpointMarker, EndpointMarker]:
    """View positions of a wall's endpoints, flagging the active snap target."""
    target: ViewPoint | None = None
    if snap_candidate is not None:
        target = transform.world_to_view(snap_candidate.world_x, snap_candidate.world_z)

    markers = []
    for which, point in zip((Endpoint.A, Endpoint.B), wall.endpoints()):
        view = transform.world_to_view(point.x, point.z)
        hit = (
            target is not None
            and abs(target.left - view.left) < SNAP_MARKER_TOLERANCE
            and abs(target.top - view.top) < SNAP_MARKER_TOLERANCE
        )
        markers.append(EndpointMarker(endpoint=which, position=view, is_snap_target=hit))
    return (markers[0], markers[1])


def rotation_handle_position(wall: Wall, transform: ViewTransform) -> ViewPoint:
    """Where the rotation handle of the selected wall is drawn."""
    center = transform.world_to_view(wall.position.x, wall.position.z)
    length = transform.wall_pixel_length(wall)
    return ViewPoint(center.left - length / 2 - ROTATION_HANDLE_GAP, center.top)
