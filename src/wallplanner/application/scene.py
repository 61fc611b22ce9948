"""Render model of the plan view.

A renderer draws the planner from a PlanScene: the floor outline, one
WallOverlay per wall and the live snap feedback. Building a scene never
mutates walls or editor state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence

from wallplanner.domain.entities import Wall, plan_walls
from wallplanner.domain.services import (
    DimensionAnnotation,
    EndpointMarker,
    ShelfSideMarker,
    ViewRect,
    ViewTransform,
    dimension_annotation,
    endpoint_markers,
    rotation_handle_position,
    shelf_side_marker,
)
from wallplanner.domain.value_objects import (
    DimensionSide,
    ShelfSide,
    SnapCandidate,
    ViewPoint,
)


@dataclass(frozen=True)
class WallOverlay:
    """Everything drawn for one wall.

    Attributes:
        wall_id: Wall identifier.
        name: Display name.
        start: View position of endpoint ``a``.
        end: View position of endpoint ``b``.
        pixel_length: On-screen length, never below the minimum stroke length.
        angle_degrees: Wall rotation in degrees for the renderer's transform.
        is_selected: Whether this is the selected wall.
        is_locked: Host lock flag, for styling.
        dimension: Length annotation placement.
        shelf_marker: Shelf-side arrow placement.
        endpoints: Endpoint markers for ``a`` and ``b``.
        rotation_handle: Handle position; only set for the selected wall.
    """

    wall_id: str
    name: str
    start: ViewPoint
    end: ViewPoint
    pixel_length: float
    angle_degrees: float
    is_selected: bool
    is_locked: bool
    dimension: DimensionAnnotation
    shelf_marker: ShelfSideMarker
    endpoints: tuple[EndpointMarker, EndpointMarker]
    rotation_handle: ViewPoint | None = None


@dataclass(frozen=True)
class PlanScene:
    floor: ViewRect
    walls: tuple[WallOverlay, ...]
    zoom: float
    selected_wall_id: str | None = None
    snap_candidate: SnapCandidate | None = None

    def overlay(self, wall_id: str) -> WallOverlay | None:
        for overlay in self.walls:
            if overlay.wall_id == wall_id:
                return overlay
        return None


def build_wall_overlay(
    wall: Wall,
    transform: ViewTransform,
    selected_wall_id: str | None = None,
    dimension_overrides: Mapping[str, DimensionSide | None] | None = None,
    shelf_side: ShelfSide | None = None,
    snap_candidate: SnapCandidate | None = None,
) -> WallOverlay:
    """Compute the overlay of a single wall."""
    a, b = wall.endpoints()
    is_selected = wall.id == selected_wall_id
    return WallOverlay(
        wall_id=wall.id,
        name=wall.name,
        start=transform.world_to_view(a.x, a.z),
        end=transform.world_to_view(b.x, b.z),
        pixel_length=transform.wall_pixel_length(wall),
        angle_degrees=math.degrees(wall.rotation_y),
        is_selected=is_selected,
        is_locked=wall.is_locked,
        dimension=dimension_annotation(wall, transform, dimension_overrides),
        shelf_marker=shelf_side_marker(wall, transform, shelf_side),
        endpoints=endpoint_markers(wall, transform, snap_candidate),
        rotation_handle=(
            rotation_handle_position(wall, transform) if is_selected else None
        ),
    )


def build_scene(
    walls: Sequence[Wall],
    transform: ViewTransform,
    selected_wall_id: str | None = None,
    dimension_overrides: Mapping[str, DimensionSide | None] | None = None,
    shelf_sides: Mapping[str, ShelfSide] | None = None,
    snap_candidate: SnapCandidate | None = None,
) -> PlanScene:
    """Compute the full plan view render model.

    Args:
        walls: Host walls, floor included. The floor is drawn as the outline
            and gets no overlay.
        transform: Current view transform.
        selected_wall_id: Selected wall, which gets a rotation handle.
        dimension_overrides: Per-wall dimension side overrides.
        shelf_sides: Host-owned shelf side per wall; missing walls use FRONT.
        snap_candidate: Active snap during a drag, for endpoint highlighting.

    Returns:
        A PlanScene for the renderer.
    """
    sides = shelf_sides or {}
    overlays = tuple(
        build_wall_overlay(
            wall,
            transform,
            selected_wall_id,
            dimension_overrides,
            sides.get(wall.id),
            snap_candidate,
        )
        for wall in plan_walls(walls)
    )
    return PlanScene(
        floor=transform.floor_rect(),
        walls=overlays,
        zoom=transform.zoom,
        selected_wall_id=selected_wall_id,
        snap_candidate=snap_candidate,
    )
