"""FloorPlanEditor: the pointer-driven facade over the interaction controllers.

The editor receives raw pointer, wheel and keyboard events in arrival order,
keeps the single active interaction session, and turns events into host
callbacks. It never owns walls; every event reads the current list from the
host.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from wallplanner.contracts.protocols import WallHostProtocol
from wallplanner.domain.constants import FLOOR_ID
from wallplanner.domain.entities import Wall, find_wall, floor_bounds
from wallplanner.domain.services import ViewTransform, dimension_side
from wallplanner.domain.services.geometry import (
    degrees_to_rotation,
    distance,
    normalize_angle,
    rotation_to_degrees,
)
from wallplanner.domain.value_objects import (
    ConnectRequest,
    ContainerSize,
    DimensionSide,
    PanOffset,
    ShelfSide,
    SnapCandidate,
    SnapMemory,
    ViewPoint,
)

from .config.adapter import (
    settings_to_drag_controller,
    settings_to_pan_zoom_controller,
    settings_to_rotation_controller,
)
from .config.schemas import EditorSettings
from .controllers import (
    DragController,
    PanZoomController,
    RotationController,
    RotationWriter,
)
from .scene import PlanScene, build_scene
from .session import (
    IDLE,
    Dragging,
    Idle,
    InteractionState,
    Panning,
    PointerButton,
    PointerTarget,
    Rotating,
    TargetKind,
)

__all__ = ["FloorPlanEditor"]

logger = logging.getLogger(__name__)

# A joint anchor is dropped once its wall's endpoint has moved away from it
# by other means than the editor (cm).
ANCHOR_DRIFT_TOLERANCE = 0.5


class FloorPlanEditor:
    """Interactive 2D wall planner engine bound to one host.

    Only one interaction session (drag, rotate or pan) is active at a time;
    a pointer-down while a session is running is ignored. Pointer-up and
    pointer-leave both end the session through :meth:`end_session`.

    Args:
        host: Wall host implementing WallHostProtocol and one of the
            rotation protocols.
        container: Initial container size in pixels. A zero size is valid
            until the host lays the planner out.
        settings: Planner tuning; defaults apply when omitted.
        drag_controller: Override for the drag controller.
        rotation_controller: Override for the rotation controller.
        pan_zoom_controller: Override for the pan/zoom controller.

    Raises:
        TypeError: If the host offers no rotation callback.

    Example:
        >>> store = InMemoryWallStore()
        >>> editor = FloorPlanEditor(store, ContainerSize(800, 600))
        >>> editor.pointer_down(400, 300, PointerTarget.wall("wall-1"))
        True
        >>> editor.pointer_move(420, 300)
        >>> editor.pointer_up()
    """

    def __init__(
        self,
        host: WallHostProtocol,
        container: ContainerSize | None = None,
        settings: EditorSettings | None = None,
        drag_controller: DragController | None = None,
        rotation_controller: RotationController | None = None,
        pan_zoom_controller: PanZoomController | None = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.host = host
        self.writer = RotationWriter(host)
        self.drag = drag_controller or settings_to_drag_controller(self.settings)
        self.rotation = rotation_controller or settings_to_rotation_controller(
            self.settings
        )
        self.pan_zoom = pan_zoom_controller or settings_to_pan_zoom_controller(
            self.settings
        )

        view = self.settings.view
        self._transform = ViewTransform(
            bounds=floor_bounds(host.get_walls()),
            container=container or ContainerSize(0.0, 0.0),
            zoom=self.pan_zoom.clamp_zoom(view.initial_zoom),
            pan=PanOffset(),
            padding=view.padding,
        )
        self.state: InteractionState = IDLE
        self.selected_wall_id: str | None = None
        self.modifier_held = False
        self._anchors: dict[str, SnapMemory] = {}
        self._dimension_overrides: dict[str, DimensionSide] = {}

    # =========================================================================
    # View state
    # =========================================================================

    @property
    def transform(self) -> ViewTransform:
        """Current view transform, with floor bounds read from the host."""
        return self._refresh(self.host.get_walls())

    @property
    def zoom(self) -> float:
        return self._transform.zoom

    @property
    def pan(self) -> PanOffset:
        return self._transform.pan

    @property
    def snap_candidate(self) -> SnapCandidate | None:
        """Active snap of the running drag, for visual feedback."""
        if isinstance(self.state, Dragging):
            return self.state.snap_candidate
        return None

    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    def _refresh(self, walls: Sequence[Wall]) -> ViewTransform:
        bounds = floor_bounds(walls)
        if bounds != self._transform.bounds:
            transform = self._transform.with_bounds(bounds)
            pan = transform.clamp_pan(transform.pan.x, transform.pan.y)
            self._transform = transform.with_pan(pan)
            logger.debug(
                f"Floor bounds changed; pan re-clamped to ({pan.x:.1f}, {pan.y:.1f})"
            )
        return self._transform

    def resize(self, width: float, height: float) -> None:
        """The container was laid out or resized; keep the pan valid."""
        self._transform = self._transform.with_container(ContainerSize(width, height))
        pan = self.transform.clamp_pan(self._transform.pan.x, self._transform.pan.y)
        self._transform = self._transform.with_pan(pan)
        logger.debug(f"Container resized to {width:.0f}x{height:.0f}")

    def set_pan_modifier(self, held: bool) -> None:
        """Track the pan modifier key (space bar)."""
        self.modifier_held = held

    def wheel(self, delta_y: float) -> None:
        self._transform = self.pan_zoom.wheel(delta_y, self.transform)

    def zoom_in(self) -> None:
        self._transform = self.pan_zoom.zoom_by(1, self.transform)

    def zoom_out(self) -> None:
        self._transform = self.pan_zoom.zoom_by(-1, self.transform)

    # =========================================================================
    # Pointer events
    # =========================================================================

    def pointer_down(
        self,
        x: float,
        y: float,
        target: PointerTarget,
        button: int = PointerButton.PRIMARY,
        modifier: bool = False,
    ) -> bool:
        """Start an interaction session.

        A primary press on the selected wall's rotation handle rotates; handles
        of other walls are not shown, so presses on them are ignored. A press
        on the background, with the pan modifier held, or with a non-primary
        button pans. A primary press on a wall drags it.

        Args:
            x: Pointer X relative to the container, in pixels.
            y: Pointer Y relative to the container, in pixels.
            target: What the pointer went down on.
            button: Mouse button number.
            modifier: Whether the pan modifier is held for this press.

        Returns:
            True if a session started.
        """
        if not self.is_idle:
            logger.debug(f"Pointer down ignored; {type(self.state).__name__} active")
            return False

        walls = self.host.get_walls()
        transform = self._refresh(walls)
        pointer = ViewPoint(x, y)
        modifier_held = modifier or self.modifier_held

        if target.kind is TargetKind.WALL and target.wall_id == FLOOR_ID:
            target = PointerTarget.canvas()

        if (
            target.kind is TargetKind.ROTATION_HANDLE
            and button == PointerButton.PRIMARY
        ):
            # Only the selected wall shows a handle.
            if target.wall_id != self.selected_wall_id:
                logger.debug(f"Handle of unselected wall {target.wall_id!r} ignored")
                return False
            wall = self._lookup(walls, target.wall_id)
            if wall is None:
                return False
            rotating = self.rotation.begin(wall, pointer, transform)
            if rotating is None:
                return False
            self.state = rotating
            return True

        if self.pan_zoom.should_pan(target, button, modifier_held):
            self.state = self.pan_zoom.begin(pointer)
            return True

        wall = self._lookup(walls, target.wall_id)
        if wall is None:
            return False
        dragging = self.drag.begin(wall, pointer, self.host, self._anchor_for(wall))
        if dragging is None:
            return False
        self.selected_wall_id = wall.id
        self.state = dragging
        return True

    def pointer_move(self, x: float, y: float) -> None:
        """Advance the active session; a no-op while idle."""
        pointer = ViewPoint(x, y)
        state = self.state
        if isinstance(state, Panning):
            self.state, self._transform = self.pan_zoom.move(
                state, pointer, self.transform
            )
            return

        walls = self.host.get_walls()
        transform = self._refresh(walls)
        if isinstance(state, Dragging):
            self.state = self.drag.move(state, pointer, transform, walls, self.host)
        elif isinstance(state, Rotating):
            wall = find_wall(walls, state.wall_id)
            anchor = self._anchor_for(wall) if wall is not None else None
            self.rotation.move(
                state, pointer, transform, walls, self.host, self.writer, anchor
            )

    def pointer_up(self) -> ConnectRequest | None:
        return self.end_session()

    def pointer_leave(self) -> ConnectRequest | None:
        return self.end_session()

    def end_session(self) -> ConnectRequest | None:
        """End the active session and return to idle.

        A drag released with an active snap commits the joint, which becomes
        the wall's anchor for later rotations and drags. A drag released
        without a snap drops the wall's anchor.

        Returns:
            The committed ConnectRequest, if any.
        """
        state = self.state
        self.state = IDLE
        if not isinstance(state, Dragging):
            if not isinstance(state, Idle):
                logger.debug(f"{type(state).__name__} session ended")
            return None

        request = self.drag.end(state, self.host)
        if state.snap_candidate is not None:
            self._anchors[state.wall_id] = SnapMemory.from_candidate(
                state.snap_candidate
            )
        else:
            self._anchors.pop(state.wall_id, None)
        return request

    # =========================================================================
    # Rotation entry
    # =========================================================================

    def set_rotation_abs(self, wall_id: str, radians: float) -> None:
        """Set a wall's absolute angle, keeping an anchored endpoint fixed."""
        wall = self._lookup(self.host.get_walls(), wall_id)
        if wall is None or not self.rotation.can_rotate(wall):
            return
        self.rotation.apply(
            wall, radians, self.host, self.writer, self._anchor_for(wall)
        )

    def rotate_wall(self, wall_id: str, delta_radians: float) -> None:
        """Rotate a wall by an increment, through the absolute primitive."""
        wall = self._lookup(self.host.get_walls(), wall_id)
        if wall is None:
            return
        self.set_rotation_abs(wall_id, wall.rotation_y + delta_radians)

    def set_rotation_degrees(self, wall_id: str, degrees: float) -> None:
        """Typed degree entry, normalised into [0, 360).

        Entries that would change the angle by less than the rotation noise
        gate are skipped.
        """
        wall = self._lookup(self.host.get_walls(), wall_id)
        if wall is None:
            return
        radians = degrees_to_rotation(degrees)
        if abs(normalize_angle(radians - wall.rotation_y)) < self.rotation.min_delta:
            return
        self.set_rotation_abs(wall_id, radians)

    def rotation_degrees(self, wall_id: str) -> float | None:
        """Display angle of a wall in [0, 360), or None for unknown ids."""
        wall = find_wall(self.host.get_walls(), wall_id)
        if wall is None:
            return None
        return rotation_to_degrees(wall.rotation_y)

    # =========================================================================
    # Selection and annotations
    # =========================================================================

    def select_wall(self, wall_id: str | None) -> None:
        if wall_id is not None and self._lookup(self.host.get_walls(), wall_id) is None:
            return
        self.selected_wall_id = wall_id
        self.host.on_select_wall(wall_id)

    def clear_selection(self) -> None:
        self.select_wall(None)

    def set_dimension_side(self, wall_id: str, side: DimensionSide | None) -> None:
        """Pin a wall's dimension side, or return it to automatic with None."""
        if side is None:
            self._dimension_overrides.pop(wall_id, None)
        else:
            self._dimension_overrides[wall_id] = DimensionSide(side)

    @property
    def dimension_overrides(self) -> Mapping[str, DimensionSide]:
        return dict(self._dimension_overrides)

    def dimension_side(self, wall_id: str) -> DimensionSide | None:
        walls = self.host.get_walls()
        wall = find_wall(walls, wall_id)
        if wall is None:
            return None
        return dimension_side(wall, self._refresh(walls), self._dimension_overrides)

    def anchor(self, wall_id: str) -> SnapMemory | None:
        """Joint anchor committed for a wall, if it is still valid."""
        wall = find_wall(self.host.get_walls(), wall_id)
        if wall is None:
            return None
        return self._anchor_for(wall)

    def scene(self, shelf_sides: Mapping[str, ShelfSide] | None = None) -> PlanScene:
        """Render model of the current plan view.

        Args:
            shelf_sides: Host-owned shelf side per wall.
        """
        walls = self.host.get_walls()
        return build_scene(
            walls,
            self._refresh(walls),
            selected_wall_id=self.selected_wall_id,
            dimension_overrides=self._dimension_overrides,
            shelf_sides=shelf_sides,
            snap_candidate=self.snap_candidate,
        )

    def reset(self) -> None:
        """Forget sessions, anchors and overrides, e.g. after the host resets walls."""
        self.state = IDLE
        self.selected_wall_id = None
        self._anchors.clear()
        self._dimension_overrides.clear()
        self._refresh(self.host.get_walls())

    def close(self) -> None:
        """The planner was closed; any running session ends without a commit."""
        self.state = IDLE
        self.modifier_held = False
        self._anchors.clear()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _lookup(self, walls: Sequence[Wall], wall_id: str | None) -> Wall | None:
        if wall_id is None:
            return None
        wall = find_wall(walls, wall_id)
        if wall is None:
            logger.debug(f"Unknown wall id {wall_id!r} ignored")
        return wall

    def _anchor_for(self, wall: Wall) -> SnapMemory | None:
        anchor = self._anchors.get(wall.id)
        if anchor is None:
            return None
        point = wall.endpoint(anchor.source_endpoint)
        if distance(point.x, point.z, anchor.ex, anchor.ez) > ANCHOR_DRIFT_TOLERANCE:
            logger.debug(f"Anchor of wall {wall.id} dropped; endpoint moved")
            del self._anchors[wall.id]
            return None
        return anchor
