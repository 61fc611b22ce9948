"""Application commands (use cases) for the wall planner."""

from __future__ import annotations

import logging
from typing import Callable

from wallplanner.contracts.protocols import WallStoreProtocol
from wallplanner.domain.entities import Wall, find_wall, plan_walls
from wallplanner.domain.value_objects import ConnectRequest, DimensionSide

from .config.adapter import session_to_container, session_to_walls
from .config.schemas import (
    DimensionSideEvent,
    ModifierEvent,
    PointerDownEvent,
    PointerLeaveEvent,
    PointerMoveEvent,
    PointerUpEvent,
    ResetWallsEvent,
    RotateEvent,
    SelectEvent,
    SessionFile,
    ToggleShelfSideEvent,
    WheelEvent,
    ZoomEvent,
)
from .dtos import ReplayOutput
from .editor import FloorPlanEditor
from .session import PointerTarget, TargetKind

logger = logging.getLogger(__name__)

StoreFactory = Callable[[list[Wall]], WallStoreProtocol]

_DIMENSION_SIDES: dict[str, DimensionSide | None] = {
    "front": DimensionSide.FRONT,
    "back": DimensionSide.BACK,
    "auto": None,
}


class ReplaySessionCommand:
    """Command to replay a scripted session against a fresh wall host.

    Each event is fed to a FloorPlanEditor in order, exactly as a pointer
    driven host would deliver it. Events naming unknown walls are reported in
    the output instead of aborting the replay.
    """

    def __init__(self, store_factory: StoreFactory) -> None:
        """Initialize the command.

        Args:
            store_factory: Builds the host that receives the planner's
                callbacks from the session's initial walls.
        """
        self.store_factory = store_factory

    def execute(self, session: SessionFile) -> ReplayOutput:
        """Replay every event of ``session``.

        Args:
            session: A validated session file.

        Returns:
            ReplayOutput with the final walls, committed joints and view state.
        """
        store = self.store_factory(session_to_walls(session))
        editor = FloorPlanEditor(store, session_to_container(session), session.settings)
        output = ReplayOutput(walls=store.get_walls())

        for index, event in enumerate(session.events):
            error = self._check_wall_reference(store, event)
            if error:
                output.errors.append(f"events[{index}]: {error}")
                continue
            self._dispatch(editor, store, event, output)

        # A session that ends mid-gesture behaves like the pointer leaving.
        request = editor.end_session()
        if request is not None:
            output.connections.append(request)

        walls = store.get_walls()
        output.walls = walls
        output.selected_wall_id = editor.selected_wall_id
        output.zoom = editor.zoom
        output.pan = editor.pan
        output.shelf_sides = dict(store.shelf_sides)
        output.dimension_sides = {
            wall.id: side
            for wall in plan_walls(walls)
            if (side := editor.dimension_side(wall.id)) is not None
        }
        logger.debug(
            f"Replayed {output.events_applied} events "
            f"({output.events_ignored} ignored, {len(output.errors)} errors)"
        )
        return output

    @staticmethod
    def _check_wall_reference(store: WallStoreProtocol, event: object) -> str | None:
        wall_events = (
            PointerDownEvent,
            SelectEvent,
            RotateEvent,
            DimensionSideEvent,
            ToggleShelfSideEvent,
        )
        if not isinstance(event, wall_events):
            return None
        wall_id = event.wall_id
        if wall_id is None or find_wall(store.get_walls(), wall_id) is not None:
            return None
        return f"unknown wall id '{wall_id}'"

    def _dispatch(
        self,
        editor: FloorPlanEditor,
        store: WallStoreProtocol,
        event: object,
        output: ReplayOutput,
    ) -> None:
        if isinstance(event, PointerDownEvent):
            target = PointerTarget(TargetKind(event.target), event.wall_id)
            started = editor.pointer_down(
                event.x, event.y, target, event.button, event.modifier
            )
            if not started:
                output.events_ignored += 1
                return
        elif isinstance(event, PointerMoveEvent):
            editor.pointer_move(event.x, event.y)
        elif isinstance(event, (PointerUpEvent, PointerLeaveEvent)):
            request: ConnectRequest | None = (
                editor.pointer_up()
                if isinstance(event, PointerUpEvent)
                else editor.pointer_leave()
            )
            if request is not None:
                output.connections.append(request)
        elif isinstance(event, WheelEvent):
            editor.wheel(event.delta_y)
        elif isinstance(event, ZoomEvent):
            if event.direction == "in":
                editor.zoom_in()
            else:
                editor.zoom_out()
        elif isinstance(event, ModifierEvent):
            editor.set_pan_modifier(event.held)
        elif isinstance(event, RotateEvent):
            if event.radians is not None:
                editor.set_rotation_abs(event.wall_id, event.radians)
            elif event.degrees is not None:
                editor.set_rotation_degrees(event.wall_id, event.degrees)
            elif event.delta is not None:
                editor.rotate_wall(event.wall_id, event.delta)
        elif isinstance(event, SelectEvent):
            editor.select_wall(event.wall_id)
        elif isinstance(event, DimensionSideEvent):
            editor.set_dimension_side(event.wall_id, _DIMENSION_SIDES[event.side])
        elif isinstance(event, ToggleShelfSideEvent):
            store.toggle_shelf_side(event.wall_id)
        elif isinstance(event, ResetWallsEvent):
            store.reset()
            editor.reset()
        output.events_applied += 1
