"""Drag-to-move interaction."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Sequence

from wallplanner.domain.entities import Wall, find_wall
from wallplanner.domain.services import SnapEngine
from wallplanner.domain.value_objects import ConnectRequest, SnapMemory, ViewPoint

from ..session import Dragging

if TYPE_CHECKING:
    from wallplanner.contracts.protocols import WallHostProtocol
    from wallplanner.domain.services import ViewTransform

__all__ = ["DragController"]

logger = logging.getLogger(__name__)


class DragController:
    """Turns pointer moves during a drag into committed wall centres.

    Each move maps the pointer to world space, clamps it to the floor, runs
    the snap engine and asks the host to move the wall. Releasing with an
    active snap emits a connect request.
    """

    def __init__(
        self,
        snap_engine: SnapEngine | None = None,
        respect_locks: bool = False,
    ) -> None:
        self.snap_engine = snap_engine or SnapEngine()
        self.respect_locks = respect_locks

    def can_drag(self, wall: Wall) -> bool:
        if wall.is_floor:
            return False
        return not (self.respect_locks and wall.is_locked)

    def begin(
        self,
        wall: Wall,
        pointer: ViewPoint,
        host: WallHostProtocol,
        anchor: SnapMemory | None = None,
    ) -> Dragging | None:
        """Start dragging ``wall``.

        Args:
            wall: Wall under the pointer.
            pointer: Pointer position relative to the container.
            host: Host notified of the selection.
            anchor: Joint committed by an earlier drag of this wall. It seeds
                the snap memory so a connected wall stays attached until it is
                pulled past the release distance.

        Returns:
            The new Dragging state, or None if the wall may not be dragged.
        """
        if not self.can_drag(wall):
            logger.debug(f"Drag refused for wall {wall.id}")
            return None
        host.on_select_wall(wall.id)
        logger.debug(f"Drag started for wall {wall.id}")
        return Dragging(wall_id=wall.id, pointer_offset=pointer, snap_memory=anchor)

    def move(
        self,
        state: Dragging,
        pointer: ViewPoint,
        transform: ViewTransform,
        walls: Sequence[Wall],
        host: WallHostProtocol,
    ) -> Dragging:
        """Apply one pointer move and return the updated drag state."""
        wall = find_wall(walls, state.wall_id)
        if wall is None:
            logger.debug(f"Dragged wall {state.wall_id} no longer exists")
            return state

        world = transform.view_to_world(pointer.left, pointer.top)
        clamped = transform.bounds.clamp(world.x, world.z)
        result = self.snap_engine.snap(
            wall, clamped.x, clamped.z, walls, state.snap_memory
        )
        host.on_move_wall(wall.id, result.x, result.z)
        return replace(state, snap_memory=result.memory, snap_candidate=result.candidate)

    def end(self, state: Dragging, host: WallHostProtocol) -> ConnectRequest | None:
        """Finish the drag, committing the active snap if there is one."""
        candidate = state.snap_candidate
        if candidate is None:
            logger.debug(f"Drag ended for wall {state.wall_id} without a snap")
            return None

        request = ConnectRequest(
            source_wall_id=state.wall_id,
            source_endpoint=candidate.source_endpoint,
            target_wall_id=candidate.target_wall_id,
            target_endpoint=candidate.target_endpoint,
        )
        host.on_connect_walls(
            request.source_wall_id,
            request.source_endpoint,
            request.target_wall_id,
            request.target_endpoint,
        )
        logger.debug(
            f"Connected {request.source_wall_id}.{request.source_endpoint.value} to "
            f"{request.target_wall_id}.{request.target_endpoint.value}"
        )
        return request
