"""Handle-driven wall rotation with damping and endpoint anchoring."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

from wallplanner.contracts.protocols import (
    AbsoluteRotationHostProtocol,
    DeltaRotationHostProtocol,
)
from wallplanner.domain.constants import (
    ROTATION_MAX_STEP,
    ROTATION_MIN_DELTA,
    ROTATION_SENSITIVITY,
    ROTATION_SMOOTHING,
)
from wallplanner.domain.entities import Wall, find_wall
from wallplanner.domain.services.geometry import center_from_anchor, clamp
from wallplanner.domain.value_objects import SnapMemory, ViewPoint, WorldPoint

from ..session import Rotating

if TYPE_CHECKING:
    from wallplanner.contracts.protocols import WallHostProtocol
    from wallplanner.domain.services import ViewTransform

__all__ = ["RotationController", "RotationWriter"]

logger = logging.getLogger(__name__)


class RotationWriter:
    """Writes absolute wall angles through whichever API the host offers.

    The absolute form is canonical. Hosts that only take increments get the
    difference between the requested angle and the wall's current one, so
    both kinds of host end in the same state.
    """

    def __init__(self, host: object) -> None:
        if isinstance(host, AbsoluteRotationHostProtocol):
            self._absolute: AbsoluteRotationHostProtocol | None = host
            self._delta: DeltaRotationHostProtocol | None = None
        elif isinstance(host, DeltaRotationHostProtocol):
            self._absolute = None
            self._delta = host
        else:
            raise TypeError(
                "Host must implement on_set_rotation_absolute or on_rotate_wall"
            )

    def write(self, wall: Wall, radians: float) -> None:
        if self._absolute is not None:
            self._absolute.on_set_rotation_absolute(wall.id, radians)
        elif self._delta is not None:
            self._delta.on_rotate_wall(wall.id, radians - wall.rotation_y)


class RotationController:
    """Turns pointer moves around a wall's centre into smoothed rotation.

    Raw pointer angle changes are scaled down by ``sensitivity``, approached
    exponentially with ``smoothing``, and each event moves the wall by at
    most ``max_step`` radians.
    """

    def __init__(
        self,
        sensitivity: float = ROTATION_SENSITIVITY,
        smoothing: float = ROTATION_SMOOTHING,
        max_step: float = ROTATION_MAX_STEP,
        min_delta: float = ROTATION_MIN_DELTA,
        respect_locks: bool = False,
    ) -> None:
        self.sensitivity = sensitivity
        self.smoothing = smoothing
        self.max_step = max_step
        self.min_delta = min_delta
        self.respect_locks = respect_locks

    def can_rotate(self, wall: Wall) -> bool:
        if wall.is_floor:
            return False
        return not (self.respect_locks and wall.is_locked)

    @staticmethod
    def pointer_angle(wall: Wall, pointer: ViewPoint, transform: ViewTransform) -> float:
        """Angle of the pointer around the wall's view-space centre."""
        center = transform.world_to_view(wall.position.x, wall.position.z)
        return math.atan2(pointer.top - center.top, pointer.left - center.left)

    def begin(
        self, wall: Wall, pointer: ViewPoint, transform: ViewTransform
    ) -> Rotating | None:
        if not self.can_rotate(wall):
            logger.debug(f"Rotation refused for wall {wall.id}")
            return None
        logger.debug(f"Rotation started for wall {wall.id}")
        return Rotating(
            wall_id=wall.id,
            start_angle=self.pointer_angle(wall, pointer, transform),
            start_wall_angle=wall.rotation_y,
        )

    def step(self, state: Rotating, current: float, pointer_angle: float) -> float:
        """Bounded rotation increment for one pointer event."""
        desired = state.start_wall_angle + (pointer_angle - state.start_angle) * self.sensitivity
        smoothed = current + (desired - current) * self.smoothing
        return clamp(smoothed - current, -self.max_step, self.max_step)

    def move(
        self,
        state: Rotating,
        pointer: ViewPoint,
        transform: ViewTransform,
        walls: Sequence[Wall],
        host: WallHostProtocol,
        writer: RotationWriter,
        anchor: SnapMemory | None = None,
    ) -> None:
        """Apply one pointer move during a rotation session."""
        wall = find_wall(walls, state.wall_id)
        if wall is None:
            logger.debug(f"Rotated wall {state.wall_id} no longer exists")
            return

        delta = self.step(state, wall.rotation_y, self.pointer_angle(wall, pointer, transform))
        if abs(delta) <= self.min_delta:
            return
        self.apply(wall, wall.rotation_y + delta, host, writer, anchor)

    def apply(
        self,
        wall: Wall,
        radians: float,
        host: WallHostProtocol,
        writer: RotationWriter,
        anchor: SnapMemory | None = None,
    ) -> None:
        """Set a wall's absolute angle, keeping an anchored endpoint in place.

        Args:
            wall: Wall to rotate.
            radians: New ``rotation_y``.
            host: Host asked to move the centre when anchored.
            writer: Rotation writer for the host.
            anchor: Joint the wall is attached to. When present, the centre is
                recomputed from the new angle so the anchored endpoint keeps
                its world position.
        """
        # Read before writing; hosts may mutate the wall in place.
        width = wall.width
        writer.write(wall, radians)
        if anchor is None:
            return
        center = center_from_anchor(
            WorldPoint(anchor.ex, anchor.ez), width, radians, anchor.source_endpoint
        )
        host.on_move_wall(wall.id, center.x, center.z)
