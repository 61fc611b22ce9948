"""Interaction session state and pointer event types.

Exactly one interaction mode is active at a time. The state is a single
value rather than a set of flags, so a drag and a pan can never overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from wallplanner.domain.value_objects import SnapCandidate, SnapMemory, ViewPoint


class PointerButton(IntEnum):
    """Mouse buttons, numbered like DOM ``MouseEvent.button``."""

    PRIMARY = 0
    MIDDLE = 1
    SECONDARY = 2


class TargetKind(str, Enum):
    """What the pointer was over when it went down."""

    CANVAS = "canvas"
    WALL = "wall"
    ROTATION_HANDLE = "rotation_handle"


@dataclass(frozen=True)
class PointerTarget:
    kind: TargetKind
    wall_id: str | None = None

    def __post_init__(self) -> None:
        if self.kind is not TargetKind.CANVAS and not self.wall_id:
            raise ValueError(f"{self.kind.value} target requires a wall_id")

    @classmethod
    def canvas(cls) -> "PointerTarget":
        return cls(TargetKind.CANVAS)

    @classmethod
    def wall(cls, wall_id: str) -> "PointerTarget":
        return cls(TargetKind.WALL, wall_id)

    @classmethod
    def rotation_handle(cls, wall_id: str) -> "PointerTarget":
        return cls(TargetKind.ROTATION_HANDLE, wall_id)


@dataclass(frozen=True)
class Idle:
    """No pointer session is active."""


@dataclass(frozen=True)
class Dragging:
    """A wall is being moved.

    Attributes:
        wall_id: Dragged wall.
        pointer_offset: Pointer position relative to the container when the
            drag started.
        snap_memory: Snap carried between pointer events for hysteresis.
        snap_candidate: Snap to commit on release, if any.
    """

    wall_id: str
    pointer_offset: ViewPoint
    snap_memory: SnapMemory | None = None
    snap_candidate: SnapCandidate | None = None


@dataclass(frozen=True)
class Rotating:
    """A wall is being rotated by its handle.

    Attributes:
        wall_id: Rotated wall.
        start_angle: Pointer angle around the wall centre at session start.
        start_wall_angle: Wall ``rotation_y`` at session start.
    """

    wall_id: str
    start_angle: float
    start_wall_angle: float


@dataclass(frozen=True)
class Panning:
    """The view is being panned; ``last_point`` is the previous pointer position."""

    last_point: ViewPoint


InteractionState = Union[Idle, Dragging, Rotating, Panning]

IDLE = Idle()
