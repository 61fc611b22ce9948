"""Application layer - interaction sessions, the editor facade and use cases."""

from .commands import ReplaySessionCommand
from .dtos import ReplayOutput
from .editor import FloorPlanEditor
from .scene import PlanScene, WallOverlay, build_scene
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

__all__ = [
    "IDLE",
    "Dragging",
    "FloorPlanEditor",
    "Idle",
    "InteractionState",
    "Panning",
    "PlanScene",
    "PointerButton",
    "PointerTarget",
    "ReplayOutput",
    "ReplaySessionCommand",
    "Rotating",
    "TargetKind",
    "WallOverlay",
    "build_scene",
]
