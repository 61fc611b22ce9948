"""Domain layer - wall geometry and interaction rules."""

from .entities import (
    PRECONFIGURED_WALLS,
    Wall,
    WallTemplate,
    default_walls,
    find_floor,
    find_wall,
    floor_bounds,
    plan_walls,
)
from .services import SnapEngine, SnapResult, ViewTransform
from .value_objects import (
    ConnectRequest,
    ContainerSize,
    DimensionSide,
    Endpoint,
    FloorBounds,
    PanOffset,
    ShelfSide,
    SnapCandidate,
    SnapMemory,
    Vector3,
    ViewPoint,
    WorldPoint,
)

__all__ = [
    "PRECONFIGURED_WALLS",
    "ConnectRequest",
    "ContainerSize",
    "DimensionSide",
    "Endpoint",
    "FloorBounds",
    "PanOffset",
    "ShelfSide",
    "SnapCandidate",
    "SnapEngine",
    "SnapMemory",
    "SnapResult",
    "Vector3",
    "ViewPoint",
    "ViewTransform",
    "Wall",
    "WallTemplate",
    "WorldPoint",
    "default_walls",
    "find_floor",
    "find_wall",
    "floor_bounds",
    "plan_walls",
]
