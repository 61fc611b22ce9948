"""Domain entities for the wall planner."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .constants import FLOOR_ID
from .services.geometry import endpoint, wall_endpoints
from .value_objects import Endpoint, FloorBounds, Vector3, WorldPoint


@dataclass
class Wall:
    """A wall segment on the floor plan, owned by the host application.

    The planner reads walls by reference and asks the host to change
    ``position`` and ``rotation_y``; it never keeps its own copy.

    Attributes:
        id: Opaque unique identifier. The floor uses ``"floor"``.
        width: Length along the wall's local axis in cm.
        height: Display-only height in cm.
        depth: Display-only thickness in cm. For the floor, its Z extent.
        position: World centre. ``x``/``z`` are the plan position, ``y`` is
            the elevation used by 3D views.
        rotation_y: Radians from +X toward +Z.
        name: Display name.
        is_locked: Bookkeeping flag for the host.
        texture: Opaque material key.
    """

    id: str
    width: float
    height: float = 250.0
    depth: float = 10.0
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    rotation_y: float = 0.0
    name: str = ""
    is_locked: bool = False
    texture: str = "default"

    @property
    def is_floor(self) -> bool:
        return self.id == FLOOR_ID

    @property
    def center(self) -> WorldPoint:
        return WorldPoint(self.position.x, self.position.z)

    def endpoints(self) -> tuple[WorldPoint, WorldPoint]:
        """Both endpoints, recomputed from centre, width and rotation."""
        return wall_endpoints(
            self.position.x, self.position.z, self.width, self.rotation_y
        )

    def endpoint(self, which: Endpoint) -> WorldPoint:
        return endpoint(
            self.position.x, self.position.z, self.width, self.rotation_y, which
        )


@dataclass(frozen=True)
class WallTemplate:
    """Preconfigured wall size offered when inserting a wall."""

    id: str
    name: str
    width: float
    height: float
    depth: float


PRECONFIGURED_WALLS: tuple[WallTemplate, ...] = (
    WallTemplate(id="standard", name="Standard Wall", width=400, height=250, depth=10),
    WallTemplate(id="tall", name="Tall Wall", width=400, height=300, depth=10),
    WallTemplate(id="wide", name="Wide Wall", width=600, height=250, depth=10),
    WallTemplate(id="narrow", name="Narrow Wall", width=200, height=250, depth=10),
)


def default_walls() -> list[Wall]:
    """Create the default layout: a large floor and four walls around the origin."""
    return [
        Wall(
            id=FLOOR_ID,
            name="Floor",
            width=4000,
            height=10,
            depth=4000,
            position=Vector3(0, 0, 0),
            is_locked=True,
        ),
        Wall(
            id="wall-1",
            name="Front Wall",
            width=400,
            position=Vector3(0, 125, -200),
        ),
        Wall(
            id="wall-2",
            name="Back Wall",
            width=400,
            position=Vector3(0, 125, 200),
        ),
        Wall(
            id="wall-3",
            name="Left Wall",
            width=400,
            position=Vector3(-200, 125, 0),
            rotation_y=math.pi / 2,
            texture="wood",
        ),
        Wall(
            id="wall-4",
            name="Right Wall",
            width=400,
            position=Vector3(200, 125, 0),
            rotation_y=-math.pi / 2,
        ),
    ]


def find_wall(walls: Iterable[Wall], wall_id: str) -> Wall | None:
    """Look up a wall by id."""
    for wall in walls:
        if wall.id == wall_id:
            return wall
    return None


def find_floor(walls: Iterable[Wall]) -> Wall | None:
    return find_wall(walls, FLOOR_ID)


def floor_bounds(walls: Sequence[Wall]) -> FloorBounds:
    """Bounding rectangle of the floor entity.

    Falls back to the default bounds when there is no floor, or when the
    floor has no usable extent.
    """
    floor = find_floor(walls)
    if floor is None or floor.width <= 0 or floor.depth <= 0:
        return FloorBounds.default()
    return FloorBounds.from_center(
        floor.position.x, floor.position.z, floor.width, floor.depth
    )


def plan_walls(walls: Iterable[Wall]) -> list[Wall]:
    """All walls except the floor."""
    return [w for w in walls if not w.is_floor]
