"""Value objects for the wall planner domain.

World coordinates are centimeters on the horizontal (top-down) plane, with
``x`` to the right and ``z`` downward on screen. View coordinates are pixels
relative to the planner container's top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_FLOOR_HALF_EXTENT


class Endpoint(str, Enum):
    """One of the two ends of a wall segment."""

    A = "a"
    B = "b"

    @property
    def opposite(self) -> "Endpoint":
        return Endpoint.B if self is Endpoint.A else Endpoint.A


class ShelfSide(str, Enum):
    """Side of a wall that carries shelving, owned by the host."""

    FRONT = "front"
    BACK = "back"


class DimensionSide(int, Enum):
    """Side of a wall where its length annotation is drawn.

    FRONT follows the screen-space normal ``(sin θ, -cos θ)``; BACK the
    opposite direction.
    """

    FRONT = 1
    BACK = -1


@dataclass(frozen=True)
class WorldPoint:
    """Point in world space (cm)."""

    x: float
    z: float


@dataclass(frozen=True)
class ViewPoint:
    """Point in view space (px), measured from the container's top-left."""

    left: float
    top: float


@dataclass(frozen=True)
class Vector3:
    """3D position of a wall.

    Only ``x`` and ``z`` take part in planning; ``y`` is the elevation used by
    3D views and is carried through untouched.
    """

    x: float
    y: float
    z: float

    def with_plan(self, x: float, z: float) -> "Vector3":
        """Return a copy moved on the horizontal plane."""
        return Vector3(x=x, y=self.y, z=z)


@dataclass(frozen=True)
class PanOffset:
    """Pixel offset applied to the whole drawing."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class ContainerSize:
    """Size of the planner container in pixels.

    A zero size means the container has not been laid out yet.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Container size must be non-negative")


@dataclass(frozen=True)
class FloorBounds:
    """Axis-aligned floor rectangle in world space."""

    min_x: float
    max_x: float
    min_z: float
    max_z: float

    def __post_init__(self) -> None:
        if self.max_x <= self.min_x or self.max_z <= self.min_z:
            raise ValueError("Floor bounds must have positive extent")

    @classmethod
    def default(cls) -> "FloorBounds":
        """Bounds used when the host supplies no floor entity."""
        h = DEFAULT_FLOOR_HALF_EXTENT
        return cls(min_x=-h, max_x=h, min_z=-h, max_z=h)

    @classmethod
    def from_center(
        cls, x: float, z: float, width: float, depth: float
    ) -> "FloorBounds":
        """Build bounds from a floor centre and its X/Z extents."""
        return cls(
            min_x=x - width / 2,
            max_x=x + width / 2,
            min_z=z - depth / 2,
            max_z=z + depth / 2,
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_z - self.min_z

    def contains(self, x: float, z: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_z <= z <= self.max_z

    def clamp(self, x: float, z: float) -> WorldPoint:
        """Clamp a world point into the floor rectangle."""
        return WorldPoint(
            x=max(self.min_x, min(self.max_x, x)),
            z=max(self.min_z, min(self.max_z, z)),
        )


@dataclass(frozen=True)
class SnapCandidate:
    """A pending endpoint-to-endpoint alignment found during a drag.

    Attributes:
        target_wall_id: Wall whose endpoint is being snapped to.
        target_endpoint: Which end of the target wall.
        source_endpoint: Which end of the dragged wall lands on the target.
        world_x: Target endpoint X in world cm.
        world_z: Target endpoint Z in world cm.
    """

    target_wall_id: str
    target_endpoint: Endpoint
    source_endpoint: Endpoint
    world_x: float
    world_z: float

    @property
    def point(self) -> WorldPoint:
        return WorldPoint(self.world_x, self.world_z)


@dataclass(frozen=True)
class SnapMemory:
    """Snap decision remembered between pointer events for one wall.

    Used for hysteresis while dragging and as the fixed anchor while
    rotating a connected wall.
    """

    ex: float
    ez: float
    source_endpoint: Endpoint
    target_endpoint: Endpoint
    last_target_id: str

    @classmethod
    def from_candidate(cls, candidate: SnapCandidate) -> "SnapMemory":
        return cls(
            ex=candidate.world_x,
            ez=candidate.world_z,
            source_endpoint=candidate.source_endpoint,
            target_endpoint=candidate.target_endpoint,
            last_target_id=candidate.target_wall_id,
        )


@dataclass(frozen=True)
class ConnectRequest:
    """Request to the host to record a joint between two wall endpoints."""

    source_wall_id: str
    source_endpoint: Endpoint
    target_wall_id: str
    target_endpoint: Endpoint
