"""Magnetic endpoint snapping for dragged walls.

While a wall is dragged, one of its endpoints locks onto the nearest
endpoint of another wall when it comes close enough. Once snapped, the lock
is kept under a looser radius so small cursor drift does not make the wall
flicker between snapped and free.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..constants import CAPTURE_MULTIPLIER, CAPTURE_RADIUS, HYSTERESIS_MULTIPLIER
from ..value_objects import Endpoint, SnapCandidate, SnapMemory, WorldPoint
from .geometry import distance, wall_endpoints

if TYPE_CHECKING:
    from ..entities import Wall

__all__ = ["SnapEngine", "SnapResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    """Outcome of one snap pass.

    Attributes:
        x: Wall centre X after snapping (unchanged when nothing snapped).
        z: Wall centre Z after snapping.
        candidate: Active snap for UI feedback, or None.
        memory: Snap memory to carry into the next pointer event, or None.
    """

    x: float
    z: float
    candidate: SnapCandidate | None = None
    memory: SnapMemory | None = None

    @property
    def is_snapped(self) -> bool:
        return self.candidate is not None


@dataclass(frozen=True)
class _Match:
    target_wall_id: str | None  # None keeps the remembered target
    ex: float
    ez: float
    target_endpoint: Endpoint
    source_endpoint: Endpoint
    dist: float


@dataclass
class SnapEngine:
    """Finds endpoint-to-endpoint snaps in world units.

    Distances are world centimeters, so the magnet has the same physical
    strength at every zoom level.

    Attributes:
        capture_radius: Base snap radius in cm.
        capture_multiplier: Factor applied to ``capture_radius`` for new snaps.
        hysteresis_multiplier: Factor applied to ``capture_radius`` when
            re-testing the previous snap.
    """

    capture_radius: float = CAPTURE_RADIUS
    capture_multiplier: float = CAPTURE_MULTIPLIER
    hysteresis_multiplier: float = HYSTERESIS_MULTIPLIER

    @property
    def capture_distance(self) -> float:
        return self.capture_radius * self.capture_multiplier

    @property
    def release_distance(self) -> float:
        return self.capture_radius * self.hysteresis_multiplier

    def snap(
        self,
        wall: Wall,
        world_x: float,
        world_z: float,
        walls: Sequence[Wall],
        memory: SnapMemory | None = None,
    ) -> SnapResult:
        """Snap a wall dragged to a tentative centre.

        Args:
            wall: The dragged wall. Its width and rotation are used; its
                stored position is ignored in favour of ``world_x``/``world_z``.
            world_x: Tentative centre X in world cm.
            world_z: Tentative centre Z in world cm.
            walls: Every wall on the plan, including the floor.
            memory: Snap memory from the previous pointer event.

        Returns:
            SnapResult with the (possibly shifted) centre, the active
            candidate and the memory for the next event.
        """
        a, b = wall_endpoints(world_x, world_z, wall.width, wall.rotation_y)

        match = self._nearest(wall, a, b, walls)
        if match is None and memory is not None:
            match = self._keep(a, b, memory)

        if match is None:
            if memory is not None:
                logger.debug(f"Wall {wall.id} released snap to {memory.last_target_id}")
            return SnapResult(x=world_x, z=world_z)

        source = a if match.source_endpoint is Endpoint.A else b
        snapped_x = world_x + (match.ex - source.x)
        snapped_z = world_z + (match.ez - source.z)

        if match.target_wall_id is None and memory is not None:
            target_id = memory.last_target_id
        else:
            target_id = match.target_wall_id or ""

        candidate = SnapCandidate(
            target_wall_id=target_id,
            target_endpoint=match.target_endpoint,
            source_endpoint=match.source_endpoint,
            world_x=match.ex,
            world_z=match.ez,
        )
        logger.debug(
            f"Wall {wall.id} endpoint {match.source_endpoint.value} snapped to "
            f"{target_id}.{match.target_endpoint.value} at {match.dist:.2f} cm"
        )
        return SnapResult(
            x=snapped_x,
            z=snapped_z,
            candidate=candidate,
            memory=SnapMemory.from_candidate(candidate),
        )

    def _nearest(
        self,
        wall: Wall,
        a: WorldPoint,
        b: WorldPoint,
        walls: Sequence[Wall],
    ) -> _Match | None:
        """Globally nearest endpoint pair within the capture distance.

        Ties keep the first pair found in wall order.
        """
        best: _Match | None = None
        limit = self.capture_distance

        for other in walls:
            if other.is_floor or other.id == wall.id:
                continue
            other_a, other_b = other.endpoints()
            for target_endpoint, target in (
                (Endpoint.A, other_a),
                (Endpoint.B, other_b),
            ):
                d_a = distance(a.x, a.z, target.x, target.z)
                d_b = distance(b.x, b.z, target.x, target.z)
                dist = min(d_a, d_b)
                if dist <= limit and (best is None or dist < best.dist):
                    best = _Match(
                        target_wall_id=other.id,
                        ex=target.x,
                        ez=target.z,
                        target_endpoint=target_endpoint,
                        source_endpoint=Endpoint.A if d_a < d_b else Endpoint.B,
                        dist=dist,
                    )
        return best

    def _keep(self, a: WorldPoint, b: WorldPoint, memory: SnapMemory) -> _Match | None:
        """Re-test the previous snap point under the looser release distance."""
        d_a = distance(a.x, a.z, memory.ex, memory.ez)
        d_b = distance(b.x, b.z, memory.ex, memory.ez)
        dist = min(d_a, d_b)
        if dist > self.release_distance:
            return None
        return _Match(
            target_wall_id=None,
            ex=memory.ex,
            ez=memory.ez,
            target_endpoint=memory.target_endpoint,
            source_endpoint=memory.source_endpoint,
            dist=dist,
        )
