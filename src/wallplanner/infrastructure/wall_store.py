"""In-memory wall host used by the CLI, session replay and tests."""

from __future__ import annotations

import logging
from typing import Iterable

from wallplanner.domain.constants import FLOOR_ID
from wallplanner.domain.entities import (
    Wall,
    WallTemplate,
    default_walls,
    find_wall,
    plan_walls,
)
from wallplanner.domain.value_objects import (
    ConnectRequest,
    Endpoint,
    ShelfSide,
    Vector3,
)

logger = logging.getLogger(__name__)


class InMemoryWallStore:
    """Wall host that keeps walls in a list and applies every request.

    Walls are handed to the planner by reference and mutated in place, the
    way a host's state store would. Requests for unknown wall ids are
    logged and ignored.

    Attributes:
        connections: Joints committed so far, one per source endpoint.
        selected_wall_id: Last selection reported by the planner.
    """

    def __init__(
        self,
        walls: Iterable[Wall] | None = None,
        shelf_sides: dict[str, ShelfSide] | None = None,
    ) -> None:
        self._walls: list[Wall] = list(walls) if walls is not None else default_walls()
        self._shelf_sides: dict[str, ShelfSide] = dict(shelf_sides or {})
        self.connections: list[ConnectRequest] = []
        self.selected_wall_id: str | None = None
        self._next_index = len(plan_walls(self._walls))

    def _require(self, wall_id: str) -> Wall | None:
        wall = find_wall(self._walls, wall_id)
        if wall is None:
            logger.warning(f"Ignoring request for unknown wall {wall_id!r}")
        return wall

    # Host callbacks

    def get_walls(self) -> list[Wall]:
        return self._walls

    def on_move_wall(self, wall_id: str, x: float, z: float) -> None:
        wall = self._require(wall_id)
        if wall is not None:
            wall.position = wall.position.with_plan(x, z)

    def on_set_rotation_absolute(self, wall_id: str, radians: float) -> None:
        wall = self._require(wall_id)
        if wall is not None:
            wall.rotation_y = radians

    def on_rotate_wall(self, wall_id: str, delta_radians: float) -> None:
        wall = self._require(wall_id)
        if wall is not None:
            wall.rotation_y += delta_radians

    def on_connect_walls(
        self,
        source_id: str,
        source_endpoint: Endpoint,
        target_id: str,
        target_endpoint: Endpoint,
    ) -> None:
        """Record a joint, replacing any earlier joint of the same endpoint."""
        connection = ConnectRequest(
            source_id, Endpoint(source_endpoint), target_id, Endpoint(target_endpoint)
        )
        self.connections = [
            c
            for c in self.connections
            if (c.source_wall_id, c.source_endpoint)
            != (connection.source_wall_id, connection.source_endpoint)
        ]
        self.connections.append(connection)
        logger.debug(
            f"Connection recorded: {source_id}.{connection.source_endpoint.value} -> "
            f"{target_id}.{connection.target_endpoint.value}"
        )

    def on_select_wall(self, wall_id: str | None) -> None:
        self.selected_wall_id = wall_id

    # Shelf sides

    @property
    def shelf_sides(self) -> dict[str, ShelfSide]:
        return dict(self._shelf_sides)

    def shelf_side(self, wall_id: str) -> ShelfSide:
        return self._shelf_sides.get(wall_id, ShelfSide.FRONT)

    def toggle_shelf_side(self, wall_id: str) -> ShelfSide:
        side = ShelfSide.FRONT if self.shelf_side(wall_id) is ShelfSide.BACK else ShelfSide.BACK
        self._shelf_sides[wall_id] = side
        return side

    # Wall management

    def add_wall(
        self,
        width: float,
        height: float = 250.0,
        depth: float = 10.0,
        x: float = 0.0,
        z: float = 0.0,
        rotation_y: float = 0.0,
        name: str = "",
    ) -> Wall:
        """Insert a new wall and select it.

        Sizes are raised to at least 1 cm, the wall stands on the floor
        (elevation is half its height) and starts locked. An empty name
        becomes ``"Wall N"`` where N counts the walls including the new one.

        Returns:
            The inserted wall.
        """
        width, height, depth = max(1.0, width), max(1.0, height), max(1.0, depth)
        wall_id = self._new_id()
        wall = Wall(
            id=wall_id,
            name=name or f"Wall {len(plan_walls(self._walls)) + 1}",
            width=width,
            height=height,
            depth=depth,
            position=Vector3(x, height / 2, z),
            rotation_y=rotation_y,
            is_locked=True,
        )
        self._walls.append(wall)
        self.selected_wall_id = wall_id
        logger.debug(f"Added wall {wall_id} ({width:.0f} cm)")
        return wall

    def add_from_template(
        self, template: WallTemplate, x: float = 0.0, z: float = 0.0
    ) -> Wall:
        return self.add_wall(
            template.width,
            template.height,
            template.depth,
            x=x,
            z=z,
            name=template.name,
        )

    def update_wall(
        self,
        wall_id: str,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
        name: str | None = None,
    ) -> Wall | None:
        """Patch a wall's size or name; omitted fields keep their value."""
        wall = self._require(wall_id)
        if wall is None:
            return None
        if width is not None:
            wall.width = width
        if height is not None:
            wall.height = height
        if depth is not None:
            wall.depth = depth
        if name is not None:
            wall.name = name
        return wall

    def remove_wall(self, wall_id: str) -> bool:
        """Delete a wall and its joints. The floor cannot be removed."""
        if wall_id == FLOOR_ID:
            return False
        wall = self._require(wall_id)
        if wall is None:
            return False
        self._walls.remove(wall)
        self._shelf_sides.pop(wall_id, None)
        self.connections = [
            c for c in self.connections if wall_id not in (c.source_wall_id, c.target_wall_id)
        ]
        if self.selected_wall_id == wall_id:
            self.selected_wall_id = None
        return True

    def reset(self) -> None:
        """Restore the default layout and forget joints and selection."""
        self._walls[:] = default_walls()
        self._shelf_sides.clear()
        self.connections = []
        self.selected_wall_id = None
        self._next_index = len(plan_walls(self._walls))

    def _new_id(self) -> str:
        while True:
            self._next_index += 1
            candidate = f"wall-{self._next_index}"
            if find_wall(self._walls, candidate) is None:
                return candidate
