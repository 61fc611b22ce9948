"""Host callback protocols.

The planner never owns walls. A host application supplies the wall list and
persists the updates the planner requests through these callbacks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from wallplanner.domain.entities import Wall
    from wallplanner.domain.value_objects import Endpoint, ShelfSide


@runtime_checkable
class WallHostProtocol(Protocol):
    """Callbacks every planner host implements.

    Example:
        ```python
        class MyHost:
            def get_walls(self) -> Sequence[Wall]:
                return self.walls

            def on_move_wall(self, wall_id: str, x: float, z: float) -> None:
                ...
        ```
    """

    def get_walls(self) -> Sequence[Wall]:
        """Current walls, including the floor entity."""
        ...

    def on_move_wall(self, wall_id: str, x: float, z: float) -> None:
        """Persist a new wall centre in world cm."""
        ...

    def on_connect_walls(
        self,
        source_id: str,
        source_endpoint: Endpoint,
        target_id: str,
        target_endpoint: Endpoint,
    ) -> None:
        """Record (or ignore) a joint committed on pointer release."""
        ...

    def on_select_wall(self, wall_id: str | None) -> None:
        """Selection changed; ``None`` clears it."""
        ...


@runtime_checkable
class AbsoluteRotationHostProtocol(Protocol):
    """Host that accepts absolute wall angles."""

    def on_set_rotation_absolute(self, wall_id: str, radians: float) -> None:
        """Persist ``radians`` as the wall's new ``rotation_y``."""
        ...


@runtime_checkable
class DeltaRotationHostProtocol(Protocol):
    """Host that accepts rotation increments."""

    def on_rotate_wall(self, wall_id: str, delta_radians: float) -> None:
        """Add ``delta_radians`` to the wall's ``rotation_y``."""
        ...


@runtime_checkable
class WallStoreProtocol(WallHostProtocol, Protocol):
    """A host that also keeps the pass-through state the planner displays.

    Used by the session replay command, which needs shelf sides and the
    reset-to-default trigger in addition to the core callbacks.
    """

    @property
    def shelf_sides(self) -> Mapping[str, ShelfSide]:
        """Shelf side per wall id; walls not listed use the front side."""
        ...

    def toggle_shelf_side(self, wall_id: str) -> ShelfSide:
        """Flip a wall's shelf side and return the new side."""
        ...

    def reset(self) -> None:
        """Replace the walls with the default layout."""
        ...
