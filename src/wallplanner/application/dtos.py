"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from wallplanner.domain.entities import Wall
from wallplanner.domain.value_objects import (
    ConnectRequest,
    DimensionSide,
    PanOffset,
    ShelfSide,
)


@dataclass
class ReplayOutput:
    """Output DTO from replaying a scripted planner session.

    Attributes:
        walls: Final walls of the host, floor included.
        connections: Joints committed during the replay, in order.
        selected_wall_id: Selection at the end of the replay.
        zoom: Final zoom factor.
        pan: Final pan offset.
        shelf_sides: Shelf side per wall, as kept by the host.
        dimension_sides: Resolved dimension side per wall.
        events_applied: Events that changed or could have changed state.
        events_ignored: Pointer-downs that started no session.
        errors: Messages for events that could not be applied.
    """

    walls: list[Wall]
    connections: list[ConnectRequest] = field(default_factory=list)
    selected_wall_id: str | None = None
    zoom: float = 0.0
    pan: PanOffset = field(default_factory=PanOffset)
    shelf_sides: dict[str, ShelfSide] = field(default_factory=dict)
    dimension_sides: dict[str, DimensionSide] = field(default_factory=dict)
    events_applied: int = 0
    events_ignored: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if every event of the session was applied."""
        return len(self.errors) == 0
