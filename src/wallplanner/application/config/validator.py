"""Validation structures and session advisory checks.

Pydantic already enforces the structure of a session file. The checks here
look at the session as a whole: events that name walls which will not exist
when they are replayed, and settings that make the replay degenerate.
"""

from dataclasses import dataclass, field
from typing import Any

from wallplanner.application.config.adapter import session_to_walls
from wallplanner.application.config.schemas import (
    DimensionSideEvent,
    PointerDownEvent,
    PointerLeaveEvent,
    PointerUpEvent,
    ResetWallsEvent,
    RotateEvent,
    SelectEvent,
    SessionFile,
    ToggleShelfSideEvent,
)
from wallplanner.domain.constants import FLOOR_ID
from wallplanner.domain.entities import default_walls, find_floor, floor_bounds

_WALL_EVENTS = (
    PointerDownEvent,
    RotateEvent,
    SelectEvent,
    DimensionSideEvent,
    ToggleShelfSideEvent,
)


@dataclass
class ValidationError:
    """A blocking problem; the session cannot be replayed as written.

    Attributes:
        path: JSON path to the offending field (e.g. "events[3].wall_id")
        message: Human-readable description of the error
        value: The value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern about a session."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_layout(session: SessionFile) -> ValidationResult:
    """Advisories about the container and the initial walls."""
    result = ValidationResult()

    if session.container.width <= 0 or session.container.height <= 0:
        result.add_warning(
            "container",
            "Container has no area; pointer positions cannot be mapped to the floor",
            "Give the container a positive width and height",
        )

    if session.walls is None:
        result.add_warning(
            "walls",
            "No walls listed; the default layout will be used",
        )
        return result

    walls = session_to_walls(session)
    if find_floor(walls) is None:
        result.add_warning(
            "walls",
            f"No '{FLOOR_ID}' wall; default floor bounds will be used",
            f"Add a wall with id '{FLOOR_ID}' to define the floor",
        )

    bounds = floor_bounds(walls)
    for index, wall in enumerate(walls):
        if wall.is_floor:
            continue
        if not bounds.contains(wall.position.x, wall.position.z):
            result.add_warning(
                f"walls[{index}]",
                f"Wall '{wall.id}' is centred outside the floor; "
                "dragging it will pull it inside",
            )
    return result


def check_event_references(session: SessionFile) -> ValidationResult:
    """Errors for events that name walls absent at that point of the replay."""
    result = ValidationResult()
    known = {wall.id for wall in session_to_walls(session)}
    default_ids = {wall.id for wall in default_walls()}

    for index, event in enumerate(session.events):
        if isinstance(event, ResetWallsEvent):
            known = set(default_ids)
            continue
        if not isinstance(event, _WALL_EVENTS):
            continue
        wall_id = event.wall_id
        if wall_id is not None and wall_id not in known:
            result.add_error(
                f"events[{index}].wall_id", f"Unknown wall id '{wall_id}'", wall_id
            )
    return result


def check_gestures(session: SessionFile) -> ValidationResult:
    """Warn when the session stops in the middle of a gesture."""
    result = ValidationResult()
    open_index: int | None = None
    for index, event in enumerate(session.events):
        if isinstance(event, PointerDownEvent) and open_index is None:
            open_index = index
        elif isinstance(event, (PointerUpEvent, PointerLeaveEvent)):
            open_index = None
    if open_index is not None:
        result.add_warning(
            f"events[{open_index}]",
            "Gesture is never released; it ends when the replay finishes",
            "Add a pointer_up event",
        )
    return result


def validate_session(session: SessionFile) -> ValidationResult:
    """Perform full validation of a session file.

    Args:
        session: A SessionFile instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_layout(session))
    result.merge(check_event_references(session))
    result.merge(check_gestures(session))
    return result
