"""Configuration and session file schemas.

EditorSettings carries the interaction tuning; SessionFile describes a
scripted planner session (container size, walls and pointer events) used by
the developer CLI and integration tests.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wallplanner.domain.constants import (
    CAPTURE_MULTIPLIER,
    CAPTURE_RADIUS,
    HYSTERESIS_MULTIPLIER,
    INITIAL_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
    ROTATION_MAX_STEP,
    ROTATION_MIN_DELTA,
    ROTATION_SENSITIVITY,
    ROTATION_SMOOTHING,
    VIEW_PADDING,
    ZOOM_STEP,
)

# Supported schema versions for session files
# Version 1.0: Initial schema (walls, container, pointer events)
# Version 1.1: Added dimension side and shelf side events
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class SnapSettings(BaseModel):
    """Magnetic snapping tuning.

    Attributes:
        capture_radius: Base snap radius in world cm
        capture_multiplier: Factor giving the radius for new snaps
        hysteresis_multiplier: Factor giving the radius that keeps an
            existing snap
    """

    model_config = ConfigDict(extra="forbid")

    capture_radius: float = Field(default=CAPTURE_RADIUS, gt=0)
    capture_multiplier: float = Field(default=CAPTURE_MULTIPLIER, gt=0)
    hysteresis_multiplier: float = Field(default=HYSTERESIS_MULTIPLIER, gt=0)

    @model_validator(mode="after")
    def validate_hysteresis(self) -> "SnapSettings":
        """A snap must not be released closer than it is captured."""
        if self.hysteresis_multiplier < self.capture_multiplier:
            raise ValueError(
                "hysteresis_multiplier must be at least capture_multiplier"
            )
        return self


class RotationSettings(BaseModel):
    """Handle rotation tuning."""

    model_config = ConfigDict(extra="forbid")

    sensitivity: float = Field(default=ROTATION_SENSITIVITY, gt=0)
    smoothing: float = Field(default=ROTATION_SMOOTHING, gt=0, le=1)
    max_step: float = Field(default=ROTATION_MAX_STEP, gt=0, description="Radians per event")
    min_delta: float = Field(default=ROTATION_MIN_DELTA, ge=0)


class ViewSettings(BaseModel):
    """Viewport tuning."""

    model_config = ConfigDict(extra="forbid")

    padding: float = Field(default=VIEW_PADDING, ge=0, description="Pixels")
    min_zoom: float = Field(default=MIN_ZOOM, gt=0)
    max_zoom: float = Field(default=MAX_ZOOM, gt=0)
    zoom_step: float = Field(default=ZOOM_STEP, gt=0)
    initial_zoom: float = Field(default=INITIAL_ZOOM, gt=0)

    @model_validator(mode="after")
    def validate_zoom_range(self) -> "ViewSettings":
        if self.max_zoom < self.min_zoom:
            raise ValueError("max_zoom must be at least min_zoom")
        if not self.min_zoom <= self.initial_zoom <= self.max_zoom:
            raise ValueError("initial_zoom must lie between min_zoom and max_zoom")
        return self


class EditorSettings(BaseModel):
    """All planner tuning.

    Attributes:
        snap: Snapping tuning
        rotation: Rotation tuning
        view: Viewport tuning
        respect_locks: If True, locked walls cannot be dragged or rotated.
            Locks are advisory by default.
    """

    model_config = ConfigDict(extra="forbid")

    snap: SnapSettings = Field(default_factory=SnapSettings)
    rotation: RotationSettings = Field(default_factory=RotationSettings)
    view: ViewSettings = Field(default_factory=ViewSettings)
    respect_locks: bool = False


class ContainerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=0, description="Container width in pixels")
    height: float = Field(..., ge=0, description="Container height in pixels")


class WallConfig(BaseModel):
    """A wall record in a session file.

    Attributes:
        id: Unique wall identifier ("floor" for the floor)
        name: Display name
        width: Length in cm (X extent for the floor)
        height: Height in cm
        depth: Thickness in cm (Z extent for the floor)
        x: Centre X in cm
        z: Centre Z in cm
        y: Elevation in cm; defaults to half the height
        rotation_y: Rotation in radians
        is_locked: Advisory lock flag
        texture: Material key
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    width: float = Field(..., gt=0)
    height: float = Field(default=250.0, gt=0)
    depth: float = Field(default=10.0, gt=0)
    x: float = 0.0
    z: float = 0.0
    y: float | None = None
    rotation_y: float = 0.0
    is_locked: bool = False
    texture: str = "default"


TargetKindConfig = Literal["canvas", "wall", "rotation_handle"]


class PointerDownEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["pointer_down"]
    x: float
    y: float
    target: TargetKindConfig = "canvas"
    wall_id: str | None = None
    button: int = Field(default=0, ge=0, le=2)
    modifier: bool = False

    @model_validator(mode="after")
    def validate_target(self) -> "PointerDownEvent":
        if self.target != "canvas" and not self.wall_id:
            raise ValueError(f"target '{self.target}' requires wall_id")
        return self


class PointerMoveEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["pointer_move"]
    x: float
    y: float


class PointerUpEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["pointer_up"]


class PointerLeaveEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["pointer_leave"]


class WheelEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["wheel"]
    delta_y: float


class ZoomEvent(BaseModel):
    """Zoom button press."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["zoom"]
    direction: Literal["in", "out"]


class ModifierEvent(BaseModel):
    """Pan modifier (space bar) pressed or released."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["modifier"]
    held: bool


class RotateEvent(BaseModel):
    """Typed rotation: exactly one of radians, degrees or delta."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["rotate"]
    wall_id: str
    radians: float | None = None
    degrees: float | None = None
    delta: float | None = None

    @model_validator(mode="after")
    def validate_single_value(self) -> "RotateEvent":
        given = [v for v in (self.radians, self.degrees, self.delta) if v is not None]
        if len(given) != 1:
            raise ValueError("rotate needs exactly one of radians, degrees or delta")
        return self


class SelectEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["select"]
    wall_id: str | None = None


class DimensionSideEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["dimension_side"]
    wall_id: str
    side: Literal["front", "back", "auto"]


class ToggleShelfSideEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["toggle_shelf_side"]
    wall_id: str


class ResetWallsEvent(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["reset_walls"]


SessionEvent = Annotated[
    Union[
        PointerDownEvent,
        PointerMoveEvent,
        PointerUpEvent,
        PointerLeaveEvent,
        WheelEvent,
        ZoomEvent,
        ModifierEvent,
        RotateEvent,
        SelectEvent,
        DimensionSideEvent,
        ToggleShelfSideEvent,
        ResetWallsEvent,
    ],
    Field(discriminator="type"),
]


class SessionFile(BaseModel):
    """Root model of a scripted planner session.

    Attributes:
        version: Schema version
        container: Planner container size
        settings: Planner tuning
        walls: Wall records; the default layout is used when omitted
        events: Events replayed in order
    """

    model_config = ConfigDict(extra="forbid")

    version: str = Field(..., pattern=r"^\d+\.\d+$")
    container: ContainerConfig
    settings: EditorSettings = Field(default_factory=EditorSettings)
    walls: list[WallConfig] | None = None
    events: list[SessionEvent] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_wall_ids(self) -> "SessionFile":
        if self.walls is None:
            return self
        seen: set[str] = set()
        for wall in self.walls:
            if wall.id in seen:
                raise ValueError(f"Duplicate wall id '{wall.id}'")
            seen.add(wall.id)
        return self
