"""Adapters from configuration models to domain objects and controllers."""

from wallplanner.application.config.schemas import (
    EditorSettings,
    SessionFile,
    WallConfig,
)
from wallplanner.application.controllers import (
    DragController,
    PanZoomController,
    RotationController,
)
from wallplanner.domain.entities import Wall, default_walls
from wallplanner.domain.services import SnapEngine
from wallplanner.domain.value_objects import ContainerSize, Vector3


def settings_to_snap_engine(settings: EditorSettings) -> SnapEngine:
    return SnapEngine(
        capture_radius=settings.snap.capture_radius,
        capture_multiplier=settings.snap.capture_multiplier,
        hysteresis_multiplier=settings.snap.hysteresis_multiplier,
    )


def settings_to_drag_controller(settings: EditorSettings) -> DragController:
    return DragController(
        snap_engine=settings_to_snap_engine(settings),
        respect_locks=settings.respect_locks,
    )


def settings_to_rotation_controller(settings: EditorSettings) -> RotationController:
    rotation = settings.rotation
    return RotationController(
        sensitivity=rotation.sensitivity,
        smoothing=rotation.smoothing,
        max_step=rotation.max_step,
        min_delta=rotation.min_delta,
        respect_locks=settings.respect_locks,
    )


def settings_to_pan_zoom_controller(settings: EditorSettings) -> PanZoomController:
    view = settings.view
    return PanZoomController(
        min_zoom=view.min_zoom,
        max_zoom=view.max_zoom,
        zoom_step=view.zoom_step,
    )


def wall_config_to_wall(config: WallConfig) -> Wall:
    """Convert a wall record to a Wall entity.

    The elevation defaults to half the wall height, as walls stand on the
    floor.
    """
    y = config.y if config.y is not None else config.height / 2
    return Wall(
        id=config.id,
        name=config.name,
        width=config.width,
        height=config.height,
        depth=config.depth,
        position=Vector3(config.x, y, config.z),
        rotation_y=config.rotation_y,
        is_locked=config.is_locked,
        texture=config.texture,
    )


def session_to_walls(session: SessionFile) -> list[Wall]:
    """Walls of a session, or the default layout when it lists none."""
    if session.walls is None:
        return default_walls()
    return [wall_config_to_wall(w) for w in session.walls]


def session_to_container(session: SessionFile) -> ContainerSize:
    return ContainerSize(session.container.width, session.container.height)
