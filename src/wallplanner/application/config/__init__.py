"""Configuration schema and loading system for the wall planner.

Public API:
    - EditorSettings: Planner tuning (snap, rotation, view, lock policy)
    - SessionFile: Scripted planner session (container, walls, events)
    - load_settings: Load EditorSettings from a JSON file
    - load_session: Load a SessionFile from a JSON file
    - load_session_from_dict: Validate a session dictionary
    - ConfigError: Exception for configuration errors
    - validate_session: Whole-session advisory checks
    - settings_to_*: Build controllers and engines from settings

Example:
    >>> from pathlib import Path
    >>> from wallplanner.application.config import load_settings, ConfigError
    >>>
    >>> try:
    ...     settings = load_settings(Path("planner.json"))
    ...     print(f"Capture radius: {settings.snap.capture_radius} cm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wallplanner.application.config.adapter import (
    session_to_container,
    session_to_walls,
    settings_to_drag_controller,
    settings_to_pan_zoom_controller,
    settings_to_rotation_controller,
    settings_to_snap_engine,
    wall_config_to_wall,
)
from wallplanner.application.config.loader import (
    ConfigError,
    load_session,
    load_session_from_dict,
    load_settings,
)
from wallplanner.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_session,
)
from wallplanner.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ContainerConfig,
    DimensionSideEvent,
    EditorSettings,
    ModifierEvent,
    PointerDownEvent,
    PointerLeaveEvent,
    PointerMoveEvent,
    PointerUpEvent,
    ResetWallsEvent,
    RotateEvent,
    RotationSettings,
    SelectEvent,
    SessionEvent,
    SessionFile,
    SnapSettings,
    ToggleShelfSideEvent,
    ViewSettings,
    WallConfig,
    WheelEvent,
    ZoomEvent,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ContainerConfig",
    "DimensionSideEvent",
    "EditorSettings",
    "ModifierEvent",
    "PointerDownEvent",
    "PointerLeaveEvent",
    "PointerMoveEvent",
    "PointerUpEvent",
    "ResetWallsEvent",
    "RotateEvent",
    "RotationSettings",
    "SelectEvent",
    "SessionEvent",
    "SessionFile",
    "SnapSettings",
    "ToggleShelfSideEvent",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ViewSettings",
    "WallConfig",
    "WheelEvent",
    "ZoomEvent",
    "load_session",
    "load_session_from_dict",
    "load_settings",
    "session_to_container",
    "session_to_walls",
    "settings_to_drag_controller",
    "settings_to_pan_zoom_controller",
    "settings_to_rotation_controller",
    "settings_to_snap_engine",
    "validate_session",
    "wall_config_to_wall",
]
