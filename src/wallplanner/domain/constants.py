"""Interaction tuning constants for the wall planner.

These values encode the planner's interaction feel (magnet strength,
rotation damping, zoom range). They are overridable through EditorSettings.
"""

from __future__ import annotations

FLOOR_ID = "floor"

# --- Floor fallback (cm) ---

DEFAULT_FLOOR_HALF_EXTENT = 500.0

# --- Snapping (world cm, zoom independent) ---

CAPTURE_RADIUS = 20.0
CAPTURE_MULTIPLIER = 1.5  # primary capture zone = CAPTURE_RADIUS * 1.5
HYSTERESIS_MULTIPLIER = 2.2  # release zone when already snapped

# --- Rotation ---

ROTATION_SENSITIVITY = 0.3
ROTATION_SMOOTHING = 0.25
ROTATION_MAX_STEP = 0.06  # radians per pointer event
ROTATION_MIN_DELTA = 1e-4  # smaller deltas are not written

# --- View ---

VIEW_PADDING = 16.0  # px
MIN_ZOOM = 0.5
MAX_ZOOM = 4.0
ZOOM_STEP = 0.1
INITIAL_ZOOM = 2.8

# --- Overlays (px) ---

MIN_WALL_PIXEL_LENGTH = 4.0
DIMENSION_OFFSET = 22.0
DIMENSION_EXTENSION_LENGTH = 18.0
SHELF_MARKER_OFFSET = 20.0
ROTATION_HANDLE_GAP = 12.0
SNAP_MARKER_TOLERANCE = 2.0
