"""Domain services for the wall planner.

This package provides the geometry and interaction services:
- geometry: endpoint and angle helpers
- ViewTransform: world/view mapping and pan clamping
- SnapEngine: magnetic endpoint snapping with hysteresis
- overlays: dimension side, shelf-side marker, endpoint markers, rotation handle
"""

from .geometry import (
    center_from_anchor,
    degrees_to_rotation,
    distance,
    normalize_angle,
    rotation_to_degrees,
    wall_endpoints,
)
from .overlays import (
    DimensionAnnotation,
    EndpointMarker,
    ShelfSideMarker,
    dimension_annotation,
    dimension_side,
    endpoint_markers,
    rotation_handle_position,
    shelf_side_marker,
)
from .snap_engine import SnapEngine, SnapResult
from .view_transform import ViewRect, ViewTransform

__all__ = [
    "DimensionAnnotation",
    "EndpointMarker",
    "ShelfSideMarker",
    "SnapEngine",
    "SnapResult",
    "ViewRect",
    "ViewTransform",
    "center_from_anchor",
    "degrees_to_rotation",
    "dimension_annotation",
    "dimension_side",
    "distance",
    "endpoint_markers",
    "normalize_angle",
    "rotation_handle_position",
    "rotation_to_degrees",
    "shelf_side_marker",
    "wall_endpoints",
]
