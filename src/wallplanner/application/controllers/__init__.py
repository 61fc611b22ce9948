"""Pointer interaction controllers."""

from .drag import DragController
from .pan_zoom import PanZoomController
from .rotation import RotationController, RotationWriter

__all__ = [
    "DragController",
    "PanZoomController",
    "RotationController",
    "RotationWriter",
]
