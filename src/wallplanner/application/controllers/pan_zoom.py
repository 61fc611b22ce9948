"""Wheel zoom and drag panning, both clamped to keep the floor in view."""

from __future__ import annotations

import logging

from wallplanner.domain.constants import MAX_ZOOM, MIN_ZOOM, ZOOM_STEP
from wallplanner.domain.services import ViewTransform
from wallplanner.domain.services.geometry import clamp
from wallplanner.domain.value_objects import ViewPoint

from ..session import Panning, PointerButton, PointerTarget, TargetKind

__all__ = ["PanZoomController"]

logger = logging.getLogger(__name__)


class PanZoomController:
    """Owns zoom steps and pointer panning.

    Every zoom or pan change passes through ``ViewTransform.clamp_pan`` with
    the zoom that will be in effect, so the floor never jumps out of view.
    """

    def __init__(
        self,
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
        zoom_step: float = ZOOM_STEP,
    ) -> None:
        if min_zoom <= 0 or max_zoom < min_zoom:
            raise ValueError("Zoom range must be positive and ordered")
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.zoom_step = zoom_step

    @staticmethod
    def should_pan(
        target: PointerTarget, button: PointerButton, modifier_held: bool
    ) -> bool:
        """Whether a pointer-down starts panning rather than editing.

        Panning starts on the empty background, with the pan modifier held,
        or with any non-primary button.
        """
        return (
            button != PointerButton.PRIMARY
            or modifier_held
            or target.kind is TargetKind.CANVAS
        )

    def clamp_zoom(self, zoom: float) -> float:
        return clamp(zoom, self.min_zoom, self.max_zoom)

    def begin(self, pointer: ViewPoint) -> Panning:
        logger.debug(f"Pan started at ({pointer.left:.1f}, {pointer.top:.1f})")
        return Panning(last_point=pointer)

    def move(
        self, state: Panning, pointer: ViewPoint, transform: ViewTransform
    ) -> tuple[Panning, ViewTransform]:
        """Shift the view by the pointer delta since the last event."""
        dx = pointer.left - state.last_point.left
        dy = pointer.top - state.last_point.top
        pan = transform.clamp_pan(transform.pan.x + dx, transform.pan.y + dy)
        return Panning(last_point=pointer), transform.with_pan(pan)

    def zoom_by(self, steps: int, transform: ViewTransform) -> ViewTransform:
        """Change zoom by ``steps`` increments and re-clamp the pan."""
        zoom = self.clamp_zoom(transform.zoom + steps * self.zoom_step)
        pan = transform.clamp_pan(transform.pan.x, transform.pan.y, zoom)
        logger.debug(f"Zoom {transform.zoom:.2f} -> {zoom:.2f}")
        return transform.with_zoom(zoom).with_pan(pan)

    def wheel(self, delta_y: float, transform: ViewTransform) -> ViewTransform:
        """One wheel notch: scrolling down zooms out, up zooms in."""
        if delta_y == 0:
            return transform
        return self.zoom_by(-1 if delta_y > 0 else 1, transform)
