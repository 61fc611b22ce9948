"""World to view coordinate mapping for the top-down planner.

The floor rectangle is fitted isotropically into the container (minus
padding on every side), then scaled by the zoom factor and shifted by the
pan offset.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from ..constants import INITIAL_ZOOM, MIN_WALL_PIXEL_LENGTH, VIEW_PADDING
from ..value_objects import (
    ContainerSize,
    FloorBounds,
    PanOffset,
    ViewPoint,
    WorldPoint,
)
from .geometry import distance

if TYPE_CHECKING:
    from ..entities import Wall

__all__ = ["ViewRect", "ViewTransform"]


@dataclass(frozen=True)
class ViewRect:
    """Axis-aligned rectangle in view space."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class ViewTransform:
    """Bijective mapping between world centimeters and view pixels.

    A transform is a snapshot of the view state; derive a new one with
    :meth:`with_zoom`, :meth:`with_pan` or :meth:`with_container` whenever
    that state changes.

    Attributes:
        bounds: Floor rectangle used for scaling and pan clamping.
        container: Container size in pixels.
        zoom: Zoom factor applied on top of the fitted base scale.
        pan: Pixel offset of the drawing.
        padding: Fixed margin on each side of the container.
    """

    bounds: FloorBounds
    container: ContainerSize
    zoom: float = INITIAL_ZOOM
    pan: PanOffset = field(default_factory=PanOffset)
    padding: float = VIEW_PADDING

    @property
    def content_width(self) -> float:
        return self.container.width - self.padding * 2

    @property
    def content_height(self) -> float:
        return self.container.height - self.padding * 2

    @property
    def is_laid_out(self) -> bool:
        """False until the container has room for content."""
        return self.content_width > 0 and self.content_height > 0

    @property
    def base_scale(self) -> float:
        """Pixels per centimeter at zoom 1, fitting the floor isotropically."""
        if not self.is_laid_out:
            return 0.0
        return min(
            self.content_width / self.bounds.width,
            self.content_height / self.bounds.depth,
        )

    @property
    def world_per_pixel(self) -> float:
        """Centimeters per pixel at zoom 1, used by the inverse mapping."""
        if not self.is_laid_out:
            return 0.0
        return max(
            self.bounds.width / self.content_width,
            self.bounds.depth / self.content_height,
        )

    def world_to_view(self, x: float, z: float) -> ViewPoint:
        """Map a world point (cm) to view pixels."""
        if not self.is_laid_out:
            return ViewPoint(self.padding, self.padding)
        s = self.base_scale * self.zoom
        return ViewPoint(
            left=self.padding + (x - self.bounds.min_x) * s + self.pan.x,
            top=self.padding + (z - self.bounds.min_z) * s + self.pan.y,
        )

    def view_to_world(self, px: float, py: float) -> WorldPoint:
        """Map view pixels back to a world point.

        No clamping is applied; points outside the container map to points
        outside the floor.
        """
        if not self.is_laid_out:
            return WorldPoint(self.bounds.min_x, self.bounds.min_z)
        x_pix = (px - self.padding - self.pan.x) / self.zoom
        z_pix = (py - self.padding - self.pan.y) / self.zoom
        s_world_per_px = self.world_per_pixel
        return WorldPoint(
            x=self.bounds.min_x + x_pix * s_world_per_px,
            z=self.bounds.min_z + z_pix * s_world_per_px,
        )

    def floor_size_px(self, zoom: float | None = None) -> tuple[float, float]:
        """Rendered floor width and height in pixels at ``zoom``."""
        z = self.zoom if zoom is None else zoom
        s = self.base_scale * z
        return (self.bounds.width * s, self.bounds.depth * s)

    def clamp_pan(
        self, pan_x: float, pan_y: float, zoom: float | None = None
    ) -> PanOffset:
        """Restrict a pan offset so the floor stays in view at ``zoom``.

        When the floor is smaller than the content area the pan is pinned
        to zero on that axis; otherwise it may scroll until the floor's far
        edge meets the content edge.
        """
        if not self.is_laid_out:
            return PanOffset(0.0, 0.0)
        floor_width_px, floor_height_px = self.floor_size_px(zoom)
        min_pan_x = min(0.0, self.content_width - floor_width_px)
        min_pan_y = min(0.0, self.content_height - floor_height_px)
        return PanOffset(
            x=max(min_pan_x, min(0.0, pan_x)),
            y=max(min_pan_y, min(0.0, pan_y)),
        )

    def floor_rect(self) -> ViewRect:
        """View rectangle covered by the floor outline."""
        top_left = self.world_to_view(self.bounds.min_x, self.bounds.min_z)
        width, height = self.floor_size_px()
        return ViewRect(top_left.left, top_left.top, width, height)

    def wall_pixel_length(self, wall: Wall) -> float:
        """On-screen length of a wall, measured between its projected endpoints."""
        a, b = wall.endpoints()
        a_view = self.world_to_view(a.x, a.z)
        b_view = self.world_to_view(b.x, b.z)
        return max(
            MIN_WALL_PIXEL_LENGTH,
            distance(a_view.left, a_view.top, b_view.left, b_view.top),
        )

    def with_zoom(self, zoom: float) -> "ViewTransform":
        return replace(self, zoom=zoom)

    def with_pan(self, pan: PanOffset) -> "ViewTransform":
        return replace(self, pan=pan)

    def with_container(self, container: ContainerSize) -> "ViewTransform":
        return replace(self, container=container)

    def with_bounds(self, bounds: FloorBounds) -> "ViewTransform":
        return replace(self, bounds=bounds)
