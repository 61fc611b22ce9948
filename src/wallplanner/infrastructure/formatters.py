"""Text and JSON formatters for wall layouts and replay results."""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from wallplanner.application.dtos import ReplayOutput
from wallplanner.domain.entities import Wall, floor_bounds, plan_walls
from wallplanner.domain.services import rotation_to_degrees
from wallplanner.domain.value_objects import (
    ConnectRequest,
    DimensionSide,
    FloorBounds,
    ShelfSide,
)


class WallTableFormatter:
    """Formats walls as a fixed-width table.

    The floor is summarised on its own line above the table; only plan walls
    get a row.
    """

    def __init__(self, show_endpoints: bool = False) -> None:
        self._show_endpoints = show_endpoints

    def format(
        self,
        walls: Sequence[Wall],
        dimension_sides: Mapping[str, DimensionSide] | None = None,
        shelf_sides: Mapping[str, ShelfSide] | None = None,
    ) -> str:
        """Format walls as a table.

        Args:
            walls: Walls including the floor.
            dimension_sides: Resolved dimension side per wall, shown when given.
            shelf_sides: Shelf side per wall, shown when given.
        """
        lines = [
            "WALLS",
            "=" * 78,
            self._format_floor(floor_bounds(walls)),
            "",
        ]

        rows = plan_walls(walls)
        if not rows:
            lines.append("No walls.")
            return "\n".join(lines)

        header = f"{'ID':<10} {'Name':<14} {'Length':>8} {'X':>9} {'Z':>9} {'Angle':>7}  Lock"
        if dimension_sides is not None:
            header += "  Dim"
        if shelf_sides is not None:
            header += "  Shelf"
        lines.append(header)
        lines.append("-" * 78)

        for wall in rows:
            line = (
                f"{wall.id:<10} {wall.name[:14]:<14} {wall.width:>6.0f}cm "
                f"{wall.position.x:>9.1f} {wall.position.z:>9.1f} "
                f"{rotation_to_degrees(wall.rotation_y):>6.1f}°  "
                f"{'yes' if wall.is_locked else 'no':<4}"
            )
            if dimension_sides is not None:
                side = dimension_sides.get(wall.id)
                line += f"  {side.name.lower() if side else '-':<5}"
            if shelf_sides is not None:
                line += f"  {shelf_sides.get(wall.id, ShelfSide.FRONT).value}"
            lines.append(line.rstrip())
            if self._show_endpoints:
                a, b = wall.endpoints()
                lines.append(
                    f"{'':<10} a=({a.x:.1f}, {a.z:.1f})  b=({b.x:.1f}, {b.z:.1f})"
                )

        return "\n".join(lines)

    @staticmethod
    def _format_floor(bounds: FloorBounds) -> str:
        return (
            f"Floor: x [{bounds.min_x:.0f}, {bounds.max_x:.0f}] cm, "
            f"z [{bounds.min_z:.0f}, {bounds.max_z:.0f}] cm"
        )


class ConnectionFormatter:
    """Formats committed joints."""

    def format(self, connections: Sequence[ConnectRequest]) -> str:
        if not connections:
            return "No connections."
        lines = ["CONNECTIONS", "=" * 40]
        for c in connections:
            lines.append(
                f"  {c.source_wall_id}.{c.source_endpoint.value} -> "
                f"{c.target_wall_id}.{c.target_endpoint.value}"
            )
        return "\n".join(lines)


class ReplayReportFormatter:
    """Formats a replay result as a text report."""

    def __init__(self) -> None:
        self._walls = WallTableFormatter()
        self._connections = ConnectionFormatter()

    def format(self, output: ReplayOutput) -> str:
        lines = [
            self._walls.format(output.walls, output.dimension_sides, output.shelf_sides),
            "",
            self._connections.format(output.connections),
            "",
            f"Selected: {output.selected_wall_id or '-'}",
            f"Zoom: {output.zoom:.2f}  Pan: ({output.pan.x:.1f}, {output.pan.y:.1f})",
            f"Events: {output.events_applied} applied, {output.events_ignored} ignored",
        ]
        if output.errors:
            lines.append("")
            lines.append("Errors:")
            lines.extend(f"  {error}" for error in output.errors)
        return "\n".join(lines)


class JsonExporter:
    """Exports replay results as JSON."""

    def export(self, output: ReplayOutput) -> str:
        """Export a replay result as a JSON string."""
        data: dict[str, Any] = {
            "walls": [self._format_wall(w) for w in output.walls],
            "connections": [
                {
                    "source_wall_id": c.source_wall_id,
                    "source_endpoint": c.source_endpoint.value,
                    "target_wall_id": c.target_wall_id,
                    "target_endpoint": c.target_endpoint.value,
                }
                for c in output.connections
            ],
            "selected_wall_id": output.selected_wall_id,
            "view": {
                "zoom": output.zoom,
                "pan": {"x": output.pan.x, "y": output.pan.y},
            },
            "shelf_sides": {k: v.value for k, v in output.shelf_sides.items()},
            "dimension_sides": {
                k: v.name.lower() for k, v in output.dimension_sides.items()
            },
            "events": {
                "applied": output.events_applied,
                "ignored": output.events_ignored,
            },
        }
        if output.errors:
            data["errors"] = output.errors
        return json.dumps(data, indent=2)

    def _format_wall(self, wall: Wall) -> dict[str, Any]:
        a, b = wall.endpoints()
        return {
            "id": wall.id,
            "name": wall.name,
            "width": wall.width,
            "height": wall.height,
            "depth": wall.depth,
            "position": {
                "x": wall.position.x,
                "y": wall.position.y,
                "z": wall.position.z,
            },
            "rotation_y": wall.rotation_y,
            "is_locked": wall.is_locked,
            "texture": wall.texture,
            "endpoints": {
                "a": {"x": a.x, "z": a.z},
                "b": {"x": b.x, "z": b.z},
            },
        }
