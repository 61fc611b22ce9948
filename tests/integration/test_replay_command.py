"""Integration tests for ReplaySessionCommand.

These tests verify:
- A scripted drag commits a joint and keeps it through a typed rotation
- View, selection, shelf and dimension state are reported
- Events naming unknown walls are reported without aborting the replay
- A session ending mid-gesture behaves like the pointer leaving
"""

import math
from pathlib import Path

import pytest

from wallplanner.application import ReplaySessionCommand
from wallplanner.application.config import load_session, load_session_from_dict
from wallplanner.domain import ConnectRequest, DimensionSide, Endpoint, ShelfSide
from wallplanner.domain.entities import find_wall
from wallplanner.infrastructure import InMemoryWallStore

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "sessions"


@pytest.fixture
def command() -> ReplaySessionCommand:
    return ReplaySessionCommand(store_factory=InMemoryWallStore)


class TestDragAndSnapSession:
    """Replays tests/fixtures/sessions/drag_and_snap.json."""

    @pytest.fixture
    def output(self, command: ReplaySessionCommand):
        return command.execute(load_session(FIXTURES_PATH / "drag_and_snap.json"))

    def test_joint_committed(self, output) -> None:
        assert output.connections == [
            ConnectRequest("wall-2", Endpoint.B, "wall-1", Endpoint.A)
        ]

    def test_rotation_keeps_joint(self, output) -> None:
        wall = find_wall(output.walls, "wall-2")
        assert wall.rotation_y == pytest.approx(math.pi / 2)
        assert wall.position.x == pytest.approx(-200)
        assert wall.position.z == pytest.approx(-100)
        b = wall.endpoint(Endpoint.B)
        assert b.x == pytest.approx(-200)
        assert b.z == pytest.approx(0, abs=1e-9)

    def test_pass_through_state(self, output) -> None:
        assert output.selected_wall_id == "wall-1"
        assert output.shelf_sides == {"wall-1": ShelfSide.BACK}
        assert output.dimension_sides["wall-1"] is DimensionSide.BACK
        assert output.zoom == pytest.approx(1.0)

    def test_counts(self, output) -> None:
        assert output.is_valid
        assert output.events_applied == 7
        assert output.events_ignored == 0


class TestReplayBehaviour:
    def test_unknown_wall_is_reported(self, command: ReplaySessionCommand) -> None:
        output = command.execute(load_session(FIXTURES_PATH / "unknown_wall.json"))

        assert not output.is_valid
        assert output.errors == ["events[0]: unknown wall id 'wall-9'"]
        assert output.events_applied == 1
        wall = find_wall(output.walls, "wall-1")
        assert wall.rotation_y == pytest.approx(math.pi / 4)

    def test_view_events(self, command: ReplaySessionCommand) -> None:
        output = command.execute(load_session(FIXTURES_PATH / "valid_session.json"))
        assert output.zoom == pytest.approx(2.8)
        assert output.pan.x == pytest.approx(-20)
        assert output.pan.y == pytest.approx(-10)
        assert output.connections == []

    def test_open_gesture_is_closed(self, command: ReplaySessionCommand) -> None:
        session = load_session_from_dict(
            {
                "version": "1.0",
                "container": {"width": 800, "height": 600},
                "settings": {"view": {"initial_zoom": 1.0}},
                "walls": [
                    {"id": "floor", "width": 1000, "depth": 1000},
                    {"id": "wall-1", "width": 400},
                    {"id": "wall-2", "width": 200, "x": 300, "z": 200},
                ],
                "events": [
                    {"type": "pointer_down", "x": 0, "y": 0, "target": "wall", "wall_id": "wall-2"},
                    {"type": "pointer_move", "x": 121.08, "y": 300},
                ],
            }
        )
        output = command.execute(session)
        assert len(output.connections) == 1

    def test_ignored_pointer_down(self, command: ReplaySessionCommand) -> None:
        session = load_session_from_dict(
            {
                "version": "1.0",
                "container": {"width": 800, "height": 600},
                "events": [
                    {"type": "pointer_down", "x": 0, "y": 0},
                    {"type": "pointer_down", "x": 5, "y": 5},
                    {"type": "pointer_up"},
                ],
            }
        )
        output = command.execute(session)
        assert output.events_applied == 2
        assert output.events_ignored == 1

    def test_reset_walls(self, command: ReplaySessionCommand) -> None:
        session = load_session_from_dict(
            {
                "version": "1.1",
                "container": {"width": 800, "height": 600},
                "walls": [{"id": "floor", "width": 1000, "depth": 1000}],
                "events": [
                    {"type": "reset_walls"},
                    {"type": "toggle_shelf_side", "wall_id": "wall-3"},
                ],
            }
        )
        output = command.execute(session)
        assert [w.id for w in output.walls] == ["floor", "wall-1", "wall-2", "wall-3", "wall-4"]
        assert output.shelf_sides == {"wall-3": ShelfSide.BACK}
        assert output.is_valid
