"""Unit tests for SnapEngine.

These tests verify:
- Capture within CAPTURE_RADIUS * CAPTURE_MULTIPLIER (30 cm)
- Hysteresis: a held snap survives up to CAPTURE_RADIUS * HYSTERESIS_MULTIPLIER (44 cm)
- The dragged wall and the floor never act as targets
- Nearest pair wins, ties keep wall order
"""

import math

import pytest

from wallplanner.domain.entities import Wall
from wallplanner.domain.services import SnapEngine, wall_endpoints
from wallplanner.domain.value_objects import Endpoint, SnapMemory, Vector3


def make_wall(wall_id: str, width: float, x: float = 0.0, z: float = 0.0, theta: float = 0.0) -> Wall:
    return Wall(id=wall_id, width=width, position=Vector3(x, 125, z), rotation_y=theta)


@pytest.fixture
def engine() -> SnapEngine:
    return SnapEngine()


@pytest.fixture
def anchor_wall() -> Wall:
    """400 cm wall on the origin, endpoints at (-200, 0) and (200, 0)."""
    return make_wall("wall-1", 400)


@pytest.fixture
def dragged() -> Wall:
    return make_wall("wall-2", 200, x=300, z=300)


@pytest.fixture
def plan(anchor_wall: Wall, dragged: Wall) -> list[Wall]:
    floor = Wall(id="floor", width=1000, depth=1000)
    return [floor, anchor_wall, dragged]


class TestDistances:
    def test_default_distances(self, engine: SnapEngine) -> None:
        assert engine.capture_distance == pytest.approx(30)
        assert engine.release_distance == pytest.approx(44)

    def test_custom_radius(self) -> None:
        engine = SnapEngine(capture_radius=10)
        assert engine.capture_distance == pytest.approx(15)
        assert engine.release_distance == pytest.approx(22)


class TestCapture:
    """Tests for new snaps."""

    def test_snaps_endpoint_onto_target(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        """B end 5 cm from wall-1's A end snaps and shifts the centre."""
        result = engine.snap(dragged, -305, 0, plan)

        assert result.is_snapped
        assert result.x == pytest.approx(-300)
        assert result.z == pytest.approx(0)
        candidate = result.candidate
        assert candidate.target_wall_id == "wall-1"
        assert candidate.target_endpoint is Endpoint.A
        assert candidate.source_endpoint is Endpoint.B
        assert (candidate.world_x, candidate.world_z) == (-200, 0)

    def test_snapped_endpoint_coincides_with_target(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        result = engine.snap(dragged, -290, 12, plan)
        assert result.is_snapped
        a, b = wall_endpoints(result.x, result.z, dragged.width, dragged.rotation_y)
        source = a if result.candidate.source_endpoint is Endpoint.A else b
        assert source.x == pytest.approx(result.candidate.world_x)
        assert source.z == pytest.approx(result.candidate.world_z)

    def test_memory_mirrors_candidate(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        result = engine.snap(dragged, -305, 0, plan)
        assert result.memory == SnapMemory.from_candidate(result.candidate)

    def test_capture_boundary_is_inclusive(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        assert engine.snap(dragged, -330, 0, plan).is_snapped

    def test_out_of_range_passes_through(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        result = engine.snap(dragged, -335, 0, plan)
        assert not result.is_snapped
        assert (result.x, result.z) == (-335, 0)
        assert result.memory is None

    def test_rotated_walls(self, engine: SnapEngine, plan: list[Wall]) -> None:
        """Endpoints are compared in world space whatever the rotation."""
        rotated = make_wall("wall-3", 100, theta=math.pi / 2)
        # Centre (-200, 55) puts its A end at (-200, 5).
        result = engine.snap(rotated, -200, 55, plan + [rotated])
        assert result.is_snapped
        assert result.candidate.source_endpoint is Endpoint.A
        assert result.x == pytest.approx(-200)
        assert result.z == pytest.approx(50)


class TestHysteresis:
    """A held snap is kept under the looser release distance."""

    def test_kept_with_memory(self, engine: SnapEngine, dragged: Wall, plan: list[Wall]) -> None:
        first = engine.snap(dragged, -305, 0, plan)
        held = engine.snap(dragged, -335, 0, plan, memory=first.memory)

        assert held.is_snapped
        assert held.x == pytest.approx(-300)
        assert held.candidate.target_wall_id == "wall-1"
        assert held.candidate.source_endpoint is Endpoint.B

    def test_released_past_release_distance(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        first = engine.snap(dragged, -305, 0, plan)
        released = engine.snap(dragged, -350, 0, plan, memory=first.memory)

        assert not released.is_snapped
        assert (released.x, released.z) == (-350, 0)
        assert released.memory is None

    def test_fresh_capture_wins_over_memory(
        self, engine: SnapEngine, dragged: Wall, plan: list[Wall]
    ) -> None:
        """A new target inside the capture zone replaces the remembered one."""
        first = engine.snap(dragged, -305, 0, plan)
        moved = engine.snap(dragged, 95, 3, plan, memory=first.memory)
        assert moved.candidate.target_endpoint is Endpoint.B
        assert (moved.candidate.world_x, moved.candidate.world_z) == (200, 0)


class TestTargets:
    def test_dragged_wall_is_excluded(self, engine: SnapEngine) -> None:
        wall = make_wall("wall-1", 200)
        result = engine.snap(wall, 2, 0, [wall])
        assert not result.is_snapped

    def test_floor_is_excluded(self, engine: SnapEngine, dragged: Wall) -> None:
        floor = Wall(id="floor", width=200)
        result = engine.snap(dragged, 3, 0, [floor, dragged])
        assert not result.is_snapped

    def test_nearest_pair_wins(self, engine: SnapEngine, dragged: Wall) -> None:
        near = make_wall("near", 100, x=-250, z=10)  # B end at (-200, 10)
        far = make_wall("far", 100, x=-250, z=20)  # B end at (-200, 20)
        result = engine.snap(dragged, -100, 0, [far, near, dragged])
        assert result.candidate.target_wall_id == "near"

    def test_ties_keep_wall_order(self, engine: SnapEngine, dragged: Wall) -> None:
        first = make_wall("first", 100, x=-250, z=10)
        second = make_wall("second", 100, x=-250, z=-10)
        result = engine.snap(dragged, -100, 0, [first, second, dragged])
        assert result.candidate.target_wall_id == "first"

    def test_either_source_endpoint_can_snap(self, engine: SnapEngine, plan: list[Wall]) -> None:
        """The magnet is symmetric between A and B of the dragged wall."""
        dragged = make_wall("wall-2", 200)
        from_left = engine.snap(dragged, 305, 0, plan)
        from_right = engine.snap(dragged, -305, 0, plan)
        assert from_left.candidate.source_endpoint is Endpoint.A
        assert from_right.candidate.source_endpoint is Endpoint.B

    def test_zero_width_dragged_wall(self, engine: SnapEngine, anchor_wall: Wall) -> None:
        """Both ends sit on the centre, so the centre itself is pulled onto the joint."""
        point = make_wall("point", 0)
        result = engine.snap(point, -210, 5, [anchor_wall, point])

        assert result.is_snapped
        assert result.x == pytest.approx(-200)
        assert result.z == pytest.approx(0)
        assert result.candidate.target_wall_id == "wall-1"
        assert result.candidate.target_endpoint is Endpoint.A
        assert result.candidate.source_endpoint is Endpoint.B

    def test_zero_width_target_wall(self, engine: SnapEngine) -> None:
        """A collapsed target still offers its centre as an endpoint."""
        pin = make_wall("pin", 0, x=-400)
        dragged = make_wall("wall-2", 200)
        # A end at (-392, 4), about 9 cm from the pin.
        result = engine.snap(dragged, -292, 4, [pin, dragged])

        assert result.is_snapped
        assert result.x == pytest.approx(-300)
        assert result.z == pytest.approx(0)
        assert result.candidate.target_wall_id == "pin"
        assert result.candidate.target_endpoint is Endpoint.A
        assert result.candidate.source_endpoint is Endpoint.A
