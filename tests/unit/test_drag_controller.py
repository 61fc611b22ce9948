"""Unit tests for DragController."""

import pytest

from wallplanner.application.controllers import DragController
from wallplanner.application.session import Dragging
from wallplanner.domain import ConnectRequest, Endpoint, SnapMemory, ViewPoint, ViewTransform, Wall
from wallplanner.domain.entities import find_wall
from wallplanner.infrastructure import InMemoryWallStore


def view_of(transform: ViewTransform, x: float, z: float) -> ViewPoint:
    return transform.world_to_view(x, z)


@pytest.fixture
def controller() -> DragController:
    return DragController()


class TestBegin:
    """Tests for starting a drag."""

    def test_begin_selects_wall(
        self, controller: DragController, store: InMemoryWallStore
    ) -> None:
        wall = find_wall(store.get_walls(), "wall-2")
        state = controller.begin(wall, ViewPoint(10, 20), store)

        assert state == Dragging(wall_id="wall-2", pointer_offset=ViewPoint(10, 20))
        assert store.selected_wall_id == "wall-2"

    def test_floor_cannot_be_dragged(
        self, controller: DragController, store: InMemoryWallStore
    ) -> None:
        floor = find_wall(store.get_walls(), "floor")
        assert controller.begin(floor, ViewPoint(0, 0), store) is None
        assert store.selected_wall_id is None

    def test_locks_are_advisory_by_default(
        self, controller: DragController, store: InMemoryWallStore
    ) -> None:
        wall = Wall(id="locked", width=100, is_locked=True)
        assert controller.begin(wall, ViewPoint(0, 0), store) is not None

    def test_respect_locks(self, store: InMemoryWallStore) -> None:
        controller = DragController(respect_locks=True)
        wall = Wall(id="locked", width=100, is_locked=True)
        assert controller.begin(wall, ViewPoint(0, 0), store) is None

    def test_anchor_seeds_memory(
        self, controller: DragController, store: InMemoryWallStore
    ) -> None:
        anchor = SnapMemory(-200, 0, Endpoint.B, Endpoint.A, "wall-1")
        wall = find_wall(store.get_walls(), "wall-2")
        state = controller.begin(wall, ViewPoint(0, 0), store, anchor=anchor)
        assert state.snap_memory is anchor


class TestMove:
    """Tests for pointer moves during a drag."""

    def test_free_move(
        self, controller: DragController, store: InMemoryWallStore, transform: ViewTransform
    ) -> None:
        state = Dragging("wall-2", ViewPoint(0, 0))
        state = controller.move(
            state, view_of(transform, 100, -250), transform, store.get_walls(), store
        )

        wall = find_wall(store.get_walls(), "wall-2")
        assert wall.position.x == pytest.approx(100)
        assert wall.position.z == pytest.approx(-250)
        assert wall.position.y == 125
        assert state.snap_candidate is None

    def test_centre_is_clamped_to_floor(
        self, controller: DragController, store: InMemoryWallStore, transform: ViewTransform
    ) -> None:
        state = Dragging("wall-2", ViewPoint(0, 0))
        controller.move(state, ViewPoint(0, 0), transform, store.get_walls(), store)

        wall = find_wall(store.get_walls(), "wall-2")
        assert (wall.position.x, wall.position.z) == (-500, -500)

    def test_snap_moves_wall_onto_joint(
        self, controller: DragController, store: InMemoryWallStore, transform: ViewTransform
    ) -> None:
        state = Dragging("wall-2", ViewPoint(0, 0))
        state = controller.move(
            state, view_of(transform, -315, 0), transform, store.get_walls(), store
        )

        wall = find_wall(store.get_walls(), "wall-2")
        assert wall.position.x == pytest.approx(-300)
        assert wall.position.z == pytest.approx(0)
        assert state.snap_candidate.target_wall_id == "wall-1"
        assert state.snap_memory is not None

    def test_missing_wall_keeps_state(
        self, controller: DragController, store: InMemoryWallStore, transform: ViewTransform
    ) -> None:
        state = Dragging("gone", ViewPoint(0, 0))
        assert controller.move(state, ViewPoint(50, 50), transform, store.get_walls(), store) is state


class TestEnd:
    """Tests for finishing a drag."""

    def test_end_with_snap_connects(
        self, controller: DragController, store: InMemoryWallStore, transform: ViewTransform
    ) -> None:
        state = controller.move(
            Dragging("wall-2", ViewPoint(0, 0)),
            view_of(transform, -315, 0),
            transform,
            store.get_walls(),
            store,
        )
        request = controller.end(state, store)

        expected = ConnectRequest("wall-2", Endpoint.B, "wall-1", Endpoint.A)
        assert request == expected
        assert store.connections == [expected]

    def test_end_without_snap(
        self, controller: DragController, store: InMemoryWallStore
    ) -> None:
        assert controller.end(Dragging("wall-2", ViewPoint(0, 0)), store) is None
        assert store.connections == []
