"""Pytest configuration and shared fixtures for wall planner tests."""

from __future__ import annotations

import pytest

from wallplanner.application import FloorPlanEditor
from wallplanner.application.config import EditorSettings, ViewSettings
from wallplanner.domain import (
    ContainerSize,
    FloorBounds,
    Vector3,
    ViewTransform,
    Wall,
)
from wallplanner.infrastructure import InMemoryWallStore


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Plan fixtures
# =============================================================================
#
# The reference plan: a 1000 x 1000 cm floor centred on the origin, shown in
# an 800 x 600 px container with 16 px padding. At zoom 1 one centimeter is
# 0.568 px and the world origin sits at view (300, 300).


def _floor(width: float = 1000.0, depth: float = 1000.0) -> Wall:
    return Wall(
        id="floor",
        name="Floor",
        width=width,
        height=10,
        depth=depth,
        position=Vector3(0, 0, 0),
        is_locked=True,
    )


def _wall(
    wall_id: str,
    width: float = 400.0,
    x: float = 0.0,
    z: float = 0.0,
    rotation_y: float = 0.0,
    is_locked: bool = False,
) -> Wall:
    return Wall(
        id=wall_id,
        name=wall_id.title(),
        width=width,
        position=Vector3(x, 125, z),
        rotation_y=rotation_y,
        is_locked=is_locked,
    )


@pytest.fixture
def bounds() -> FloorBounds:
    return FloorBounds(-500, 500, -500, 500)


@pytest.fixture
def container() -> ContainerSize:
    return ContainerSize(800, 600)


@pytest.fixture
def transform(bounds: FloorBounds, container: ContainerSize) -> ViewTransform:
    """Reference transform at zoom 1 with no pan."""
    return ViewTransform(bounds=bounds, container=container, zoom=1.0)


@pytest.fixture
def walls() -> list[Wall]:
    """Floor, a 400 cm wall on the origin and a 200 cm wall off to the side."""
    return [
        _floor(),
        _wall("wall-1", width=400),
        _wall("wall-2", width=200, x=300, z=200),
    ]


@pytest.fixture
def store(walls: list[Wall]) -> InMemoryWallStore:
    return InMemoryWallStore(walls)


@pytest.fixture
def settings() -> EditorSettings:
    """Default tuning, starting at zoom 1 so the reference numbers apply."""
    return EditorSettings(view=ViewSettings(initial_zoom=1.0))


@pytest.fixture
def editor(
    store: InMemoryWallStore, container: ContainerSize, settings: EditorSettings
) -> FloorPlanEditor:
    return FloorPlanEditor(store, container, settings)
