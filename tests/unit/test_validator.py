"""Unit tests for session advisory checks and ValidationResult."""

import pytest

from wallplanner.application.config import SessionFile, ValidationResult, validate_session
from wallplanner.application.config.validator import (
    check_event_references,
    check_gestures,
    check_layout,
)

FLOOR = {"id": "floor", "width": 1000, "depth": 1000}


def make_session(**overrides: object) -> SessionFile:
    data: dict = {
        "version": "1.1",
        "container": {"width": 800, "height": 600},
        "walls": [FLOOR, {"id": "wall-1", "width": 400}],
    }
    data.update(overrides)
    return SessionFile.model_validate(data)


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_empty_result(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warnings_exit_two(self) -> None:
        result = ValidationResult().add_warning("walls", "careful")
        assert result.is_valid
        assert result.exit_code == 2

    def test_errors_take_precedence(self) -> None:
        result = ValidationResult().add_warning("walls", "careful").add_error("events[0]", "bad")
        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "x")
        second = ValidationResult().add_warning("b", "y", "do z")
        first.merge(second)
        assert len(first.errors) == 1
        assert first.warnings[0].suggestion == "do z"


class TestLayoutChecks:
    def test_clean_layout(self) -> None:
        result = check_layout(make_session())
        assert result.errors == []
        assert result.warnings == []

    def test_zero_container(self) -> None:
        result = check_layout(make_session(container={"width": 0, "height": 0}))
        assert [w.path for w in result.warnings] == ["container"]

    def test_default_walls(self) -> None:
        result = check_layout(make_session(walls=None))
        assert result.warnings[0].path == "walls"
        assert "default layout" in result.warnings[0].message

    def test_missing_floor(self) -> None:
        result = check_layout(make_session(walls=[{"id": "wall-1", "width": 400}]))
        assert any("No 'floor' wall" in w.message for w in result.warnings)

    def test_wall_outside_floor(self) -> None:
        result = check_layout(
            make_session(walls=[FLOOR, {"id": "wall-1", "width": 400, "x": 900}])
        )
        assert [w.path for w in result.warnings] == ["walls[1]"]


class TestEventReferences:
    """Tests for check_event_references()."""

    def test_unknown_wall(self) -> None:
        result = check_event_references(
            make_session(events=[{"type": "select", "wall_id": "wall-9"}])
        )
        assert result.errors[0].path == "events[0].wall_id"
        assert result.errors[0].value == "wall-9"

    def test_known_wall_and_clear_selection(self) -> None:
        result = check_event_references(
            make_session(
                events=[
                    {"type": "select", "wall_id": "wall-1"},
                    {"type": "select"},
                ]
            )
        )
        assert result.is_valid

    def test_reset_switches_to_default_ids(self) -> None:
        events = [
            {"type": "rotate", "wall_id": "wall-3", "degrees": 10},
            {"type": "reset_walls"},
            {"type": "rotate", "wall_id": "wall-3", "degrees": 10},
        ]
        result = check_event_references(make_session(events=events))
        assert [e.path for e in result.errors] == ["events[0].wall_id"]

    @pytest.mark.parametrize(
        "event",
        [
            {"type": "pointer_down", "x": 0, "y": 0, "target": "rotation_handle", "wall_id": "nope"},
            {"type": "dimension_side", "wall_id": "nope", "side": "back"},
            {"type": "toggle_shelf_side", "wall_id": "nope"},
        ],
    )
    def test_every_wall_event_is_checked(self, event: dict) -> None:
        assert not check_event_references(make_session(events=[event])).is_valid


class TestGestures:
    def test_open_gesture_warns(self) -> None:
        events = [
            {"type": "pointer_down", "x": 0, "y": 0},
            {"type": "pointer_move", "x": 5, "y": 5},
        ]
        result = check_gestures(make_session(events=events))
        assert result.warnings[0].path == "events[0]"

    def test_leave_closes_gesture(self) -> None:
        events = [{"type": "pointer_down", "x": 0, "y": 0}, {"type": "pointer_leave"}]
        assert not check_gestures(make_session(events=events)).has_warnings


def test_validate_session_merges_checks() -> None:
    session = make_session(
        walls=None,
        events=[{"type": "select", "wall_id": "ghost"}, {"type": "pointer_down", "x": 0, "y": 0}],
    )
    result = validate_session(session)
    assert result.exit_code == 1
    assert len(result.errors) == 1
    assert len(result.warnings) == 2
