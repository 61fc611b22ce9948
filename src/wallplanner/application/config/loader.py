"""Reading planner settings and scripted sessions from JSON files.

Every failure (missing file, unreadable file, broken JSON, a document the
schema rejects) surfaces as a single ConfigError, so callers such as the CLI
only need one except clause.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wallplanner.application.config.schemas import EditorSettings, SessionFile

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """A settings or session document could not be loaded.

    Attributes:
        message: Text shown to the user
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse or validation
        path: File the document came from; None for in-memory documents
        details: One entry per problem. JSON errors carry line and column;
            schema errors carry path, message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it appears in the document.

    >>> _json_path(("walls", 0, "width"))
    'walls[0].width'
    >>> _json_path(("events", 3, "pointer_down", "wall_id"))
    'events[3].pointer_down.wall_id'
    """
    rendered = "".join(
        f"[{segment}]" if isinstance(segment, int) else f".{segment}"
        for segment in loc
    )
    return rendered.lstrip(".")


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _json_path(problem["loc"]),
            "message": problem["msg"],
            "value": problem.get("input"),
            "error_type": problem["type"],
        }
        for problem in error.errors()
    ]


def _describe(model: type[BaseModel], problems: list[dict[str, Any]]) -> str:
    lines = [f"{model.__name__} is invalid:"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        # Whole objects are too noisy to echo back.
        value = problem.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"File not found: {path}", error_type="file_not_found", path=path
        )

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"No permission to read {path}", error_type="permission_denied", path=path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Could not read {path}: {e}", error_type="file_read_error", path=path
        ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path} is not valid JSON: {e.msg} at line {e.lineno}, column {e.colno}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def _validate(model: type[ModelT], data: Any, path: Path | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        raise ConfigError(
            _describe(model, problems),
            error_type="validation",
            path=path,
            details=problems,
        ) from e


def load_settings(path: Path) -> EditorSettings:
    """Load planner tuning (snap, rotation, view) from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    return _validate(EditorSettings, _read_json(path), path)


def load_session(path: Path) -> SessionFile:
    """Load a scripted planner session.

    Example:
        >>> try:
        ...     session = load_session(Path("drag-and-snap.json"))
        ... except ConfigError as e:
        ...     for problem in e.details:
        ...         print(problem.get("path"), problem["message"])
    """
    return _validate(SessionFile, _read_json(path), path)


def load_session_from_dict(data: dict[str, Any]) -> SessionFile:
    return _validate(SessionFile, data)
