"""Validate command for checking session files.

This module provides the `validate` command that checks a JSON session file
for errors and warnings, including events that name unknown walls.
"""

from pathlib import Path
from typing import Annotated

import typer

from wallplanner.application.config import (
    ConfigError,
    ValidationResult,
    load_session,
    validate_session,
)


def validate_command(
    session_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON session file to validate"),
    ],
) -> None:
    """Validate a planner session file.

    Checks the session file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unsupported version, etc.)
    - Events that name walls which do not exist when they are replayed
    - Degenerate layouts (no container area, missing floor)

    Exit codes:
        0 - Session is valid with no warnings
        1 - Session has errors (cannot be replayed)
        2 - Session is valid but has warnings

    Example:
        wallplanner validate drag-and-snap.json
    """
    typer.echo(f"Validating {session_file}...")
    typer.echo()

    try:
        session = load_session(session_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_session(session)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a session loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Session is valid.")
