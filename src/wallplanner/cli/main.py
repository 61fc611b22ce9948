"""Typer CLI for the wall planner."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from wallplanner.application import FloorPlanEditor, ReplaySessionCommand
from wallplanner.application.config import (
    ConfigError,
    load_session,
    session_to_container,
    session_to_walls,
)
from wallplanner.cli.commands import display_load_error, validate_command
from wallplanner.domain import PRECONFIGURED_WALLS, default_walls, plan_walls
from wallplanner.infrastructure import (
    InMemoryWallStore,
    JsonExporter,
    ReplayReportFormatter,
    WallTableFormatter,
)

app = typer.Typer(
    name="wallplanner",
    help="Inspect and replay top-down wall planner sessions.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log interaction decisions")
    ] = False,
) -> None:
    """Wall planner developer tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def defaults(
    templates: Annotated[
        bool, typer.Option("--templates", "-t", help="Also list wall templates")
    ] = False,
) -> None:
    """Show the default wall layout."""
    formatter = WallTableFormatter(show_endpoints=True)
    typer.echo(formatter.format(default_walls()))

    if templates:
        typer.echo()
        typer.echo("TEMPLATES")
        typer.echo("=" * 40)
        for template in PRECONFIGURED_WALLS:
            typer.echo(
                f"  {template.id:<10} {template.name:<14} "
                f"{template.width:.0f} x {template.height:.0f} x {template.depth:.0f} cm"
            )


@app.command()
def inspect(
    session_file: Annotated[
        Path, typer.Argument(help="Path to the JSON session file")
    ],
) -> None:
    """Show the initial walls of a session with endpoints and dimension sides."""
    try:
        session = load_session(session_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    store = InMemoryWallStore(session_to_walls(session))
    editor = FloorPlanEditor(store, session_to_container(session), session.settings)
    walls = store.get_walls()
    sides = {}
    for wall in plan_walls(walls):
        side = editor.dimension_side(wall.id)
        if side is not None:
            sides[wall.id] = side

    formatter = WallTableFormatter(show_endpoints=True)
    typer.echo(formatter.format(walls, dimension_sides=sides))
    typer.echo()
    typer.echo(
        f"Container: {session.container.width:.0f} x {session.container.height:.0f} px, "
        f"zoom {editor.zoom:.2f}, {len(session.events)} event(s)"
    )


@app.command()
def replay(
    session_file: Annotated[
        Path, typer.Argument(help="Path to the JSON session file")
    ],
    output_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON")
    ] = False,
) -> None:
    """Replay a session's events and show the resulting walls and joints."""
    try:
        session = load_session(session_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    command = ReplaySessionCommand(store_factory=InMemoryWallStore)
    result = command.execute(session)

    if output_json:
        typer.echo(JsonExporter().export(result))
    else:
        typer.echo(ReplayReportFormatter().format(result))

    if not result.is_valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
