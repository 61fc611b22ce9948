"""CLI command implementations for the wallplanner application.

This package contains subcommands for the wallplanner CLI, including:
- validate: Validate a session file
"""

from wallplanner.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
