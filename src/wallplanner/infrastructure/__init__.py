"""Infrastructure layer - in-memory host and formatters."""

from .formatters import (
    ConnectionFormatter,
    JsonExporter,
    ReplayReportFormatter,
    WallTableFormatter,
)
from .wall_store import InMemoryWallStore

__all__ = [
    "ConnectionFormatter",
    "InMemoryWallStore",
    "JsonExporter",
    "ReplayReportFormatter",
    "WallTableFormatter",
]
