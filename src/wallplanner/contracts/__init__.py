"""Contracts module - protocols between the planner and its host.

Example:
    ```python
    from wallplanner.contracts import WallHostProtocol

    def open_planner(host: WallHostProtocol) -> None:
        ...
    ```
"""

from .protocols import (
    AbsoluteRotationHostProtocol as AbsoluteRotationHostProtocol,
    DeltaRotationHostProtocol as DeltaRotationHostProtocol,
    WallHostProtocol as WallHostProtocol,
    WallStoreProtocol as WallStoreProtocol,
)

__all__ = [
    "AbsoluteRotationHostProtocol",
    "DeltaRotationHostProtocol",
    "WallHostProtocol",
    "WallStoreProtocol",
]
