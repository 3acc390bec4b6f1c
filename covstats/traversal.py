"""The path of a line through a single grid cell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from covstats.side import Side


@dataclass(frozen=True)
class Crossing:
    """A point at which a line crosses a side of a cell."""

    side: Side
    coord: Any


@dataclass
class Traversal:
    """The coordinates a line visits while inside one cell."""

    coords: list[Any] = field(default_factory=list)
    entry_side: Side = Side.NONE
    exit_side: Side = Side.NONE

    def add(self, coord: Any) -> None:
        self.coords.append(coord)

    def enter(self, coord: Any, side: Side) -> None:
        """Start the traversal at ``coord``, entering through ``side``."""
        if self.coords:
            raise RuntimeError("Traversal already started")
        self.add(coord)
        self.entry_side = side

    def exit(self, coord: Any, side: Side) -> None:
        """Finish the traversal at ``coord``, leaving through ``side``."""
        self.add(coord)
        self.exit_side = side

    def force_exit(self, side: Side) -> None:
        self.exit_side = side

    def is_closed_ring(self) -> bool:
        return len(self.coords) >= 3 and self.coords[0] == self.coords[-1]

    def empty(self) -> bool:
        return not self.coords

    def entered(self) -> bool:
        return self.entry_side is not Side.NONE

    def exited(self) -> bool:
        return self.exit_side is not Side.NONE

    def traversed(self) -> bool:
        return self.entered() and self.exited()

    def multiple_unique_coordinates(self) -> bool:
        first = self.coords[0] if self.coords else None
        return any(c != first for c in self.coords[1:])

    def last_coordinate(self) -> Any:
        if not self.coords:
            raise IndexError("Traversal has no coordinates.")
        return self.coords[-1]

    def exit_coordinate(self) -> Any:
        if not self.exited():
            raise RuntimeError("Can't get exit coordinate from incomplete traversal.")
        return self.last_coordinate()