"""Core data types shared by the grid, the search and the editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CellType(Enum):
    """What a single grid cell currently holds."""

    EMPTY = auto()
    WALL = auto()
    START = auto()
    GOAL = auto()
    VISITED = auto()
    PATH = auto()


@dataclass
class Cell:
    """One cell of the grid."""

    cell_type: CellType = CellType.EMPTY


class PlacementMode(Enum):
    """Which element a mouse click places."""

    WALL = auto()
    START = auto()
    GOAL = auto()


@dataclass(frozen=True)
class State:
    """A search node; ordering looks at the priority (f = g + h) alone."""

    position: tuple[int, int]
    priority: int

    def __lt__(self, other: State) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.priority < other.priority

    def __le__(self, other: State) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.priority <= other.priority

    def __gt__(self, other: State) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.priority > other.priority

    def __ge__(self, other: State) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.priority >= other.priority