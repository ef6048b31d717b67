"""Step-by-step A* search over the grid."""

from __future__ import annotations

import heapq
from collections.abc import Callable
from typing import Optional

from .types import Cell, CellType, State

Position = tuple[int, int]
Field = list[list[Cell]]
StepCallback = Callable[[Field], None]

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def heuristic(a: Position, b: Position) -> int:
    """Manhattan distance between two (row, column) positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def a_star_step_by_step(
    field: Field,
    start: Position,
    goal: Position,
    on_step: Optional[StepCallback],
    height: int,
    width: int,
) -> bool:
    """Run A* from start to goal, marking visited and path cells.

    ``on_step`` is called with the field after every change, so a caller
    can show the search as it progresses. Returns whether a path exists.
    """

    def step() -> None:
        if on_step is not None:
            on_step(field)

    queue: list[State] = [State(start, heuristic(start, goal))]
    came_from: dict[Position, Position] = {}
    g_score: dict[Position, int] = {start: 0}

    found = False
    while queue:
        position = heapq.heappop(queue).position
        if position == goal:
            found = True
            break

        y, x = position
        if field[y][x].cell_type not in (CellType.START, CellType.GOAL):
            field[y][x].cell_type = CellType.VISITED
        step()

        for dy, dx in _DIRECTIONS:
            ny, nx = y + dy, x + dx
            if not (0 <= ny < height and 0 <= nx < width):
                continue
            if field[ny][nx].cell_type is CellType.WALL:
                continue
            tentative_g = g_score[position] + 1
            if tentative_g < g_score.get((ny, nx), float("inf")):
                g_score[(ny, nx)] = tentative_g
                came_from[(ny, nx)] = position
                heapq.heappush(
                    queue, State((ny, nx), tentative_g + heuristic((ny, nx), goal))
                )

    if not found:
        print("No path found.")
        return False

    current = goal
    while current != start:
        current = came_from[current]
        if current != start:
            field[current[0]][current[1]].cell_type = CellType.PATH
            step()

    return True