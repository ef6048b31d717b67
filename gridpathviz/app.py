"""Interactive grid editor and its window."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from typing import Optional

from .astar import StepCallback, a_star_step_by_step
from .grid import CELL_SIZE, draw_grid, new_frame
from .types import Cell, CellType, PlacementMode

STEP_DELAY = 0.1
"""Pause between animation steps, in seconds."""


class Editor:
    """Holds the grid and the state of placing walls, start and goal."""

    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        self.field = [[Cell() for _ in range(width)] for _ in range(height)]
        self.mode = PlacementMode.WALL
        self.start_pos: Optional[tuple[int, int]] = None
        self.goal_pos: Optional[tuple[int, int]] = None
        self.placing = True
        self.pending_run = False
        self.path_drawn = False

    def set_mode(self, mode: PlacementMode) -> None:
        """Choose what the next click places."""
        self.mode = mode

    def _clear(self, cell_types: Sequence[CellType]) -> None:
        for row in self.field:
            for cell in row:
                if cell.cell_type in cell_types:
                    cell.cell_type = CellType.EMPTY

    def click(self, px: float, py: float) -> bool:
        """Handle a click at logical pixel (px, py); return whether the grid may have changed."""
        if not self.placing:
            return False
        x = int(max(0.0, px / CELL_SIZE))
        y = int(max(0.0, py / CELL_SIZE))
        if x >= self.width or y >= self.height:
            return False

        cell = self.field[y][x]
        if self.mode is PlacementMode.WALL:
            if cell.cell_type is CellType.WALL:
                cell.cell_type = CellType.EMPTY
            elif cell.cell_type is CellType.EMPTY:
                cell.cell_type = CellType.WALL
            return True

        if cell.cell_type is CellType.WALL:
            return False
        marker = CellType.START if self.mode is PlacementMode.START else CellType.GOAL
        self._clear((marker,))
        if cell.cell_type is CellType.EMPTY:
            cell.cell_type = marker
            if marker is CellType.START:
                self.start_pos = (y, x)
            else:
                self.goal_pos = (y, x)
        return True

    def reset(self) -> bool:
        """Clear a finished search so the grid can be edited again."""
        if not self.path_drawn:
            return False
        self._clear((CellType.PATH, CellType.VISITED))
        self.placing = True
        self.pending_run = False
        self.path_drawn = False
        print("Grid reset. Place walls, start, and goal again.")
        return True

    def request_run(self) -> bool:
        """Schedule a search if both start and goal are placed."""
        if not self.placing:
            return False
        if self.start_pos is None or self.goal_pos is None:
            print("Please set both start and goal positions before running.")
            return False
        self.placing = False
        self.pending_run = True
        return True

    def run_pending(self, on_step: Optional[StepCallback]) -> Optional[bool]:
        """Run a scheduled search; return its result, or None if none was scheduled."""
        if not self.pending_run:
            return None
        self.pending_run = False
        assert self.start_pos is not None and self.goal_pos is not None
        found = a_star_step_by_step(
            self.field, self.start_pos, self.goal_pos, on_step, self.height, self.width
        )
        self.path_drawn = True
        return found

    def render(self, frame: bytearray) -> None:
        """Draw the grid into an RGBA frame."""
        draw_grid(frame, self.field, self.height, self.width)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the editor window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="gridpathviz", description="Place walls, start and goal, then watch A* search."
    )
    parser.add_argument("--height", type=int, default=10, help="rows in the grid")
    parser.add_argument("--width", type=int, default=10, help="columns in the grid")
    args = parser.parse_args(argv)
    if args.height <= 0 or args.width <= 0:
        parser.error("height and width must be positive")

    import pygame

    editor = Editor(args.height, args.width)
    size = (args.width * CELL_SIZE, args.height * CELL_SIZE)
    frame = new_frame(args.height, args.width)
    modes = {
        pygame.K_w: PlacementMode.WALL,
        pygame.K_s: PlacementMode.START,
        pygame.K_g: PlacementMode.GOAL,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("A* Grid Visualization")
        clock = pygame.time.Clock()

        def present() -> None:
            editor.render(frame)
            image = pygame.image.frombuffer(bytes(frame), size, "RGBA")
            screen.blit(image, (0, 0))
            pygame.display.flip()

        def step(_field: list[list[Cell]]) -> None:
            present()
            pygame.event.pump()
            time.sleep(STEP_DELAY)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3):
                    editor.click(*event.pos)
                elif event.type == pygame.KEYDOWN:
                    if event.key in modes:
                        editor.set_mode(modes[event.key])
                    elif event.key == pygame.K_r:
                        editor.reset()
                    elif event.key == pygame.K_SPACE:
                        editor.request_run()
            if not running:
                break
            editor.run_pending(step)
            present()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0