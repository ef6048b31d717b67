"""Rendering of the grid into an RGBA frame buffer."""

from __future__ import annotations

from collections.abc import Sequence

from .types import Cell, CellType

CELL_SIZE = 40
"""Edge length of one cell, in pixels."""

BORDER_COLOR = (40, 40, 40)

COLORS: dict[CellType, tuple[int, int, int]] = {
    CellType.EMPTY: (255, 255, 255),
    CellType.WALL: (80, 80, 80),
    CellType.START: (0, 255, 0),
    CellType.GOAL: (255, 0, 0),
    CellType.VISITED: (0, 0, 255),
    CellType.PATH: (255, 255, 0),
}


def color_for(cell_type: CellType) -> tuple[int, int, int]:
    """Return the RGB fill colour of a cell type."""
    return COLORS[cell_type]


def new_frame(height: int, width: int) -> bytearray:
    """Return a zeroed RGBA frame large enough for a grid of the given size."""
    return bytearray(height * CELL_SIZE * width * CELL_SIZE * 4)


def draw_grid(
    frame: bytearray, field: Sequence[Sequence[Cell]], height: int, width: int
) -> None:
    """Paint every cell of the field into the frame."""
    screen_width = width * CELL_SIZE
    for y, row in enumerate(field[:height]):
        for x, cell in enumerate(row[:width]):
            draw_cell_with_border(
                frame,
                x * CELL_SIZE,
                y * CELL_SIZE,
                CELL_SIZE,
                color_for(cell.cell_type),
                screen_width,
            )


def draw_cell_with_border(
    frame: bytearray,
    x: int,
    y: int,
    size: int,
    color: tuple[int, int, int],
    screen_width: int,
) -> None:
    """Fill a square at pixel (x, y) with a one-pixel dark border."""
    if size <= 0:
        return
    r, g, b = color
    border = bytes((*BORDER_COLOR, 255))
    fill = bytes((r, g, b, 255))
    full_row = border * size
    inner_row = border + fill * (size - 2) + border if size >= 2 else border
    for dy in range(size):
        start = ((y + dy) * screen_width + x) * 4
        end = start + size * 4
        if end > len(frame):
            raise IndexError("cell lies outside the frame")
        frame[start:end] = full_row if dy in (0, size - 1) else inner_row