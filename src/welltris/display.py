"""Rendering support shared by front-ends.

Nothing here draws anything.  The helpers translate well coordinates to
pixels, overlay the falling piece on a copy of the well and drive the
game-over blink, so a front-end only has to paint rectangles.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import BLINK_INTERVAL
from .tetrimino import Tetrimino
from .well import WELL_COLS, WELL_ROWS, VISIBLE_ROWS, Well, create_empty_well, create_filled_well

Rect = Tuple[float, float, float, float]  # x, y, width, height

WINDOW_SIZE = (1280, 720)
# 700 px / 20 visible rows = 35 px per cell.
CELL_SIZE = 35.0
BLOCK_SIZE = CELL_SIZE - 2.0
# Pixel position of well cell (0, 0).  Rows above the visible area start
# off-screen.
WELL_ORIGIN = (465.0, -(WELL_ROWS - VISIBLE_ROWS) * CELL_SIZE)
# The next piece is always drawn here, independent of the well.
NEXT_PIECE_ORIGIN = (320.0, 115.0)
# Black frame around the well, 2 px wider than the cells.
WELL_OUTLINE: Rect = (
    WELL_ORIGIN[0] - 2.0,
    WELL_ORIGIN[1],
    WELL_COLS * CELL_SIZE + 4.0,
    WELL_ROWS * CELL_SIZE + 2.0,
)
WELL_BLOCK_COLOR = (1.0, 1.0, 1.0, 1.0)


def well_to_pixel(row: int, col: int) -> Tuple[float, float]:
    """Return the top-left pixel of the well cell at ``(row, col)``."""

    return col * CELL_SIZE + WELL_ORIGIN[0], row * CELL_SIZE + WELL_ORIGIN[1]


def block_rect(x: float, y: float) -> Rect:
    """Return the square drawn inside the cell whose corner is ``(x, y)``."""

    return x + 1.0, y + 1.0, BLOCK_SIZE, BLOCK_SIZE


def piece_rects(piece: Tetrimino, origin: Tuple[float, float]) -> Iterator[Rect]:
    """Yield a block rectangle for every occupied cell of ``piece``."""

    px, py = origin
    for r, c in piece.cells():
        yield block_rect(px + CELL_SIZE * c, py + CELL_SIZE * r)


def well_rects(well: Well) -> Iterator[Rect]:
    """Yield a block rectangle for every occupied cell of ``well``."""

    rows, cols = np.nonzero(well)
    for r, c in zip(rows, cols):
        yield block_rect(*well_to_pixel(int(r), int(c)))


def render_grid(well: Well, piece: Optional[Tetrimino] = None, row: int = 0, col: int = 0) -> List[List[int]]:
    """Return a copy of the well with ``piece`` overlaid at ``(row, col)``.

    Cells of the piece outside the well are skipped.  The well is not
    modified.
    """

    grid = [[int(v) for v in line] for line in well]
    if piece is not None:
        for r, c in piece.cells():
            wr, wc = row + r, col + c
            if 0 <= wr < WELL_ROWS and 0 <= wc < WELL_COLS:
                grid[wr][wc] = 1
    return grid


class BlinkDriver:
    """Alternate the displayed well between empty and full after game over.

    Until the first phase change the real well is shown.  Afterwards the
    display switches to empty after ``interval`` ticks and to full after
    another ``interval`` ticks, repeating.
    """

    def __init__(self, interval: int = BLINK_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._counter = 0
        self._filled: Optional[bool] = None

    def reset(self) -> None:
        self._counter = 0
        self._filled = None

    def tick(self) -> None:
        if self._counter == self.interval:
            self._filled = False
        if self._counter == 2 * self.interval:
            self._filled = True
            self._counter = 0
        self._counter += 1

    def display(self, well: Well) -> Well:
        """Return the grid to draw in place of ``well``."""

        if self._filled is None:
            return well
        return create_filled_well() if self._filled else create_empty_well()
