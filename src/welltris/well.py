"""Well (playfield) representation and the operations on it."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .tetrimino import Tetrimino


# A well is 24 rows of 10 columns.  Only the bottom 20 rows are meant to be
# visible; the top rows are the spawn buffer.
WELL_ROWS = 24
WELL_COLS = 10
VISIBLE_ROWS = 20

Well = NDArray[np.uint8]


def create_empty_well() -> Well:
    """Return a new well with every cell empty."""

    return np.zeros((WELL_ROWS, WELL_COLS), dtype=np.uint8)


def create_filled_well() -> Well:
    """Return a new well with every cell occupied."""

    return np.ones((WELL_ROWS, WELL_COLS), dtype=np.uint8)


def _absolute_cells(piece: Tetrimino, row: int, col: int) -> tuple[np.ndarray, np.ndarray]:
    rows, cols = np.nonzero(piece.shape)
    return rows + row, cols + col


def would_collide(piece: Tetrimino, well: Well, row: int, col: int) -> bool:
    """Return ``True`` if ``piece`` anchored at ``(row, col)`` does not fit.

    The anchor is the top-left corner of the piece's 4x4 box.  A placement
    collides when an occupied cell lands left of column 0, right of the last
    column, below the last row, or on an occupied well cell.  Cells above
    row 0 are allowed and never collide.
    """

    rows, cols = _absolute_cells(piece, row, col)
    if np.any(cols < 0) or np.any(cols >= WELL_COLS) or np.any(rows >= WELL_ROWS):
        return True
    inside = rows >= 0
    return bool(np.any(well[rows[inside], cols[inside]]))


def freeze(piece: Tetrimino, well: Well, row: int, col: int) -> None:
    """Write the occupied cells of ``piece`` into ``well`` at ``(row, col)``.

    No bounds checking is done; the placement must already have passed
    :func:`would_collide`.
    """

    rows, cols = np.nonzero(piece.shape)
    well[rows + row, cols + col] = piece.shape[rows, cols]


def count_complete_rows(well: Well) -> int:
    """Return how many rows of ``well`` are fully occupied."""

    return int(np.count_nonzero(np.all(well != 0, axis=1)))


def clear_complete_rows(well: Well) -> Well:
    """Return a new well with full rows removed and gaps collapsed.

    Full rows and empty rows are both dropped.  The remaining partial rows
    keep their order and are packed against the bottom of a fresh empty
    well.  ``well`` itself is left untouched.
    """

    population = np.count_nonzero(well, axis=1)
    partial = well[(population > 0) & (population < WELL_COLS)]
    cleared = create_empty_well()
    if len(partial):
        cleared[WELL_ROWS - len(partial):] = partial
    return cleared
