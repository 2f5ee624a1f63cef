"""Tetrimino catalog and shape rotation.

Every piece is described by a 4x4 occupancy mask in a single canonical
orientation.  The other orientations are never stored; they are reached at
runtime through :func:`rotate_shape`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray

Shape = NDArray[np.uint8]
Color = Tuple[float, float, float, float]  # R, G, B, A

SHAPE_SIZE = 4


class TetriminoKind(str, Enum):
    """Enumeration of the seven standard tetrimino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


def _mask(*rows: str) -> Shape:
    return np.array([[int(ch) for ch in row] for row in rows], dtype=np.uint8)


TETRIMINO_SHAPES: Dict[TetriminoKind, Shape] = {
    TetriminoKind.I: _mask("0010", "0010", "0010", "0010"),
    TetriminoKind.J: _mask("1000", "1110", "0000", "0000"),
    TetriminoKind.L: _mask("0010", "1110", "0000", "0000"),
    TetriminoKind.O: _mask("0000", "0000", "0110", "0110"),
    TetriminoKind.S: _mask("0110", "1100", "0000", "0000"),
    TetriminoKind.T: _mask("0100", "1110", "0000", "0000"),
    TetriminoKind.Z: _mask("1100", "0110", "0000", "0000"),
}

for _shape in TETRIMINO_SHAPES.values():
    _shape.setflags(write=False)

TETRIMINO_COLORS: Dict[TetriminoKind, Color] = {
    TetriminoKind.I: (1.0, 1.0, 1.0, 1.0),  # white
    TetriminoKind.J: (0.0, 0.0, 1.0, 1.0),  # blue
    TetriminoKind.L: (0.0, 1.0, 1.0, 1.0),  # cyan
    TetriminoKind.O: (0.0, 1.0, 0.0, 1.0),  # green
    TetriminoKind.S: (1.0, 0.0, 1.0, 1.0),  # magenta
    TetriminoKind.T: (1.0, 1.0, 0.0, 1.0),  # yellow
    TetriminoKind.Z: (1.0, 0.0, 0.0, 1.0),  # red
}


def rotate_shape(kind: TetriminoKind, shape: Shape, clockwise: bool) -> Shape:
    """Return ``shape`` rotated 90 degrees.

    The ``O`` piece is returned unchanged.  The ``I`` piece rotates its whole
    4x4 mask; every other kind only occupies the top-left 3x3 submatrix, so
    only that part is rotated and row/column 3 stay empty.

    The function does not look at the well.  Callers test the result with
    :func:`welltris.well.would_collide` and keep the old mask when it does not
    fit.
    """

    if kind is TetriminoKind.O:
        return shape.copy()

    size = SHAPE_SIZE if kind is TetriminoKind.I else 3
    rotated = np.zeros((SHAPE_SIZE, SHAPE_SIZE), dtype=np.uint8)
    # np.rot90 turns counter-clockwise for positive k.
    rotated[:size, :size] = np.rot90(shape[:size, :size], k=-1 if clockwise else 1)
    return rotated


@dataclass(eq=False)
class Tetrimino:
    """A piece: its kind, display color and current occupancy mask."""

    kind: TetriminoKind
    color: Color
    shape: Shape

    def rotate(self, clockwise: bool = True) -> None:
        """Rotate the piece in place.  Kind and color are left untouched."""

        self.shape = rotate_shape(self.kind, self.shape, clockwise)

    def copy(self) -> "Tetrimino":
        """Return an independent copy of this piece."""

        return Tetrimino(self.kind, self.color, self.shape.copy())

    def cells(self) -> list[tuple[int, int]]:
        """Return the ``(row, col)`` offsets of the occupied mask cells."""

        rows, cols = np.nonzero(self.shape)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]


def new_tetrimino(kind: TetriminoKind) -> Tetrimino:
    """Return a fresh piece of ``kind`` in its canonical orientation."""

    return Tetrimino(kind, TETRIMINO_COLORS[kind], TETRIMINO_SHAPES[kind].copy())
