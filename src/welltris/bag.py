"""Random bag piece supply.

Pieces are dealt from a shuffled bag holding one of each kind, so every kind
shows up once per seven pieces and the gap between two pieces of the same
kind never exceeds twelve.
"""

from __future__ import annotations

import random
from typing import List, Optional

from .tetrimino import Tetrimino, TetriminoKind, new_tetrimino


def new_bag(rng: Optional[random.Random] = None) -> List[Tetrimino]:
    """Return one fresh piece of every kind in a uniformly random order."""

    bag = [new_tetrimino(kind) for kind in TetriminoKind]
    (rng or random).shuffle(bag)
    return bag


class PieceBag:
    """Mutable bag of pieces consumed from its end."""

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random(seed)
        self._pieces: List[Tetrimino] = new_bag(self._rng)

    def __len__(self) -> int:
        return len(self._pieces)

    def is_empty(self) -> bool:
        return not self._pieces

    def refill(self) -> None:
        """Replace the contents with a new full permutation."""

        self._pieces = new_bag(self._rng)

    def draw(self) -> Tetrimino:
        """Remove and return the next piece.

        Raises:
            IndexError: If the bag is empty.  Callers must :meth:`refill`
                first.
        """

        if not self._pieces:
            raise IndexError("draw from an empty piece bag")
        return self._pieces.pop()

    def peek_kinds(self) -> List[TetriminoKind]:
        """Return the kinds still in the bag, next one first."""

        return [piece.kind for piece in reversed(self._pieces)]
