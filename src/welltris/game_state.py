"""High level game state and the per-tick state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .bag import PieceBag
from .commands import Command
from .config import GameConfig
from .tetrimino import Tetrimino
from .well import (
    Well,
    clear_complete_rows,
    count_complete_rows,
    create_empty_well,
    freeze,
    would_collide,
)


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Copy of everything a renderer needs for one frame."""

    well: Well
    current: Tetrimino
    row: int
    col: int
    next_piece: Tetrimino
    game_over: bool


@dataclass(eq=False)
class GameState:
    """Mutable state for a game session.

    The state is created once and advanced by calling :meth:`update` once per
    logic tick.  Input adapters latch commands with :meth:`press` at any time
    between ticks; every pending command is consumed (or dropped) by the next
    tick.
    """

    config: GameConfig = field(default_factory=GameConfig)
    seed: Optional[int] = None
    game_over: bool = field(init=False)
    fall_counter: int = field(init=False)
    well: Well = field(init=False, repr=False)
    pending: Command = field(init=False)
    pieces_locked: int = field(init=False)
    bag: PieceBag = field(init=False, repr=False)
    current: Tetrimino = field(init=False)
    next_piece: Tetrimino = field(init=False)
    row: int = field(init=False)
    col: int = field(init=False)

    def __post_init__(self) -> None:
        self.bag = PieceBag(seed=self.seed)
        self.reset_game()

    def reset_game(self) -> None:
        """Start a new game on an empty well."""

        self.game_over = False
        self.fall_counter = 0
        self.well = create_empty_well()
        self.pending = Command.NONE
        self.pieces_locked = 0
        self.bag.refill()
        self.current = self.bag.draw()
        self.next_piece = self.bag.draw()
        self.row = self.config.spawn_row
        self.col = self.config.spawn_col
        LOGGER.info("New game: first piece %s, next %s", self.current.kind.value, self.next_piece.kind.value)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def press(self, command: Command) -> None:
        """Latch ``command`` for the next tick."""

        self.pending |= command

    def is_pending(self, command: Command) -> bool:
        """Return ``True`` if ``command`` is latched for the next tick."""

        return bool(self.pending & command)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def update(self) -> None:
        """Advance the simulation by one tick."""

        if not self.game_over:
            self._apply_gravity()
        if not self.game_over:
            self._apply_commands()
        self.pending = Command.NONE

    def _apply_gravity(self) -> None:
        self.fall_counter += 1
        if self.fall_counter < self.config.fall_interval:
            return
        self.fall_counter = 0

        if would_collide(self.current, self.well, self.row + 1, self.col):
            self._lock()
        else:
            self.row += 1

    def _lock(self) -> None:
        """Freeze the current piece, clear rows and bring in the next one."""

        freeze(self.current, self.well, self.row, self.col)
        cleared = count_complete_rows(self.well)
        self.well = clear_complete_rows(self.well)
        self.pieces_locked += 1
        LOGGER.debug(
            "Locked %s at row=%d col=%d, cleared %d row(s)",
            self.current.kind.value,
            self.row,
            self.col,
            cleared,
        )

        if self.bag.is_empty():
            self.bag.refill()
        self.current = self.next_piece
        self.next_piece = self.bag.draw()
        self.row = self.config.spawn_row
        self.col = self.config.spawn_col

        if would_collide(self.current, self.well, self.row, self.col):
            self.game_over = True
            LOGGER.info("Game over after %d locked pieces", self.pieces_locked)

    def _fits(self, row: int, col: int) -> bool:
        return not would_collide(self.current, self.well, row, col)

    def _apply_commands(self) -> None:
        if self.is_pending(Command.MOVE_LEFT) and self._fits(self.row, self.col - 1):
            self.col -= 1

        if self.is_pending(Command.MOVE_RIGHT) and self._fits(self.row, self.col + 1):
            self.col += 1

        if self.is_pending(Command.SOFT_DROP) and self._fits(self.row + 1, self.col):
            self.row += 1

        # Hard drop only moves the piece; it is frozen by the next gravity
        # step that finds it resting.
        if self.is_pending(Command.HARD_DROP):
            while self._fits(self.row + 1, self.col):
                self.row += 1

        if self.is_pending(Command.ROTATE_CCW):
            self._try_rotate(clockwise=False)

        if self.is_pending(Command.ROTATE_CW):
            self._try_rotate(clockwise=True)

    def _try_rotate(self, clockwise: bool) -> None:
        previous = self.current.shape
        self.current.rotate(clockwise)
        if not self._fits(self.row, self.col):
            self.current.shape = previous

    # ------------------------------------------------------------------
    # Rendering support
    # ------------------------------------------------------------------
    def snapshot(self) -> GameSnapshot:
        """Return an independent copy of the state visible to renderers."""

        return GameSnapshot(
            well=self.well.copy(),
            current=self.current.copy(),
            row=self.row,
            col=self.col,
            next_piece=self.next_piece.copy(),
            game_over=self.game_over,
        )
