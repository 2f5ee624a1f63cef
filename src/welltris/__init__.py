"""Falling-block puzzle simulation: well, pieces, bag and game state."""

from .bag import PieceBag, new_bag
from .commands import Command
from .config import GameConfig
from .display import BlinkDriver, render_grid, well_to_pixel
from .game_state import GameSnapshot, GameState
from .tetrimino import Tetrimino, TetriminoKind, new_tetrimino, rotate_shape
from .well import clear_complete_rows, create_empty_well, freeze, would_collide

__all__ = [
    "BlinkDriver",
    "Command",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "PieceBag",
    "Tetrimino",
    "TetriminoKind",
    "clear_complete_rows",
    "create_empty_well",
    "freeze",
    "new_bag",
    "new_tetrimino",
    "render_grid",
    "rotate_shape",
    "well_to_pixel",
    "would_collide",
]
