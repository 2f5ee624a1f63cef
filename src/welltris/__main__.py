"""Command line entry point.

Run with: `python -m welltris`

Without ``--play`` the simulation runs headless for ``--ticks`` updates and
prints the final frame (well plus falling piece) as ASCII, which is a quick
smoke test that does not need a display.  ``--play`` opens the pygame window.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from . import GameConfig, GameState, render_grid
from .config import FALL_INTERVAL, UPDATES_PER_SECOND
from .well import VISIBLE_ROWS, WELL_ROWS


def _print_grid(grid: List[List[int]], hidden_rows: int) -> None:
    for row in grid[hidden_rows:]:
        print("".join("#" if cell else "." for cell in row))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="welltris", description=__doc__)
    parser.add_argument("--play", action="store_true", help="Open the pygame window.")
    parser.add_argument("--ticks", type=int, default=200, help="Headless updates to run before printing.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece bag.")
    parser.add_argument("--ups", type=int, default=UPDATES_PER_SECOND, help="Logic updates per second.")
    parser.add_argument(
        "--fall-interval",
        type=int,
        default=FALL_INTERVAL,
        help="Updates between two gravity steps.",
    )
    parser.add_argument("--music", type=Path, default=None, help="Background track to loop while playing.")
    parser.add_argument(
        "--show-buffer",
        action="store_true",
        help="Include the spawn buffer rows above the visible well.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    try:
        config = GameConfig(updates_per_second=args.ups, fall_interval=args.fall_interval)
    except ValueError as exc:
        parser.error(str(exc))

    if args.play:
        from .run_pygame import main as play

        play(config, seed=args.seed, music=args.music)
        return

    gs = GameState(config=config, seed=args.seed)
    for _ in range(args.ticks):
        gs.update()
    grid = render_grid(gs.well, None if gs.game_over else gs.current, gs.row, gs.col)
    _print_grid(grid, 0 if args.show_buffer else WELL_ROWS - VISIBLE_ROWS)
    print(f"next: {gs.next_piece.kind.value}  locked: {gs.pieces_locked}  game over: {gs.game_over}")


if __name__ == "__main__":
    main()
