"""Play headless games with random commands and log how long they last.

Run with::

    PYTHONPATH=src python examples/autoplay.py

Pass ``--help`` to see options for the number of games, the tick limit and
periodic logging summaries.
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from welltris.commands import COMMAND_ORDER
from welltris.config import GameConfig
from welltris.game_state import GameState


LOGGER = logging.getLogger(__name__)


@dataclass
class GameResult:
    seed: int
    ticks: int
    pieces: int
    game_over: bool


def play_game(seed: int, *, max_ticks: int, press_rate: float, config: Optional[GameConfig] = None) -> GameResult:
    rng = random.Random(seed)
    state = GameState(config=config or GameConfig(), seed=seed)
    ticks = 0
    while ticks < max_ticks and not state.game_over:
        if rng.random() < press_rate:
            state.press(rng.choice(COMMAND_ORDER))
        state.update()
        ticks += 1
    return GameResult(seed=seed, ticks=ticks, pieces=state.pieces_locked, game_over=state.game_over)


def _format_summary(results: List[GameResult]) -> str:
    if not results:
        return "No games played."
    finished = sum(1 for r in results if r.game_over)
    avg_ticks = sum(r.ticks for r in results) / len(results)
    avg_pieces = sum(r.pieces for r in results) / len(results)
    longest = max(results, key=lambda r: r.pieces)
    return (
        f"games={len(results)}, finished={finished}, avg_ticks={avg_ticks:.1f}, "
        f"avg_pieces={avg_pieces:.1f}, longest=seed {longest.seed} ({longest.pieces} pieces)"
    )


def log_summary(results: List[GameResult], *, index: int) -> str:
    message = _format_summary(results)
    LOGGER.info("After game %d: %s", index, message)
    return message


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--max-ticks", type=int, default=50_000, help="Tick limit per game.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game.")
    parser.add_argument(
        "--press-rate",
        type=float,
        default=0.3,
        help="Probability of pressing a random command on each tick.",
    )
    parser.add_argument(
        "--log-interval",
        type=int,
        default=5,
        help="Emit a summary every N games (0 disables periodic logging).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    results: List[GameResult] = []
    for game_idx in range(1, args.games + 1):
        results.append(
            play_game(args.seed + game_idx - 1, max_ticks=args.max_ticks, press_rate=args.press_rate)
        )
        if (args.log_interval > 0 and game_idx % args.log_interval == 0) or game_idx == args.games:
            log_summary(results, index=game_idx)


if __name__ == "__main__":
    main()
