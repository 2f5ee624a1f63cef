"""Tunable simulation settings."""

from __future__ import annotations

from dataclasses import dataclass

from .well import WELL_COLS, WELL_ROWS


# Logic updates per second.  Rendering may run faster than this.
UPDATES_PER_SECOND = 30
# A piece falls one row every FALL_INTERVAL updates (~0.667 s at 30 ups).
FALL_INTERVAL = 20
# Anchor of a freshly spawned piece: near the top and near the centre.
SPAWN_ROW = 2
SPAWN_COL = 3
# Updates between the two phases of the game-over blink.
BLINK_INTERVAL = 15


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by the simulation and its front-ends."""

    updates_per_second: int = UPDATES_PER_SECOND
    fall_interval: int = FALL_INTERVAL
    spawn_row: int = SPAWN_ROW
    spawn_col: int = SPAWN_COL
    blink_interval: int = BLINK_INTERVAL

    def __post_init__(self) -> None:
        if self.updates_per_second <= 0:
            raise ValueError("updates_per_second must be positive")
        if self.fall_interval <= 0:
            raise ValueError("fall_interval must be positive")
        if self.blink_interval <= 0:
            raise ValueError("blink_interval must be positive")
        if not 0 <= self.spawn_row < WELL_ROWS:
            raise ValueError("spawn_row outside the well")
        if not -3 <= self.spawn_col < WELL_COLS:
            raise ValueError("spawn_col outside the well")

    @property
    def seconds_per_row(self) -> float:
        """Return how long a piece takes to fall one row under gravity."""

        return self.fall_interval / self.updates_per_second
