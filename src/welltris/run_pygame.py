"""pygame front-end for the simulation.

The front-end owns the window, the keyboard and the music.  It translates key
presses into :class:`~welltris.commands.Command` flags, advances the
:class:`~welltris.game_state.GameState` at a fixed update rate and paints a
snapshot of the state every frame.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from .commands import Command
from .config import GameConfig
from .display import (
    NEXT_PIECE_ORIGIN,
    WELL_BLOCK_COLOR,
    WELL_OUTLINE,
    WINDOW_SIZE,
    BlinkDriver,
    Rect,
    piece_rects,
    well_rects,
    well_to_pixel,
)
from .game_state import GameSnapshot, GameState
from .tetrimino import Color


LOGGER = logging.getLogger(__name__)

# Frames per second for rendering; logic updates run at the config's rate.
FPS = 60
BACKGROUND = (128, 128, 128)
OUTLINE = (0, 0, 0)
MUSIC_VOLUME = 0.1

# Several keys may trigger the same command.
KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CCW,
    pygame.K_d: Command.ROTATE_CCW,
    pygame.K_f: Command.ROTATE_CW,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
}


def translate_key(key: int) -> Command:
    """Return the command bound to ``key``, or ``Command.NONE``."""

    return KEY_BINDINGS.get(key, Command.NONE)


def to_rgb(color: Color) -> Tuple[int, int, int]:
    r, g, b, _ = color
    return round(r * 255), round(g * 255), round(b * 255)


class MusicPlayer:
    """Loop a background track while the game runs, stop it on game over."""

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        self._playing = False
        if path is not None:
            # Fail at startup rather than in the middle of a game.
            pygame.mixer.init()
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.set_volume(MUSIC_VOLUME)

    @property
    def playing(self) -> bool:
        return self._playing

    def update(self, game_over: bool) -> None:
        if self.path is None:
            return
        if game_over and self._playing:
            pygame.mixer.music.stop()
            self._playing = False
            LOGGER.info("Music stopped")
        elif not game_over and not self._playing:
            pygame.mixer.music.play(-1)
            self._playing = True


def _draw_rect(screen: pygame.Surface, color: Tuple[int, int, int], rect: Rect) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(*(round(v) for v in rect)))


def draw_frame(screen: pygame.Surface, snap: GameSnapshot, blink: BlinkDriver) -> None:
    """Paint the well, the falling piece and the next piece."""

    screen.fill(BACKGROUND)
    _draw_rect(screen, OUTLINE, WELL_OUTLINE)

    block = to_rgb(WELL_BLOCK_COLOR)
    well = blink.display(snap.well) if snap.game_over else snap.well
    for rect in well_rects(well):
        _draw_rect(screen, block, rect)

    # The last piece stays on screen over the blinking well.
    color = to_rgb(snap.current.color)
    for rect in piece_rects(snap.current, well_to_pixel(snap.row, snap.col)):
        _draw_rect(screen, color, rect)

    color = to_rgb(snap.next_piece.color)
    for rect in piece_rects(snap.next_piece, NEXT_PIECE_ORIGIN):
        _draw_rect(screen, color, rect)


class GameRunner:
    """Run the window loop: events, fixed-rate updates and rendering."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        seed: Optional[int] = None,
        music: Optional[Path] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.seed = seed
        self.music_path = music
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def handle_event(self, event: pygame.event.Event, state: GameState) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._running = False
                return
            command = translate_key(event.key)
            if command:
                state.press(command)

    def run(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("welltris")
        clock = pygame.time.Clock()
        music = MusicPlayer(self.music_path)

        state = GameState(config=self.config, seed=self.seed)
        blink = BlinkDriver(self.config.blink_interval)
        update_ms = 1000.0 / self.config.updates_per_second
        accum = 0.0

        self._running = True
        try:
            while self._running:
                accum += clock.tick(FPS)
                for event in pygame.event.get():
                    self.handle_event(event, state)

                while accum >= update_ms:
                    accum -= update_ms
                    if state.game_over:
                        blink.tick()
                    else:
                        state.update()
                    music.update(state.game_over)

                draw_frame(screen, state.snapshot(), blink)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(config: Optional[GameConfig] = None, *, seed: Optional[int] = None, music: Optional[Path] = None) -> None:
    GameRunner(config, seed=seed, music=music).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
