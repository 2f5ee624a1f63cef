"""One-shot player commands latched between simulation ticks."""

from __future__ import annotations

from enum import Flag, auto


class Command(Flag):
    """Set of commands pending for the next tick.

    Pressing a command that is already pending has no further effect, so any
    number of presses between two ticks coalesce into a single action.
    """

    NONE = 0
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ROTATE_CCW = auto()
    ROTATE_CW = auto()
    SOFT_DROP = auto()
    HARD_DROP = auto()


# Order in which pending commands are applied within a tick.
COMMAND_ORDER = (
    Command.MOVE_LEFT,
    Command.MOVE_RIGHT,
    Command.SOFT_DROP,
    Command.HARD_DROP,
    Command.ROTATE_CCW,
    Command.ROTATE_CW,
)
