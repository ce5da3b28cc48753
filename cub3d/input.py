"""Keyboard handling: movement, rotation and quitting."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from cub3d.player import Player

ROTATION_STEP = 0.02


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 65
    D = 68
    S = 83
    W = 87
    ESCAPE = 256
    RIGHT = 262
    LEFT = 263


_MOVES = {Key.W: "W", Key.A: "A", Key.S: "S", Key.D: "D"}
_ROTATIONS = {Key.LEFT: -ROTATION_STEP, Key.RIGHT: ROTATION_STEP}


def _as_key(key: Key | int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def move_player(player: Player, key: Key | int) -> None:
    """Move the player for W, A, S or D; other keys are ignored."""
    direction = _MOVES.get(_as_key(key))
    if direction is not None:
        player.move(direction)


def rotate_player(player: Player, key: Key | int) -> None:
    """Turn the player for the left or right arrow; other keys are ignored."""
    angle = _ROTATIONS.get(_as_key(key))
    if angle is not None:
        player.rotate(angle)


def format_position(player: Player) -> str:
    """Describe the player's position in map units."""
    return f"player x: {player.position.x:f}\nplayer y: {player.position.y:f}\n"


def handle_key(player: Player, key: Key | int, stream: TextIO | None = None) -> bool:
    """Apply a key press and report the position.

    Returns False when the key asks the game to quit, True otherwise.
    """
    parsed = _as_key(key)
    if parsed is Key.ESCAPE:
        return False
    if parsed in _MOVES:
        move_player(player, parsed)
    elif parsed in _ROTATIONS:
        rotate_player(player, parsed)
    out = sys.stdout if stream is None else stream
    out.write(format_position(player))
    return True