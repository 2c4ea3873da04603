"""Player movement and rotation in response to keys and the mouse."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum

from raycube.scene import WIN_WIDTH, Player

MOVE_SPEED = 0.08
ROTATE_SPEED = 0.05


class Key(IntEnum):
    """Key and mouse codes understood by the controls."""

    MOUSE_LEFT = 1
    MOUSE_RIGHT = 2
    A = 97
    D = 100
    S = 115
    W = 119
    LEFT = 65361
    RIGHT = 65363
    ESC = 65307


_MOVE_KEYS = frozenset({Key.W, Key.A, Key.S, Key.D})
_ROTATIONS = {
    Key.LEFT: -ROTATE_SPEED,
    Key.RIGHT: ROTATE_SPEED,
    Key.MOUSE_LEFT: -ROTATE_SPEED / 2,
    Key.MOUSE_RIGHT: ROTATE_SPEED / 2,
}


def _is_wall(rows: Sequence[str], x: float, y: float) -> bool:
    """True if the cell holding (x, y) is a wall or lies off the map."""
    col, row = int(x), int(y)
    if row < 0 or col < 0 or row >= len(rows) or col >= len(rows[row]):
        return True
    return rows[row][col] == "1"


def move(player: Player, rows: Sequence[str], key: int) -> None:
    """Step the player forward, back or sideways unless a wall is close."""
    if key not in _MOVE_KEYS:
        raise ValueError(f"Not a movement key: {key}")
    direction = -1 if key in (Key.S, Key.A) else 1
    if key in (Key.A, Key.D):
        step_x = player.plane_x * MOVE_SPEED * direction
        step_y = player.plane_y * MOVE_SPEED * direction
    else:
        step_x = player.dir_x * MOVE_SPEED * direction
        step_y = player.dir_y * MOVE_SPEED * direction
    if not _is_wall(rows, player.pos_x + step_x * 3, player.pos_y):
        player.pos_x += step_x
    if not _is_wall(rows, player.pos_x, player.pos_y + step_y * 3):
        player.pos_y += step_y


def rotate(player: Player, key: int) -> None:
    """Turn the player's direction and camera plane for a turn key."""
    angle = _ROTATIONS.get(key, 0.0)
    if player.dir in ("E", "W"):
        angle = -angle
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    dir_x, plane_x = player.dir_x, player.plane_x
    player.dir_x = dir_x * cos_a - player.dir_y * sin_a
    player.dir_y = dir_x * sin_a + player.dir_y * cos_a
    player.plane_x = plane_x * cos_a - player.plane_y * sin_a
    player.plane_y = plane_x * sin_a + player.plane_y * cos_a


def handle_key_event(player: Player, rows: Sequence[str], key: int) -> bool:
    """Apply a key press; return False when the game should close."""
    if key == Key.ESC:
        return False
    if key in _MOVE_KEYS:
        move(player, rows, key)
    elif key in (Key.LEFT, Key.RIGHT):
        rotate(player, key)
    return True


def handle_mouse_event(player: Player, x: int) -> None:
    """Turn the player when the pointer is near the left or right edge."""
    if x > WIN_WIDTH * 0.8:
        rotate(player, Key.MOUSE_RIGHT)
    elif x < WIN_WIDTH * 0.2:
        rotate(player, Key.MOUSE_LEFT)