"""Casting rays through the map grid and sizing the wall slices they hit."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from raycube.scene import WIN_HEIGHT, WIN_WIDTH, Player

# Stand-in distance between grid lines for a ray parallel to an axis.
_NO_CROSSING = float(2**31 - 1)
# Wall heights are kept in the range of a 16-bit signed integer.
_MAX_WALL_HEIGHT = 2**15 - 1


class Side(IntEnum):
    """Which face of a wall cell a ray struck."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass(frozen=True)
class Ray:
    """The result of casting one ray: direction, face hit and distance."""

    dir_x: float
    dir_y: float
    side: Side
    length: float
    map_x: int
    map_y: int


@dataclass(frozen=True)
class WallSlice:
    """Vertical extent of a wall column on screen."""

    height: int
    start: int
    end: int


def _is_wall(rows: Sequence[str], x: int, y: int) -> bool:
    """True for wall cells and for cells outside the map."""
    if y < 0 or x < 0 or y >= len(rows) or x >= len(rows[y]):
        return True
    return rows[y][x] == "1"


def _delta(direction: float) -> float:
    return _NO_CROSSING if direction == 0 else abs(1 / direction)


def cast_ray(rows: Sequence[str], player: Player, x: int) -> Ray:
    """Cast the ray for screen column ``x`` and walk it to the first wall."""
    offset = 2 * x / WIN_WIDTH - 1
    dir_x = player.dir_x + player.plane_x * offset
    dir_y = player.dir_y + player.plane_y * offset
    map_x, map_y = int(player.pos_x), int(player.pos_y)
    if _is_wall(rows, map_x, map_y):
        raise ValueError("The player stands inside a wall")
    delta_x, delta_y = _delta(dir_x), _delta(dir_y)

    if dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    side = Side.NORTH
    while not _is_wall(rows, map_x, map_y):
        if side_x > side_y:
            side_y += delta_y
            map_y += step_y
            side = Side.NORTH if dir_y < 0 else Side.SOUTH
        else:
            side_x += delta_x
            map_x += step_x
            side = Side.WEST if dir_x < 0 else Side.EAST

    if side in (Side.WEST, Side.EAST):
        length = side_x - delta_x
    else:
        length = side_y - delta_y
    return Ray(dir_x, dir_y, side, length, map_x, map_y)


def cast_rays(rows: Sequence[str], player: Player) -> list[Ray]:
    """Cast one ray for every screen column, left to right."""
    return [cast_ray(rows, player, x) for x in range(WIN_WIDTH)]


def init_wall(length: float) -> WallSlice:
    """Size the on-screen wall slice for a wall ``length`` away."""
    if length <= 0:
        height = _MAX_WALL_HEIGHT
    else:
        height = min(int(WIN_HEIGHT / length), _MAX_WALL_HEIGHT)
    start = 0 if height > WIN_HEIGHT else (WIN_HEIGHT - height) // 2
    return WallSlice(height, start, WIN_HEIGHT - start)


def texture_column(ray: Ray, player: Player, width: int) -> int:
    """Return the texture column to sample for the point the ray hit."""
    if ray.side in (Side.NORTH, Side.SOUTH):
        wall_x = player.pos_x + ray.length * ray.dir_x
    else:
        wall_x = player.pos_y + ray.length * ray.dir_y
    wall_x -= math.floor(wall_x)
    column = min(int(wall_x * width), width - 1)
    if ray.side in (Side.SOUTH, Side.WEST) and column > 0:
        column = width - column - 1
    return column


def texture_start(wall: WallSlice, step: float) -> float:
    """Return the texture row matching the first drawn pixel of ``wall``."""
    return (wall.start - WIN_HEIGHT // 2 + wall.height // 2) * step