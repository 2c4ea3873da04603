"""Reading and checking scene description files."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, replace

from raycube.textutils import atoi, check_extension, fix_spaces, split
from raycube.validation import fill_1s, is_valid

WIN_WIDTH = 1280
WIN_HEIGHT = 720
MINIMAP_SCALE = 8
PLAYER_COLOR = 0x003A8DFF

SCENE_EXTENSION = ".cub"
TEXTURE_KEYS = ("NO", "EA", "SO", "WE")
COLOR_KEYS = ("F", "C")

_TEXTURE_ERROR = "Wrong textures"

# direction -> (dir_x, dir_y, plane_x, plane_y)
_DIRECTIONS = {
    "N": (0.0, -1.0, 0.75, 0.0),
    "S": (0.0, 1.0, -0.75, 0.0),
    "W": (-1.0, 0.0, 0.0, 0.75),
    "E": (1.0, 0.0, 0.0, -0.75),
}


class MapError(Exception):
    """Raised when a scene file cannot be read or is not valid."""


@dataclass
class Player:
    """Player position, facing direction and camera plane."""

    dir: str
    pos_x: float
    pos_y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0


@dataclass
class Scene:
    """A parsed scene: map rows, texture paths, colours and player."""

    rows: list[str]
    textures: tuple[str, str, str, str]
    floor_rgb: tuple[int, int, int]
    ceil_rgb: tuple[int, int, int]
    player: Player | None = None

    @property
    def width(self) -> int:
        """Length of the first map row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.rows)


def init_player(direction: str, x: int, y: int) -> Player:
    """Create a player standing in the centre of grid cell (x, y)."""
    try:
        dir_x, dir_y, plane_x, plane_y = _DIRECTIONS[direction]
    except KeyError:
        raise MapError(f"Unknown player direction {direction!r}") from None
    return Player(direction, x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y)


def find_player(rows: Sequence[str]) -> Player:
    """Locate the player start on the map; the last one found wins."""
    player = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in _DIRECTIONS:
                player = init_player(char, x, y)
    if player is None:
        raise MapError("Player not found")
    return player


def read_scene_file(path: str | os.PathLike[str]) -> str:
    """Return the whole text of a scene file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        raise MapError("Wrong map path") from None
    if not text:
        raise MapError("Map file is empty")
    return text


def _parse_rgb(value: str) -> tuple[int, int, int]:
    parts = value.split(",")
    if len(parts) != 3:
        raise MapError(_TEXTURE_ERROR)
    red, green, blue = (atoi(part) for part in parts)
    if any(not 0 <= c <= 255 for c in (red, green, blue)):
        raise MapError(_TEXTURE_ERROR)
    return red, green, blue


def process_scene(text: str) -> Scene:
    """Parse the six header entries and the map rows that follow them.

    Texture paths are kept in the order NO, EA, SO, WE. The returned scene
    has no player yet.
    """
    remaining = iter(split(text, "\n"))
    textures: dict[str, str] = {}
    colors: dict[str, tuple[int, int, int]] = {}
    while len(textures) + len(colors) < len(TEXTURE_KEYS) + len(COLOR_KEYS):
        line = next(remaining, None)
        if line is None:
            raise MapError(_TEXTURE_ERROR)
        key, _, value = fix_spaces(line).partition(" ")
        if key in TEXTURE_KEYS and key not in textures:
            textures[key] = value
        elif key in COLOR_KEYS and key not in colors:
            colors[key] = _parse_rgb(value)
        else:
            raise MapError(_TEXTURE_ERROR)
    return Scene(
        rows=list(remaining),
        textures=tuple(textures[key] for key in TEXTURE_KEYS),
        floor_rgb=colors["F"],
        ceil_rgb=colors["C"],
    )


def parse_map(path: str | os.PathLike[str]) -> Scene:
    """Read, check and prepare the scene stored at ``path``."""
    if not check_extension(os.fspath(path), SCENE_EXTENSION):
        raise MapError("Wrong map extension")
    scene = process_scene(read_scene_file(path))
    if not is_valid(scene.rows, scene.textures):
        raise MapError("Map is invalid")
    rows = fill_1s(scene.rows)
    return replace(scene, rows=rows, player=find_player(rows))