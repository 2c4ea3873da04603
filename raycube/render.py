"""Drawing frames: background fog, textured walls and the minimap."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from PIL import Image

from raycube.raycast import Ray, cast_rays, init_wall, texture_column, texture_start
from raycube.scene import (
    MINIMAP_SCALE,
    PLAYER_COLOR,
    WIN_HEIGHT,
    WIN_WIDTH,
    Player,
    Scene,
)
from raycube.validation import count_cols

WALL_COLOR = 0x00786A6A
FLOOR_COLOR = 0x00DADAFC
MINIMAP_OFFSET = 10


@dataclass(frozen=True)
class Texture:
    """A wall texture as a (height, width) array of 0xRRGGBB values."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file into a texture."""
    with Image.open(path) as image:
        rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    pixels = (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]
    return Texture(pixels.astype(np.uint32))


def fog_color(rgb: Sequence[int], y: int, is_ceil: bool) -> int:
    """Colour of a background row, darker towards the horizon."""
    distance = y / WIN_HEIGHT
    if is_ceil:
        distance = 1 - distance
    red, green, blue = (int(c * distance) for c in rgb)
    return (red << 16) | (green << 8) | blue


def draw_background(
    frame: np.ndarray, floor_rgb: Sequence[int], ceil_rgb: Sequence[int]
) -> None:
    """Fill the upper half with ceiling fog and the lower half with floor fog."""
    for y in range(min(WIN_HEIGHT, frame.shape[0])):
        if y < WIN_HEIGHT // 2:
            frame[y, :] = fog_color(ceil_rgb, y, True)
        else:
            frame[y, :] = fog_color(floor_rgb, y, False)


def draw_minimap(rows: Sequence[str], player: Player) -> np.ndarray:
    """Return the minimap image of the grid with the player marked on it."""
    image = np.zeros(
        (len(rows) * MINIMAP_SCALE, count_cols(rows) * MINIMAP_SCALE), dtype=np.uint32
    )
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            image[
                y * MINIMAP_SCALE : (y + 1) * MINIMAP_SCALE,
                x * MINIMAP_SCALE : (x + 1) * MINIMAP_SCALE,
            ] = WALL_COLOR if cell == "1" else FLOOR_COLOR
    size = int(MINIMAP_SCALE * 0.7)
    left = int(player.pos_x * MINIMAP_SCALE - MINIMAP_SCALE // 3)
    top = int(player.pos_y * MINIMAP_SCALE - MINIMAP_SCALE // 3)
    image[max(top, 0) : max(top + size, 0), max(left, 0) : max(left + size, 0)] = (
        PLAYER_COLOR
    )
    return image


def draw_wall(
    frame: np.ndarray,
    x: int,
    ray: Ray,
    player: Player,
    textures: Sequence[Texture],
) -> None:
    """Draw the textured wall slice hit by ``ray`` into column ``x``."""
    texture = textures[ray.side]
    wall = init_wall(ray.length)
    end = min(wall.end, frame.shape[0])
    if wall.height == 0 or end <= wall.start:
        return
    step = texture.height / wall.height
    column = texture_column(ray, player, texture.width)
    positions = texture_start(wall, step) + step * np.arange(end - wall.start)
    tex_rows = positions.astype(np.int64) & (texture.height - 1)
    frame[wall.start : end, x] = texture.pixels[tex_rows, column]


def render_frame(scene: Scene, textures: Sequence[Texture]) -> np.ndarray:
    """Render a full frame of the scene with the minimap in its corner."""
    player = scene.player
    if player is None:
        raise ValueError("The scene has no player")
    frame = np.zeros((WIN_HEIGHT, WIN_WIDTH), dtype=np.uint32)
    draw_background(frame, scene.floor_rgb, scene.ceil_rgb)
    for x, ray in enumerate(cast_rays(scene.rows, player)):
        draw_wall(frame, x, ray, player, textures)
    minimap = draw_minimap(scene.rows, player)
    height = max(min(minimap.shape[0], WIN_HEIGHT - MINIMAP_OFFSET), 0)
    width = max(min(minimap.shape[1], WIN_WIDTH - MINIMAP_OFFSET), 0)
    frame[
        MINIMAP_OFFSET : MINIMAP_OFFSET + height,
        MINIMAP_OFFSET : MINIMAP_OFFSET + width,
    ] = minimap[:height, :width]
    return frame