"""Casting rays through the map grid and drawing textured wall columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .player import Player

WIN_WIDTH = 1920
WIN_HEIGHT = 1080

_WALL = "1"
_FAR = 1e30


@dataclass
class Texture:
    """A wall texture: a 2-D array of packed ``0xRRGGBB`` pixels, row-major."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        pixels = np.asarray(self.pixels, dtype=np.uint32)
        if pixels.ndim != 2 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("a texture needs a non-empty two-dimensional pixel array")
        self.pixels = pixels

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass(frozen=True)
class RayHit:
    """What one screen column's ray met and how tall the wall slice is.

    ``side`` is 0 when an x-side (vertical grid line) was crossed last and 1
    for a y-side. ``wall`` is false when the ray left the grid before it met
    a wall. ``tex_num`` indexes the four wall textures.
    """

    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    side: int
    wall: bool
    perp_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    tex_num: int
    wall_x: float


def _delta(ray_dir: float) -> float:
    return abs(1 / ray_dir) if ray_dir != 0 else _FAR


def _outside(grid: Sequence[str], map_x: int, map_y: int) -> bool:
    if map_x < 0 or map_y < 0:
        return True
    if map_x > len(grid[0]) - 1 or map_y > len(grid) - 1:
        return True
    return map_x >= len(grid[map_y])


def _texture_number(side: int, ray_dir_x: float, ray_dir_y: float) -> int:
    if side == 1:
        if ray_dir_y > 0:
            return 1
        return 0
    if ray_dir_x < 0:
        return 2
    if ray_dir_x > 0:
        return 3
    return 0


def cast_ray(
    grid: Sequence[str],
    player: Player,
    column: int,
    width: int = WIN_WIDTH,
    height: int = WIN_HEIGHT,
) -> RayHit:
    """Cast the ray for screen ``column`` and measure the wall it reaches."""
    camera_x = 2 * column / width - 1
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _delta(ray_dir_x)
    delta_y = _delta(ray_dir_y)

    if ray_dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    side = 0
    wall = False
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _outside(grid, map_x, map_y):
            break
        if grid[map_y][map_x] == _WALL:
            wall = True
            break

    perp_dist = side_x - delta_x if side == 0 else side_y - delta_y
    line_height = int(height / perp_dist) if perp_dist > 0 else height
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)

    if side == 0:
        wall_x = player.pos_y + perp_dist * ray_dir_y
    else:
        wall_x = player.pos_x + perp_dist * ray_dir_x
    wall_x -= math.floor(wall_x)

    return RayHit(
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        map_x=map_x,
        map_y=map_y,
        side=side,
        wall=wall,
        perp_dist=perp_dist,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        tex_num=_texture_number(side, ray_dir_x, ray_dir_y),
        wall_x=wall_x,
    )


def _texture_x(hit: RayHit, tex_width: int) -> int:
    tex_x = min(int(hit.wall_x * tex_width), tex_width - 1)
    if hit.side == 0 and hit.ray_dir_x > 0:
        tex_x = tex_width - tex_x - 1
    if hit.side == 1 and hit.ray_dir_y < 0:
        tex_x = tex_width - tex_x - 1
    return tex_x


def draw_column(
    frame: np.ndarray,
    column: int,
    hit: RayHit,
    texture: Texture,
    height: int = WIN_HEIGHT,
) -> None:
    """Paint the textured wall slice of ``hit`` into ``frame[:, column]``."""
    if hit.line_height <= 0 or hit.draw_start > hit.draw_end:
        return
    step = texture.height / hit.line_height
    start = (hit.draw_start - height // 2 + hit.line_height // 2) * step
    count = hit.draw_end - hit.draw_start + 1
    positions = np.cumsum(np.concatenate(([start], np.full(count - 1, step))))
    tex_y = positions.astype(np.int64) & (texture.height - 1)
    tex_x = _texture_x(hit, texture.width)
    frame[hit.draw_start : hit.draw_end + 1, column] = texture.pixels[tex_y, tex_x]


def render_frame(
    grid: Sequence[str],
    player: Player,
    textures: Sequence[Texture],
    ceiling: int,
    floor: int,
    width: int = WIN_WIDTH,
    height: int = WIN_HEIGHT,
) -> np.ndarray:
    """Render the whole view as a ``(height, width)`` array of packed colours."""
    if len(textures) != 4:
        raise ValueError(f"expected four wall textures, got {len(textures)}")
    frame = np.empty((height, width), dtype=np.uint32)
    frame[: height // 2, :] = ceiling
    frame[height // 2 :, :] = floor
    for column in range(width):
        hit = cast_ray(grid, player, column, width, height)
        draw_column(frame, column, hit, textures[hit.tex_num], height)
    return frame