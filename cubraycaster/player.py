"""The player's position, view direction and camera plane, and how they move."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

MOVE_SPEED = 0.1
ROT_SPEED = 0.05
_LOOKAHEAD = 1.1
_WALL = "1"


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = ord("w")
    A = ord("a")
    S = ord("s")
    D = ord("d")
    LEFT = 65361
    RIGHT = 65363
    ESCAPE = 65307


_FACINGS = {
    "E": (-1.0, 0.0, 0.0, 0.66),
    "W": (1.0, 0.0, 0.0, -0.66),
    "S": (0.0, 1.0, 0.66, 0.0),
    "N": (0.0, -1.0, -0.66, 0.0),
}


@dataclass
class Player:
    """Position, direction vector and camera plane of the viewer."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def facing(cls, column: int, row: int, direction: str) -> "Player":
        """Place a player in the middle of a cell, looking ``N``/``S``/``E``/``W``."""
        try:
            dir_x, dir_y, plane_x, plane_y = _FACINGS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        return cls(column + 0.5, row + 0.5, dir_x, dir_y, plane_x, plane_y)

    def _step(self, grid: Sequence[str], dx: float, dy: float, speed: float) -> None:
        ahead = speed * _LOOKAHEAD
        if grid[int(self.pos_y)][int(self.pos_x + dx * ahead)] != _WALL:
            self.pos_x += dx * speed
        if grid[int(self.pos_y + dy * ahead)][int(self.pos_x)] != _WALL:
            self.pos_y += dy * speed

    def move_forward(self, grid: Sequence[str], speed: float = MOVE_SPEED) -> None:
        """Walk along the view direction unless a wall is just ahead."""
        self._step(grid, self.dir_x, self.dir_y, speed)

    def move_backward(self, grid: Sequence[str], speed: float = MOVE_SPEED) -> None:
        """Walk against the view direction unless a wall is just behind."""
        self._step(grid, -self.dir_x, -self.dir_y, speed)

    def strafe_left(self, grid: Sequence[str], speed: float = MOVE_SPEED) -> None:
        """Step sideways against the camera plane."""
        self._step(grid, -self.plane_x, -self.plane_y, speed)

    def strafe_right(self, grid: Sequence[str], speed: float = MOVE_SPEED) -> None:
        """Step sideways along the camera plane."""
        self._step(grid, self.plane_x, self.plane_y, speed)

    def rotate(self, angle: float) -> None:
        """Turn the direction and camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def handle_key(self, key: int, grid: Sequence[str]) -> bool:
        """Apply a movement or rotation key; return whether it was one."""
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.W:
            self.move_forward(grid)
        elif key is Key.S:
            self.move_backward(grid)
        elif key is Key.A:
            self.strafe_left(grid)
        elif key is Key.D:
            self.strafe_right(grid)
        elif key is Key.LEFT:
            self.rotate(ROT_SPEED)
        elif key is Key.RIGHT:
            self.rotate(-ROT_SPEED)
        else:
            return False
        return True