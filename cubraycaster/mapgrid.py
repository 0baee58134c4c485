"""Building, checking and searching the padded map grid of a scene."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import CubError

_MAP_CHARS = frozenset(" 10NSEW")
_SPAWN_CHARS = frozenset("NSEW")
_OPEN_CHARS = frozenset("0NSEW")


@dataclass(frozen=True)
class Spawn:
    """Where the player starts: grid column, grid row and facing letter."""

    column: int
    row: int
    direction: str


def is_map_char(char: str) -> bool:
    """Tell whether ``char`` may appear in a map."""
    return len(char) == 1 and char in _MAP_CHARS


def _content(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def build_grid(lines: Iterable[str]) -> list[str]:
    """Turn the map block of a scene into a rectangular grid.

    Each line may still carry its trailing newline. Every line is mirrored
    and right-aligned, and the whole map is framed by a border of spaces,
    so every row of the result has the same length and the first and last
    rows hold only spaces.
    """
    raw = list(lines)
    if not raw or not is_map_char(raw[0].lstrip(" ")[:1]):
        raise CubError("The .cub does not conform")
    width = max(len(line) for line in raw) + 2
    border = " " * width
    rows = [border]
    for line in raw:
        content = _content(line)
        rows.append(" " * (width - len(content) - 1) + content[::-1] + " ")
    rows.append(border)
    return rows


def _check_open_cell(grid: Sequence[str], row: int, column: int) -> None:
    neighbours = (
        grid[row][column - 1],
        grid[row][column + 1],
        grid[row - 1][column],
        grid[row + 1][column],
    )
    if " " in neighbours:
        raise CubError("The map is not valid")


def validate_grid(grid: Sequence[str]) -> None:
    """Reject unknown characters and open cells that touch empty space."""
    for row in range(1, len(grid) - 1):
        line = grid[row]
        for column in range(1, len(line) - 1):
            char = line[column]
            if not is_map_char(char):
                raise CubError("The map is not valid")
            if char in _OPEN_CHARS:
                _check_open_cell(grid, row, column)


def find_spawn(grid: Sequence[str]) -> Spawn:
    """Return the single player start in ``grid``."""
    spawns = [
        Spawn(column, row, char)
        for row, line in enumerate(grid)
        for column, char in enumerate(line)
        if char in _SPAWN_CHARS
    ]
    if len(spawns) != 1:
        raise CubError("too much or no player found")
    return spawns[0]