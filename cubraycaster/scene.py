"""Reading a ``.cub`` scene: wall textures, floor and ceiling colours, map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .colors import parse_color
from .errors import CubError
from .mapgrid import Spawn, build_grid, find_spawn, is_map_char, validate_grid

TEXTURE_IDS = ("NO ", "EA ", "SO ", "WE ")
FLOOR_ID = "F "
CEILING_ID = "C "
IDENTIFIERS = TEXTURE_IDS + (FLOOR_ID, CEILING_ID)

_NOT_CONFORM = "The .cub does not conform"


@dataclass
class Scene:
    """Everything a ``.cub`` file describes.

    ``textures`` holds the wall texture paths in the order north, east,
    south, west. ``floor`` and ``ceiling`` are packed ``0xRRGGBB`` colours.
    """

    textures: tuple[str, str, str, str]
    floor: int
    ceiling: int
    grid: list[str]
    spawn: Spawn


def format_path(line: str) -> str:
    """Strip the identifier and surrounding blanks from a resource line."""
    rest = line.lstrip(" ")
    i = 0
    while i < len(rest) and rest[i].isascii() and rest[i].isalpha():
        i += 1
    return rest[i:].lstrip(" ").rstrip(" \n")


def check_arguments(argv: Sequence[str]) -> str:
    """Check the command-line arguments and return the scene path."""
    if len(argv) != 1:
        raise CubError("too many or no arguments")
    path = argv[0]
    if not path.endswith(".cub") or len(path) == 4:
        raise CubError("The file is not a .cub")
    return path


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _starts_blank(line: str) -> bool:
    return line.lstrip(" ")[:1] == "\n"


def _read_resources(
    lines: Iterator[str],
) -> tuple[tuple[str, str, str, str], int, int, str | None]:
    textures: dict[str, str] = {}
    colors: dict[str, int] = {}

    def finished() -> bool:
        return len(textures) + len(colors) == len(IDENTIFIERS)

    line = next(lines, None)
    while line is not None and not finished():
        if not line.startswith("\n"):
            stripped = line.lstrip(" ")
            identifier = next(
                (ident for ident in IDENTIFIERS if stripped.startswith(ident)), None
            )
            if identifier is None:
                raise CubError(_NOT_CONFORM)
            value = format_path(line)
            if identifier in TEXTURE_IDS:
                if identifier in textures:
                    raise CubError(f"duplicate texture identifier: {identifier.strip()}")
                textures[identifier] = value
            else:
                colors[identifier] = parse_color(value)
        line = next(lines, None)
    if not finished():
        raise CubError(_NOT_CONFORM)
    ordered = tuple(textures[ident] for ident in TEXTURE_IDS)
    return ordered, colors[FLOOR_ID], colors[CEILING_ID], line  # type: ignore[return-value]


def _read_map_block(lines: Iterator[str], line: str | None) -> list[str]:
    while line is not None and _starts_blank(line):
        line = next(lines, None)
    if line is None or not is_map_char(line.lstrip(" ")[:1]):
        raise CubError(_NOT_CONFORM)
    block = []
    while line is not None and not _starts_blank(line):
        block.append(line)
        line = next(lines, None)
    return block


def parse_scene(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene file, each keeping its trailing newline."""
    stream = iter(lines)
    textures, floor, ceiling, line = _read_resources(stream)
    grid = build_grid(_read_map_block(stream, line))
    validate_grid(grid)
    for rest in stream:
        if not rest.startswith("\n"):
            raise CubError("there should not be anything after the map")
    spawn = find_spawn(grid)
    return Scene(textures, floor, ceiling, grid, spawn)


def load_scene(path: str) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(exc.strerror or str(exc), exit_code=exc.errno or 1) from exc
    except UnicodeDecodeError as exc:
        raise CubError(f"cannot decode {path}: {exc.reason}") from exc
    return parse_scene(_split_lines(text))