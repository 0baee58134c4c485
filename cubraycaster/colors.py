"""Parsing and packing of the ``R,G,B`` colours used for floor and ceiling."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import CubError

_WHITESPACE = " \t\n\v\f\r"


def _is_digit(char: str) -> bool:
    # Signs count as digits here, exactly as the scene format has always
    # treated them.
    return ("0" <= char <= "9") or char in "+-"


def parse_int(text: str) -> int:
    """Read a leading integer from ``text``; missing digits read as 0."""
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < length and _is_digit(text[i]):
        value = (ord(text[i]) - ord("0")) + value * 10
        i += 1
    return value * sign


def _tail_is_bad(text: str, i: int, count: int) -> bool:
    char = text[i] if i < len(text) else ""
    if char != "," or count == 3:
        if count == 3 and char == " " and text[i:].lstrip(" ") == "":
            return False
        if count == 3 and char == "":
            return False
        return True
    return False


def _has_rgb_shape(text: str) -> bool:
    count = 0
    i = 0
    length = len(text)
    while i < length:
        if text[i] in "+-":
            following = text[i + 1] if i + 1 < length else ""
            if not ("0" <= following <= "9"):
                return False
        digits = 0
        while i < length and _is_digit(text[i]):
            digits += 1
            i += 1
        count += 1
        if digits == 0 or _tail_is_bad(text, i, count):
            return False
        i += 1
        while i < length and text[i] in " \n":
            i += 1
    return count == 3


def split_rgb(text: str) -> tuple[int, int, int]:
    """Split ``R,G,B`` into three integers without validating them."""
    parts = text.split(",", 2)
    parts += [""] * (3 - len(parts))
    red, green, blue = (parse_int(part) for part in parts)
    return red, green, blue


def is_rgb_valid(text: str) -> bool:
    """Tell whether ``text`` is three comma-separated values in 0..255."""
    if not _has_rgb_shape(text):
        return False
    return all(0 <= component <= 255 for component in split_rgb(text))


def rgb_to_int(rgb: Sequence[int]) -> int:
    """Pack three 0..255 components into a ``0xRRGGBB`` integer."""
    if len(rgb) != 3:
        raise ValueError(f"expected three components, got {len(rgb)}")
    packed = 0
    for component in rgb:
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")
        packed = (packed << 8) | component
    return packed


def parse_color(text: str) -> int:
    """Validate an ``R,G,B`` string and return it packed as ``0xRRGGBB``."""
    if not is_rgb_valid(text):
        raise CubError(f"invalid colour: {text!r}")
    return rgb_to_int(split_rgb(text))