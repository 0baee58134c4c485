"""Error type raised when a scene or its resources cannot be used."""

from __future__ import annotations


class CubError(Exception):
    """A fatal problem with the scene file, the map or the game setup.

    ``exit_code`` is the status the program should exit with when the
    error reaches the top level.
    """

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return f"Error\n{self.message}"