"""Grid-based raycasting engine: .cub scene parsing, map checks, rendering and a game window."""

__version__ = "0.1.0"
__all__ = ["app", "colors", "errors", "mapgrid", "player", "raycast", "scene"]