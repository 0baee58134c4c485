"""The game window: loads a scene, reacts to keys and shows rendered frames."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, UnidentifiedImageError

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .errors import CubError  # noqa: E402
from .player import Key, Player  # noqa: E402
from .raycast import WIN_HEIGHT, WIN_WIDTH, Texture, render_frame  # noqa: E402
from .scene import Scene, check_arguments, load_scene  # noqa: E402

WINDOW_TITLE = "Cub3d"

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def load_texture(path: str) -> Texture:
    """Load an image file as a wall texture of packed ``0xRRGGBB`` pixels."""
    try:
        with Image.open(path) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
    except (OSError, UnidentifiedImageError) as exc:
        raise CubError(f"cannot load texture {path!r}: {exc}") from exc
    packed = (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]
    return Texture(packed)


@dataclass
class Game:
    """A loaded scene together with the player walking through it."""

    scene: Scene
    player: Player
    textures: list[Texture]
    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT
    running: bool = field(default=True)

    @classmethod
    def from_scene(cls, scene: Scene) -> "Game":
        """Load the scene's textures and place the player on its spawn."""
        textures = [load_texture(path) for path in scene.textures]
        spawn = scene.spawn
        player = Player.facing(spawn.column, spawn.row, spawn.direction)
        return cls(scene=scene, player=player, textures=textures)

    def on_key(self, key: int) -> bool:
        """React to a key press; return whether the game keeps running."""
        if key == Key.ESCAPE:
            self.running = False
        else:
            self.player.handle_key(key, self.scene.grid)
        return self.running

    def frame(self) -> np.ndarray:
        """Render the current view as a ``(height, width)`` array of colours."""
        return render_frame(
            self.scene.grid,
            self.player,
            self.textures,
            self.scene.ceiling,
            self.scene.floor,
            self.width,
            self.height,
        )

    def _to_rgb(self, pixels: np.ndarray) -> np.ndarray:
        rgb = np.stack(
            ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
        ).astype(np.uint8)
        return rgb.transpose(1, 0, 2)

    def run(self) -> None:
        """Open the window and loop until it is closed or Escape is pressed."""
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((self.width, self.height))
            except pygame.error as exc:
                raise CubError(f"cannot open the window: {exc}") from exc
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.key.set_repeat(200, 30)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        key = _PYGAME_KEYS.get(event.key)
                        if key is not None:
                            self.on_key(key)
                if not self.running:
                    break
                pygame.surfarray.blit_array(screen, self._to_rgb(self.frame()))
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the scene named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
        game = Game.from_scene(load_scene(path))
        game.run()
    except CubError as err:
        print(err)
        return err.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())