"""The game window, its event loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402

from raycube.controls import Key, handle_key_event, handle_mouse_event  # noqa: E402
from raycube.render import Texture, load_texture, render_frame  # noqa: E402
from raycube.scene import (  # noqa: E402
    WIN_HEIGHT,
    WIN_WIDTH,
    MapError,
    Scene,
    find_player,
    parse_map,
)

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}

_FPS = 60
_KEY_REPEAT_DELAY_MS = 150
_KEY_REPEAT_INTERVAL_MS = 15


def _to_surface(frame: np.ndarray) -> pygame.Surface:
    rgb = np.dstack(((frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF))
    return pygame.surfarray.make_surface(rgb.astype(np.uint8).swapaxes(0, 1))


class Game:
    """A running scene: the player, the map and the wall textures."""

    def __init__(self, scene: Scene, textures: Sequence[Texture] | None = None):
        if scene.player is None:
            scene.player = find_player(scene.rows)
        self.scene = scene
        self.player = scene.player
        if textures is None:
            textures = [load_texture(path) for path in scene.textures]
        self.textures = list(textures)
        if len(self.textures) != 4:
            raise ValueError("Exactly four wall textures are needed")

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one window event; return False when the game should end."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            key = _KEYMAP.get(event.key)
            if key is None:
                return True
            return handle_key_event(self.player, self.scene.rows, key)
        if event.type == pygame.MOUSEMOTION:
            handle_mouse_event(self.player, event.pos[0])
        return True

    def run(self) -> None:
        """Open the window and render until the player quits."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
            pygame.display.set_caption("raycube")
            pygame.key.set_repeat(_KEY_REPEAT_DELAY_MS, _KEY_REPEAT_INTERVAL_MS)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                if not running:
                    break
                frame = render_frame(self.scene, self.textures)
                screen.blit(_to_surface(frame), (0, 0))
                pygame.display.flip()
                clock.tick(_FPS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Wrong amount of arguments")
        return 1
    try:
        game = Game(parse_map(args[0]))
    except MapError as error:
        print(error)
        return 1
    except OSError:
        print("Wrong textures")
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())