"""Command entry point: opens a window and runs the duel."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random  # noqa: E402
import sys  # noqa: E402

import numpy as np  # noqa: E402
import pygame  # noqa: E402

from tankduel import colors  # noqa: E402
from tankduel.game import Game  # noqa: E402
from tankduel.window import (  # noqa: E402
    KEY_A,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_F3,
    KEY_F5,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    MOD_ALT,
    MOD_CONTROL,
    MOD_SHIFT,
    MOD_SUPER,
    MOUSE_BUTTON_LEFT,
    MOUSE_BUTTON_MIDDLE,
    MOUSE_BUTTON_RIGHT,
    PRESS,
    RELEASE,
    InputState,
    WindowProperties,
)

FRAME_RATE = 60

_SPECIAL_KEYS = {
    pygame.K_SPACE: KEY_SPACE,
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_RETURN: KEY_ENTER,
    pygame.K_KP_ENTER: KEY_ENTER,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_UP: KEY_UP,
    pygame.K_F3: KEY_F3,
    pygame.K_F5: KEY_F5,
}

_MOUSE_BUTTONS = {1: MOUSE_BUTTON_LEFT, 2: MOUSE_BUTTON_MIDDLE, 3: MOUSE_BUTTON_RIGHT}


def parent_dir(file_path: str) -> str:
    """Directory part of a path, or "." when it has none."""
    pos = max(file_path.rfind("/"), file_path.rfind("\\"))
    return "." if pos < 0 else file_path[:pos]


def _key_code(pg_key: int) -> int | None:
    if pygame.K_a <= pg_key <= pygame.K_z:
        return pg_key - pygame.K_a + KEY_A
    return _SPECIAL_KEYS.get(pg_key)


def _mods(pg_mods: int) -> int:
    mods = 0
    if pg_mods & pygame.KMOD_SHIFT:
        mods |= MOD_SHIFT
    if pg_mods & pygame.KMOD_CTRL:
        mods |= MOD_CONTROL
    if pg_mods & pygame.KMOD_ALT:
        mods |= MOD_ALT
    if pg_mods & pygame.KMOD_META:
        mods |= MOD_SUPER
    return mods


class _PygameGame(Game):
    """The duel wired to a pygame window for events and drawing."""

    def __init__(self, window: InputState, surface: pygame.Surface, rng: random.Random) -> None:
        super().__init__(window, rng=rng)
        self._surface = surface
        self._frame_clock = pygame.time.Clock()
        self._outlines: dict[str, tuple[np.ndarray, tuple[int, int, int]]] = {}

    def _poll_events(self) -> None:
        window = self.window
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                window.close()
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                code = _key_code(event.key)
                if code is not None:
                    action = PRESS if event.type == pygame.KEYDOWN else RELEASE
                    window.key_callback(code, event.scancode, action, _mods(event.mod))
            elif event.type == pygame.MOUSEMOTION:
                window.mouse_move(*event.pos)
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                button = _MOUSE_BUTTONS.get(event.button)
                if button is not None:
                    action = PRESS if event.type == pygame.MOUSEBUTTONDOWN else RELEASE
                    window.mouse_button_callback(button, action, _mods(pygame.key.get_mods()))
            elif event.type == pygame.MOUSEWHEEL:
                window.mouse_scroll(event.x, event.y)
            elif event.type == pygame.VIDEORESIZE:
                window.set_size(event.w, event.h)

    def _outline(self, name: str) -> tuple[np.ndarray, tuple[int, int, int]]:
        if name not in self._outlines:
            vertices = self.meshes[name].vertices
            # Quads are drawn by their corners, fans by their rim.
            rim = vertices if len(vertices) == 4 else vertices[1:]
            points = np.array([[v.position[0], v.position[1], 1.0] for v in rim]).T
            color = tuple(int(round(c * 255)) for c in rim[0].color)
            self._outlines[name] = (points, color)
        return self._outlines[name]

    def _swap_buffers(self) -> None:
        surface = self._surface
        surface.fill(tuple(int(round(c * 255)) for c in colors.sky_color()))
        height = surface.get_height()
        for command in self.draw_list():
            points, color = self._outline(command.mesh)
            placed = command.matrix @ points
            screen = [(float(x), height - float(y)) for x, y in zip(placed[0], placed[1])]
            pygame.draw.polygon(surface, color, screen)
        pygame.display.flip()
        if self.window.props.v_sync:
            self._frame_clock.tick(FRAME_RATE)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    argv = sys.argv if argv is None else argv
    random.seed()
    props = WindowProperties(
        self_dir=parent_dir(argv[0]) if argv else ".",
        resolution=(1280, 720),
        v_sync=True,
    )
    pygame.init()
    try:
        surface = pygame.display.set_mode(props.resolution)
        pygame.display.set_caption(props.name)
        game = _PygameGame(InputState(props), surface, random.Random())
        game.init()
        game.run()
    finally:
        print("=" * 53)
        print("Engine closed. Exit")
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())