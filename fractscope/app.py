"""Interactive fractal viewer window and command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from fractscope.cli import UsageError, parse_args
from fractscope.events import (
    Key,
    handle_cursor,
    handle_keys,
    handle_mouse_button,
    handle_scroll,
)
from fractscope.render import render_frame
from fractscope.state import HEIGHT, WIDTH, FractalState

_LEFT_BUTTON = 1

_KEYMAP: dict[Key, int] = {
    Key.ESCAPE: pygame.K_ESCAPE,
    Key.F: pygame.K_f,
    Key.G: pygame.K_g,
    Key.W: pygame.K_w,
    Key.S: pygame.K_s,
    Key.D: pygame.K_d,
    Key.A: pygame.K_a,
    Key.Q: pygame.K_q,
    Key.E: pygame.K_e,
    Key.Z: pygame.K_z,
    Key.C: pygame.K_c,
    Key.P: pygame.K_p,
    Key.O: pygame.K_o,
    Key.PAGE_UP: pygame.K_PAGEUP,
    Key.PAGE_DOWN: pygame.K_PAGEDOWN,
}


class _Framebuffer:
    """Persistent RGBA image; pixels not redrawn keep their old colour."""

    def __init__(self) -> None:
        self._pixels = bytearray(WIDTH * HEIGHT * 4)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        offset = (y * WIDTH + x) * 4
        self._pixels[offset : offset + 4] = color.to_bytes(4, "big")

    def surface(self) -> pygame.Surface:
        return pygame.image.frombuffer(self._pixels, (WIDTH, HEIGHT), "RGBA")


def _pressed_keys() -> set[Key]:
    held = pygame.key.get_pressed()
    return {key for key, code in _KEYMAP.items() if held[code]}


def _dispatch(state: FractalState, event: pygame.event.Event) -> None:
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == _LEFT_BUTTON:
        handle_mouse_button(state, True, *event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == _LEFT_BUTTON:
        handle_mouse_button(state, False, *event.pos)
    elif event.type == pygame.MOUSEMOTION:
        handle_cursor(state, *event.pos)
    elif event.type == pygame.MOUSEWHEEL:
        mouse_x, mouse_y = pygame.mouse.get_pos()
        handle_scroll(state, event.y, mouse_x, mouse_y)


def run(state: FractalState) -> int:
    """Open the viewer window and run until it is closed; return exit status."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(state.name)
        frame = _Framebuffer()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                _dispatch(state, event)
            render_frame(state, frame.put_pixel)
            screen.blit(frame.surface(), (0, 0))
            pygame.display.flip()
            if handle_keys(state, _pressed_keys()):
                return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and start the viewer."""
    if argv is None:
        argv = sys.argv[1:]
    state = FractalState()
    try:
        parse_args(argv, state)
    except UsageError as exc:
        sys.stdout.write(str(exc))
        return 1
    return run(state)


if __name__ == "__main__":
    raise SystemExit(main())