"""Keyboard and mouse handling that updates the fractal state."""

from __future__ import annotations

import enum
from collections.abc import Collection

from fractscope.fractal_math import adjust_offsets_for_zoom
from fractscope.state import (
    KEY_STEP,
    PAN_SPEED,
    ZOOM_FACTOR_IN,
    ZOOM_FACTOR_OUT,
    FractalState,
)

_VIEW_RANGE = 4.0
_BIG_ITER_STEP = 64


class Key(enum.Enum):
    """Keys the viewer reacts to."""

    ESCAPE = enum.auto()
    F = enum.auto()
    G = enum.auto()
    W = enum.auto()
    S = enum.auto()
    D = enum.auto()
    A = enum.auto()
    Q = enum.auto()
    E = enum.auto()
    Z = enum.auto()
    C = enum.auto()
    P = enum.auto()
    O = enum.auto()  # noqa: E741
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()


def _adjust_params(state: FractalState, pressed: Collection[Key]) -> None:
    real, imag = state.c.real, state.c.imag
    if Key.W in pressed:
        imag += KEY_STEP
    if Key.S in pressed:
        imag -= KEY_STEP
    if Key.D in pressed:
        real += KEY_STEP
    if Key.A in pressed:
        real -= KEY_STEP
    state.c = complex(real, imag)
    if Key.Q in pressed:
        state.power_mag -= KEY_STEP
    if Key.E in pressed:
        state.power_mag += KEY_STEP
    if Key.Z in pressed:
        state.power_ang -= KEY_STEP
    if Key.C in pressed:
        state.power_ang += KEY_STEP


def _adjust_iterations(state: FractalState, pressed: Collection[Key]) -> None:
    if Key.P in pressed:
        state.iter_max += 1
    if Key.O in pressed and state.iter_max > 1:
        state.iter_max -= 1
    if Key.PAGE_UP in pressed:
        state.iter_max += _BIG_ITER_STEP
    if Key.PAGE_DOWN in pressed and state.iter_max > _BIG_ITER_STEP:
        state.iter_max -= _BIG_ITER_STEP


def handle_keys(state: FractalState, pressed: Collection[Key]) -> bool:
    """Apply the keys held this frame; return True if the viewer should quit."""
    if Key.ESCAPE in pressed:
        return True
    if Key.F in pressed:
        state.is_julia = False
    if Key.G in pressed:
        state.is_julia = True
    _adjust_params(state, pressed)
    _adjust_iterations(state, pressed)
    return False


def handle_cursor(state: FractalState, xpos: float, ypos: float) -> None:
    """Pan the view while the left button is held."""
    if not state.is_dragging:
        return
    state.mouse_x = int(xpos)
    state.mouse_y = int(ypos)
    delta_x = state.mouse_x - state.drag_start_x
    delta_y = state.mouse_y - state.drag_start_y
    view_size = _VIEW_RANGE / state.zoom
    state.offset_x = state.start_offset_x - delta_x * view_size * PAN_SPEED
    state.offset_y = state.start_offset_y - delta_y * view_size * PAN_SPEED


def handle_scroll(state: FractalState, ydelta: float, mouse_x: int, mouse_y: int) -> None:
    """Zoom in on upward scroll, out otherwise, around the mouse position."""
    factor = ZOOM_FACTOR_IN if ydelta > 0 else ZOOM_FACTOR_OUT
    adjust_offsets_for_zoom(state, factor, mouse_x, mouse_y)


def handle_mouse_button(state: FractalState, pressed: bool, mouse_x: int, mouse_y: int) -> None:
    """Start a drag on left-button press, end it on release."""
    if pressed:
        state.is_dragging = True
        state.drag_start_x = mouse_x
        state.drag_start_y = mouse_y
        state.start_offset_x = state.offset_x
        state.start_offset_y = state.offset_y
    else:
        state.is_dragging = False