"""Adaptive, change-driven rendering of the fractal image."""

from __future__ import annotations

from collections.abc import Callable

from fractscope.color import get_color
from fractscope.fractal_math import calculate_iterations
from fractscope.state import HEIGHT, WIDTH, FractalState

PutPixel = Callable[[int, int, int], None]

_CHANGE_EPSILON = 1e-9
_COARSEST_QUALITY = 2


def check_view_change(state: FractalState) -> bool:
    """Compare the view parameters with the last rendered ones.

    Records the new parameters when they differ and returns whether they did.
    """
    current = state.params()
    changed = any(
        abs(now - before) > _CHANGE_EPSILON
        for now, before in zip(current, state.last_params)
    )
    if changed:
        state.last_params = current
    state.view_changed = changed
    return changed


def update_quality_level(state: FractalState) -> int:
    """Reset to the coarsest level on change, otherwise refine one step."""
    if state.view_changed:
        state.quality_level = _COARSEST_QUALITY
    elif state.quality_level >= 0:
        state.quality_level -= 1
    return state.quality_level


def draw_image(state: FractalState, put_pixel: PutPixel) -> None:
    """Compute and emit pixels, every 2**quality_level-th in each direction."""
    step = 1 << max(state.quality_level, 0)
    for y in range(0, HEIGHT, step):
        for x in range(0, WIDTH, step):
            iterations = calculate_iterations(state, x, y)
            put_pixel(x, y, get_color(state.palette, iterations, state.iter_max))


def render_frame(state: FractalState, put_pixel: PutPixel) -> bool:
    """Run one frame of the renderer; return whether anything was drawn."""
    check_view_change(state)
    update_quality_level(state)
    if state.view_changed or state.quality_level >= 0:
        draw_image(state, put_pixel)
        return True
    return False