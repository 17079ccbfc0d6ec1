"""Coordinate mapping, escape-time iteration and zoom arithmetic."""

from __future__ import annotations

import math

from fractscope.state import HEIGHT, WIDTH, FractalState

_VIEW_RANGE = 4.0
_ESCAPE_RADIUS_SQ = 4.0


def map_range(val: float, n_min: float, n_max: float, o_max: float) -> float:
    """Map val from [0, o_max] onto [n_min, n_max]."""
    return (val / o_max) * (n_max - n_min) + n_min


def screen_to_world(screen_coord: float, offset: float, zoom: float, max_dim: float) -> float:
    """Convert a pixel coordinate to a coordinate in the complex plane."""
    return (screen_coord / zoom / max_dim) * _VIEW_RANGE - (_VIEW_RANGE / 2.0) + offset


def _log(value: float) -> float:
    if value == 0.0:
        return -math.inf
    return math.log(value)


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def calculate_iterations(state: FractalState, x: float, y: float) -> int:
    """Escape-time count for the pixel at (x, y)."""
    world_x = screen_to_world(x, state.offset_x, state.zoom, WIDTH)
    world_y = screen_to_world(y, state.offset_y, state.zoom, HEIGHT)
    if state.is_julia:
        c_re, c_im = state.c.real, state.c.imag
        z_re, z_im = world_x, world_y
    else:
        c_re, c_im = world_x, world_y
        z_re, z_im = state.z.real, state.z.imag

    power_mag = state.power_mag
    power_ang = state.power_ang
    quadratic = power_mag == 2.0 and power_ang == 2.0

    iteration = 0
    while iteration < state.iter_max:
        mag_sq = z_re * z_re + z_im * z_im
        if mag_sq > _ESCAPE_RADIUS_SQ:
            return iteration
        if quadratic:
            z_re, z_im = z_re * z_re - z_im * z_im + c_re, 2 * z_re * z_im + c_im
        else:
            log_mag = 0.5 * _log(mag_sq)
            angle = math.atan2(z_im, z_re) * power_ang
            magnitude = _exp(power_mag * log_mag)
            z_re, z_im = (
                magnitude * math.cos(angle) + c_re,
                magnitude * math.sin(angle) + c_im,
            )
        iteration += 1
    return iteration


def adjust_offsets_for_zoom(
    state: FractalState, zoom_factor: float, mouse_x: int, mouse_y: int
) -> None:
    """Zoom by zoom_factor, keeping the point under the mouse fixed."""
    world_x = screen_to_world(mouse_x, state.offset_x, state.zoom, WIDTH)
    world_y = screen_to_world(mouse_y, state.offset_y, state.zoom, HEIGHT)
    state.zoom *= zoom_factor
    state.offset_x = world_x - screen_to_world(mouse_x, 0.0, state.zoom, WIDTH)
    state.offset_y = world_y - screen_to_world(mouse_y, 0.0, state.zoom, HEIGHT)