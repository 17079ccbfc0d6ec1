import pytest

from fractscope.fractal_math import (
    adjust_offsets_for_zoom,
    calculate_iterations,
    map_range,
    screen_to_world,
)
from fractscope.state import HEIGHT, WIDTH, ZOOM_FACTOR_IN, ZOOM_FACTOR_OUT, FractalState


def test_map_range_endpoints():
    assert map_range(0.0, -3.0, 5.0, 100.0) == -3.0
    assert map_range(100.0, -3.0, 5.0, 100.0) == 5.0


def test_screen_center_maps_to_offset():
    assert screen_to_world(WIDTH / 2, 0.3, 1.0, WIDTH) == pytest.approx(0.3)


def test_screen_to_world_is_monotonic():
    values = [screen_to_world(x, 0.0, 2.0, WIDTH) for x in range(0, WIDTH, 64)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_screen_edges_span_view():
    left = screen_to_world(0, 0.0, 1.0, WIDTH)
    right = screen_to_world(WIDTH, 0.0, 1.0, WIDTH)
    assert right - left == pytest.approx(4.0)
    assert left == pytest.approx(-right)


def test_mandelbrot_center_never_escapes():
    state = FractalState(iter_max=50)
    assert calculate_iterations(state, WIDTH / 2, HEIGHT / 2) == 50


def test_mandelbrot_corner_escapes_after_one_step():
    state = FractalState(iter_max=50)
    assert calculate_iterations(state, 0, 0) == 1


def test_julia_corner_escapes_immediately():
    state = FractalState(iter_max=50, is_julia=True)
    assert calculate_iterations(state, 0, 0) == 0


def test_general_power_handles_zero_magnitude():
    state = FractalState(iter_max=30, power_mag=3.0, power_ang=3.0)
    assert calculate_iterations(state, WIDTH / 2, HEIGHT / 2) == 30


def test_general_power_overflow_stays_in_range():
    state = FractalState(iter_max=10, power_mag=2000.0, power_ang=2.0)
    result = calculate_iterations(state, 896, HEIGHT / 2)
    assert 0 <= result <= 10


@pytest.mark.parametrize("x, y", [(0, 0), (100, 700), (512, 300), (900, 900)])
def test_iterations_bounded(x, y):
    state = FractalState(iter_max=40)
    assert 0 <= calculate_iterations(state, x, y) <= 40


@pytest.mark.parametrize("factor", [ZOOM_FACTOR_IN, ZOOM_FACTOR_OUT])
def test_zoom_keeps_point_under_mouse(factor):
    state = FractalState(zoom=1.5, offset_x=0.2, offset_y=-0.4)
    mouse_x, mouse_y = 300, 700
    before_x = screen_to_world(mouse_x, state.offset_x, state.zoom, WIDTH)
    before_y = screen_to_world(mouse_y, state.offset_y, state.zoom, HEIGHT)
    adjust_offsets_for_zoom(state, factor, mouse_x, mouse_y)
    assert state.zoom == pytest.approx(1.5 * factor)
    assert screen_to_world(mouse_x, state.offset_x, state.zoom, WIDTH) == pytest.approx(before_x)
    assert screen_to_world(mouse_y, state.offset_y, state.zoom, HEIGHT) == pytest.approx(before_y)