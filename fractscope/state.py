"""Fractal viewer state and its defaults."""

from __future__ import annotations

from dataclasses import dataclass, field

from fractscope.color import build_palette

WIDTH = 1024
HEIGHT = 1024
MAX_ITER = 1024

KEY_STEP = 0.05
PAN_SPEED = 0.01
ZOOM_FACTOR_IN = 1.1
ZOOM_FACTOR_OUT = 0.9

PARAM_COUNT = 10


@dataclass
class FractalState:
    """Everything that describes the current view and interaction."""

    name: str = "unspecified"

    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    is_julia: bool = False
    c: complex = complex(-0.7, 0.27015)
    z: complex = 0j
    power_mag: float = 2.0
    power_ang: float = 2.0
    iter_max: int = 512

    mouse_x: int = 0
    mouse_y: int = 0
    is_dragging: bool = False
    drag_start_x: int = 0
    drag_start_y: int = 0
    start_offset_x: float = 0.0
    start_offset_y: float = 0.0

    quality_level: int = 0
    last_params: tuple[float, ...] = (0.0,) * PARAM_COUNT
    view_changed: bool = True

    palette: tuple[int, ...] = field(default_factory=build_palette, repr=False)

    def params(self) -> tuple[float, ...]:
        """The values whose change triggers a redraw, in fixed order."""
        return (
            self.zoom,
            self.offset_x,
            self.offset_y,
            self.c.real,
            self.c.imag,
            self.z.real,
            self.z.imag,
            self.power_mag,
            self.power_ang,
            float(self.iter_max),
        )