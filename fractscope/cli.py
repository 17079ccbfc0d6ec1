"""Command-line argument handling for choosing a fractal."""

from __future__ import annotations

from collections.abc import Sequence

from fractscope.numparse import atof
from fractscope.state import FractalState


class UsageError(Exception):
    """Raised when the command line does not name a valid fractal."""


def usage_text() -> str:
    """The usage message shown for invalid arguments."""
    return (
        "Usage: fractscope <fractal_name>\n\n"
        "Available fractals:\n"
        "  - mandelbrot\n"
        "  - julia <real_const> <imag_const>\n\n"
        "Example:\n"
        " fractscope julia -0.7 0.27015\n"
    )


def parse_args(argv: Sequence[str], state: FractalState) -> FractalState:
    """Configure state from arguments (program name excluded).

    Raises UsageError, leaving state untouched, if the arguments are invalid.
    """
    if not argv:
        raise UsageError(usage_text())
    kind, *rest = argv
    if kind == "mandelbrot":
        if rest:
            raise UsageError(usage_text())
        state.name = "mandelbrot"
        state.is_julia = False
        return state
    if kind == "julia":
        if len(rest) != 2:
            raise UsageError(usage_text())
        state.name = "julia"
        state.is_julia = True
        state.c = complex(atof(rest[0]), atof(rest[1]))
        return state
    raise UsageError(usage_text())