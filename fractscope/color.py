"""Colour palette generation and iteration-count to colour lookup."""

from __future__ import annotations

from collections.abc import Sequence

PALETTE_SIZE = 1024
INSIDE_COLOR = 0x000000FF

KEY_COLORS: tuple[int, ...] = (
    0x000000FF,
    0x1032A6FF,
    0xF62D2DFF,
    0xFFFFFFFF,
)


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF


def _rgba(r: int, g: int, b: int) -> int:
    return (r << 24) | (g << 16) | (b << 8) | 0xFF


def _lerp(start: int, end: int, t: float) -> int:
    return int(start + t * (end - start)) & 0xFF


def build_palette() -> tuple[int, ...]:
    """Return PALETTE_SIZE RGBA colours interpolated between the key colours."""
    segments = len(KEY_COLORS) - 1
    segment_size = PALETTE_SIZE // segments
    palette = []
    for i in range(PALETTE_SIZE):
        seg_idx = i // segment_size
        if seg_idx >= segments:
            palette.append(KEY_COLORS[-1])
            continue
        t = (i % segment_size) / (segment_size - 1)
        start = _channels(KEY_COLORS[seg_idx])
        end = _channels(KEY_COLORS[seg_idx + 1])
        r, g, b = (_lerp(s, e, t) for s, e in zip(start, end))
        palette.append(_rgba(r, g, b))
    return tuple(palette)


def get_color(palette: Sequence[int], value: int, max_value: int) -> int:
    """Colour for an escape count; points that never escaped are black."""
    if value == max_value:
        return INSIDE_COLOR
    return palette[value % PALETTE_SIZE]