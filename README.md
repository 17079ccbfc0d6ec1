# fractscope

An interactive viewer for the Mandelbrot and Julia sets. The iteration formula
can be generalized: the power applied to the magnitude and the power applied to
the angle of `z` can each be changed while you watch. Rendering is adaptive:
after every change the image is first drawn coarsely (every 4th pixel), then
refined over the next frames until every pixel has been computed.

## Installation

```
pip install .
```

This installs the `fractscope` command and its one dependency, pygame.

## Usage

```
fractscope mandelbrot
fractscope julia <real_const> <imag_const>
```

For example:

```
fractscope julia -0.7 0.27015
```

The two Julia constants are read leniently: leading whitespace and a sign are
accepted, a decimal fraction is read, anything after the number is ignored, and
exponents are not recognised. A wrong fractal name or argument count prints the
usage message and exits with status 1.

The viewer opens a 1024×1024 window. It starts with 512 iterations per point and,
for the Mandelbrot set, with the constant `c = -0.7 + 0.27015i` ready for when
you switch to the Julia set.

## Controls

| Input                   | Effect                                        |
|-------------------------|-----------------------------------------------|
| Mouse wheel             | Zoom in / out around the cursor               |
| Left button + drag      | Pan the view                                  |
| `W` / `S`               | Increase / decrease the imaginary part of `c` |
| `D` / `A`               | Increase / decrease the real part of `c`      |
| `E` / `Q`               | Increase / decrease the magnitude power       |
| `C` / `Z`               | Increase / decrease the angle power           |
| `P` / `O`               | Add / remove one iteration                    |
| `Page Up` / `Page Down` | Add / remove 64 iterations                    |
| `F`                     | Switch to the Mandelbrot set                  |
| `G`                     | Switch to the Julia set                       |
| `Esc`                   | Quit                                          |

Keys act every frame for as long as they are held. Closing the window also quits.
The iteration count never drops below 1 with `O`, and `Page Down` only acts
while it is above 64.

## Using it as a library

The computation does not depend on the window and can be used directly:

```python
from fractscope.state import FractalState
from fractscope.fractal_math import calculate_iterations
from fractscope.color import get_color

state = FractalState()
n = calculate_iterations(state, 512, 512)
rgba = get_color(state.palette, n, state.iter_max)
```

- `fractscope.state.FractalState` holds the view (zoom, offsets), the fractal
  parameters (`c`, `z`, `power_mag`, `power_ang`, `iter_max`, `is_julia`),
  the drag state and the colour palette.
- `fractscope.color.build_palette()` returns 1024 RGBA colours running from
  black through blue and red to white; `get_color` maps an escape count to one
  of them, and points that never escaped to black.
- `fractscope.fractal_math` has `screen_to_world`, `map_range`,
  `calculate_iterations` and `adjust_offsets_for_zoom`.
- `fractscope.cli.parse_args(argv, state)` configures a state from arguments
  (without the program name) and raises `UsageError` for invalid ones.
- `fractscope.events.handle_keys`, `handle_cursor`, `handle_scroll` and
  `handle_mouse_button` apply input to a state; `handle_keys` takes a set of
  `Key` members and returns `True` when the viewer should quit.
- `fractscope.render.render_frame(state, put_pixel)` runs one frame of the
  adaptive renderer through any `put_pixel(x, y, color)` callable and returns
  whether anything was drawn, so the image can be sent to a window, an array or
  a file of your own making.

## What it does not do

The viewer has no built-in way to save images or views, and the rendered image
is always 1024×1024 pixels regardless of the window size.

## Running the tests

```
pip install .[test]
pytest
```