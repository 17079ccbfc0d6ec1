"""Interactive Mandelbrot and Julia set viewer with adaptive rendering."""

__version__ = "0.1.0"