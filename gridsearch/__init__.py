"""Search algorithms on a square grid, with path smoothing and a Tkinter viewer."""

__version__ = "0.1.0"