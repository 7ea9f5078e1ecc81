"""Core pieces of a tiny window system: fixed-point math, pixels and blur, layout, animation, handles and pointer input."""

__version__ = "0.1.0"