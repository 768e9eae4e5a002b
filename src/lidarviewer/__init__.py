"""Live grayscale view of a depth camera's per-pixel distance."""

__version__ = "1.0.0"
