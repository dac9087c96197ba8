"""Pixel output for scanfill.

Key classes:
- RGBABuffer: Row-major RGBA buffer with a set_pixel_white sink
"""

from scanfill.io.buffer import WHITE, RGBABuffer

__all__ = [
    "WHITE",
    "RGBABuffer",
]
