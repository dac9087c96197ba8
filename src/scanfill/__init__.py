"""Scanfill - Scanline polygon fill.

Scanfill rasterizes a simple polygon, given as an ordered loop of vertices,
with the classic edge table / active edge list scanline algorithm. The result
can be a flat list of interior points, per-scanline span endpoints, or pixels
painted into an RGBA buffer.

Example:
    >>> from scanfill import fill_points
    >>> len(fill_points([(0, 0), (4, 0), (4, 4), (0, 4)]))
    16
"""

from scanfill.core import (
    ScanlineFiller,
    fill_image,
    fill_pixels,
    fill_points,
    fill_spans,
)

__version__ = "0.1.0"

__all__ = [
    "ScanlineFiller",
    "__version__",
    "fill_image",
    "fill_pixels",
    "fill_points",
    "fill_spans",
]
