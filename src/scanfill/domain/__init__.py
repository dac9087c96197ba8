"""Domain models for scanfill.

This module contains the value types the fill pipeline passes around. All
models are immutable frozen dataclasses.

Key classes:
- Point: A 2D point (vertex, intersection or pixel)
- Edge: A directed polygon edge
- Span: An interior interval on one scanline
- Scanline: The ordered intersections of one scanline
"""

from scanfill.domain.edge import Edge
from scanfill.domain.point import Point, as_points
from scanfill.domain.span import Scanline, Span

__all__: list[str] = [
    "Edge",
    "Point",
    "Scanline",
    "Span",
    "as_points",
]
