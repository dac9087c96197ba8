"""Geometric operations for the scanline fill.

This module provides the numeric pieces of the fill:
- Scanline/edge intersection (linear interpolation)
- Signed area calculation (shoelace formula)
- Vertical extent of an edge set

All functions are pure and stateless.
"""

import math

from scanfill.config import RoundingMode
from scanfill.domain import Edge, Point


def intersect_x(y: float, edge: Edge) -> float:
    """Find the x-coordinate where scanline y crosses an edge.

    Linear interpolation between the edge's endpoints. When y equals an
    endpoint's y the endpoint's x is returned directly, which also covers
    edges with no vertical extent.

    Args:
        y: Scanline position
        edge: Edge crossing (or touching) the scanline

    Returns:
        Interpolated x-coordinate

    Examples:
        >>> edge = Edge(Point(0.0, 0.0), Point(4.0, 8.0))
        >>> intersect_x(2.0, edge)
        1.0
        >>> intersect_x(8.0, edge)
        4.0
    """
    point1, point2 = edge.point1, edge.point2

    if y == point1.y:
        return point1.x
    if y == point2.y:
        return point2.x

    return point1.x + (y - point1.y) / (point2.y - point1.y) * (point2.x - point1.x)


def round_x(x: float, rounding: RoundingMode) -> float:
    """Apply the configured rounding to an intersection x-value."""
    if rounding is RoundingMode.FLOOR:
        return math.floor(x)
    return x


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    With y growing downwards (pixel space), positive area means the loop
    runs clockwise on screen.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def y_extent(edges: list[Edge]) -> tuple[float, float]:
    """Return (min y_min, max y_max) over an edge set.

    Returns:
        Vertical extent, (0.0, 0.0) for an empty edge set
    """
    if not edges:
        return (0.0, 0.0)
    return (min(e.y_min for e in edges), max(e.y_max for e in edges))
