"""Point type and polygon input coercion."""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from numbers import Real

from scanfill.exceptions import PolygonError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Pixel coordinates are
    ints, interpolated intersections are floats.

    Attributes:
        x: X coordinate
        y: Y coordinate (grows downwards in pixel space)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pair: Sequence[float]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = pair
        return cls(x, y)


def as_points(vertices: Iterable[Point | Sequence[float]]) -> list[Point]:
    """Coerce polygon vertices into a list of points.

    Accepts Point instances and (x, y) pairs, mixed freely.

    Args:
        vertices: Polygon vertices in loop order

    Returns:
        List of Point instances

    Raises:
        PolygonError: If a vertex is not a pair of finite real numbers
    """
    points: list[Point] = []
    for index, vertex in enumerate(vertices):
        if isinstance(vertex, Point):
            point = vertex
        else:
            try:
                point = Point.from_tuple(vertex)
            except (TypeError, ValueError) as e:
                raise PolygonError(index, f"expected an (x, y) pair, got {vertex!r}") from e

        for value in (point.x, point.y):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise PolygonError(index, f"coordinate {value!r} is not a number")
            if not math.isfinite(value):
                raise PolygonError(index, f"coordinate {value!r} is not finite")

        points.append(point)

    return points
