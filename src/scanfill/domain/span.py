"""Scanline spans.

- Span: an inclusive-exclusive interior interval on one scanline
- Scanline: the ordered boundary intersections found on one scanline
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from scanfill.domain.point import Point


@dataclass(frozen=True, slots=True)
class Span:
    """Interior interval [x_start, x_end) on scanline y.

    Attributes:
        x_start: Left boundary intersection (inclusive)
        x_end: Right boundary intersection (exclusive)
        y: Scanline the span lies on
    """

    x_start: float
    x_end: float
    y: float

    @property
    def width(self) -> float:
        return max(0, self.x_end - self.x_start)

    def pixels(self) -> Iterator[Point]:
        """Yield every integer-x point with x_start <= x < x_end, left to right."""
        for x in range(math.ceil(self.x_start), math.ceil(self.x_end)):
            yield Point(x, self.y)

    def clipped(self, lo: float, hi: float) -> "Span":
        """Restrict the span to [lo, hi).

        A span lying entirely outside the range comes back empty.
        """
        x_start = max(self.x_start, lo)
        x_end = min(self.x_end, hi)
        if x_end < x_start:
            x_end = x_start
        return Span(x_start, x_end, self.y)


@dataclass(frozen=True, slots=True)
class Scanline:
    """Boundary intersections of one scanline, ordered left to right.

    Attributes:
        y: Scanline position
        intersections: Intersection points, even in count
    """

    y: float
    intersections: tuple[Point, ...]

    def spans(self) -> list[Span]:
        """Pair consecutive intersections into interior spans."""
        points = self.intersections
        return [
            Span(points[i].x, points[i + 1].x, self.y)
            for i in range(0, len(points) - 1, 2)
        ]

    def pixels(self) -> list[Point]:
        """All interior pixels of the scanline, left to right."""
        return [pixel for span in self.spans() for pixel in span.pixels()]
