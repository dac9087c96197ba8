"""Directed polygon edge."""

from dataclasses import dataclass

from scanfill.domain.point import Point


@dataclass(frozen=True, slots=True)
class Edge:
    """A polygon edge, directed as found while walking the vertex loop.

    The endpoints are not normalized by y; the y_min/y_max accessors pick
    the right end. When both ends share a y-coordinate, point1 counts as
    the minimum end.

    Attributes:
        point1: Start vertex in traversal order
        point2: End vertex in traversal order
    """

    point1: Point
    point2: Point

    @property
    def y_min(self) -> float:
        return self.point1.y if self.point1.y <= self.point2.y else self.point2.y

    @property
    def y_max(self) -> float:
        return self.point1.y if self.point1.y > self.point2.y else self.point2.y

    @property
    def x_at_y_min(self) -> float:
        """X-coordinate of the endpoint with the minimum y."""
        return self.point1.x if self.point1.y <= self.point2.y else self.point2.x

    @property
    def x_at_y_max(self) -> float:
        """X-coordinate of the endpoint with the maximum y."""
        return self.point1.x if self.point1.y > self.point2.y else self.point2.x

    @property
    def is_horizontal(self) -> bool:
        return self.point1.y == self.point2.y

    @property
    def is_vertical(self) -> bool:
        return self.point1.x == self.point2.x

    @property
    def sort_key(self) -> tuple[float, float]:
        """Active edge list ordering: x at y_min, then x at y_max."""
        return (self.x_at_y_min, self.x_at_y_max)
