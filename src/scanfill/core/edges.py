"""Edge construction from a closed vertex loop."""

from scanfill.config import DegenerateEdgeRule
from scanfill.domain import Edge, Point


def is_degenerate(edge: Edge, rule: DegenerateEdgeRule) -> bool:
    """Check whether the edge builder discards an edge under the given rule."""
    if rule is DegenerateEdgeRule.SAME_X:
        return edge.is_vertical
    return edge.is_horizontal


def build_edges(
    points: list[Point],
    rule: DegenerateEdgeRule = DegenerateEdgeRule.SAME_Y,
) -> list[Edge]:
    """Convert a closed vertex loop into directed edges.

    The loop is implicit: the last point connects back to the first. Each
    edge keeps its endpoints in traversal order.

    Args:
        points: Polygon vertices in loop order
        rule: Which degenerate edges to discard

    Returns:
        Edges in traversal order, starting with the closing edge
        (last -> first). Empty when fewer than 3 points are given.
    """
    if len(points) < 3:
        return []

    edges: list[Edge] = []
    point1 = points[-1]
    for point2 in points:
        edge = Edge(point1, point2)
        if not is_degenerate(edge, rule):
            edges.append(edge)
        point1 = point2

    return edges
