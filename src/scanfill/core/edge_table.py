"""Edge table and active edge list.

The edge table (ET) holds edges the scanline has not reached yet, sorted by
descending minimum y so the next edge to activate always sits at the tail.
The active edge list (AEL) holds the edges relevant to the current scanline.
An edge only ever moves ET -> AEL -> discarded.
"""

from collections.abc import Iterable, Iterator

from scanfill.config import ActivationRule, DeactivationRule, RoundingMode
from scanfill.core.geometry import intersect_x, round_x
from scanfill.domain import Edge, Point


def is_ready(y: float, edge: Edge, rule: ActivationRule) -> bool:
    """Check whether scanline y activates an edge."""
    if rule is ActivationRule.EXACT:
        return y == edge.y_min
    return y >= edge.y_min


def is_expired(y: float, edge: Edge, rule: DeactivationRule) -> bool:
    """Check whether scanline y has passed an edge."""
    if rule is DeactivationRule.STRICT:
        return y > edge.y_max
    return y >= edge.y_max


class EdgeTable:
    """Pending edges, sorted by descending y_min.

    The table is only drained from the tail, through pop() and
    pop_ready(), so the sort order holds for its whole lifetime.

    Example:
        table = EdgeTable(edges)
        while table:
            ready = table.pop_ready(y, ActivationRule.AT_OR_AFTER)
    """

    def __init__(self, edges: Iterable[Edge]) -> None:
        self._edges = sorted(edges, key=lambda e: e.y_min, reverse=True)

    def __len__(self) -> int:
        return len(self._edges)

    def __bool__(self) -> bool:
        return bool(self._edges)

    def peek(self) -> Edge | None:
        """Return the next edge to activate without removing it."""
        return self._edges[-1] if self._edges else None

    @property
    def next_y_min(self) -> float | None:
        """Minimum y of the next edge to activate, None when drained."""
        edge = self.peek()
        return edge.y_min if edge is not None else None

    def pop(self) -> Edge:
        """Remove and return the edge with the lowest y_min.

        Raises:
            IndexError: If the table is empty
        """
        return self._edges.pop()

    def pop_ready(self, y: float, rule: ActivationRule) -> list[Edge]:
        """Remove and return every edge scanline y activates.

        Stops at the first tail edge that is not ready. Under
        ActivationRule.EXACT an edge whose y_min falls between scanlines is
        never ready and blocks the rest of the table.
        """
        ready: list[Edge] = []
        while self._edges and is_ready(y, self._edges[-1], rule):
            ready.append(self._edges.pop())
        return ready


class ActiveEdgeList:
    """Edges crossing or touching the current scanline."""

    def __init__(self) -> None:
        self._edges: list[Edge] = []

    def __len__(self) -> int:
        return len(self._edges)

    def __bool__(self) -> bool:
        return bool(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def add(self, edges: Iterable[Edge]) -> None:
        """Activate edges, ignoring any edge object already active."""
        for edge in edges:
            if not any(active is edge for active in self._edges):
                self._edges.append(edge)

    def prune(self, y: float, rule: DeactivationRule) -> list[Edge]:
        """Drop edges the scanline has passed.

        Returns:
            The removed edges
        """
        retained = [e for e in self._edges if not is_expired(y, e, rule)]
        removed = [e for e in self._edges if is_expired(y, e, rule)]
        self._edges = retained
        return removed

    def sort(self) -> None:
        """Order by x at y_min, ties broken by x at y_max."""
        self._edges.sort(key=lambda e: e.sort_key)

    def intersections(self, y: float, rounding: RoundingMode) -> list[Point]:
        """Intersect every active edge with scanline y, in list order."""
        return [Point(round_x(intersect_x(y, edge), rounding), y) for edge in self._edges]
