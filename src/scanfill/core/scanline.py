"""Scanline driver for the polygon fill.

This module runs the edge table / active edge list loop that every output
mode shares.

Key components:
- ScanResult: Scanlines gathered by one run, plus abort and parity details
- ScanlineFiller: Builds the edge table and advances the scanline
"""

import math
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import structlog

from scanfill.config import FillConfig, ParityPolicy, ScanfillSettings, get_default_settings
from scanfill.core.edge_table import ActiveEdgeList, EdgeTable
from scanfill.core.edges import build_edges
from scanfill.core.geometry import y_extent
from scanfill.domain import Edge, Point, Scanline, Span, as_points
from scanfill.exceptions import ParityError
from scanfill.utils import FillLogger, FillStats, configure_logging, get_logger


@dataclass
class ScanResult:
    """Outcome of one scanline run.

    Attributes:
        scanlines: Scanlines with an even intersection count, top to bottom
        stats: Statistics of the run (iterations, skipped scanlines, abort flag)
    """

    scanlines: list[Scanline] = field(default_factory=list)
    stats: FillStats = field(default_factory=FillStats)

    @property
    def aborted(self) -> bool:
        """True if the iteration cap stopped the run early."""
        return self.stats.aborted

    @property
    def iterations(self) -> int:
        return self.stats.iterations

    @property
    def skipped(self) -> list[float]:
        """Scanlines dropped because of an odd intersection count."""
        return self.stats.skipped

    def spans(self) -> list[Span]:
        """All interior spans, scanline by scanline."""
        return [span for scanline in self.scanlines for span in scanline.spans()]

    def pixels(self) -> list[Point]:
        """All interior pixels, scanline by scanline, left to right."""
        return [pixel for scanline in self.scanlines for pixel in scanline.pixels()]


class ScanlineFiller:
    """Scanline polygon fill driver.

    Each call to scan() builds its own edge table and active edge list, so
    a filler can be reused and shared freely.

    Example:
        filler = ScanlineFiller(FillConfig(max_iterations=1000))
        result = filler.scan([(0, 0), (4, 0), (4, 4), (0, 4)])
        if result.aborted:
            ...
    """

    def __init__(
        self,
        config: FillConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the filler.

        Args:
            config: Fill rules (defaults to FillConfig())
            logger: Structured logger (defaults to the "scanfill" stdlib logger)
        """
        self.config = config if config is not None else FillConfig()
        self.logger = logger if logger is not None else get_logger("scanfill")

    @classmethod
    def from_settings(cls, settings: ScanfillSettings | None = None) -> "ScanlineFiller":
        """Build a filler from application settings.

        Configures logging from settings.logging and fills with
        settings.fill.

        Args:
            settings: Application settings (defaults to get_default_settings())
        """
        settings = settings if settings is not None else get_default_settings()
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        return cls(settings.fill, logger)

    def scan(self, points: Iterable[Point | Sequence[float]]) -> ScanResult:
        """Run the scanline loop over a polygon.

        Args:
            points: Polygon vertices in loop order, as Points or (x, y) pairs

        Returns:
            ScanResult with the gathered scanlines. Fewer than 3 vertices,
            or a polygon whose edges are all discarded, gives an empty
            result.

        Raises:
            PolygonError: If a vertex is malformed
            ParityError: On an odd intersection count under ParityPolicy.RAISE
        """
        config = self.config
        fill_logger = FillLogger(self.logger)
        stats = fill_logger.stats
        stats.start_time = time.time()

        vertices = as_points(points)
        edges = build_edges(vertices, config.degenerate_edges)
        discarded = len(vertices) - len(edges) if len(vertices) >= 3 else 0
        fill_logger.log_edges_built(len(vertices), len(edges), discarded)

        result = ScanResult(stats=stats)
        if not edges:
            stats.end_time = time.time()
            return result

        table = EdgeTable(edges)
        active = ActiveEdgeList()

        y = table.next_y_min
        if config.integer_scanlines:
            y = math.floor(y)
        limit = config.max_iterations or self._iteration_limit(edges, y)

        iterations = 0
        while table or active:
            if iterations >= limit:
                fill_logger.log_fill_aborted(y, iterations, len(table), len(active))
                break
            iterations += 1

            active.add(table.pop_ready(y, config.activation))
            active.prune(y, config.deactivation)
            active.sort()

            crossings = self._order(active.intersections(y, config.rounding))
            crossings = self._apply_parity(crossings, y, fill_logger)
            if crossings is not None:
                scanline = Scanline(y, tuple(crossings))
                result.scanlines.append(scanline)
                fill_logger.log_scanline(y, len(active), len(crossings) // 2)

            y += 1

        stats.end_time = time.time()
        fill_logger.log_fill_complete(iterations, stats.duration_seconds * 1000)
        return result

    @staticmethod
    def _iteration_limit(edges: list[Edge], y_start: float) -> int:
        """Scanline cap derived from the polygon's vertical extent."""
        _, y_max = y_extent(edges)
        return max(math.ceil(y_max - y_start), 0) + 2

    @staticmethod
    def _order(crossings: list[Point]) -> list[Point]:
        # Stable: equal x keeps active edge list order.
        return sorted(crossings, key=lambda p: p.x)

    def _apply_parity(
        self,
        crossings: list[Point],
        y: float,
        fill_logger: FillLogger,
    ) -> list[Point] | None:
        """Resolve an odd intersection count per the parity policy.

        Returns:
            The intersections to pair, or None to skip the scanline
        """
        if len(crossings) % 2 == 0:
            return crossings

        policy = self.config.parity
        if policy is ParityPolicy.RAISE:
            raise ParityError(y, len(crossings))
        if policy is ParityPolicy.DROP_LAST:
            return crossings[:-1]

        fill_logger.log_scanline_skipped(y, len(crossings))
        return None
