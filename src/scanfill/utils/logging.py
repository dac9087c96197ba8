"""Logging utilities for Scanfill."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class FillStats:
    """Statistics from one fill run."""

    edge_count: int = 0
    discarded_edges: int = 0
    iterations: int = 0
    scanline_count: int = 0
    span_count: int = 0
    skipped: list[float] = field(default_factory=list)
    aborted: bool = False
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate fill duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def get_logger(name: str = "scanfill") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger writing through the stdlib logger `name`.

    Events are handed to stdlib logging as message plus extra fields, so
    nothing is emitted until the application configures handlers (for
    example with configure_logging).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("scanfill")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class FillLogger:
    """Logger for tracking one fill run and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = FillStats()

    def log_edges_built(self, vertex_count: int, edge_count: int, discarded: int) -> None:
        """Log edge table construction."""
        self._logger.debug(
            "Edges built",
            vertices=vertex_count,
            edges=edge_count,
            discarded=discarded,
        )
        self._stats.edge_count = edge_count
        self._stats.discarded_edges = discarded

    def log_scanline(self, y: float, active: int, spans: int) -> None:
        """Log one emitted scanline."""
        self._logger.debug("Scanline", scanline=y, active=active, spans=spans)
        self._stats.scanline_count += 1
        self._stats.span_count += spans

    def log_scanline_skipped(self, y: float, intersections: int) -> None:
        """Log a scanline dropped for odd parity."""
        self._logger.warning(
            "Scanline skipped",
            scanline=y,
            intersections=intersections,
            reason="odd intersection count",
        )
        self._stats.skipped.append(y)

    def log_fill_aborted(self, y: float, iterations: int, pending: int, active: int) -> None:
        """Log a fill stopped by the iteration cap."""
        self._logger.warning(
            "Fill aborted",
            scanline=y,
            iterations=iterations,
            pending_edges=pending,
            active_edges=active,
        )
        self._stats.aborted = True

    def log_fill_complete(self, iterations: int, duration_ms: float) -> None:
        """Log the end of a fill run."""
        self._logger.debug(
            "Fill complete",
            iterations=iterations,
            scanlines=self._stats.scanline_count,
            spans=self._stats.span_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.iterations = iterations

    @property
    def stats(self) -> FillStats:
        """Get current fill statistics."""
        return self._stats
