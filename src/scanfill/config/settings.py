"""Configuration settings for Scanfill."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class DegenerateEdgeRule(str, Enum):
    """Which edges the edge builder discards.

    SAME_Y drops horizontal edges, which never cross a scanline. SAME_X drops
    edges with zero horizontal extent (vertical edges); older fills did this
    while describing it as dropping horizontal edges, and lose the left and
    right sides of axis-aligned rectangles as a result.
    """

    SAME_Y = "same_y"
    SAME_X = "same_x"


class ActivationRule(str, Enum):
    """When an edge moves from the edge table to the active edge list."""

    AT_OR_AFTER = "at_or_after"
    EXACT = "exact"


class DeactivationRule(str, Enum):
    """When an edge leaves the active edge list."""

    INCLUSIVE = "inclusive"
    STRICT = "strict"


class ParityPolicy(str, Enum):
    """Recovery for a scanline with an odd number of intersections."""

    SKIP = "skip"
    DROP_LAST = "drop_last"
    RAISE = "raise"


class RoundingMode(str, Enum):
    """Rounding applied to intersection x-values."""

    FLOOR = "floor"
    NONE = "none"


class FillConfig(BaseModel):
    """Configuration for the scanline fill."""

    degenerate_edges: DegenerateEdgeRule = Field(
        default=DegenerateEdgeRule.SAME_Y,
        description="Edges discarded while building the edge table",
    )
    activation: ActivationRule = Field(
        default=ActivationRule.AT_OR_AFTER,
        description="Scanline test moving an edge into the active edge list",
    )
    deactivation: DeactivationRule = Field(
        default=DeactivationRule.INCLUSIVE,
        description="Scanline test removing an edge from the active edge list",
    )
    parity: ParityPolicy = Field(
        default=ParityPolicy.SKIP,
        description="What to do with a scanline having an odd intersection count",
    )
    rounding: RoundingMode = Field(
        default=RoundingMode.FLOOR,
        description="Rounding of intersection x-values",
    )
    integer_scanlines: bool = Field(
        default=True,
        description="Start scanning at the floored minimum y so scanlines land on integers",
    )
    max_iterations: int | None = Field(
        default=None,
        ge=1,
        description="Scanline iteration cap (None = derived from the polygon's y-extent)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ScanfillSettings(BaseModel):
    """Main application settings."""

    fill: FillConfig = Field(default_factory=FillConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ScanfillSettings:
    """Get default application settings."""
    return ScanfillSettings()
