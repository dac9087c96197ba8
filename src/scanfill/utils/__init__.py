"""Utility functions for scanfill.

This module provides logging setup and per-fill statistics.
"""

from scanfill.utils.logging import (
    FillLogger,
    FillStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "FillLogger",
    "FillStats",
    "configure_logging",
    "get_logger",
]
