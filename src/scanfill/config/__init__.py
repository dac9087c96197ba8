"""Configuration management for scanfill.

This module provides configuration management using Pydantic models.

Key classes:
- FillConfig: Scanline fill rules (edge exclusion, activation, parity, rounding)
- LoggingConfig: Logging settings
- ScanfillSettings: Main application settings
"""

from scanfill.config.settings import (
    ActivationRule,
    DeactivationRule,
    DegenerateEdgeRule,
    FillConfig,
    LoggingConfig,
    ParityPolicy,
    RoundingMode,
    ScanfillSettings,
    get_default_settings,
)

__all__ = [
    "ActivationRule",
    "DeactivationRule",
    "DegenerateEdgeRule",
    "FillConfig",
    "LoggingConfig",
    "ParityPolicy",
    "RoundingMode",
    "ScanfillSettings",
    "get_default_settings",
]
