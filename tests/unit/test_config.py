"""Unit tests for configuration and logging setup."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from scanfill.config import (
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
from scanfill.core import ScanlineFiller
from scanfill.utils import FillLogger, configure_logging, get_logger


class TestFillConfig:
    """Tests for FillConfig."""

    def test_defaults(self):
        config = FillConfig()

        assert config.degenerate_edges is DegenerateEdgeRule.SAME_Y
        assert config.activation is ActivationRule.AT_OR_AFTER
        assert config.deactivation is DeactivationRule.INCLUSIVE
        assert config.parity is ParityPolicy.SKIP
        assert config.rounding is RoundingMode.FLOOR
        assert config.integer_scanlines is True
        assert config.max_iterations is None

    def test_enum_values_from_strings(self):
        config = FillConfig(parity="raise", degenerate_edges="same_x")

        assert config.parity is ParityPolicy.RAISE
        assert config.degenerate_edges is DegenerateEdgeRule.SAME_X

    def test_max_iterations_must_be_positive(self):
        with pytest.raises(ValidationError):
            FillConfig(max_iterations=0)

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            FillConfig(parity="ignore")

    def test_default_settings(self):
        settings = get_default_settings()

        assert settings.fill == FillConfig()
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = set(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


class TestFillerFromSettings:
    """Tests for ScanlineFiller.from_settings."""

    def test_uses_fill_and_logging_settings(self, tmp_path, restore_logging):
        log_file = tmp_path / "fill.log"
        settings = ScanfillSettings(
            fill=FillConfig(max_iterations=2),
            logging=LoggingConfig(log_file=log_file, log_level="ERROR"),
        )

        filler = ScanlineFiller.from_settings(settings)
        result = filler.scan([(0, 0), (4, 0), (4, 4), (0, 4)])

        assert filler.config is settings.fill
        assert result.aborted
        content = log_file.read_text(encoding="utf-8")
        assert "Fill aborted" in content

    def test_defaults(self, restore_logging):
        filler = ScanlineFiller.from_settings()

        assert filler.config == FillConfig()
        assert len(filler.scan([(0, 0), (4, 0), (4, 4), (0, 4)]).pixels()) == 16


class TestLogging:
    """Tests for logging helpers."""

    def test_fill_logger_stats(self):
        fill_logger = FillLogger(get_logger())

        fill_logger.log_edges_built(5, 3, 2)
        fill_logger.log_scanline(0, 2, 1)
        fill_logger.log_scanline_skipped(1, 3)
        fill_logger.log_fill_complete(2, 0.5)

        stats = fill_logger.stats
        assert (stats.edge_count, stats.discarded_edges) == (3, 2)
        assert stats.scanline_count == 1
        assert stats.skipped == [1]
        assert stats.iterations == 2
        assert not stats.aborted

    def test_get_logger_is_silent_below_level(self, caplog):
        caplog.set_level(logging.INFO, logger="scanfill")

        get_logger().debug("Hidden", scanline=1)
        get_logger().info("Shown", scanline=2)

        assert [r.getMessage() for r in caplog.records] == ["Shown"]
        assert caplog.records[0].scanline == 2

    def test_configure_logging_writes_file(self, tmp_path, restore_logging):
        log_file = tmp_path / "scanfill.log"

        logger = configure_logging(log_file=log_file, quiet=True)
        logger.debug("Fill complete", iterations=3)

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert '"iterations": 3' in content
