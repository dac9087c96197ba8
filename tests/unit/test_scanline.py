"""Unit tests for the scanline driver.

Tests cover:
- Basic fills and scan start
- Parity recovery policies on vertex-aligned scanlines
- Iteration cap and aborted results
- Intersection ordering for edges activated on different scanlines
- Logging of skipped and aborted scanlines
"""

import logging

import pytest

from scanfill.config import (
    ActivationRule,
    DeactivationRule,
    DegenerateEdgeRule,
    FillConfig,
    ParityPolicy,
    RoundingMode,
)
from scanfill.core.scanline import ScanlineFiller
from scanfill.domain import Point
from scanfill.exceptions import ParityError

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4)]

# Square with an extra vertex halfway down its right side. Under strict
# deactivation both right-side edges are active at y=2.
NOTCHED_SQUARE = [(0, 0), (4, 0), (4, 2), (4, 4), (0, 4)]


def rows(points: list[Point]) -> dict[float, list[float]]:
    result: dict[float, list[float]] = {}
    for p in points:
        result.setdefault(p.y, []).append(p.x)
    return result


class TestScan:
    """Tests for ScanlineFiller.scan basics."""

    def test_square(self):
        result = ScanlineFiller().scan(SQUARE)

        assert set(result.pixels()) == {Point(x, y) for x in range(4) for y in range(4)}
        assert not result.aborted
        assert result.skipped == []
        assert result.iterations == 5

    def test_stats(self):
        result = ScanlineFiller().scan(SQUARE)

        assert result.stats.edge_count == 2
        assert result.stats.discarded_edges == 2
        assert result.stats.span_count == 4
        assert result.stats.duration_seconds >= 0.0

    def test_scanlines_are_ordered(self):
        result = ScanlineFiller().scan(SQUARE)

        ys = [s.y for s in result.scanlines]
        assert ys == sorted(ys)
        assert [len(s.intersections) for s in result.scanlines] == [2, 2, 2, 2, 0]

    @pytest.mark.parametrize("points", [[], [(1, 1)], [(0, 0), (5, 5)]])
    def test_fewer_than_three_points(self, points):
        result = ScanlineFiller().scan(points)

        assert result.scanlines == []
        assert result.pixels() == []
        assert not result.aborted

    def test_flat_polygon(self):
        """All edges horizontal: nothing to activate."""
        result = ScanlineFiller().scan([(0, 3), (5, 3), (9, 3)])
        assert result.scanlines == []

    def test_same_x_rule_loses_rectangle_sides(self):
        """Legacy exclusion of vertical edges leaves a rectangle empty."""
        config = FillConfig(degenerate_edges=DegenerateEdgeRule.SAME_X)
        result = ScanlineFiller(config).scan(SQUARE)

        assert result.pixels() == []
        assert not result.aborted

    def test_fractional_top_starts_on_next_integer(self):
        polygon = [(0, 0.5), (4, 0.5), (4, 3.5), (0, 3.5)]
        result = ScanlineFiller().scan(polygon)

        assert sorted(rows(result.pixels())) == [1, 2, 3]

    def test_real_valued_scanlines(self):
        polygon = [(0.5, 0.5), (3.5, 0.5), (3.5, 2.5), (0.5, 2.5)]
        config = FillConfig(integer_scanlines=False, rounding=RoundingMode.NONE)

        pixels = ScanlineFiller(config).scan(polygon).pixels()

        assert rows(pixels) == {0.5: [1, 2, 3], 1.5: [1, 2, 3]}

    def test_floor_rounding_shifts_span(self):
        polygon = [(0.5, 0.5), (3.5, 0.5), (3.5, 2.5), (0.5, 2.5)]
        config = FillConfig(integer_scanlines=False)

        pixels = ScanlineFiller(config).scan(polygon).pixels()

        assert rows(pixels) == {0.5: [0, 1, 2], 1.5: [0, 1, 2]}

    def test_idempotent(self):
        filler = ScanlineFiller()
        first = filler.scan(NOTCHED_SQUARE)
        second = filler.scan(NOTCHED_SQUARE)

        assert first.scanlines == second.scanlines
        assert first.stats.span_count == second.stats.span_count


class TestParity:
    """Tests for odd intersection counts."""

    def test_default_rules_keep_parity_on_shared_vertex(self):
        result = ScanlineFiller(FillConfig(parity=ParityPolicy.RAISE)).scan(NOTCHED_SQUARE)

        assert sorted(rows(result.pixels())) == [0, 1, 2, 3]
        assert len(result.pixels()) == 16

    def test_skip(self):
        config = FillConfig(deactivation=DeactivationRule.STRICT)
        result = ScanlineFiller(config).scan(NOTCHED_SQUARE)

        assert result.skipped == [2]
        assert sorted(rows(result.pixels())) == [0, 1, 3, 4]
        assert all(len(s.intersections) % 2 == 0 for s in result.scanlines)

    def test_drop_last(self):
        config = FillConfig(
            deactivation=DeactivationRule.STRICT,
            parity=ParityPolicy.DROP_LAST,
        )
        result = ScanlineFiller(config).scan(NOTCHED_SQUARE)

        assert result.skipped == []
        assert rows(result.pixels())[2] == [0, 1, 2, 3]
        assert len(result.pixels()) == 20

    def test_raise(self):
        config = FillConfig(
            deactivation=DeactivationRule.STRICT,
            parity=ParityPolicy.RAISE,
        )

        with pytest.raises(ParityError) as exc_info:
            ScanlineFiller(config).scan(NOTCHED_SQUARE)

        assert exc_info.value.y == 2
        assert exc_info.value.count == 3

    def test_skip_is_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger="scanfill")
        config = FillConfig(deactivation=DeactivationRule.STRICT)

        ScanlineFiller(config).scan(NOTCHED_SQUARE)

        records = [r for r in caplog.records if r.getMessage() == "Scanline skipped"]
        assert len(records) == 1
        assert records[0].scanline == 2
        assert records[0].intersections == 3


class TestIterationCap:
    """Tests for the iteration cap."""

    def test_exact_activation_stall_aborts(self):
        """EXACT activation never matches a fractional y_min on integer scanlines."""
        polygon = [(0, 0.5), (4, 0.5), (4, 3.5), (0, 3.5)]
        config = FillConfig(activation=ActivationRule.EXACT)

        result = ScanlineFiller(config).scan(polygon)

        assert result.aborted
        assert result.iterations == 6
        assert result.pixels() == []

    def test_explicit_cap_returns_partial_result(self):
        result = ScanlineFiller(FillConfig(max_iterations=2)).scan(SQUARE)

        assert result.aborted
        assert result.iterations == 2
        assert sorted(rows(result.pixels())) == [0, 1]

    def test_derived_cap_covers_strict_deactivation(self):
        config = FillConfig(deactivation=DeactivationRule.STRICT)
        result = ScanlineFiller(config).scan([(0, 0), (3, 0.5), (3, 4.5), (0, 4)])

        assert not result.aborted

    def test_abort_is_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger="scanfill")

        ScanlineFiller(FillConfig(max_iterations=1)).scan(SQUARE)

        records = [r for r in caplog.records if r.getMessage() == "Fill aborted"]
        assert len(records) == 1
        assert records[0].iterations == 1
        assert records[0].active_edges == 2


class TestIntersectionOrder:
    """Edges activated on different scanlines pair by crossing position."""

    # Long edge (0,0)-(8,8) on the right; lower-left edge starts at y=4 with a
    # larger x at its own y_min than the long edge has at its y_min.
    POLYGON = [(0, 0), (8, 8), (-2, 8), (3, 4), (-4, 4)]

    def test_rows(self):
        pixels = ScanlineFiller().scan(self.POLYGON).pixels()
        by_row = rows(pixels)

        assert by_row[1] == [-1, 0]
        assert by_row[4] == [3]
        assert by_row[5] == [1, 2, 3, 4]
        assert by_row[7] == list(range(-1, 7))
        assert 0 not in by_row
        assert len(pixels) == 31
