"""Output modes of the scanline fill.

- fill_points: flat list of interior pixels
- fill_spans: per-scanline intersection endpoints
- fill_pixels: interior pixels pushed into a set_pixel callback
- fill_image: interior pixels painted white into a fresh RGBA buffer
"""

from collections.abc import Callable, Iterable, Sequence

from scanfill.config import FillConfig
from scanfill.core.scanline import ScanlineFiller, ScanResult
from scanfill.domain import Point
from scanfill.io import RGBABuffer

PolygonInput = Iterable[Point | Sequence[float]]


def fill_points(points: PolygonInput, config: FillConfig | None = None) -> list[Point]:
    """Return every interior pixel of a polygon.

    Args:
        points: Polygon vertices in loop order
        config: Fill rules

    Returns:
        Points ordered scanline by scanline, left to right within a scanline.
        Empty for fewer than 3 vertices.

    Examples:
        >>> fill_points([(0, 0), (2, 0), (2, 1), (0, 1)])
        [Point(x=0, y=0), Point(x=1, y=0)]
    """
    return ScanlineFiller(config).scan(points).pixels()


def fill_spans(points: PolygonInput, config: FillConfig | None = None) -> list[list[Point]]:
    """Return the boundary intersections of each scanline.

    Scanlines without intersections are left out. Consecutive pairs of each
    inner list delimit an interior span [x1, x2).

    Args:
        points: Polygon vertices in loop order
        config: Fill rules

    Returns:
        One list of intersection points per non-empty scanline, top to bottom
    """
    result = ScanlineFiller(config).scan(points)
    return [list(s.intersections) for s in result.scanlines if s.intersections]


def fill_pixels(
    points: PolygonInput,
    set_pixel: Callable[[int, int], None],
    config: FillConfig | None = None,
) -> ScanResult:
    """Call set_pixel(x, y) once for every interior pixel.

    Scanlines always land on integers here. No bounds checking is done:
    the callback must accept every pixel the polygon covers.

    Args:
        points: Polygon vertices in loop order
        set_pixel: Pixel sink, typically RGBABuffer.set_pixel_white
        config: Fill rules

    Returns:
        The scan result, for abort and parity details
    """
    return _paint(points, set_pixel, config)


def fill_image(
    points: PolygonInput,
    width: int,
    height: int,
    config: FillConfig | None = None,
) -> RGBABuffer:
    """Rasterize a polygon into a new RGBA buffer.

    Interior pixels are painted opaque white, everything else stays zero.
    Spans are clipped to the buffer, so polygons may extend past its edges.

    Args:
        points: Polygon vertices in loop order
        width: Buffer width in pixels
        height: Buffer height in pixels
        config: Fill rules

    Returns:
        The painted buffer
    """
    buffer = RGBABuffer(width, height)
    _paint(points, buffer.set_pixel_white, config, bounds=(width, height))
    return buffer


def _paint(
    points: PolygonInput,
    set_pixel: Callable[[int, int], None],
    config: FillConfig | None,
    bounds: tuple[int, int] | None = None,
) -> ScanResult:
    config = config if config is not None else FillConfig()
    if not config.integer_scanlines:
        config = config.model_copy(update={"integer_scanlines": True})

    result = ScanlineFiller(config).scan(points)
    if bounds is not None:
        width, height = bounds
    for span in result.spans():
        if bounds is not None:
            if not 0 <= span.y < height:
                continue
            span = span.clipped(0, width)
        if not span.width:
            continue
        for pixel in span.pixels():
            set_pixel(pixel.x, pixel.y)
    return result
