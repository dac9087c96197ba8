"""Exception hierarchy for Scanfill."""


class ScanfillError(Exception):
    """Base exception for all Scanfill errors."""

    pass


class PolygonError(ScanfillError):
    """Invalid polygon input."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid polygon vertex at index {index}: {reason}")


class ParityError(ScanfillError):
    """Odd number of edge intersections on a scanline."""

    def __init__(self, y: float, count: int) -> None:
        self.y = y
        self.count = count
        super().__init__(
            f"Scanline y={y} has an odd number of intersections ({count})"
        )


class BufferSizeError(ScanfillError):
    """Pixel buffer does not match its declared dimensions."""

    def __init__(self, width: int, height: int, actual: int) -> None:
        self.width = width
        self.height = height
        self.actual = actual
        super().__init__(
            f"Buffer of {actual} bytes does not fit {width}x{height} RGBA pixels "
            f"({width * height * 4} bytes expected)"
        )
