"""RGBA pixel buffer used as the fill's pixel sink."""

from scanfill.exceptions import BufferSizeError

WHITE = (255, 255, 255, 255)


class RGBABuffer:
    """Row-major buffer of 4-byte RGBA pixels.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Raw bytes, width * height * 4 long
    """

    def __init__(self, width: int, height: int, data: bytearray | None = None) -> None:
        """Wrap or allocate pixel storage.

        Args:
            width: Width in pixels
            height: Height in pixels
            data: Existing storage to paint into (zero-filled buffer if None)

        Raises:
            BufferSizeError: If data does not hold exactly width * height pixels
        """
        size = width * height * 4
        if data is None:
            data = bytearray(size)
        elif len(data) != size:
            raise BufferSizeError(width, height, len(data))

        self.width = width
        self.height = height
        self.data = data

    def _offset(self, x: int, y: int) -> int:
        return (self.width * y + x) * 4

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel_white(self, x: int, y: int) -> None:
        """Paint one pixel opaque white.

        Coordinates are not checked against width and height: a negative or
        overlong x lands on a neighbouring row. Writes falling outside the
        storage are dropped, so the buffer never changes size.
        """
        offset = self._offset(x, y)
        if not 0 <= offset <= len(self.data) - 4:
            return
        self.data[offset:offset + 4] = bytes(WHITE)

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int, int]:
        offset = self._offset(x, y)
        r, g, b, a = self.data[offset:offset + 4]
        return (r, g, b, a)
