#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .color import Color, BLACK
from .errors import PixelOutOfBoundsError

# Depth sentinel for "nothing drawn yet"; any real depth is greater.
EMPTY_DEPTH = float('-inf')


class Framebuffer:
    """
    width x height RGBA pixels, 4 bytes each, stored row-major top row first.

    Logical coordinates have their origin at the bottom-left, so every
    access flips the row: stored_row = height - 1 - y.

    Writes outside [0, width) x [0, height) raise PixelOutOfBoundsError.
    With clip=True they are dropped instead and counted in clipped_writes.
    """
    __slots__ = ['width', 'height', 'buf', 'background', 'clip', 'clipped_writes']

    def __init__(self, width: int, height: int, background: Color = BLACK, clip: bool = False):
        if width < 1 or height < 1:
            raise ValueError(f"Framebuffer size must be positive, got {width}x{height}")
        self.width, self.height = width, height
        self.buf = bytearray(bytes(background) * (width * height))
        self.background = background
        self.clip = clip
        self.clipped_writes = 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        row = self.height - 1 - y
        return (row * self.width + x) * 4

    def set(self, x: int, y: int, color: Color):
        if not (0 <= x < self.width and 0 <= y < self.height):
            if self.clip:
                self.clipped_writes += 1
                return
            raise PixelOutOfBoundsError(x, y, self.width, self.height)
        offset = self._offset(x, y)
        self.buf[offset:offset + 4] = bytes(color)

    def get(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise PixelOutOfBoundsError(x, y, self.width, self.height)
        offset = self._offset(x, y)
        return Color(*self.buf[offset:offset + 4])

    def fill(self, color: Color):
        self.buf[:] = bytes(color) * (self.width * self.height)

    def clear(self):
        self.fill(self.background)

    def pixels(self):
        """Yield (x, y, Color) for every pixel, in logical coordinates."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get(x, y)

    def to_bytes(self) -> bytes:
        """Raw RGBA bytes, top row first (what image encoders expect)."""
        return bytes(self.buf)


class ZBuffer:
    """
    Per-pixel depth record for one render pass.

    Shares the Framebuffer's logical coordinates.  A new depth wins only if
    it is strictly greater than the stored one.
    """
    __slots__ = ['width', 'height', 'depth']

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"ZBuffer size must be positive, got {width}x{height}")
        self.width, self.height = width, height
        self.depth = [[EMPTY_DEPTH] * width for _ in range(height)]

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOutOfBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> float:
        self._check(x, y)
        return self.depth[self.height - 1 - y][x]

    def set(self, x: int, y: int, z: float):
        self._check(x, y)
        self.depth[self.height - 1 - y][x] = z

    def test_and_set(self, x: int, y: int, z: float) -> bool:
        """Store z if it is closer than what is there.  Returns True on a win."""
        self._check(x, y)
        row = self.depth[self.height - 1 - y]
        if z > row[x]:
            row[x] = z
            return True
        return False

    def clear(self):
        for row in self.depth:
            for x in range(self.width):
                row[x] = EMPTY_DEPTH
