#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class Vec3:
    """Immutable 3-component vector (model-space vertex)."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        if isinstance(other, (tuple, list)) and len(other) == 3:
            return (self.x, self.y, self.z) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


class ScreenPoint:
    """
    Pixel position after projection.

    x and y are integers in screen space (origin bottom-left); z carries the
    model-space depth through unchanged for the depth test.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: int, y: int, z: float = 0.0):
        object.__setattr__(self, 'x', int(x))
        object.__setattr__(self, 'y', int(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("ScreenPoint is immutable")

    def __repr__(self):
        return f"ScreenPoint({self.x}, {self.y}, {self.z:.3f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if isinstance(other, ScreenPoint):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    @classmethod
    def of(cls, value) -> 'ScreenPoint':
        """Coerce a ScreenPoint, (x, y) or (x, y, z) tuple into a ScreenPoint."""
        if isinstance(value, ScreenPoint):
            return value
        if len(value) == 2:
            return cls(value[0], value[1])
        return cls(value[0], value[1], value[2])


def round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero (Python's round() is banker's)."""
    if value >= 0:
        return int(value + 0.5)
    return -int(-value + 0.5)
