#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import ScreenPoint


def project(vertex, width: int, height: int) -> ScreenPoint:
    """
    Orthographic projection of a normalized vertex ([-1, 1] in x and y)
    onto a width x height raster.  Depth passes through unchanged.

    The +1 offset matches the reference output, so a vertex at exactly +1
    lands on x == width (or y == height).  Use clamp_point before writing.
    """
    x, y, z = vertex[0], vertex[1], vertex[2]
    sx = 1 + (x + 1.0) * (width - 1) / 2.0
    sy = 1 + (y + 1.0) * (height - 1) / 2.0
    return ScreenPoint(int(sx), int(sy), z)


def clamp_point(point: ScreenPoint, width: int, height: int) -> ScreenPoint:
    """Clamp x/y into [0, width-1] x [0, height-1], keeping depth."""
    x = min(max(point.x, 0), width - 1)
    y = min(max(point.y, 0), height - 1)
    if x == point.x and y == point.y:
        return point
    return ScreenPoint(x, y, point.z)
