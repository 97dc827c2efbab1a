#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Optional, Sequence, Tuple

from .canvas import Framebuffer, ZBuffer
from .color import Color
from .math_utils import Vec3, ScreenPoint, round_half_away

# Returned for degenerate triangles; the negative weight rejects every pixel.
DEGENERATE = (-1.0, 1.0, 1.0)


def draw_line(framebuffer: Framebuffer, color: Color, p0, p1):
    """
    Draws a single-color segment between two integer screen points.

    Parametric interpolation along the longer axis: for each step t in
    [0, 1] the minor coordinate is round(a*(1-t) + b*t).  Both endpoints
    are always written and the pixel set does not depend on point order.
    Depth on the points, if any, is ignored.

    Returns the number of pixels written (writes dropped by a clipping
    framebuffer are not counted).
    """
    p0, p1 = ScreenPoint.of(p0), ScreenPoint.of(p1)
    x0, y0, x1, y1 = p0.x, p0.y, p1.x, p1.y
    clipped_before = framebuffer.clipped_writes

    if x0 == x1:
        y_lo, y_hi = min(y0, y1), max(y0, y1)
        for y in range(y_lo, y_hi + 1):
            framebuffer.set(x0, y, color)
        return y_hi - y_lo + 1 - (framebuffer.clipped_writes - clipped_before)

    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1

    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    span = float(x1 - x0)
    for x in range(x0, x1 + 1):
        t = (x - x0) / span
        y = round_half_away(y0 * (1.0 - t) + y1 * t)
        if steep:
            framebuffer.set(y, x, color)
        else:
            framebuffer.set(x, y, color)
    return x1 - x0 + 1 - (framebuffer.clipped_writes - clipped_before)


def barycentric(a, b, c, p) -> Tuple[float, float, float]:
    """
    Barycentric weights (w0, w1, w2) of p relative to triangle a, b, c.

    Only x and y are used.  The z of the cross product is twice the signed
    screen area; below 1 the triangle covers no pixel centre reliably and
    DEGENERATE is returned instead of dividing by it.
    """
    u = Vec3(c[0] - a[0], b[0] - a[0], a[0] - p[0]).cross(
        Vec3(c[1] - a[1], b[1] - a[1], a[1] - p[1]))
    if abs(u.z) < 1:
        return DEGENERATE
    return (1.0 - (u.x + u.y) / u.z, u.y / u.z, u.x / u.z)


def fill_triangle(framebuffer: Framebuffer, zbuffer: Optional[ZBuffer],
                  color: Color, triangle: Sequence):
    """
    Fills a screen-space triangle with one color.

    Every pixel of the triangle's bounding box (clamped to the framebuffer)
    whose barycentric weights are all >= 0 is a candidate, edges included.
    With a zbuffer, the candidate is written only when its interpolated
    depth w0*A.z + w1*B.z + w2*C.z is strictly greater than the stored one.
    Without one, every candidate is written and the last triangle drawn wins.

    Returns the number of pixels written.
    """
    if len(triangle) != 3:
        raise ValueError(f"triangle needs 3 points, got {len(triangle)}")
    if zbuffer is not None and (zbuffer.width != framebuffer.width or
                                zbuffer.height != framebuffer.height):
        raise ValueError(
            f"zbuffer {zbuffer.width}x{zbuffer.height} does not match "
            f"framebuffer {framebuffer.width}x{framebuffer.height}")

    a, b, c = (ScreenPoint.of(p) for p in triangle)
    pa, pb, pc = tuple(a), tuple(b), tuple(c)

    x_min = max(0, min(a.x, b.x, c.x))
    y_min = max(0, min(a.y, b.y, c.y))
    x_max = min(framebuffer.width - 1, max(a.x, b.x, c.x))
    y_max = min(framebuffer.height - 1, max(a.y, b.y, c.y))

    written = 0
    for y in range(y_min, y_max + 1):
        for x in range(x_min, x_max + 1):
            w0, w1, w2 = barycentric(pa, pb, pc, (x, y))
            if w0 < 0 or w1 < 0 or w2 < 0:
                continue
            if zbuffer is not None:
                z = w0 * a.z + w1 * b.z + w2 * c.z
                if not zbuffer.test_and_set(x, y, z):
                    continue
            framebuffer.set(x, y, color)
            written += 1
    return written
