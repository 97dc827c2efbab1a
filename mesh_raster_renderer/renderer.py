#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .canvas import Framebuffer, ZBuffer
from .color import Color, ConstantColorSource, RandomColorSource
from .config import RenderConfig, RenderMode
from .errors import FaceIndexError
from .mesh import Mesh
from .projection import project, clamp_point
from .rasterizer import draw_line, fill_triangle

logger = logging.getLogger(__name__)

ColorSource = Callable[[int], Color]


@dataclass
class RenderStats:
    """What a render pass did."""
    faces_drawn: int = 0
    faces_skipped: int = 0
    pixels_written: int = 0
    errors: List[FaceIndexError] = field(default_factory=list)


@dataclass
class RenderResult:
    framebuffer: Framebuffer
    zbuffer: Optional[ZBuffer]
    stats: RenderStats


class Renderer:
    """
    Single render pipeline for all three modes.

    render(mesh) projects every vertex, then rasterizes faces in input order:
      - WIREFRAME:    the three edges of each face in config.line_color
      - FILLED:       solid faces, no depth test, later faces overwrite
      - FILLED_DEPTH: solid faces, z-buffered (greater depth wins)

    Fill colors come from the injected color source, called with the face
    index.  Faces that reference missing vertices are skipped and reported
    in RenderStats, never raised.
    """

    def __init__(self, config: Optional[RenderConfig] = None,
                 color_source: Optional[ColorSource] = None):
        self.config = config or RenderConfig()
        self.color_source = color_source

    def _color_source(self) -> ColorSource:
        """The injected source, or a fresh default so seeded passes repeat."""
        if self.color_source is not None:
            return self.color_source
        if self.config.mode is RenderMode.WIREFRAME:
            return ConstantColorSource(self.config.line_color)
        return RandomColorSource(self.config.seed)

    def project_vertices(self, mesh: Mesh):
        cfg = self.config
        points = [project(v, cfg.width, cfg.height) for v in mesh.vertices]
        if cfg.clamp:
            points = [clamp_point(p, cfg.width, cfg.height) for p in points]
        return points

    def render(self, mesh: Mesh) -> RenderResult:
        cfg = self.config
        mode = cfg.mode

        framebuffer = Framebuffer(cfg.width, cfg.height, cfg.background, clip=cfg.clip)
        zbuffer = ZBuffer(cfg.width, cfg.height) if mode is RenderMode.FILLED_DEPTH else None
        stats = RenderStats()
        color_source = self._color_source()

        points = self.project_vertices(mesh)
        faces, errors = mesh.validate_faces()
        for err in errors:
            logger.warning("Skipping face: %s", err)
        stats.errors.extend(errors)
        stats.faces_skipped = len(errors)

        for face_index, (a, b, c) in faces:
            tri = (points[a], points[b], points[c])
            color = color_source(face_index)
            if mode is RenderMode.WIREFRAME:
                for i in range(3):
                    stats.pixels_written += draw_line(framebuffer, color, tri[i], tri[(i + 1) % 3])
            else:
                stats.pixels_written += fill_triangle(framebuffer, zbuffer, color, tri)
            stats.faces_drawn += 1

        logger.debug("Rendered %s %dx%d: %d faces drawn, %d skipped, %d pixels",
                     mode.value, cfg.width, cfg.height, stats.faces_drawn,
                     stats.faces_skipped, stats.pixels_written)
        if framebuffer.clipped_writes:
            logger.debug("Dropped %d out-of-range pixel writes", framebuffer.clipped_writes)

        return RenderResult(framebuffer, zbuffer, stats)
