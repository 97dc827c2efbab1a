#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, ScreenPoint
from .color import (Color, RED, GREEN, BLUE, WHITE, BLACK, TRANSPARENT, parse_hex_color,
                    ConstantColorSource, RandomColorSource, CycleColorSource)
from .errors import (RendererError, MeshParseError, FaceIndexError,
                     PixelOutOfBoundsError, ImageWriteError)
from .canvas import Framebuffer, ZBuffer
from .projection import project, clamp_point
from .rasterizer import draw_line, barycentric, fill_triangle
from .mesh import Mesh, parse_obj, load_obj
from .config import RenderConfig, RenderMode
from .renderer import Renderer, RenderResult, RenderStats
from .image_io import to_image, save_image
