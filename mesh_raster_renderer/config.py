#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .color import Color, WHITE, BLACK, parse_hex_color


class RenderMode(Enum):
    """Which rasterizer the pipeline runs per face."""
    WIREFRAME = 'wireframe'
    FILLED = 'filled'
    FILLED_DEPTH = 'depth'


@dataclass
class RenderConfig:
    """Configuration for one render pass."""
    width: int = 800
    height: int = 800
    mode: RenderMode = RenderMode.FILLED_DEPTH
    line_color: Color = WHITE
    background: Color = BLACK
    # Drop out-of-range pixel writes instead of raising
    clip: bool = False
    # Clamp projected points into the raster before drawing
    clamp: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.mode, str):
            self.mode = RenderMode(self.mode)
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")

    @classmethod
    def from_args(cls, args) -> 'RenderConfig':
        """
        Build a config from parsed CLI arguments.
        Unparseable hex colors fall back to the defaults.
        """
        return cls(
            width=args.width,
            height=args.height,
            mode=RenderMode(args.mode),
            line_color=parse_hex_color(args.line_color) or WHITE,
            background=parse_hex_color(args.bg_color) or BLACK,
            clip=args.clip,
            seed=args.seed,
        )
