#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import random
from typing import NamedTuple, Optional, Sequence


class Color(NamedTuple):
    """RGBA color with 8-bit channels."""
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def checked(cls, r, g, b, a=255) -> 'Color':
        """Build a Color, rejecting channels outside 0-255."""
        for name, val in (('r', r), ('g', g), ('b', b), ('a', a)):
            if not 0 <= int(val) <= 255:
                raise ValueError(f"Color channel {name}={val} out of range 0-255")
        return cls(int(r), int(g), int(b), int(a))

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)


def parse_hex_color(hex_str, alpha: int = 255) -> Optional[Color]:
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB', 'RRGGBB', '#RRGGBBAA' or 'RRGGBBAA' (case-insensitive).
    Returns: Color, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) not in (6, 8):
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        a = int(val[6:8], 16) if len(val) == 8 else alpha
    except ValueError:
        return None
    return Color.checked(r, g, b, a)


# --- Color sources ---
#
# A color source is any callable taking the face index and returning the
# Color for that face.  The renderer never draws random numbers itself.

class ConstantColorSource:
    """Every face gets the same color."""
    __slots__ = ('color',)

    def __init__(self, color: Color = WHITE):
        self.color = color

    def __call__(self, face_index: int) -> Color:
        return self.color


class RandomColorSource:
    """
    Opaque random color per face.

    Pass a seed (or a ready random.Random) for reproducible output.
    """
    __slots__ = ('rng',)

    def __init__(self, seed=None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def __call__(self, face_index: int) -> Color:
        return Color(self.rng.randrange(256),
                     self.rng.randrange(256),
                     self.rng.randrange(256),
                     255)


class CycleColorSource:
    """Cycles through a fixed palette by face index."""
    __slots__ = ('palette',)

    def __init__(self, palette: Sequence[Color]):
        if not palette:
            raise ValueError("CycleColorSource needs at least one color")
        self.palette = tuple(palette)

    def __call__(self, face_index: int) -> Color:
        return self.palette[face_index % len(self.palette)]
