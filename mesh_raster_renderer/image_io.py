#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/image_io.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from pathlib import Path

from PIL import Image

from .canvas import Framebuffer
from .errors import ImageWriteError

logger = logging.getLogger(__name__)


def to_image(framebuffer: Framebuffer) -> Image.Image:
    """Wrap the framebuffer's RGBA bytes in a Pillow image (top row first)."""
    return Image.frombytes('RGBA', (framebuffer.width, framebuffer.height),
                           framebuffer.to_bytes())


def save_image(framebuffer: Framebuffer, path) -> Path:
    """
    Encode the framebuffer to disk.  The format follows the file suffix.
    Encoder failures are raised as ImageWriteError.
    """
    path = Path(path)
    image = to_image(framebuffer)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path)
    except (OSError, ValueError) as e:
        raise ImageWriteError(path, e) from e
    logger.info("Wrote %dx%d image to '%s'", framebuffer.width, framebuffer.height, path)
    return path
