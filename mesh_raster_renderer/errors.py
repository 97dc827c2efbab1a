#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Exceptions raised by the renderer.

Everything derives from RendererError so callers can catch the whole
family with one except clause.
"""


class RendererError(Exception):
    """Base exception for all mesh-raster-renderer errors."""
    pass


class MeshParseError(RendererError):
    """A 'v' or 'f' line in the mesh text could not be parsed.

    Attributes:
        line_number: 1-based line number in the source text
        line: The offending line, without trailing newline
        reason: Short description of what was wrong
    """

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class FaceIndexError(RendererError):
    """A face refers to a vertex index outside the vertex list.

    Attributes:
        face_number: 0-based position of the face in the mesh
        face: The index triple
        vertex_count: Number of vertices in the mesh
    """

    def __init__(self, face_number: int, face, vertex_count: int):
        self.face_number = face_number
        self.face = tuple(face)
        self.vertex_count = vertex_count
        super().__init__(
            f"face {face_number} {self.face} references a vertex outside "
            f"0..{vertex_count - 1}"
        )


class PixelOutOfBoundsError(RendererError, IndexError):
    """A pixel write fell outside the framebuffer."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"pixel ({x}, {y}) outside {width}x{height} framebuffer"
        )


class ImageWriteError(RendererError):
    """The image encoder failed to persist the framebuffer."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"could not write image '{path}': {cause}")
