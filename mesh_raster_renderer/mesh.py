#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
import re

from .errors import MeshParseError, FaceIndexError
from .math_utils import Vec3

logger = logging.getLogger(__name__)

# Only the first number of each v/vt/vn group is used.
FACE_RE = re.compile(r"f (\d+)/\d+/\d+ (\d+)/\d+/\d+ (\d+)/\d+/\d+")


class Mesh:
    """
    Triangle mesh: an ordered vertex list and faces as zero-based index triples.

    Parse errors skipped in lenient mode are kept in `errors`.
    """

    def __init__(self, vertices=None, faces=None):
        self.vertices = [v if isinstance(v, Vec3) else Vec3(*v) for v in (vertices or [])]
        self.faces = [tuple(f) for f in (faces or [])]
        self.errors = []

    def __repr__(self):
        return f"Mesh(vertices={len(self.vertices)}, faces={len(self.faces)})"

    def validate_faces(self):
        """
        Split faces into those whose indices are all inside the vertex list
        and a FaceIndexError for each of the others.

        Returns (valid_faces, errors); valid_faces keeps (face_number, face).
        """
        count = len(self.vertices)
        valid, errors = [], []
        for n, face in enumerate(self.faces):
            if all(0 <= idx < count for idx in face):
                valid.append((n, face))
            else:
                errors.append(FaceIndexError(n, face, count))
        return valid, errors

    @classmethod
    def tetrahedron(cls):
        """Demo geometry used when no model is given."""
        vertices = [
            (-0.8, -0.7, -0.5), (0.8, -0.7, -0.5),
            (0.0, -0.6, 0.8), (0.0, 0.8, 0.0),
        ]
        faces = [(0, 1, 3), (1, 2, 3), (2, 0, 3), (0, 2, 1)]
        return cls(vertices, faces)

    @classmethod
    def from_obj(cls, filename, strict: bool = True):
        """Factory method to create a mesh from an OBJ file."""
        return load_obj(filename, strict=strict)


def _parse_vertex(line_number, line):
    parts = line.split()
    if len(parts) < 4:
        raise MeshParseError(line_number, line, "vertex needs 3 coordinates")
    try:
        coords = [float(p) for p in parts[1:4]]
    except ValueError:
        raise MeshParseError(line_number, line, "non-numeric vertex coordinate") from None
    if not all(math.isfinite(c) for c in coords):
        raise MeshParseError(line_number, line, "non-finite vertex coordinate")
    return Vec3(*coords)


def _parse_face(line_number, line):
    match = FACE_RE.match(line)
    if match is None:
        raise MeshParseError(line_number, line, "face must have 3 groups of the form a/b/c")
    indices = tuple(int(g) - 1 for g in match.groups())
    if min(indices) < 0:
        raise MeshParseError(line_number, line, "vertex indices are 1-based")
    return indices


def parse_obj(text: str, strict: bool = True) -> Mesh:
    """
    Parse Wavefront-style mesh text.

    'v x y z' lines add a vertex, 'f a/b/c a/b/c a/b/c' lines add a face
    (first number of each group, made zero-based).  Anything else is skipped.

    A malformed v/f line raises MeshParseError when strict.  Otherwise the
    line is dropped, logged, and the error appended to Mesh.errors.
    """
    mesh = Mesh()
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            if line.startswith('v '):
                mesh.vertices.append(_parse_vertex(line_number, line))
            elif line.startswith('f '):
                mesh.faces.append(_parse_face(line_number, line))
        except MeshParseError as e:
            if strict:
                raise
            logger.warning("Skipping malformed mesh line: %s", e)
            mesh.errors.append(e)

    logger.debug("Parsed mesh: %d vertices, %d faces, %d skipped lines",
                 len(mesh.vertices), len(mesh.faces), len(mesh.errors))
    return mesh


def load_obj(filename, strict: bool = True) -> Mesh:
    """Read an OBJ file (UTF-8) and parse it with parse_obj."""
    with open(filename, 'r', encoding='utf-8') as f:
        text = f.read()
    logger.info("Loaded '%s'", filename)
    return parse_obj(text, strict=strict)
