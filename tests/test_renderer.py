import math

from mesh_raster_renderer.color import Color, RED, BLUE, WHITE, BLACK, CycleColorSource
from mesh_raster_renderer.config import RenderConfig, RenderMode
from mesh_raster_renderer.mesh import Mesh
from mesh_raster_renderer.renderer import Renderer

CORNER_TRI = [(-1, -1, 0), (1, -1, 0), (-1, 1, 0)]


def test_wireframe_draws_edges_only():
    config = RenderConfig(width=10, height=10, mode=RenderMode.WIREFRAME, line_color=RED)
    fb = Renderer(config).render(Mesh(CORNER_TRI, [(0, 1, 2)])).framebuffer
    # projected and clamped to (1,1), (9,1), (1,9)
    assert fb.get(1, 1) == RED
    assert fb.get(5, 1) == RED
    assert fb.get(5, 5) == RED
    assert fb.get(1, 5) == RED
    assert fb.get(3, 3) == BLACK
    assert fb.get(0, 0) == BLACK


def two_layers():
    far = [(x, y, 0.0) for x, y, _ in CORNER_TRI]
    near = [(x, y, 0.5) for x, y, _ in CORNER_TRI]
    # face 0 is near, face 1 is far and drawn last
    return Mesh(far + near, [(3, 4, 5), (0, 1, 2)])


def test_depth_mode_keeps_nearest_face():
    config = RenderConfig(width=10, height=10, mode=RenderMode.FILLED_DEPTH)
    result = Renderer(config, CycleColorSource([RED, BLUE])).render(two_layers())
    assert result.framebuffer.get(3, 3) == RED
    assert math.isclose(result.zbuffer.get(3, 3), 0.5)
    assert result.stats.faces_drawn == 2


def test_filled_mode_last_face_wins():
    config = RenderConfig(width=10, height=10, mode="filled")
    result = Renderer(config, CycleColorSource([RED, BLUE])).render(two_layers())
    assert result.framebuffer.get(3, 3) == BLUE
    assert result.zbuffer is None


def test_background_untouched():
    bg = Color(1, 2, 3, 255)
    config = RenderConfig(width=10, height=10, background=bg)
    fb = Renderer(config, CycleColorSource([WHITE])).render(Mesh(CORNER_TRI, [(0, 1, 2)])).framebuffer
    assert fb.get(0, 0) == bg
    assert fb.get(9, 9) == bg
    assert fb.get(2, 2) == WHITE


def test_bad_face_is_skipped_and_reported():
    mesh = Mesh(CORNER_TRI, [(0, 1, 2), (0, 1, 7)])
    for mode in RenderMode:
        config = RenderConfig(width=10, height=10, mode=mode)
        stats = Renderer(config).render(mesh).stats
        assert stats.faces_drawn == 1
        assert stats.faces_skipped == 1
        assert stats.errors[0].face_number == 1


def test_seeded_renders_match():
    config = RenderConfig(width=32, height=32, seed=5)
    first = Renderer(config).render(Mesh.tetrahedron()).framebuffer.to_bytes()
    second = Renderer(config).render(Mesh.tetrahedron()).framebuffer.to_bytes()
    assert first == second
    assert first != bytes(BLACK) * (32 * 32)


def test_unclamped_boundary_vertex_is_clipped():
    config = RenderConfig(width=10, height=10, mode=RenderMode.WIREFRAME, clamp=False, clip=True)
    result = Renderer(config).render(Mesh(CORNER_TRI, [(0, 1, 2)]))
    # (1,-1) projects to x == width
    assert result.framebuffer.clipped_writes > 0
    assert result.framebuffer.get(9, 1) == WHITE


def test_same_renderer_repeats_seeded_colors():
    renderer = Renderer(RenderConfig(width=32, height=32, seed=9))
    first = renderer.render(Mesh.tetrahedron()).framebuffer.to_bytes()
    second = renderer.render(Mesh.tetrahedron()).framebuffer.to_bytes()
    assert first == second


def test_wireframe_counts_pixels():
    config = RenderConfig(width=10, height=10, mode=RenderMode.WIREFRAME)
    stats = Renderer(config).render(Mesh(CORNER_TRI, [(0, 1, 2)])).stats
    # three 9-pixel edges between (1,1), (9,1) and (1,9)
    assert stats.pixels_written == 27
