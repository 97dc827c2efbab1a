from PIL import Image

from mesh_raster_renderer.cli import main, parse_args
from mesh_raster_renderer.config import RenderConfig, RenderMode
from mesh_raster_renderer.color import Color

TRIANGLE = "v -1 -1 0\nv 1 -1 0\nv 0 1 0\nf 1/1/1 2/2/2 3/3/3\n"


def test_demo_render(tmp_path):
    out = tmp_path / "demo.png"
    assert main(["-o", str(out), "--width", "48", "--height", "32"]) == 0
    with Image.open(out) as img:
        assert img.size == (48, 32)


def test_render_model_all_modes(tmp_path):
    model = tmp_path / "tri.obj"
    model.write_text(TRIANGLE, encoding="utf-8")
    for mode in ("wireframe", "filled", "depth"):
        out = tmp_path / f"{mode}.png"
        assert main([str(model), "-o", str(out), "--width", "16", "--height", "16",
                     "--mode", mode, "--seed", "1"]) == 0
        assert out.exists()


def test_malformed_model_fails_unless_lenient(tmp_path):
    model = tmp_path / "bad.obj"
    model.write_text(TRIANGLE + "v 1 nope 3\n", encoding="utf-8")
    out = tmp_path / "bad.png"
    assert main([str(model), "-o", str(out), "--width", "16", "--height", "16"]) == 1
    assert not out.exists()
    assert main([str(model), "-o", str(out), "--width", "16", "--height", "16", "--lenient"]) == 0


def test_missing_model(tmp_path):
    assert main([str(tmp_path / "nothing.obj"), "-o", str(tmp_path / "x.png")]) == 1


def test_config_from_args():
    args = parse_args(["--mode", "wireframe", "--line-color", "#FF0000",
                       "--bg-color", "bogus", "--width", "20", "--clip"])
    config = RenderConfig.from_args(args)
    assert config.mode is RenderMode.WIREFRAME
    assert config.line_color == Color(255, 0, 0, 255)
    assert config.background == Color(0, 0, 0, 255)
    assert config.width == 20 and config.height == 800
    assert config.clip


def test_non_finite_vertex_fails_unless_lenient(tmp_path):
    model = tmp_path / "inf.obj"
    model.write_text(TRIANGLE + "v 1e400 0 0\n", encoding="utf-8")
    out = tmp_path / "inf.png"
    assert main([str(model), "-o", str(out), "--width", "16", "--height", "16"]) == 1
    assert not out.exists()
    assert main([str(model), "-o", str(out), "--width", "16", "--height", "16", "--lenient"]) == 0
    assert out.exists()
