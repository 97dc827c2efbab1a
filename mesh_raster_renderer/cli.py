#
# PROJECT: mesh-raster-renderer
# MODULE: mesh_raster_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import sys

from .config import RenderConfig, RenderMode
from .errors import RendererError
from .image_io import save_image
from .log import setup_logger
from .mesh import Mesh, load_obj
from .renderer import Renderer


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                         Demo tetrahedron to output.png
  %(prog)s head.obj -o head.png                    Depth-tested random colors
  %(prog)s head.obj --mode wireframe --line-color #FF0000
  %(prog)s head.obj --mode filled --seed 7         Painter's order, reproducible colors
  %(prog)s head.obj --lenient --clip               Skip bad lines, drop stray pixels
"""
    parser = argparse.ArgumentParser(
        prog="mesh-raster-render",
        description="Render an OBJ mesh to an image on the CPU",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("-o", "--output", default="output.png",
                        help="Output image path (default: output.png)")
    parser.add_argument("--width", type=int, default=800,
                        help="Image width in pixels (default: 800)")
    parser.add_argument("--height", type=int, default=800,
                        help="Image height in pixels (default: 800)")
    parser.add_argument("--mode", choices=[m.value for m in RenderMode],
                        default=RenderMode.FILLED_DEPTH.value,
                        help="wireframe, filled (no depth test) or depth (default: depth)")
    parser.add_argument("--line-color", default="#FFFFFF",
                        help="Wireframe color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--bg-color", default="#000000",
                        help="Background color in hex #RRGGBB[AA] (default: #000000)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for per-face random colors")
    parser.add_argument("--lenient", action="store_true",
                        help="Skip malformed mesh lines instead of failing")
    parser.add_argument("--clip", action="store_true",
                        help="Drop out-of-range pixel writes instead of failing")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(verbose=args.verbose)

    try:
        config = RenderConfig.from_args(args)
        if args.model:
            mesh = load_obj(args.model, strict=not args.lenient)
        else:
            mesh = Mesh.tetrahedron()
        result = Renderer(config).render(mesh)
        save_image(result.framebuffer, args.output)
    except KeyboardInterrupt:
        return 130
    except (RendererError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    stats = result.stats
    logger.info("%d faces drawn, %d skipped", stats.faces_drawn, stats.faces_skipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
