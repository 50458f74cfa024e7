# main.py
import argparse
import logging
import sys

from PIL import Image

from openray.core.vector import Vector3
from openray.renderer.raytracer import Renderer
from openray.renderer.settings import QUALITY_PRESETS, RenderSettings
from openray.renderer.tone_mapping import TONE_MAPPERS
from openray.scene import default_scene

logger = logging.getLogger("openray")


def parse_vector(text: str) -> Vector3:
    try:
        x, y, z = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y,z but got {text!r}")
    return Vector3(x, y, z)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="openray",
                                     description="Path trace the default scene to an image.")
    parser.add_argument("--width", type=int, default=400)
    parser.add_argument("--height", type=int, default=225)
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default="balanced",
                        help="samples/depth preset; --samples and --depth override it")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--depth", type=int, help="maximum bounces per path")
    parser.add_argument("--vfov", type=float, default=90.0, help="vertical field of view, degrees")
    parser.add_argument("--look-from", type=parse_vector, default=Vector3(0, 0, 1))
    parser.add_argument("--look-at", type=parse_vector, default=Vector3(0, 0, -1))
    parser.add_argument("--seed", type=int, help="fixed seed for a reproducible image")
    parser.add_argument("--workers", type=int, default=4)
    parser.add_argument("--no-roulette", action="store_true",
                        help="disable Russian roulette path termination")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="gamma")
    parser.add_argument("--output", "-o", default="render.png")
    parser.add_argument("--preview", action="store_true", help="show the render in a window")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    overrides = dict(width=args.width, height=args.height, vfov=args.vfov,
                     look_from=args.look_from, look_at=args.look_at, seed=args.seed,
                     workers=args.workers, russian_roulette=not args.no_roulette)
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.depth is not None:
        overrides["max_depth"] = args.depth
    return RenderSettings.from_preset(args.quality, **overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    renderer = Renderer(settings)
    objects = default_scene().snapshot()
    camera = renderer.make_camera()

    if args.preview:
        from openray.preview import run_preview
        buffer = run_preview(renderer, objects, camera)
    else:
        buffer = renderer.render(objects, camera)

    pixels = TONE_MAPPERS[args.tone_map](buffer)
    Image.fromarray(pixels).save(args.output)
    logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
