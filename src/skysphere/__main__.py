import argparse
import sys
from dataclasses import replace

from loguru import logger

from .config import default_settings
from .errors import RenderError
from .surface import Surface, render_to_surface


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="skysphere", description="Render a sphere under a sky gradient.")
    parser.add_argument("--width", type=int, default=default_settings.width)
    parser.add_argument("--height", type=int, default=default_settings.height)
    parser.add_argument(
        "--output",
        default=default_settings.output,
        help="image path; .ppm writes plain-text PPM, other extensions go through Pillow",
    )
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("--show", action="store_true", help="open the rendered image")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = replace(
        default_settings,
        width=args.width,
        height=args.height,
        output=args.output,
        show_progress=not args.no_progress,
    )

    try:
        surface = render_to_surface(Surface(settings.width, settings.height), settings=settings)
    except RenderError as e:
        logger.error(f"Render failed: {e}")
        return 1

    try:
        surface.save(settings.output)
    except (OSError, ValueError) as e:
        logger.error(f"Could not save {settings.output}: {e}")
        return 1

    if args.show:
        surface.to_image().show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
