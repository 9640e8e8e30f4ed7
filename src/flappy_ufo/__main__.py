"""Command-line entry point: python -m flappy_ufo"""

import argparse
import logging
import random

from .constants import RENDER_FPS, SCREEN_WIDTH, SCREEN_HEIGHT
from .data_models import GameConfig


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="flappy-ufo",
        description="Fly a UFO through the gaps between the trees.",
    )
    ap.add_argument("--fps", type=int, default=RENDER_FPS, help="Target frame rate")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for tree gap placement (random if omitted)")
    ap.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Field width in pixels")
    ap.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Field height in pixels")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return ap


def parse_config(ap: argparse.ArgumentParser, args: argparse.Namespace) -> GameConfig:
    try:
        return GameConfig(width=args.width, height=args.height)
    except ValueError as e:
        ap.error(str(e))


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.fps <= 0:
        ap.error("--fps must be positive")
    config = parse_config(ap, args)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None

    # Imported late so --help works without opening a window
    from .flappy_client import FlappyClient
    FlappyClient(config, rng=rng, fps=args.fps).run()


if __name__ == "__main__":
    main()
