"""Command-line entry point: blend a sequence of images into one trail image."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from diffblend.blender import BlendMode
from diffblend.mediator import Mediator

__all__ = ["main"]

DEFAULT_OUTPUT = "result.png"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diffblend",
        description="Accumulate the per-pixel change across a sequence of images.",
    )
    parser.add_argument("images", nargs="+", help="image files or file: URLs, in frame order")
    parser.add_argument(
        "-m",
        "--mode",
        type=int,
        choices=[int(mode) for mode in BlendMode],
        default=int(BlendMode.TRAIL_V4_FAST),
        help="blend algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=int,
        default=30,
        help="change threshold for modes 2-4 (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help="where to write the result (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log timings and skipped files")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    mediator = Mediator(threshold=args.threshold)
    if mediator.load_images(args.images) == 0:
        print("diffblend: no image could be loaded", file=sys.stderr)
        return 1

    result = mediator.process(args.mode)
    try:
        result.save(args.output)
    except (OSError, ValueError) as exc:
        print(f"diffblend: cannot write {args.output}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())