"""
cli.py

Command-line interface: run one transform on an image file without the GUI.
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from config import LOG_LEVELS, Settings
from image_io import ImageLoadError, ImageSaveError, load_grid, save_grid
from transforms import TRANSFORMS, InvalidInput, apply_transform

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sharpen or binarize an image")
    parser.add_argument("--input", required=True, help="path to the source image")
    parser.add_argument("--output", required=True, help="path for the result (format from extension)")
    parser.add_argument("--op", required=True, choices=TRANSFORMS, help="transform to apply")
    parser.add_argument("--level", type=int, default=settings.threshold_level,
                        help="threshold level for --op fixed (0..255)")
    parser.add_argument("--block-size", type=int, default=settings.block_size,
                        help="tile size for --op adaptive (>= 1)")
    parser.add_argument("--log-level", default=settings.log_level, type=str.upper,
                        choices=LOG_LEVELS, help="logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings.threshold_level = args.level
    settings.block_size = args.block_size

    try:
        grid = load_grid(Path(args.input))
        result = apply_transform(args.op, grid, settings)
        save_grid(result, Path(args.output))
    except (ImageLoadError, ImageSaveError, InvalidInput) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("%s -> %s (%s)", args.input, args.output, args.op)
    return 0


if __name__ == "__main__":
    sys.exit(main())
