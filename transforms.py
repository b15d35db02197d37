# transforms.py
"""
Pixel transforms for the image processing viewer.
Pure functions on RGB rows; every call allocates a fresh output grid and
never modifies its input.

- Sharpen (3x3 high-frequency convolution, unprocessed black border)
- Threshold Method 1 (fixed level)
- Threshold Method 2 (block-local mean)

All three read the red channel as the intensity of a pixel.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from config import Settings, default_settings

logger = logging.getLogger(__name__)

# RGB row type alias, indexed grid[y][x]
RGBRows = List[List[Tuple[int, int, int]]]

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

SHARPEN_KERNEL: Tuple[float, ...] = (
    0.0, -1.0, 0.0,
    -1.0, 5.0, -1.0,
    0.0, -1.0, 0.0,
)

TRANSFORMS = ("sharpen", "fixed", "adaptive")


class InvalidInput(ValueError):
    """Grid or parameter rejected before any pixel is touched."""


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def clamp8(value: int) -> int:
    return max(0, min(255, value))


def luminance(pixel: Tuple[int, int, int]) -> int:
    """Intensity of a pixel: its red channel."""
    return pixel[0]


def validate_grid(grid: Optional[RGBRows]) -> Tuple[int, int]:
    """Return (width, height), raising InvalidInput for empty or ragged grids."""
    if not grid:
        raise InvalidInput("image grid is empty")
    width = len(grid[0])
    if width == 0:
        raise InvalidInput("image grid has no columns")
    for y, row in enumerate(grid):
        if len(row) != width:
            raise InvalidInput(f"row {y} has {len(row)} pixels, expected {width}")
    return width, len(grid)


def _check_int(name: str, value, lo: int, hi: Optional[int] = None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    if value < lo or (hi is not None and value > hi):
        bounds = f"[{lo}, {hi}]" if hi is not None else f">= {lo}"
        raise InvalidInput(f"{name} must be {bounds}, got {value}")


def _blank(width: int, height: int) -> RGBRows:
    return [[BLACK] * width for _ in range(height)]


# ---------------------------------------------------------------------
# 1. Sharpen (high-frequency filter)
# ---------------------------------------------------------------------
def sharpen(grid: RGBRows) -> RGBRows:
    """
    Convolve the red channel with SHARPEN_KERNEL and write the clamped sum
    to all three channels. The one-pixel border stays black.
    """
    width, height = validate_grid(grid)
    out = _blank(width, height)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            s = 0.0
            k = 0
            for ky in (-1, 0, 1):
                row = grid[y + ky]
                for kx in (-1, 0, 1):
                    s += luminance(row[x + kx]) * SHARPEN_KERNEL[k]
                    k += 1
            v = clamp8(int(s))
            out[y][x] = (v, v, v)
    return out


# ---------------------------------------------------------------------
# 2. Threshold Method 1 (fixed level)
# ---------------------------------------------------------------------
def fixed_threshold(grid: RGBRows, level: int = 128) -> RGBRows:
    """Black where red < level, white elsewhere."""
    validate_grid(grid)
    _check_int("level", level, 0, 255)
    return [[BLACK if luminance(px) < level else WHITE for px in row] for row in grid]


# ---------------------------------------------------------------------
# 3. Threshold Method 2 (block-local mean)
# ---------------------------------------------------------------------
def adaptive_threshold(grid: RGBRows, block_size: int = 16) -> RGBRows:
    """
    Split the image into block_size x block_size tiles (clipped at the right
    and bottom edges) and threshold each pixel against its own tile's mean.
    """
    width, height = validate_grid(grid)
    _check_int("block_size", block_size, 1)
    out = _blank(width, height)
    for y0 in range(0, height, block_size):
        y1 = min(y0 + block_size, height)
        for x0 in range(0, width, block_size):
            x1 = min(x0 + block_size, width)

            # Pass 1: integer mean over the clipped tile
            total = 0
            count = 0
            for y in range(y0, y1):
                for x in range(x0, x1):
                    total += luminance(grid[y][x])
                    count += 1
            mean = total // count

            # Pass 2
            for y in range(y0, y1):
                for x in range(x0, x1):
                    out[y][x] = BLACK if luminance(grid[y][x]) < mean else WHITE
    return out


# ---------------------------------------------------------------------
# Dispatch by name (used by the viewer buttons and the CLI)
# ---------------------------------------------------------------------
def apply_transform(name: str, grid: RGBRows, settings: Optional[Settings] = None) -> RGBRows:
    settings = settings or default_settings
    if name not in TRANSFORMS:
        raise InvalidInput(f"unknown transform {name!r}; expected one of {', '.join(TRANSFORMS)}")
    width, height = validate_grid(grid)
    logger.debug("%s on %dx%d grid (level=%s, block_size=%s)",
                 name, width, height, settings.threshold_level, settings.block_size)
    if name == "sharpen":
        return sharpen(grid)
    if name == "fixed":
        return fixed_threshold(grid, settings.threshold_level)
    return adaptive_threshold(grid, settings.block_size)
