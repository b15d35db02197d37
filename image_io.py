# image_io.py
"""
Pillow/NumPy bridge between image files and RGB rows.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from transforms import RGBRows, validate_grid

logger = logging.getLogger(__name__)

IMAGE_FILETYPES = [("Image files", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff"), ("All files", "*.*")]


class ImageLoadError(Exception):
    pass


class ImageSaveError(Exception):
    pass


def image_to_grid(image: Image.Image) -> RGBRows:
    arr = np.array(image.convert("RGB"), dtype=np.uint8)
    return [[(int(r), int(g), int(b)) for (r, g, b) in row] for row in arr.tolist()]


def grid_to_image(grid: RGBRows) -> Image.Image:
    validate_grid(grid)
    arr = np.array(grid, dtype=np.uint8)
    return Image.fromarray(arr)


def load_grid(path: Union[str, Path]) -> RGBRows:
    """Decode any format Pillow understands into RGB rows."""
    try:
        with Image.open(path) as img:
            img.load()
            grid = image_to_grid(img)
    except (OSError, Image.DecompressionBombError) as exc:
        logger.error("Failed to load %s: %s", path, exc)
        raise ImageLoadError(f"Failed to load image {path}: {exc}") from exc
    logger.info("Loaded %s (%dx%d)", path, len(grid[0]), len(grid))
    return grid


def save_grid(grid: RGBRows, path: Union[str, Path]) -> Path:
    path = Path(path)
    try:
        grid_to_image(grid).save(path)
    except (OSError, ValueError) as exc:
        logger.error("Failed to save %s: %s", path, exc)
        raise ImageSaveError(f"Failed to save image {path}: {exc}") from exc
    logger.info("Saved %s", path)
    return path
