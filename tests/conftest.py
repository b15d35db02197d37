"""
Shared fixtures for the transform tests.
"""
import pytest
from PIL import Image


def grid_from_reds(reds, green=0, blue=0):
    """Build RGB rows from a 2D list of red values."""
    return [[(r, green, blue) for r in row] for row in reds]


@pytest.fixture
def gradient_grid():
    """7x5 grid with distinct channel values so red-only reads are visible."""
    return [[((x * 37 + y * 11) % 256, (x * 5) % 256, (y * 90) % 256) for x in range(7)]
            for y in range(5)]


@pytest.fixture
def png_path(tmp_path):
    """A 3x2 RGB PNG on disk."""
    path = tmp_path / "sample.png"
    img = Image.new("RGB", (3, 2))
    img.putdata([(10, 20, 30), (40, 50, 60), (70, 80, 90),
                 (100, 110, 120), (130, 140, 150), (160, 170, 180)])
    img.save(path)
    return path
