# histogram.py
"""
Intensity histogram for the side panel: counts the red channel (the same
value the thresholds compare) and renders it with matplotlib off-screen.
"""

from __future__ import annotations
from io import BytesIO
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from PIL import Image

from transforms import RGBRows, luminance


def luminance_histogram(grid: RGBRows) -> List[int]:
    hist = [0] * 256
    for row in grid:
        for px in row:
            hist[luminance(px)] += 1
    return hist


def plot_histogram_image(hist: List[int], level: Optional[int] = None,
                         width: int = 256, height: int = 128) -> Image.Image:
    fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
    ax.bar(range(256), hist, color="red", width=1.0)
    if level is not None:
        ax.axvline(level, color="black", linewidth=1)
    ax.set_xlim(0, 255)
    ax.set_ylim(0, max(hist) * 1.1 if hist and max(hist) else 1)
    ax.axis('off')
    buf = BytesIO()
    fig.savefig(buf, format='png', bbox_inches='tight', pad_inches=0)
    plt.close(fig)
    buf.seek(0)
    img = Image.open(buf)
    img.load()
    return img
