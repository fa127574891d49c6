"""Color rendering: resolved grid -> upscaled RGBA pixel buffer."""

import colorsys
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np
from PIL import Image

from .config import BLACK, GeneratorConfig
from .mask import BORDER, EMPTY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sprite:
    """A finished sprite: float RGBA pixels in [0, 1], indexed ``[y, x]``."""

    pixels: np.ndarray
    pivot: Tuple[float, float] = field(default=(0.5, 0.5))

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def to_image(self) -> Image.Image:
        data = np.clip(np.rint(self.pixels * 255.0), 0, 255).astype(np.uint8)
        return Image.fromarray(data)

    def save(self, path) -> None:
        self.to_image().save(path)


def _color_noise(rng: random.Random) -> float:
    # Average of three symmetric draws; small values are much more likely
    total = (rng.random() * 2.0 - 1.0) + (rng.random() * 2.0 - 1.0) + (rng.random() * 2.0 - 1.0)
    return abs(total / 3.0)


def render(grid: np.ndarray, config: GeneratorConfig, rng: random.Random) -> Sprite:
    """Color ``grid`` and upscale it by ``config.scale``.

    A primary axis is picked at random; the hue drifts along it and the
    brightness peaks at its midpoint. The buffer is written with both axes
    flipped relative to the grid.
    """
    height, width = grid.shape
    scale = config.scale
    pixels = np.empty((height * scale, width * scale, 4), dtype=np.float32)
    pixels[:, :] = config.background_color

    is_vertical_gradient = rng.random() > 0.5
    saturation = max(min(rng.random() * config.saturation, 1.0), 0.0)
    hue = rng.random()

    if is_vertical_gradient:
        ulen, vlen = width, height
    else:
        ulen, vlen = height, width

    hue_changes = 0
    for u in range(ulen):
        if _color_noise(rng) > 1.0 - config.color_variations:
            hue = rng.random()
            hue_changes += 1

        for v in range(vlen):
            x, y = (u, v) if is_vertical_gradient else (v, u)
            val = grid[y, x]
            if val == EMPTY:
                continue

            if config.is_colored:
                brightness = (
                    math.sin(u / ulen * math.pi) * (1.0 - config.brightness_noise)
                    + rng.random() * config.brightness_noise
                )
                if config.foreground_color is not None:
                    r, g, b, a = config.foreground_color
                else:
                    r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
                    a = 1.0
                if val == BORDER:
                    r *= config.edge_brightness
                    g *= config.edge_brightness
                    b *= config.edge_brightness
                rgba = (r, g, b, a)
            elif val == BORDER:
                rgba = BLACK
            else:
                continue

            row = (height - 1 - y) * scale
            col = (width - 1 - x) * scale
            pixels[row:row + scale, col:col + scale] = rgba

    logger.debug(
        "Rendered %dx%d sprite (%s gradient, saturation=%.3f, hue changes=%d)",
        width * scale, height * scale,
        "vertical" if is_vertical_gradient else "horizontal", saturation, hue_changes,
    )
    return Sprite(pixels)
