"""End-to-end sprite generation.

Each call owns its random stream: pass a ``random.Random`` (or a seed) to get
reproducible sprites. The module-level ``random`` state is never touched.
"""

import logging
import random
from typing import Optional

import numpy as np

from .config import GeneratorConfig
from .edges import detect_edges
from .mask import Mask
from .render import Sprite, render
from .resolver import resolve

logger = logging.getLogger(__name__)


def _stream(rng: Optional[random.Random], seed) -> random.Random:
    if rng is not None and seed is not None:
        raise ValueError("pass either rng or seed, not both")
    return rng if rng is not None else random.Random(seed)


def generate_grid(mask: Mask, rng: Optional[random.Random] = None, seed=None) -> np.ndarray:
    """Resolve, mirror and edge ``mask`` without coloring it."""
    grid = resolve(mask, _stream(rng, seed))
    return detect_edges(grid)


def generate_sprite(
    mask: Mask,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
    seed=None,
) -> Sprite:
    """Create a sprite from ``mask`` and aesthetic parameters."""
    config = (config or GeneratorConfig()).validate()
    rng = _stream(rng, seed)

    grid = generate_grid(mask, rng)
    sprite = render(grid, config, rng)
    logger.debug("Generated %dx%d sprite from %dx%d mask", sprite.width, sprite.height, mask.width, mask.height)
    return sprite


class PixelSpriteGenerator:
    """Binds a mask to a config; every ``create_sprite`` call is independent."""

    def __init__(self, mask: Mask, config: Optional[GeneratorConfig] = None, **params):
        if config is not None and params:
            config = config.replace(**params)
        elif config is None:
            config = GeneratorConfig(**params)
        self.mask = mask
        self.config = config.validate()

    def create_sprite(self, rng: Optional[random.Random] = None, seed=None) -> Sprite:
        return generate_sprite(self.mask, self.config, rng=rng, seed=seed)
