"""Structural resolution: mask -> working grid of border/empty/body cells."""

import logging
import random

import numpy as np

from .mask import BODY, BODY_OR_BORDER, BORDER, EMPTY, Mask

logger = logging.getLogger(__name__)


def apply_mask(mask: Mask) -> np.ndarray:
    """Copy the mask into the top-left corner of a zeroed working grid.

    The grid is doubled along every mirrored axis; codes are copied verbatim.
    """
    width, height = mask.output_size
    grid = np.zeros((height, width), dtype=np.int8)
    grid[: mask.height, : mask.width] = np.asarray(mask.data, dtype=np.int8)
    return grid


def resolve_ambiguity(grid: np.ndarray, rng: random.Random) -> np.ndarray:
    """Collapse codes 1 and 2 into concrete cells, in place.

    Cells are visited in raster order and only ambiguous cells consume a
    draw, so a seeded ``rng`` always yields the same grid.
    """
    height, width = grid.shape
    for y in range(height):
        for x in range(width):
            val = grid[y, x]
            if val == BODY:
                # round half up on a single draw: 50% body, 50% empty
                grid[y, x] = BODY if int(rng.random() + 0.5) == 1 else EMPTY
            elif val == BODY_OR_BORDER:
                grid[y, x] = BODY if rng.random() > 0.5 else BORDER
    return grid


def mirror_x(grid: np.ndarray) -> np.ndarray:
    """Mirror the left half onto the right half, in place."""
    width = grid.shape[1]
    for x in range(width // 2):
        grid[:, width - x - 1] = grid[:, x]
    return grid


def mirror_y(grid: np.ndarray) -> np.ndarray:
    """Mirror the top half onto the bottom half, in place."""
    height = grid.shape[0]
    for y in range(height // 2):
        grid[height - y - 1, :] = grid[y, :]
    return grid


def resolve(mask: Mask, rng: random.Random) -> np.ndarray:
    """Build the working grid for ``mask``: apply, resolve, then mirror."""
    grid = apply_mask(mask)
    resolve_ambiguity(grid, rng)
    if mask.mirror_x:
        mirror_x(grid)
    if mask.mirror_y:
        mirror_y(grid)

    logger.debug(
        "Resolved %dx%d mask into %dx%d grid (body=%d, border=%d)",
        mask.width, mask.height, grid.shape[1], grid.shape[0],
        int(np.count_nonzero(grid == BODY)), int(np.count_nonzero(grid == BORDER)),
    )
    return grid
