"""Edge detection on a resolved working grid."""

import logging

import numpy as np

from .mask import BORDER, EMPTY

logger = logging.getLogger(__name__)


def detect_edges(grid: np.ndarray) -> np.ndarray:
    """Turn every empty cell touching a body cell into a border cell.

    Single raster pass (rows, then columns). Neighbours are checked against
    their current value, so cells bordered earlier in the pass are not
    bordered again. Modifies ``grid`` in place and returns it.
    """
    height, width = grid.shape
    added = 0
    for y in range(height):
        for x in range(width):
            if grid[y, x] <= 0:
                continue
            for ny, nx in ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)):
                if 0 <= ny < height and 0 <= nx < width and grid[ny, nx] == EMPTY:
                    grid[ny, nx] = BORDER
                    added += 1

    logger.debug("Edge pass added %d border cells", added)
    return grid
