import logging

import numpy as np
from PIL import Image

from mazegen.grid import OccupancyGrid

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def grid_to_image(grid):
    """Rasterize an occupancy snapshot, one pixel per cell plus a one pixel black border."""
    cells = grid.cells if isinstance(grid, OccupancyGrid) else np.asarray(grid, dtype=bool)
    height, width = cells.shape
    pixels = np.zeros((height + 2, width + 2, 3), dtype=np.uint8)
    pixels[1:-1, 1:-1][cells] = WHITE
    return Image.fromarray(pixels)


def save_bmp(grid, path):
    """Save the maze as a 24-bit BMP. Accepts an OccupancyGrid or a 2D boolean array."""
    image = grid_to_image(grid)
    image.save(path, format="BMP")
    logger.info(f"Saved maze to '{path}'")
    return path
