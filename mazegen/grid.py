from collections import namedtuple

import numpy as np

Point = namedtuple("Point", ["x", "y"])


class OccupancyGrid:
    """Fixed-size boolean field of visited cells.

    Cells are stored row-major in a numpy array indexed ``[y, x]``.
    Once a cell is marked it is never unmarked.
    """

    def __init__(self, width, height):
        if width <= 1 or height <= 1:
            raise ValueError(f"Grid dimensions must be greater than 1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=bool)
        self._visited = 0

    def in_bounds(self, point):
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def is_free(self, point):
        x, y = point
        return self.in_bounds(point) and not self.cells[y, x]

    def is_visited(self, point):
        x, y = point
        return self.in_bounds(point) and bool(self.cells[y, x])

    def mark(self, point):
        """Mark a cell visited. Marking an out-of-bounds point is a bug in the caller."""
        if not self.in_bounds(point):
            # numpy would silently wrap negative indices
            raise IndexError(f"Point {tuple(point)} outside {self.width}x{self.height} grid")
        x, y = point
        if not self.cells[y, x]:
            self.cells[y, x] = True
            self._visited += 1

    def visited_count(self):
        return self._visited

    def snapshot(self):
        return self.cells.copy()

    def __repr__(self):
        return f"OccupancyGrid({self.width}x{self.height}, visited={self.visited_count()})"
