from enum import IntEnum

from mazegen.grid import Point


class Direction(IntEnum):
    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


# Fixed enumeration order, selection by index relies on it.
DIRECTIONS = [
    (Direction.UP, (0, -1)),
    (Direction.RIGHT, (1, 0)),
    (Direction.DOWN, (0, 1)),
    (Direction.LEFT, (-1, 0)),
]
OFFSETS = dict(DIRECTIONS)


def offset_point(point, direction, distance=1):
    dx, dy = OFFSETS[direction]
    return Point(point[0] + dx * distance, point[1] + dy * distance)


def get_paths(grid, point, step):
    """
    Return the directions a head at ``point`` may take.

    A direction is legal when the cell ``step`` cells away is in bounds and
    unvisited. Cells in between are not checked, moving is what carves them.

    :param grid: OccupancyGrid the heads share.
    :param point: (x, y) to evaluate.
    :param step: lattice spacing.
    :return: list of Direction in UP, RIGHT, DOWN, LEFT order.
    """
    paths = []
    for direction, (dx, dy) in DIRECTIONS:
        if grid.is_free((point[0] + dx * step, point[1] + dy * step)):
            paths.append(direction)
    return paths


def count_paths(grid, point, step):
    return len(get_paths(grid, point, step))
