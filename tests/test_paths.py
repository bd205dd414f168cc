import unittest

from mazegen.grid import OccupancyGrid
from mazegen.paths import Direction, get_paths, count_paths, offset_point


class TestPaths(unittest.TestCase):

    def setUp(self):
        self.grid = OccupancyGrid(5, 5)

    def test_corner_only_has_inward_moves(self):
        self.assertEqual(get_paths(self.grid, (0, 0), 2), [Direction.RIGHT, Direction.DOWN])

    def test_order_is_up_right_down_left(self):
        self.assertEqual(get_paths(self.grid, (2, 2), 2),
                         [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT])

    def test_visited_destination_is_not_legal(self):
        self.grid.mark((2, 0))
        self.assertEqual(get_paths(self.grid, (2, 2), 2),
                         [Direction.RIGHT, Direction.DOWN, Direction.LEFT])

    def test_only_destination_is_checked(self):
        self.grid.mark((3, 2))
        self.assertIn(Direction.RIGHT, get_paths(self.grid, (2, 2), 2))

    def test_step_one(self):
        self.assertEqual(get_paths(self.grid, (0, 0), 1), [Direction.RIGHT, Direction.DOWN])
        self.assertEqual(count_paths(self.grid, (4, 4), 1), 2)

    def test_destination_outside_grid(self):
        # (4, 4) + 2 in any outward direction leaves the grid
        self.assertEqual(get_paths(self.grid, (4, 4), 2), [Direction.UP, Direction.LEFT])

    def test_count_matches_paths(self):
        self.grid.mark((0, 2))
        self.assertEqual(count_paths(self.grid, (2, 2), 2), len(get_paths(self.grid, (2, 2), 2)))
        self.assertEqual(count_paths(self.grid, (2, 2), 2), 3)

    def test_offset_point(self):
        self.assertEqual(offset_point((2, 2), Direction.LEFT, 2), (0, 2))
        self.assertEqual(offset_point((2, 2), Direction.UP), (2, 1))


if __name__ == '__main__':
    unittest.main()
