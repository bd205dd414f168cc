from collections import deque

from mazegen.grid import Point
from mazegen.paths import Direction, offset_point, get_paths, count_paths


class BranchStore:
    """Ordered points a head can resume from. The policy decides which end is used."""

    def __init__(self):
        self._points = deque()

    def push(self, point):
        self._points.append(Point(*point))

    def pop_back(self):
        return self._points.pop()

    def pop_front(self):
        return self._points.popleft()

    def remove_at(self, index):
        point = self._points[index]
        del self._points[index]
        return point

    def clear(self):
        self._points.clear()

    def __len__(self):
        return len(self._points)

    def __bool__(self):
        return bool(self._points)

    def __iter__(self):
        return iter(self._points)

    def __repr__(self):
        return f"BranchStore({list(self._points)})"


class Head:
    def __init__(self, head_id, point, env):
        self.id = head_id
        self.point = Point(*point)
        self.direction = Direction.NONE
        self.branches = BranchStore()
        self.sharing_env = env
        self.alive = True
        self.num_moves = 0
        self.num_switches = 0

    def get_paths(self, point=None):
        point = self.point if point is None else point
        return get_paths(self.sharing_env.grid, point, self.sharing_env.step_size)

    def count_paths(self, point=None):
        point = self.point if point is None else point
        return count_paths(self.sharing_env.grid, point, self.sharing_env.step_size)

    def switch_branch(self):
        """Jump to a stored branch chosen by the policy.

        The current point is kept as a branch when it still has somewhere to go.
        """
        branch = self.sharing_env.policy.select_branch(self.branches)
        if self.count_paths():
            self.branches.push(self.point)
        self.point = branch
        self.num_switches += 1

    def move(self, direction):
        """Carve ``step`` cells in ``direction``, marking each one on the way."""
        grid = self.sharing_env.grid
        old_point = self.point
        for _ in range(self.sharing_env.step_size):
            self.point = offset_point(self.point, direction)
            grid.mark(self.point)

        # fresh recompute, the direction just taken is excluded because it is now visited
        if self.count_paths(old_point):
            self.branches.push(old_point)
        self.direction = direction
        self.num_moves += 1

    def kill(self):
        self.alive = False
        self.branches.clear()

    def __repr__(self):
        return f"Head(id={self.id}, point={tuple(self.point)}, branches={len(self.branches)})"
