import logging
import random

from mazegen.config import MODE, NUM_HEADS, STEP, SWITCH_CHANCE
from mazegen.grid import OccupancyGrid, Point
from mazegen.head import Head
from mazegen.log_system import TickLog
from mazegen.policies.policy_factory import PolicyFactory

logger = logging.getLogger(__name__)


class MazeEngine:
    """
    Carves a perfect maze with one or more heads.

    Each call to step() advances every live head once, in pool order. Heads share
    the grid, so a cell marked by an earlier head is already taken for the heads
    after it in the same tick. The run is over once every head has run out of
    moves and branches.

    :param maze_width: width in lattice units, must be greater than 1.
    :param maze_height: height in lattice units, must be greater than 1.
    :param step: lattice spacing and corridor length, at least 1.
    :param num_heads: number of heads, at least 1.
    :param mode: exploration policy name, see PolicyFactory.POLICY_TYPES.
    :param switch_chance: percentage for the "random" policy.
    :param seed: seed of the engine's random.Random, None for an unseeded one.
    :param starts: optional explicit start points (cell coordinates on the lattice).
    """

    def __init__(self, maze_width, maze_height, step=STEP, num_heads=NUM_HEADS, mode=MODE,
                 switch_chance=SWITCH_CHANCE, seed=None, starts=None):
        for name, value in (("maze_width", maze_width), ("maze_height", maze_height), ("step", step),
                            ("num_heads", num_heads), ("switch_chance", switch_chance)):
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if maze_width <= 1 or maze_height <= 1:
            raise ValueError(f"Both maze dimensions must be greater than 1, got {maze_width}x{maze_height}")
        if step < 1:
            raise ValueError(f"step must be at least 1, got {step}")
        if num_heads < 1:
            raise ValueError(f"num_heads must be at least 1, got {num_heads}")
        if mode not in PolicyFactory.POLICY_TYPES:
            raise ValueError(f"Unknown mode: {mode}. Valid modes are: {list(PolicyFactory.POLICY_TYPES.keys())}")
        if not 0 <= switch_chance <= 100:
            raise ValueError(f"switch_chance must be within [0, 100], got {switch_chance}")

        self.maze_width = maze_width
        self.maze_height = maze_height
        self.step_size = step
        self.width = maze_width * step - 1
        self.height = maze_height * step - 1
        if self.width <= 1 or self.height <= 1:
            raise ValueError(f"A {maze_width}x{maze_height} maze with step {step} leaves a "
                             f"{self.width}x{self.height} cell grid, both sides must exceed 1")

        if starts is not None:
            starts = [Point(*p) for p in starts]
            if len(starts) != num_heads:
                raise ValueError(f"Got {len(starts)} start points for {num_heads} heads")
            for p in starts:
                if not (0 <= p.x < self.width and 0 <= p.y < self.height):
                    raise ValueError(f"Start point {tuple(p)} outside the {self.width}x{self.height} grid")
                if p.x % step or p.y % step:
                    raise ValueError(f"Start point {tuple(p)} is not on the step {step} lattice")

        self.num_heads = num_heads
        self.mode = mode
        self.switch_chance = switch_chance
        self.seed = seed
        self.starts = starts

        self.grid = None
        self.heads = []
        self.policy = None
        self.rng = None
        self.running = True
        self.steps = 0
        self._log_system = TickLog()

        self.reset()

    def reset(self):
        self.rng = random.Random(self.seed)
        self.policy = PolicyFactory.create_policy(self.mode, self.rng, self.switch_chance)
        self.grid = OccupancyGrid(self.width, self.height)
        self.heads = self.__setup_heads()
        self.running = True
        self.steps = 0
        self._log_system = TickLog()

    def __setup_heads(self):
        if self.starts is not None:
            points = list(self.starts)
        else:
            cols = self.width // self.step_size
            rows = self.height // self.step_size
            lattice = cols * rows
            if self.num_heads <= lattice:
                picks = self.rng.sample(range(lattice), self.num_heads)
            else:
                picks = [self.rng.randrange(lattice) for _ in range(self.num_heads)]
            points = [Point(i % cols * self.step_size, i // cols * self.step_size) for i in picks]

        heads = []
        for head_id, point in enumerate(points):
            heads.append(Head(head_id, point, self))
            self.grid.mark(point)
        return heads

    def step_head(self, head):
        """Advance one head. Returns False when the head has to leave the pool."""
        # Random switching may jump to a branch even though the head could still move.
        if head.branches and head.count_paths() and self.policy.wants_switch():
            head.switch_branch()

        while not head.count_paths():
            if not head.branches:
                return False
            head.switch_branch()

        paths = head.get_paths()
        direction = paths[self.rng.randrange(len(paths))]
        head.move(direction)
        return True

    def step(self):
        """Advance every live head once."""
        if not self.running:
            return

        i = 0
        while i < len(self.heads):
            head = self.heads[i]
            if self.step_head(head):
                i += 1
            else:
                # the next head slides into slot i, don't advance
                head.kill()
                del self.heads[i]
                logger.debug(f"Head {head.id} finished after {head.num_moves} moves at tick {self.steps}")

        self.steps += 1
        self._log_system.add_observation(self._fill_observation_dict(), self.grid.visited_count())
        self._log_system.step()

        if not self.heads:
            self.running = False
            logger.info(f"Maze finished after {self.steps} ticks, {self.grid.visited_count()} cells carved")

    def run(self, max_ticks=None):
        """Tick until the head pool is empty or max_ticks ticks have run. Returns ticks run."""
        start = self.steps
        while self.running:
            if max_ticks is not None and self.steps - start >= max_ticks:
                break
            self.step()
        return self.steps - start

    @property
    def is_done(self):
        return not self.heads

    def head_positions(self):
        return [head.point for head in self.heads]

    def snapshot(self):
        return self.grid.snapshot()

    def visited_count(self):
        return self.grid.visited_count()

    def get_log_system(self):
        return self._log_system

    def _fill_observation_dict(self):
        return {
            head.id: {
                'position': [int(head.point.x), int(head.point.y)],
                'direction': int(head.direction),
                'branches': len(head.branches),
                'switches': head.num_switches,
            }
            for head in self.heads
        }
