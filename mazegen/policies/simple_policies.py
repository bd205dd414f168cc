from mazegen.policies.base_policy import BasePolicy

class DepthFirstPolicy(BasePolicy):
    """Branches are a stack, resume from the newest one"""
    name = "depth"

    def select_branch(self, branches):
        return branches.pop_back()


class BreadthFirstPolicy(BasePolicy):
    """Branches are a queue, resume from the oldest one"""
    name = "breadth"

    def select_branch(self, branches):
        return branches.pop_front()


class RandomSwitchingPolicy(BasePolicy):
    """Resume from a random branch, and sometimes jump there before getting stuck.

    switch_chance is a percentage compared against an inclusive roll in [1, 100],
    so 0 never switches early and 100 always does.
    """
    name = "random"

    def __init__(self, rng, switch_chance=10):
        super().__init__(rng)
        if not 0 <= switch_chance <= 100:
            raise ValueError(f"switch_chance must be within [0, 100], got {switch_chance}")
        self.switch_chance = switch_chance

    def select_branch(self, branches):
        return branches.remove_at(self.rng.randrange(len(branches)))

    def wants_switch(self):
        return self.rng.randint(1, 100) <= self.switch_chance

    def __repr__(self):
        return f"RandomSwitchingPolicy(switch_chance={self.switch_chance})"
