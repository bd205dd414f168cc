from abc import ABC, abstractmethod

class BasePolicy(ABC):
    name = None

    def __init__(self, rng):
        self.rng = rng

    @abstractmethod
    def select_branch(self, branches):
        """Remove one point from the head's BranchStore and return it.
        Only called with a non-empty store.
        """
        pass

    def wants_switch(self):
        """Whether a head that can still move should jump to a branch this tick"""
        return False

    def __repr__(self):
        return f"{type(self).__name__}()"
