import random
import unittest

from mazegen.head import BranchStore
from mazegen.policies.base_policy import BasePolicy
from mazegen.policies.policy_factory import PolicyFactory
from mazegen.policies.simple_policies import DepthFirstPolicy, BreadthFirstPolicy, RandomSwitchingPolicy

B1 = (2, 2)
B2 = (4, 4)


class TestPolicies(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(1234)
        self.branches = BranchStore()
        self.branches.push(B1)
        self.branches.push(B2)

    def test_depth_first_is_lifo(self):
        policy = DepthFirstPolicy(self.rng)
        self.assertEqual(policy.select_branch(self.branches), B2)
        self.assertEqual(policy.select_branch(self.branches), B1)
        self.assertEqual(len(self.branches), 0)

    def test_breadth_first_is_fifo(self):
        policy = BreadthFirstPolicy(self.rng)
        self.assertEqual(policy.select_branch(self.branches), B1)
        self.assertEqual(policy.select_branch(self.branches), B2)
        self.assertFalse(self.branches)

    def test_random_removes_every_point_once(self):
        points = [(0, 0), (0, 2), (2, 0), (2, 2), (4, 4)]
        branches = BranchStore()
        for p in points:
            branches.push(p)
        policy = RandomSwitchingPolicy(self.rng, 50)
        taken = [policy.select_branch(branches) for _ in points]
        self.assertCountEqual(taken, points)
        self.assertEqual(len(branches), 0)

    def test_only_random_switches_early(self):
        self.assertFalse(DepthFirstPolicy(self.rng).wants_switch())
        self.assertFalse(BreadthFirstPolicy(self.rng).wants_switch())

    def test_switch_chance_zero_never_switches(self):
        policy = RandomSwitchingPolicy(self.rng, 0)
        self.assertFalse(any(policy.wants_switch() for _ in range(1000)))

    def test_switch_chance_hundred_always_switches(self):
        policy = RandomSwitchingPolicy(self.rng, 100)
        self.assertTrue(all(policy.wants_switch() for _ in range(1000)))

    def test_switch_chance_out_of_range(self):
        with self.assertRaises(ValueError):
            RandomSwitchingPolicy(self.rng, 101)
        with self.assertRaises(ValueError):
            RandomSwitchingPolicy(self.rng, -1)

    def test_base_policy_is_abstract(self):
        with self.assertRaises(TypeError):
            BasePolicy(self.rng)


class TestPolicyFactory(unittest.TestCase):

    def test_creates_each_type(self):
        rng = random.Random(0)
        self.assertIsInstance(PolicyFactory.create_policy('depth', rng), DepthFirstPolicy)
        self.assertIsInstance(PolicyFactory.create_policy('breadth', rng), BreadthFirstPolicy)
        policy = PolicyFactory.create_policy('random', rng, switch_chance=33)
        self.assertIsInstance(policy, RandomSwitchingPolicy)
        self.assertEqual(policy.switch_chance, 33)
        self.assertIs(policy.rng, rng)

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            PolicyFactory.create_policy('spiral', random.Random(0))


if __name__ == '__main__':
    unittest.main()
