from mazegen.policies.simple_policies import DepthFirstPolicy, BreadthFirstPolicy, RandomSwitchingPolicy

class PolicyFactory:
    """Factory class to create the exploration policies"""

    POLICY_TYPES = {
        'random': RandomSwitchingPolicy,
        'depth': DepthFirstPolicy,
        'breadth': BreadthFirstPolicy,
    }

    @staticmethod
    def create_policy(policy_type: str, rng, switch_chance: int = 10):
        """Create a policy of the specified type

        Args:
            policy_type (str): Type of policy to create ('random', 'depth', 'breadth')
            rng: random.Random instance owned by the engine
            switch_chance (int): Percentage used by 'random', ignored by the others

        Returns:
            BasePolicy: An instance of the specified policy type

        Raises:
            ValueError: If policy_type is not recognized
        """
        if policy_type not in PolicyFactory.POLICY_TYPES:
            raise ValueError(f"Unknown policy type: {policy_type}. Valid types are: {list(PolicyFactory.POLICY_TYPES.keys())}")

        if policy_type == 'random':
            return RandomSwitchingPolicy(rng, switch_chance)
        return PolicyFactory.POLICY_TYPES[policy_type](rng)
