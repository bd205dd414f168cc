import numpy as np

class TickLog:
    def __init__(self):
        self.current_observations = {}
        self.current_visited = None
        self.logs = []  # Each entry is a dict: {'visited': int, 'heads': {head_id: {...}}}

    def add_observation(self, obs_dict: dict[int, dict], visited: int):
        self.current_observations = obs_dict
        self.current_visited = visited

    def step(self):
        if self.current_visited is None:
            raise ValueError("Missing observation before step")

        self.logs.append({
            'visited': self.current_visited,
            'heads': self.current_observations,
        })

        # Reset current step data
        self.current_observations = {}
        self.current_visited = None

    def get_log_result(self):
        return self.logs

    def __len__(self):
        return len(self.logs)

    def extract_from_logs(self, mode="visited", head_ids="all"):
        """
        mode:
          "visited"   -> np.array of visited-cell counts, one per tick
          "positions" -> {head_id: np.array of shape (ticks_alive, 2)}
          "branches"  -> {head_id: np.array of branch counts}
          "switches"  -> {head_id: np.array of cumulative branch switches}
        """
        if mode == "visited":
            return np.array([entry['visited'] for entry in self.logs], dtype=int)

        if mode not in ("positions", "branches", "switches"):
            raise ValueError(f"Unsupported mode: {mode}")

        if head_ids == "all":
            head_ids = sorted({hid for entry in self.logs for hid in entry['heads']})
        elif isinstance(head_ids, int):
            head_ids = [head_ids]

        key = {"positions": "position", "branches": "branches", "switches": "switches"}[mode]
        result = {hid: [] for hid in head_ids}
        for entry in self.logs:
            for hid in head_ids:
                if hid in entry['heads']:
                    result[hid].append(entry['heads'][hid][key])
        return {hid: np.array(values, dtype=int) for hid, values in result.items()}
