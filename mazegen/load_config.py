import json
from argparse import Namespace

from mazegen import config as defaults
from mazegen.maze_env import MazeEngine

# flat key -> default, every loaded config is filled up to this set
DEFAULT_CONFIGS = {
    "MAZE_WIDTH": defaults.MAZEWIDTH,
    "MAZE_HEIGHT": defaults.MAZEHEIGHT,
    "MAZE_STEP": defaults.STEP,
    "HEADS_NUM": defaults.NUM_HEADS,
    "HEADS_MODE": defaults.MODE,
    "HEADS_SWITCH_CHANCE": defaults.SWITCH_CHANCE,
    "RUN_SEED": defaults.SEED,
    "RUN_OUTFILE": defaults.OUTFILE,
    "RUN_MAX_TICKS": defaults.MAX_TICKS,
}


def flatten_dict(d, parent_key='', sep='_'):
    """Flatten nested dictionary into flat dict with underscore-separated keys"""
    items = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


def default_maze_configs():
    return Namespace(**DEFAULT_CONFIGS)


def load_maze_configs(config_path=None):
    """Load a nested JSON config into a Namespace of upper-case flat keys.

    Keys missing from the file keep their defaults, unknown keys are rejected.
    """
    flat_config = dict(DEFAULT_CONFIGS)
    if config_path is not None:
        with open(config_path, 'r') as f:
            raw_config = json.load(f)
        if not isinstance(raw_config, dict):
            raise ValueError(f"Config {config_path} must hold a JSON object, got {type(raw_config).__name__}")
        loaded = {k.upper(): v for k, v in flatten_dict(raw_config).items()}
        unknown = set(loaded) - set(DEFAULT_CONFIGS)
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {sorted(unknown)}")
        flat_config.update(loaded)
    return Namespace(**flat_config)


def build_engine(maze_configs, seed=None):
    """Create a MazeEngine from a Namespace returned by load_maze_configs"""
    return MazeEngine(
        maze_width=maze_configs.MAZE_WIDTH,
        maze_height=maze_configs.MAZE_HEIGHT,
        step=maze_configs.MAZE_STEP,
        num_heads=maze_configs.HEADS_NUM,
        mode=maze_configs.HEADS_MODE,
        switch_chance=maze_configs.HEADS_SWITCH_CHANCE,
        seed=maze_configs.RUN_SEED if seed is None else seed,
    )
