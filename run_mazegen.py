import argparse
import logging
import time

from tqdm import tqdm

from mazegen.config import LOG_FORMAT
from mazegen.export import save_bmp
from mazegen.load_config import load_maze_configs, build_engine
from mazegen.policies.policy_factory import PolicyFactory

logger = logging.getLogger("mazegen")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Carve a perfect maze with one or more heads and save it as a BMP.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config, see configs/config_basic.json")
    parser.add_argument("-s", "--size", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"), default=None,
                        help="Width and height of the maze in lattice units. Default 20x20.")
    parser.add_argument("-m", "--mode", type=str, choices=list(PolicyFactory.POLICY_TYPES.keys()), default=None,
                        help="Method used to generate the maze. Options: " + ", ".join(PolicyFactory.POLICY_TYPES.keys()))
    parser.add_argument("--switch", type=int, default=None,
                        help="Chance (0-100) that a head switches to another branch each tick in 'random' mode. Default 10.")
    parser.add_argument("--step", type=int, default=None, help="Number of cells a head carves per move. Default 2.")
    parser.add_argument("--heads", type=int, default=None, help="Number of heads that carve the maze. Default 1.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source, 0 picks one from the clock.")
    parser.add_argument("-o", "--outfile", type=str, default=None, help="Where to save the final maze. Default 'maze.bmp'.")
    parser.add_argument("--max-ticks", type=int, default=None, help="Stop after this many ticks even if heads remain.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every head that finishes.")
    return parser, parser.parse_args(argv)


def apply_overrides(maze_configs, args):
    """Command line values win over the config file"""
    overrides = {
        "MAZE_STEP": args.step,
        "HEADS_NUM": args.heads,
        "HEADS_MODE": args.mode,
        "HEADS_SWITCH_CHANCE": args.switch,
        "RUN_SEED": args.seed,
        "RUN_OUTFILE": args.outfile,
        "RUN_MAX_TICKS": args.max_ticks,
    }
    if args.size is not None:
        overrides["MAZE_WIDTH"], overrides["MAZE_HEIGHT"] = args.size
    for key, value in overrides.items():
        if value is not None:
            setattr(maze_configs, key, value)
    return maze_configs


def run(maze_configs):
    """Runs the engine headless until every head is done, then saves the maze."""
    seed = maze_configs.RUN_SEED or int(time.time())
    logger.info(f"Running with seed: {seed}")

    env = build_engine(maze_configs, seed=seed)
    total_cells = env.grid.width * env.grid.height
    progress_bar = tqdm(total=total_cells, initial=env.visited_count(), desc="Carving maze", unit="cell")
    while env.running:
        if maze_configs.RUN_MAX_TICKS is not None and env.steps >= maze_configs.RUN_MAX_TICKS:
            logger.info(f"Stopped after {env.steps} ticks with {len(env.heads)} heads left")
            break
        before = env.visited_count()
        env.step()
        progress_bar.update(env.visited_count() - before)
    progress_bar.close()

    return save_bmp(env.grid, maze_configs.RUN_OUTFILE), env


def main(argv=None):
    parser, args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    try:
        maze_configs = apply_overrides(load_maze_configs(args.config), args)
        run(maze_configs)
    except ValueError as e:
        parser.error(str(e))
    except OSError as e:
        logger.error(f"{e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
