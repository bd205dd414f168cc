MAZEWIDTH, MAZEHEIGHT = 20, 20  # in lattice units, the cell grid is units * STEP - 1
STEP = 2                        # lattice spacing == corridor length per move

'''-----------------HEAD SETTING-----------------'''
NUM_HEADS = 1
MODE = "depth"          # one of "random", "depth", "breadth"
SWITCH_CHANCE = 10      # 0-100, only used by "random"

'''-----------------RUN SETTING-----------------'''
SEED = 0                # 0 -> seed from the clock
OUTFILE = "maze.bmp"
MAX_TICKS = None

LOG_FORMAT = "[%(levelname)s] %(message)s"
