# client/headless.py
"""Run the board without a window and report where the balls landed."""
import logging
import os
import sys
from typing import List, Optional

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from shared.constants import FPS, LOG_FORMAT
from shared.board_config import BoardConfig, make_rng
from physics.world import GaltonWorld

logger = logging.getLogger(__name__)

MAX_FRAMES = 60 * 60 * 5


def run_until_drained(world: GaltonWorld, dt: float = 1.0 / FPS, max_frames: int = MAX_FRAMES) -> int:
    """Step `world` at a fixed dt until no ball is left. Returns frames used."""
    frames = 0
    while not world.drained and frames < max_frames:
        world.update(dt)
        frames += 1
    if not world.drained:
        logger.warning("stopped after %d frames with %d balls still on the board", frames, len(world.balls))
    return frames


def format_tally(tally: List[int], width: int = 40) -> str:
    peak = max(tally, default=0) or 1
    lines = []
    for i, count in enumerate(tally):
        lines.append(f"{i:>3} {count:>6} {'#' * round(count / peak * width)}")
    return "\n".join(lines)


def main(cfg: Optional[BoardConfig] = None):
    logging.basicConfig(level=os.getenv("GALTON_LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    try:
        world = GaltonWorld(cfg or BoardConfig.from_env(), rng=make_rng())
        frames = run_until_drained(world)
        logger.info("simulated %d frames\n%s", frames, format_tally(world.tally))
    except Exception as e:
        logging.exception(f"Fatal error: {e}.")
        raise


if __name__ == "__main__":
    main()
