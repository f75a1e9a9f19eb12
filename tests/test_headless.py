import random
import unittest

from shared.board_config import BoardConfig
from physics.world import GaltonWorld
from shared import board_config
from client import headless
from client.headless import format_tally, run_until_drained


class TestHeadless(unittest.TestCase):
    def test_run_until_drained(self):
        cfg = BoardConfig(num_rows=4, num_balls=10)
        world = GaltonWorld(cfg, rng=random.Random(11))
        frames = run_until_drained(world)

        self.assertTrue(world.drained)
        self.assertGreater(frames, 0)
        self.assertEqual(sum(world.tally), 10)

    def test_frame_cap(self):
        world = GaltonWorld(BoardConfig(num_balls=3), rng=random.Random(0))
        self.assertEqual(run_until_drained(world, max_frames=5), 5)
        self.assertFalse(world.drained)

    def test_format_tally(self):
        text = format_tally([0, 2, 4], width=4)
        lines = text.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[2].endswith("####"))
        self.assertTrue(lines[1].endswith("##"))
        self.assertEqual(format_tally([0, 0]).count("#"), 0)

    def test_uses_shared_rng_factory(self):
        # no window module needed to seed a headless run
        self.assertIs(headless.make_rng, board_config.make_rng)
        self.assertFalse(hasattr(headless, "App"))
