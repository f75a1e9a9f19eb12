import dataclasses
import unittest

from shared.board_config import BoardConfig, make_rng


class TestBoardConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = BoardConfig()
        self.assertEqual(cfg.num_buckets, 16)
        self.assertEqual(cfg.spacing, 30.0)

    def test_num_buckets_derived(self):
        self.assertEqual(BoardConfig(num_rows=0, pegs_in_first_row=1).num_buckets, 2)
        self.assertEqual(BoardConfig(num_rows=3, pegs_in_first_row=2).num_buckets, 6)

    def test_rejects_bad_values(self):
        bad = [
            dict(peg_radius=0),
            dict(ball_radius=-1),
            dict(num_rows=-1),
            dict(pegs_in_first_row=0),
            dict(num_balls=-5),
            dict(screen_x=0),
            dict(elasticity=1.5),
            dict(elasticity=-0.1),
            dict(wiggle_deg=-1),
            dict(gravity=-9.8),
        ]
        for kwargs in bad:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    BoardConfig(**kwargs)

    def test_frozen(self):
        cfg = BoardConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.num_rows = 3

    def test_from_env(self):
        env = {"GALTON_ROWS": "4", "GALTON_ELASTICITY": "0.25", "GALTON_BALLS": ""}
        cfg = BoardConfig.from_env(env)
        self.assertEqual(cfg.num_rows, 4)
        self.assertIsInstance(cfg.num_rows, int)
        self.assertEqual(cfg.elasticity, 0.25)
        self.assertEqual(cfg.num_balls, BoardConfig().num_balls)

    def test_from_env_keeps_base(self):
        base = BoardConfig(num_balls=7)
        cfg = BoardConfig.from_env({"GALTON_GRAVITY": "100"}, base=base)
        self.assertEqual(cfg.num_balls, 7)
        self.assertEqual(cfg.gravity, 100.0)

    def test_from_env_bad_number(self):
        with self.assertRaises(ValueError):
            BoardConfig.from_env({"GALTON_ROWS": "ten"})

    def test_from_env_validates(self):
        with self.assertRaises(ValueError):
            BoardConfig.from_env({"GALTON_ELASTICITY": "2"})


class TestMakeRng(unittest.TestCase):
    def test_seeded(self):
        a = make_rng({"GALTON_SEED": "42"})
        b = make_rng({"GALTON_SEED": " 42 "})
        self.assertEqual([a.random() for _ in range(3)], [b.random() for _ in range(3)])

    def test_unseeded(self):
        self.assertIsNotNone(make_rng({}).random())
        self.assertIsNotNone(make_rng({"GALTON_SEED": ""}).random())

    def test_bad_seed(self):
        with self.assertRaises(ValueError):
            make_rng({"GALTON_SEED": "abc"})
