# physics/world.py
import enum
import logging
import random
from typing import List, Optional

from shared.board_config import BoardConfig
from physics.bounce import bucket_bounce, clamp_to_walls, peg_bounce
from physics.colliders import circle_hits_slab, circles_collide
from physics.entities import Ball
from physics.geometry import Vec2
from physics.layout import BoardLayout, generate_layout

logger = logging.getLogger(__name__)


class Zone(enum.Enum):
    PEGS = "pegs"
    BUCKETS = "buckets"


class Hit(enum.Enum):
    NONE = "none"
    PEG = "peg"
    BUCKET = "bucket"


class GaltonWorld:
    """
    Board physics.
    One update() per rendered frame; every active ball is integrated,
    clamped to the outer walls, then tested against pegs OR slabs (never both),
    resolving at most one obstacle hit.
    """

    def __init__(self, cfg: BoardConfig, rng: Optional[random.Random] = None,
                 layout: Optional[BoardLayout] = None, spawn: bool = True):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random()
        self.layout = layout if layout is not None else generate_layout(cfg)

        self.balls: List[Ball] = []
        self.tally: List[int] = [0] * cfg.num_buckets
        self.removed: int = 0

        if spawn:
            self.spawn()

    # ---------------- Spawning ----------------
    def spawn(self):
        mid = self.cfg.screen_x / 2
        for _ in range(self.cfg.num_balls):
            self.add_ball(mid + self.rng.uniform(-1.0, 1.0), 0.0)
        logger.info("spawned %d balls around x=%.1f", self.cfg.num_balls, mid)

    def add_ball(self, x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Ball:
        ball = Ball(Vec2(x, y), self.cfg.ball_radius, Vec2(vx, vy))
        self.balls.append(ball)
        return ball

    def reset(self):
        self.balls.clear()
        self.tally = [0] * self.cfg.num_buckets
        self.removed = 0
        self.spawn()

    @property
    def drained(self) -> bool:
        return not self.balls

    def zone_of(self, ball: Ball) -> Zone:
        return Zone.PEGS if ball.y <= self.layout.last_row_y else Zone.BUCKETS

    # ---------------- Physics update ----------------
    def update(self, dt: float):
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if dt == 0:
            return

        # swap-with-last removal: each ball visited once, order not kept
        i = 0
        while i < len(self.balls):
            ball = self.balls[i]
            self.integrate(ball, dt)
            self.resolve(ball)

            if ball.out_of_bounds(self.cfg.screen_y):
                self.balls[i] = self.balls[-1]
                self.balls.pop()
                self._retire(ball)
            else:
                i += 1

    def integrate(self, ball: Ball, dt: float):
        ball.vel.y += self.cfg.gravity * dt
        ball.move(dt)

    def resolve(self, ball: Ball) -> Hit:
        lay = self.layout
        e = self.cfg.elasticity

        clamp_to_walls(ball, lay.first_bucket_right_x, lay.last_bucket_left_x, e)

        if self.zone_of(ball) is Zone.PEGS:
            for peg in lay.pegs:
                if circles_collide(ball, peg):
                    peg_bounce(ball, peg, e, self.cfg.wiggle_deg, self.rng)
                    return Hit.PEG
        else:
            for slab in lay.slabs:
                if circle_hits_slab(ball, slab):
                    bucket_bounce(ball, slab, e)
                    return Hit.BUCKET
        return Hit.NONE

    def _retire(self, ball: Ball):
        idx = self.layout.bin_index(ball.x)
        self.tally[idx] += 1
        self.removed += 1
        logger.debug("ball left through bin %d at x=%.2f (%d peg hits)", idx, ball.x, ball.peg_hits)
        if not self.balls:
            logger.info("board drained: %d balls, tally=%s", self.removed, self.tally)
