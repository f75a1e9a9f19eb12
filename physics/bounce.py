# physics/bounce.py
"""
Collision response. Each rule assumes the caller already confirmed the overlap.

All rules push the ball SEPARATION_EPS clear of what it hit, so the same
obstacle never reports a hit again on the next frame.
"""
import math
import random

from physics.entities import Ball, Peg, Slab
from physics.geometry import heading, polar, reflect

SEPARATION_EPS = 0.015


def peg_bounce(ball: Ball, peg: Peg, elasticity: float, wiggle_deg: float, rng: random.Random):
    d = peg.pos - ball.pos

    # jitter only steers where the ball is put back, not its velocity
    wiggle = math.radians(wiggle_deg)
    angle = heading(d) + rng.uniform(-wiggle, wiggle)

    n = d.normalize()
    ball.vel = reflect(ball.vel, n) * elasticity

    ball.pos = peg.pos - polar(ball.r + peg.r + SEPARATION_EPS, angle)
    ball.peg_hits += 1


def bucket_bounce(ball: Ball, slab: Slab, elasticity: float):
    ball.vel.x = -ball.vel.x * elasticity

    if ball.x - slab.left <= slab.right - ball.x:
        ball.x = slab.left - ball.r - SEPARATION_EPS
    else:
        ball.x = slab.right + ball.r + SEPARATION_EPS
    ball.bucket_hits += 1


def clamp_to_walls(ball: Ball, left: float, right: float, elasticity: float) -> bool:
    """Keep the ball centre between the two outer walls. True if it was pushed back."""
    if ball.x <= left:
        ball.x = left + SEPARATION_EPS
    elif ball.x >= right:
        ball.x = right - SEPARATION_EPS
    else:
        return False
    ball.vel.x = -ball.vel.x * elasticity
    return True
