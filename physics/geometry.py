# physics/geometry.py
import math

import pygame

Vec2 = pygame.math.Vector2


def reflect(v: Vec2, n: Vec2) -> Vec2:
    """Mirror v about the unit normal n: v - 2 (v.n) n."""
    return v - n * (2.0 * v.dot(n))


def polar(length: float, angle: float) -> Vec2:
    """Vector of the given length pointing along `angle` (radians)."""
    return Vec2(math.cos(angle) * length, math.sin(angle) * length)


def heading(v: Vec2) -> float:
    return math.atan2(v.y, v.x)
