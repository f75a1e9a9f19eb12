# physics/colliders.py
import math
from typing import Protocol

from physics.entities import Slab


class Collider(Protocol):
    """Anything round sitting somewhere on the board."""
    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def r(self) -> float: ...


def circles_collide(a: Collider, b: Collider) -> bool:
    # touching counts
    return math.hypot(a.x - b.x, a.y - b.y) <= a.r + b.r


def circle_hits_slab(c: Collider, slab: Slab) -> bool:
    # slabs fill the whole bucket zone vertically, so only x matters
    return c.x + c.r >= slab.left and c.x - c.r <= slab.right
