# physics/entities.py
from dataclasses import dataclass, field

from physics.geometry import Vec2


@dataclass(frozen=True)
class Peg:
    x: float
    y: float
    r: float

    @property
    def pos(self) -> Vec2:
        # fresh copy; a Peg never hands out its own coordinates
        return Vec2(self.x, self.y)


@dataclass(frozen=True)
class Slab:
    """Vertical bucket divider between the last peg row and the screen bottom."""
    left: float
    right: float
    top: float
    bottom: float

    @property
    def center(self) -> float:
        return (self.left + self.right) / 2.0


@dataclass(eq=False)
class Ball:
    pos: Vec2
    r: float
    vel: Vec2 = field(default_factory=Vec2)

    peg_hits: int = 0
    bucket_hits: int = 0

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value

    def move(self, dt: float):
        self.pos += self.vel * dt

    def out_of_bounds(self, screen_y: float) -> bool:
        return self.pos.y >= screen_y + self.r
