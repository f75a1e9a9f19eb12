# shared/board_config.py
import os
import random
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

# env var -> field name
ENV_FIELDS = {
    "GALTON_PEG_RADIUS": "peg_radius",
    "GALTON_BALL_RADIUS": "ball_radius",
    "GALTON_PEGS_IN_FIRST_ROW": "pegs_in_first_row",
    "GALTON_ROWS": "num_rows",
    "GALTON_BALLS": "num_balls",
    "GALTON_SCREEN_X": "screen_x",
    "GALTON_SCREEN_Y": "screen_y",
    "GALTON_GRAVITY": "gravity",
    "GALTON_WIGGLE_DEG": "wiggle_deg",
    "GALTON_ELASTICITY": "elasticity",
}


@dataclass(frozen=True)
class BoardConfig:
    peg_radius: float = 3.0
    ball_radius: float = 5.0

    pegs_in_first_row: int = 5
    num_rows: int = 10
    num_balls: int = 100

    screen_x: float = 600.0
    screen_y: float = 600.0

    gravity: float = 400.0       # px/s^2, dt is in seconds
    wiggle_deg: float = 5.0      # jitter on the repositioning angle
    elasticity: float = 0.5      # velocity kept on every bounce

    def __post_init__(self):
        if self.peg_radius <= 0 or self.ball_radius <= 0:
            raise ValueError("Radii must be positive.")
        if self.screen_x <= 0 or self.screen_y <= 0:
            raise ValueError("Screen extents must be positive.")
        if self.num_rows < 0:
            raise ValueError("num_rows must be >= 0.")
        if self.pegs_in_first_row < 1:
            raise ValueError("pegs_in_first_row must be >= 1.")
        if self.num_balls < 0:
            raise ValueError("num_balls must be >= 0.")
        if not 0.0 <= self.elasticity <= 1.0:
            raise ValueError("elasticity must be within [0, 1].")
        if self.wiggle_deg < 0:
            raise ValueError("wiggle_deg must be >= 0.")
        if self.gravity < 0:
            raise ValueError("gravity must be >= 0.")

    @property
    def num_buckets(self) -> int:
        return self.num_rows + self.pegs_in_first_row + 1

    @property
    def spacing(self) -> float:
        # horizontal and vertical peg cadence
        return 3 * (2 * self.ball_radius)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, base: Optional["BoardConfig"] = None) -> "BoardConfig":
        """Overlay GALTON_* variables on top of `base` (defaults if omitted)."""
        env = os.environ if env is None else env
        base = base or cls()
        types = {f.name: f.type for f in fields(cls)}

        overrides = {}
        for var, name in ENV_FIELDS.items():
            raw = env.get(var)
            if raw is None or raw.strip() == "":
                continue
            cast = int if types[name] in (int, "int") else float
            try:
                overrides[name] = cast(raw)
            except ValueError:
                raise ValueError(f"{var}={raw!r} is not a valid {cast.__name__}") from None

        return replace(base, **overrides)


CFG = BoardConfig()


def make_rng(env: Optional[Mapping[str, str]] = None) -> random.Random:
    # GALTON_SEED=42 -> reproducible run
    env = os.environ if env is None else env
    seed = env.get("GALTON_SEED", "").strip()
    if not seed:
        return random.Random()
    try:
        return random.Random(int(seed))
    except ValueError:
        raise ValueError(f"GALTON_SEED={seed!r} is not a valid int") from None
