# physics/layout.py
import bisect
import logging
from dataclasses import dataclass
from typing import Tuple

from shared.board_config import BoardConfig
from physics.entities import Peg, Slab

logger = logging.getLogger(__name__)

TOP_MARGIN = 100.0  # y of the first peg row


@dataclass(frozen=True)
class BoardLayout:
    """Static board geometry. Built once, read by the world and the renderer."""
    pegs: Tuple[Peg, ...]
    slabs: Tuple[Slab, ...]
    last_row_y: float
    first_bucket_right_x: float
    last_bucket_left_x: float

    @property
    def bins(self) -> Tuple[Tuple[float, float], ...]:
        """Open intervals between consecutive walls, left to right."""
        edges = [self.first_bucket_right_x]
        for s in self.slabs:
            edges.extend((s.left, s.right))
        edges.append(self.last_bucket_left_x)
        return tuple(zip(edges[0::2], edges[1::2]))

    def bin_index(self, x: float) -> int:
        centers = [s.center for s in self.slabs]
        return bisect.bisect_right(centers, x)


def generate_layout(cfg: BoardConfig) -> BoardLayout:
    dx = dy = cfg.spacing
    mid = cfg.screen_x / 2

    pegs = []
    last_row_y = TOP_MARGIN
    for row in range(cfg.num_rows + 1):
        peg_x = mid - (2 + row / 2.0) * dx
        peg_y = TOP_MARGIN + row * dy
        for i in range(cfg.pegs_in_first_row + row):
            pegs.append(Peg(peg_x + i * dx, peg_y, cfg.peg_radius))
        last_row_y = peg_y

    # slabs sit under the last row's pegs; outer walls one cadence further out
    bucket_x = mid - (2 + cfg.num_rows / 2.0) * dx
    first_bucket_right_x = bucket_x - dx + cfg.peg_radius

    slabs = []
    for _ in range(cfg.num_buckets - 1):
        slabs.append(Slab(bucket_x - cfg.peg_radius, bucket_x + cfg.peg_radius, last_row_y, cfg.screen_y))
        bucket_x += dx
    last_bucket_left_x = bucket_x - cfg.peg_radius

    layout = BoardLayout(
        pegs=tuple(pegs),
        slabs=tuple(slabs),
        last_row_y=last_row_y,
        first_bucket_right_x=first_bucket_right_x,
        last_bucket_left_x=last_bucket_left_x,
    )
    logger.info(
        "layout: %d pegs in %d rows, %d slabs, walls at x=%.1f..%.1f",
        len(pegs), cfg.num_rows + 1, len(slabs), first_bucket_right_x, last_bucket_left_x,
    )
    return layout
