# client/board_view.py
import pygame

from shared.constants import WHITE, BLACK, GRAY, LIGHT_GRAY, DARK, BLUE, RED, TALLY, GRID_SPACING
from physics.world import GaltonWorld


class BoardView:
    """Draws a GaltonWorld. Board layer is baked once, balls redrawn each frame."""

    def __init__(self, world: GaltonWorld, show_walls: bool = True):
        self.world = world
        self.show_walls = show_walls
        self.font = pygame.font.SysFont(None, 20)
        self.board = self._bake_board()

    def _bake_board(self) -> pygame.Surface:
        cfg = self.world.cfg
        lay = self.world.layout
        w, h = int(cfg.screen_x), int(cfg.screen_y)

        surf = pygame.Surface((w, h))
        surf.fill(WHITE)

        for x in range(0, w + 1, GRID_SPACING):
            pygame.draw.line(surf, LIGHT_GRAY, (x, 0), (x, h))
        for y in range(0, h + 1, GRID_SPACING):
            pygame.draw.line(surf, LIGHT_GRAY, (0, y), (w, y))

        # outer walls run the full height, slabs only below the last row
        pr = cfg.peg_radius
        left_wall = pygame.Rect(0, 0, int(2 * pr), h)
        left_wall.right = int(round(lay.first_bucket_right_x))
        right_wall = pygame.Rect(int(round(lay.last_bucket_left_x)), 0, int(2 * pr), h)
        pygame.draw.rect(surf, DARK, left_wall)
        pygame.draw.rect(surf, DARK, right_wall)

        for s in lay.slabs:
            pygame.draw.rect(surf, DARK, pygame.Rect(int(s.left), int(s.top), int(s.right - s.left), int(s.bottom - s.top)))

        for p in lay.pegs:
            pygame.draw.circle(surf, BLACK, (int(p.x), int(p.y)), max(1, int(round(p.r))))

        return surf

    def draw(self, surface: pygame.Surface):
        surface.blit(self.board, (0, 0))

        lay = self.world.layout
        h = int(self.world.cfg.screen_y)
        if self.show_walls:
            pygame.draw.line(surface, RED, (int(lay.first_bucket_right_x), 0), (int(lay.first_bucket_right_x), h))
            pygame.draw.line(surface, RED, (int(lay.last_bucket_left_x), 0), (int(lay.last_bucket_left_x), h))

        self._draw_tally(surface)

        for b in self.world.balls:
            pygame.draw.circle(surface, BLUE, (int(b.x), int(b.y)), int(round(b.r)), 1)

        info = f"active: {len(self.world.balls)}  drained: {self.world.removed}"
        surface.blit(self.font.render(info, True, GRAY), (8, 8))

    def _draw_tally(self, surface: pygame.Surface):
        tally = self.world.tally
        peak = max(tally, default=0)
        if not peak:
            return

        lay = self.world.layout
        bottom = int(self.world.cfg.screen_y)
        room = bottom - lay.last_row_y - 10
        for (lo, hi), count in zip(lay.bins, tally):
            bh = int(count / peak * room)
            if bh <= 0:
                continue
            bar = pygame.Rect(int(lo) + 1, bottom - bh, max(1, int(hi - lo) - 2), bh)
            pygame.draw.rect(surface, TALLY, bar)
