# client/main.py
import logging
import os
import sys

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from shared.constants import APP_TITLE, FPS, LOG_FORMAT
from shared.board_config import BoardConfig, make_rng
from physics.world import GaltonWorld
from client.board_view import BoardView

logger = logging.getLogger(__name__)


class App:
    def __init__(self, cfg: BoardConfig):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.cfg = cfg
        self.screen = pygame.display.set_mode((int(cfg.screen_x), int(cfg.screen_y)))
        self.clock = pygame.time.Clock()

        self.world = GaltonWorld(cfg, rng=make_rng())
        self.view = BoardView(self.world)
        self.running = True

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                logger.info("respawning %d balls", self.cfg.num_balls)
                self.world.reset()
            elif event.key == pygame.K_d:
                self.view.show_walls = not self.view.show_walls

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0

                for event in pygame.event.get():
                    self.handle_event(event)

                self.world.update(dt)

                self.view.draw(self.screen)
                pygame.display.flip()
        finally:
            pygame.quit()


def main():
    logging.basicConfig(level=os.getenv("GALTON_LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    try:
        App(BoardConfig.from_env()).run()
    except Exception as e:
        logging.exception(f"Fatal error: {e}.")
        raise


if __name__ == "__main__":
    main()
