# shared/constants.py

APP_TITLE = "Galton Board"
FPS = 60
GRID_SPACING = 50

WHITE = (245, 245, 245)
BLACK = (20, 20, 20)
GRAY = (120, 120, 120)
LIGHT_GRAY = (211, 211, 211)
DARK = (30, 30, 30)
BLUE = (70, 140, 255)
RED = (240, 80, 80)
TALLY = (122, 122, 244)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
