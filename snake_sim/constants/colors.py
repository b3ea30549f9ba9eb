WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
MAGENTA = (255, 0, 255)

SNAKE_COLORS = [GREEN, BLUE, YELLOW, MAGENTA]
BACKGROUND_COLOR = WHITE
FRUIT_COLOR = RED
