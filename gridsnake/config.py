"""Game constants: board geometry, timing, colours and sound."""

# Board
GRID_WIDTH = 40
GRID_HEIGHT = 30
CELL_SIZE = 20
BOARD_WIDTH = GRID_WIDTH * CELL_SIZE
BOARD_HEIGHT = GRID_HEIGHT * CELL_SIZE
PANEL_WIDTH = 200
WINDOW_WIDTH = BOARD_WIDTH + PANEL_WIDTH
WINDOW_HEIGHT = BOARD_HEIGHT

# Timing
FPS = 60
TICK_INTERVAL_MS = 100  # Lower is faster

# Snake
START_LENGTH = 3

# Player
DEFAULT_PLAYER_NAME = "Player"
MAX_NAME_LENGTH = 16

# Colors
BOARD_BG = (17, 17, 17)
PANEL_BG = (34, 34, 40)
FOOD_COLOR = (0x4c, 0xaf, 0x50)
TEXT_COLOR = (220, 220, 220)
MUTED_TEXT_COLOR = (150, 150, 160)
INPUT_BG = (50, 50, 58)
INPUT_ACTIVE_BORDER = (0x4c, 0xaf, 0x50)
BUTTON_COLOR = (0x4c, 0xaf, 0x50)
BUTTON_TEXT_COLOR = (10, 30, 10)
NOTICE_BG = (40, 40, 48)

# Snake gradient: hsl(120, 60%, L), L from dark head to light tail
SNAKE_HUE = 120
SNAKE_SATURATION = 60
SNAKE_LIGHTNESS_HEAD = 30
SNAKE_LIGHTNESS_SPAN = 40

# Food is drawn at 70% of the cell, 15% inset on each side
FOOD_INSET = 0.15
SEGMENT_INSET = 1

# Eat tone
TONE_FREQUENCY = 660
TONE_DURATION_MS = 50
TONE_VOLUME = 0.05
SAMPLE_RATE = 22050
