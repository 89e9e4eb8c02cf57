GRID_ROWS = 8
GRID_COLS = 8

# Run length that counts as a match.
MIN_RUN = 3

# Piece generation
SPECIAL_SPAWN_CHANCE = 0.05
SPECIAL_MIN_LEVEL = 3  # specials only spawn strictly above this level

# Scoring
POINTS_PER_PIECE = 100
COMBO_STEP_BONUS = 200  # per cascade pass beyond the first

# Game progression
STARTING_LEVEL = 1
STARTING_MOVES = 30
STARTING_TARGET = 1000
TARGET_GROWTH = 2
LEVEL_UP_MOVE_BONUS = 10

# Phase durations (seconds) used by AnimationSystem; zero completes a phase immediately.
CLEAR_ANIMATION_SECONDS = 0.3
DROP_ANIMATION_SECONDS = 0.4

# Toasts kept for the HUD.
NOTIFICATION_FEED_SIZE = 5

# Window / layout
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
TILE_SIZE = 56
BOTTOM_MARGIN = 20
HUD_HEIGHT = 90

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.80

# Arcade mouse buttons
MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_RIGHT = 4
