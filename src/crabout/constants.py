"""
constants.py: Centralized configuration for the simulation and the client.
"""

# -------- Frame Timing --------
TARGET_FPS = 60                 # Frame clock target; motion is tuned per 1/60 s
MAX_FRAME_ELAPSED = 3.0         # Longest frame fed to the simulation, in target frames
WINDOW_TITLE = "Crabout"

# -------- Field Config --------
FIELD_WIDTH = 640
FIELD_HEIGHT = 480
GROUND_OFFSET = 100             # Paddle rests this far above the bottom edge

# -------- Paddle Config --------
PADDLE_WIDTH = 100
PADDLE_HEIGHT = 10
PADDLE_SPEED = 12.0             # Pixels per normalized tick

# -------- Ball Config --------
BALL_RADIUS = 10
BALL_VELOCITY = (5.0, 5.0)      # Launch velocity (pixels per normalized tick)

# -------- Obstacle Field Config --------
OBSTACLE_ROWS = 5
OBSTACLE_MIN_WIDTH = 70.0
OBSTACLE_WIDTH_RANGE = 80.0     # Widths are drawn from [MIN, MIN + RANGE)
OBSTACLE_HEIGHT = 25.0
OBSTACLE_TOP_OFFSET = 50.0      # y of the first row
OBSTACLE_ROW_GAP = 2.0
OBSTACLE_BRICK_GAP = 2.0

# -------- Session Config --------
SCORE_PER_HIT = 10
STARTING_LIVES = 3

# -------- Presentation Config --------
BACKGROUND_SCROLL_SPEED = 2.0   # Pixels per normalized tick
WAVE_FRAMES = 4
WAVE_FRAME_SPEED = 10           # Wave animation frames per second
ASSET_FILES = {
    "background": "bg.png",
    "wave": "wave.png",
    "paddle": "metal.png",
    "brick": "brick_img.png",
    "ball": "ball_20.png",
}
