"""
constants.py: Centralized configuration for the game world and its timing.
"""

# -------- Frame & Debug Config --------
FPS = 60                        # Target frames per second for the client loop
DEBUG_MODE = False              # Draw hitbox outlines around every entity

# -------- Game World Config --------
SCREEN_WIDTH = 1024.0
SCREEN_HEIGHT = 768.0
MIDDLE = 704.0 / 2.0            # Vertical midline (above the ground strip)
FLOOR_LEVEL = 683.0             # Player y past this counts as hitting the ground

# -------- Player Config --------
FERRIS_WIDTH = 64.0
FERRIS_HEIGHT = 42.0
FERRIS_X = SCREEN_WIDTH / 4.0   # Fixed player X position
STARTING_LIVES = 1

# -------- Physics Config (pixels / frame) --------
GRAVITY = 0.50                  # Vertical acceleration added every frame
JUMP = 8.0                      # Upward velocity set by a jump

# -------- Obstacle & Boost Config --------
PIPE_WIDTH = 128.0
PIPE_GAP = 160.0
PIPE_SPEED = 4.5

ENEMY_WIDTH = 128.0
ENEMY_HEIGHT = 84.0
ENEMY_SPEED = 5.5

BOOST_WIDTH = 64.0
BOOST_HEIGHT = 64.0
BOOST_SPEED = 7.0               # Boosts ignore the speed multiplier

# -------- Spawn Timing (seconds) --------
PIPE_FIRST_SPAWN = 1.0
ENEMY_FIRST_SPAWN = 10.0
BOOST_FIRST_SPAWN = 10.0

PIPE_SPAWN_RANGE = (1.0, 4.5)
ENEMY_SPAWN_RANGE = (6.0, 12.0)
BOOST_SPAWN_RANGE = (10.0, 30.0)

# -------- Spawn Positions (pixels) --------
PIPE_Y_RANGE = (67.0, 481.0)    # Where the gap starts
ENEMY_Y_RANGE = (63.0, 705.0)
BOOST_Y_RANGE = (48.0, 720.0)

# -------- Boost Effects --------
BOOST_TYPE_RANGE = (0.0, 18.0)
BONUS_LIFE_THRESHOLD = 2.0      # Draws below this give a bonus life
SPEED_UP_THRESHOLD = 10.0       # Draws below this (and above the above) speed up
BOOST_DURATION = 10.0           # Seconds a speed boost stays active
SLOW_DOWN_MULTIPLIER = 0.5
SPEED_UP_MULTIPLIER = 1.5
DEFAULT_MULTIPLIER = 1.0
