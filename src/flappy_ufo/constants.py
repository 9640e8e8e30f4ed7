"""
constants.py: Centralized tuning for the game world and the frame loop.
"""

# -------- Frame Timing --------
RENDER_FPS = 60                 # Host frame rate target
FRAME_NORMALIZER = 60           # Constants below are tuned per 60 fps frame
MAX_FRAME_TIME = 0.05           # dt clamp (seconds) for slow frames

# -------- Game World Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
UFO_X = 80                      # Fixed UFO X position
UFO_RADIUS = 20                 # Visual radius, also used for the bounds check

# Hitbox is smaller than the visual ellipse
UFO_HITBOX_RADIUS_X = UFO_RADIUS * 0.7
UFO_HITBOX_RADIUS_Y = UFO_RADIUS * 0.5

# -------- Physics Config (units per 60 fps frame) --------
GRAVITY = 0.13
FLAP_IMPULSE = -3.5

# -------- Tree Config --------
SPEED_MULTIPLIER = 2.5
TREE_WIDTH = 60
GAP_HEIGHT = 300
GAP_MARGIN = 20                 # Minimum distance between a gap and the field edge
TREE_SPEED = 2.6 * SPEED_MULTIPLIER
SPAWN_INTERVAL = (90 / 60) / SPEED_MULTIPLIER  # seconds

# -------- Difficulty --------
SPEEDUP_SCORE_STEP = 20
SPEEDUP_FACTOR = 0.9

# -------- Bonus Stars --------
STAR_EVERY = 10                 # A star is launched every Nth tree passed
STAR_RADIUS = 14
STAR_VELOCITY_Y = -1.2          # Slow upward drift, per tick
