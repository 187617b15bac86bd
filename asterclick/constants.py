"""Game-wide constants for Aster Click.

Screen dimensions, colors, font sizes, tuning knobs for the hazard, particles,
difficulty progression and frame timing, plus file paths for the log and
persisted JSON state.
"""
import os

WIDTH, HEIGHT = 960, 540           # initial window size
FPS = 60                           # target frame rate
BG_COLOR = (5, 7, 10)              # near-black space
TEXT_COLOR = (235, 235, 235)       # light text
HAZARD_COLOR = (214, 214, 214)     # asteroid outline
PARTICLE_COLOR = (255, 255, 255)
RING_COLOR = (255, 255, 255)
ACCENT_COLOR = (255, 255, 100)     # titles, pause banner
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22

# Frame timing
MAX_FRAME_DT = 0.033               # clamp for a single simulation step (s)

# Hazard tuning
HAZARD_BOUNDS_PAD = 120            # despawn margin beyond the viewport (px)
HAZARD_SPAWN_OFFSET = 80           # entry distance beyond the viewport edge (px)
HAZARD_TARGET_SPREAD = 0.28        # target box half-size, fraction of min(w, h)
HAZARD_SPEED_RANGE = (38.0, 78.0)  # base speed (px/s), before multipliers
HAZARD_RADIUS_RANGE = (22.0, 46.0)
HAZARD_SPIN_RANGE = (-0.7, 0.7)    # angular velocity (rad/s)
HAZARD_VERTEX_RANGE = (7, 11)      # inclusive
HAZARD_JAGGEDNESS = (0.75, 1.15)   # per-vertex radial factor
HAZARD_HP = 1
SPAWN_COOLDOWN_RANGE = (0.2, 0.5)  # delay before the next hazard (s)

# Particle tuning
EXPLOSION_COUNT_RANGE = (12, 30)
PARTICLE_SPEED_RANGE = (50.0, 220.0)
PARTICLE_LIFESPAN_RANGE = (0.25, 0.7)
PARTICLE_SIZE_RANGE = (1.0, 3.0)
PARTICLE_DAMPING = 0.92            # velocity factor per 1/60 s
DAMPING_REFERENCE_HZ = 60
RING_LIFESPAN = 0.35
RING_RADIUS_START = 6.0
RING_RADIUS_END = 28.0

# Difficulty Progression
DIFFICULTY_STEP_SECONDS = 10       # elapsed time per difficulty step
DIFFICULTY_STEP = 0.1              # multiplier added per step
MAX_DIFFICULTY = 3.0

# Settings bounds
SPEED_LEVEL_MULTIPLIERS = (1.0, 1.5, 2.0, 3.0, 4.0)
MIN_SPEED_LEVEL, MAX_SPEED_LEVEL = 1, 5
MIN_UI_OPACITY, MAX_UI_OPACITY = 0.2, 1.0
STAR_COUNT = 160                   # cosmetic background

# File paths
BASE_DIR = os.path.dirname(os.path.dirname(__file__))
LOG_FILE = os.path.join(BASE_DIR, "log.md")
SETTINGS_PATH = os.path.join(BASE_DIR, "settings.json")
LAST_RESULT_PATH = os.path.join(BASE_DIR, "last_result.json")
