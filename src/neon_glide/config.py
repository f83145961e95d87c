import os

# Window
WIDTH = 450
HEIGHT = 800
FULLSCREEN = False
RESIZABLE = True
FPS = 60
VSYNC = True
TITLE = "Neon Glide"

# Playfield (logical units, independent of the window size)
BASE_WIDTH = 360
BASE_HEIGHT = 640
PLAYER_WIDTH = 48
PLAYER_HEIGHT = 60
PLAYER_BOTTOM_GAP = 24
PLAYER_MARGIN = 12
MAX_PARTICLES = 40

# Player steering
# Damping is applied once per frame and is not scaled by delta.
PLAYER_DAMPING = 0.85
PLAYER_GAIN = 6.0

# Difficulty
SPAWN_INTERVAL_START = 1400.0  # ms
SPAWN_INTERVAL_FLOOR = 450.0  # ms
SPAWN_INTERVAL_DECAY = 0.97
BASE_SPEED_START = 120.0
BASE_SPEED_STEP = 6.0
DIFFICULTY_SPEED_SCALE = 0.35

# Obstacles
OBSTACLE_MIN_WIDTH = 60.0
OBSTACLE_WIDTH_RANGE = 60.0
OBSTACLE_MIN_HEIGHT = 12.0
OBSTACLE_HEIGHT_RANGE = 12.0
OBSTACLE_MIN_SPEED = 90.0
OBSTACLE_SPEED_JITTER = 30.0
OBSTACLE_EXIT_MARGIN = 40.0

# Particles
PARTICLE_DECAY = 0.8  # life per second
PARTICLE_EXIT_MARGIN = 20.0
IMPACT_PARTICLES = 12

# Flash overlay durations (ms)
FLASH_START_MS = 120.0
FLASH_END_MS = 160.0
FLASH_OPACITY = 0.1

# Persistence
BEST_SCORE_KEY = "neon-glide-best"
SAVE_PATH = os.environ.get(
    "NEON_GLIDE_SAVE",
    os.path.join(os.path.expanduser("~"), ".neon_glide.json"),
)

# Colors (RGBA, 0..1)
BACKGROUND_TOP = (12 / 255, 19 / 255, 38 / 255, 0.9)
BACKGROUND_BOTTOM = (23 / 255, 7 / 255, 45 / 255, 0.95)
CLEAR_COLOR = (2 / 255, 6 / 255, 23 / 255, 1.0)
LANE_COUNT = 8
LANE_ALPHA = 0.15
LANE_EVEN = (31 / 255, 41 / 255, 55 / 255, 1.0)
LANE_ODD = (17 / 255, 24 / 255, 39 / 255, 1.0)
OBSTACLE_LEFT = (2 / 255, 132 / 255, 199 / 255, 0.9)
OBSTACLE_RIGHT = (147 / 255, 51 / 255, 234 / 255, 0.9)
OBSTACLE_STRIP = (148 / 255, 163 / 255, 184 / 255, 0.25)
OBSTACLE_GLOW = (191 / 255, 219 / 255, 254 / 255, 1.0)
PLAYER_TOP = (96 / 255, 165 / 255, 250 / 255, 1.0)
PLAYER_BOTTOM = (192 / 255, 132 / 255, 252 / 255, 1.0)
PLAYER_BORDER = (1.0, 1.0, 1.0, 0.2)
PLAYER_MARK = (1.0, 1.0, 1.0, 0.8)
PLAYER_GLOW = (168 / 255, 85 / 255, 247 / 255, 1.0)
HUD_TEXT = (199, 210, 254, 255)
HUD_DIM = (199, 210, 254, 180)
OVERLAY_SHADE = (2 / 255, 6 / 255, 23 / 255, 0.7)
