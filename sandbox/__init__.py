# ── Central defaults (tune here, not scattered across files) ──

# Window (startup parameters, read once)
WINDOW_WIDTH = 1400
WINDOW_HEIGHT = 800

# World
GRAVITY = 0.0
PARTICLE_RADIUS = 30.0
HALF_EXTENTS = (700.0, 400.0)
GRAVITY_RANGE = (0.0, 1000.0)
RADIUS_RANGE = (0.0, 100.0)
WALL_THICKNESS = 5.0
SPEED_RANGE = (50.0, 250.0)

# Scheduling
FIXED_DT = 1.0 / 64.0
MAX_TICKS_PER_FRAME = 8

# Rendering
FPS = 60
BG_COLOR = (0, 0, 0)
PARTICLE_COLOR = (0, 0, 255)
WALL_COLOR = (200, 200, 200)

# Simulation
N_PARTICLES = 1
N_STEPS = 1000
SEED = 42
