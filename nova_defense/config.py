"""
Configuration constants for Nova Defense.

All values are tuned against a fixed 60 Hz tick: speeds are expressed
as progress per tick, growth rates as radius units per tick.
"""

# ---------------------------------------------------------------------------
# Display / play area
# ---------------------------------------------------------------------------
SCREEN_WIDTH: int = 960
SCREEN_HEIGHT: int = 720
UPDATE_RATE: int = 60  # Hz – all timing assumes 60 fps

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
WIN_SCORE: int = 1000
POINTS_PER_KILL: int = 20

# ---------------------------------------------------------------------------
# Projectiles (speeds are progress units per tick, progress runs 0 → 1)
# ---------------------------------------------------------------------------
ROCKET_SPEED_MIN: float = 0.00025
ROCKET_SPEED_MAX: float = 0.00075
MISSILE_SPEED: float = 0.02

# ---------------------------------------------------------------------------
# Explosions
# ---------------------------------------------------------------------------
EXPLOSION_INITIAL_RADIUS: float = 2.0
EXPLOSION_MAX_RADIUS: float = 350.0      # player missile blast
EXPLOSION_GROWTH_RATE: float = 5.0
EXPLOSION_CONTRACT_FACTOR: float = 0.5   # shrink at half the growth rate

CHAIN_EXPLOSION_FACTOR: float = 0.8      # chain blast = 80% of a full blast

IMPACT_EXPLOSION_MAX_RADIUS: float = 20.0  # rocket hitting the ground
IMPACT_EXPLOSION_GROWTH_RATE: float = 1.5

# ---------------------------------------------------------------------------
# Batteries
# ---------------------------------------------------------------------------
NUM_BATTERIES: int = 3
BATTERY_AMMO: tuple[int, ...] = (20, 40, 20)

# Horizontal placement as a fraction of the play width (left, center, right)
BATTERY_X_FRACTIONS: tuple[float, ...] = (0.1, 0.5, 0.9)
BATTERY_GROUND_OFFSET: int = 40  # pixels above the bottom edge

# ---------------------------------------------------------------------------
# Cities
# ---------------------------------------------------------------------------
NUM_CITIES: int = 6
CITY_X_FRACTIONS: tuple[float, ...] = (0.25, 0.35, 0.45, 0.55, 0.65, 0.75)
CITY_GROUND_OFFSET: int = 30

# Horizontal slack used to match a rocket's aim point to a structure
IMPACT_TOLERANCE: float = 5.0

# ---------------------------------------------------------------------------
# Spawning
# ---------------------------------------------------------------------------
# Per-tick probability = SPAWN_BASE_PROBABILITY + score / SPAWN_SCORE_DIVISOR
SPAWN_BASE_PROBABILITY: float = 0.0075
SPAWN_SCORE_DIVISOR: float = 10_000.0
