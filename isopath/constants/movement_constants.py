"""
Centralized movement and adjacency constants for isopath.
All tolerance values used by the classifiers are defined here to avoid duplication.
"""

# === WORLD GRID ===
BLOCK_SIZE = 1.0  # Every block is a unit cube
QUARTER_TURN_DEGREES = 90.0  # One rotator increment
VIEW_COUNT = 4  # Discrete camera orientations

# === PHYSICAL ADJACENCY ===
# Horizontal (XZ-plane) distance band around one block
MIN_ADJACENT_DISTANCE = 0.85
MAX_ADJACENT_DISTANCE = 1.15

# Vertical step limits (rise = destination.y - source.y)
FLAT_TOLERANCE = 0.1  # |rise| at or below this is level walking
MAX_CLIMB_HEIGHT = 1.1  # Highest step that can be climbed (stair/ramp only)
MAX_DROP_HEIGHT = 2.1  # Deepest drop the character will jump down

# === OPTICAL BRIDGE ===
OPTICAL_SCREEN_THRESHOLD = 0.3  # Projected 2D distance must be strictly below this
OPTICAL_MAX_HEIGHT_DIFF = 1.0  # World Y difference allowed across a bridge
OPTICAL_MIN_DEPTH_GAP = 2.0  # Hidden-axis separation must exceed this

# === COLLISION ===
COLLISION_RADIUS = 0.4  # Solid block this close to a step midpoint blocks it

# === SEARCH ===
DEFAULT_MAX_REACHABLE_DEPTH = 100  # Flood fill depth cap

# === LEVEL CONSTRUCTION ===
DEDUP_TOLERANCE = 0.1  # Nodes closer than this on every axis are the same block
PILLAR_FLOOR_Y = -2  # Pillars are dropped down to this level
