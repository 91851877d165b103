"""
Configuration constants.

Centralizes all magic numbers and configuration values used by the layout
generator. Organized by functional area for easy maintenance. Per-build
overrides go through ``PartitionSettings`` rather than by mutating this module.
"""

from delve.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# None means "seed from system entropy" - every build differs.
RANDOM_SEED: RandomSeed = None

# =============================================================================
# TILE GRID
# =============================================================================

# Size of one tile cell in layout units. Room coordinates and dimensions are
# quantized to multiples of this value.
TILE_UNIT = 64

# =============================================================================
# BSP LAYOUT GENERATION
# =============================================================================

# Depths below this always split (when the region is large enough), so every
# layout gets at least two levels of partitioning.
BSP_FORCED_SPLIT_DEPTH = 2

# Regions whose width/height falls outside these bounds are never split
# further at random depths. Keeps slivers out of the layout.
BSP_MIN_ASPECT_RATIO = 0.2
BSP_MAX_ASPECT_RATIO = 3.0

# Area bounds for the size factor of the split chance. At or below the minimum
# and at or above the maximum the size factor is 1.0; in between it falls off
# linearly towards the maximum.
BSP_MIN_SPLIT_AREA = 50.0
BSP_MAX_SPLIT_AREA = 10000.0

# Split chance decays as base ** depth, never below the floor.
BSP_DEPTH_DECAY_BASE = 0.8
BSP_DEPTH_DECAY_FLOOR = 0.1

# Small-room merge pass
BSP_MERGE_PROBABILITY = 0.5
BSP_MERGE_DEPTH_THRESHOLD = 2  # Only siblings deeper than this are merged

# Hard recursion cap. Only reachable with pathological parameters.
BSP_MAX_SPLIT_DEPTH = 32

# =============================================================================
# COMMAND LINE DEFAULTS
# =============================================================================

DEFAULT_LAYOUT_WIDTH = 1024.0
DEFAULT_LAYOUT_HEIGHT = 1024.0
DEFAULT_MIN_ROOM_WIDTH = 128.0
DEFAULT_MIN_ROOM_HEIGHT = 128.0
