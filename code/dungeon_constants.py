"""Shared constants for the maze dungeon generator."""

from __future__ import annotations

RANDOM_SEED = None  # Set to a number for reproducible behavior (for debugging); set to None to produce different dungeon on every run.

# Fixed safety ceiling on maze walk iterations (each iteration is one carve or one backtrack).
# Large grids may stop short of full coverage; the cells left over stay unvisited and get no room.
MAX_WALK_ITERATIONS = 1000

# The camera view is sized to this fraction of the larger dungeon extent.
CAMERA_FRAME_SCALE = 0.7

DEFAULT_CELL_SPACING = (1.0, 1.0)

# Upper bound (inclusive) when drawing a fresh seed for an unseeded run.
MAX_GENERATED_SEED = 1_000_000
