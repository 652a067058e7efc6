"""
Configuration constants.

Centralizes the magic numbers used by the dungeon generator.
Organized by functional area for easy maintenance.
"""

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED = "burrito1"

# =============================================================================
# DUNGEON GENERATION
# =============================================================================

# RNG domain used by DungeonSculptor when no generator is injected.
DUNGEON_RNG_DOMAIN = "worldgen.dungeon"

# Candidate rooms drawn per room before placement is declared unsatisfiable.
DUNGEON_MAX_PLACEMENT_TRIALS = 0xFFFF

# Upper bound (inclusive) on extra corridors added on top of the spanning tree.
DUNGEON_MAX_EXTRA_CORRIDORS = 4
