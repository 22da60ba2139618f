"""Utility functions and constants for Galaxy Forge."""

from .constants import (
    BLACK_HOLE_RESOURCE_FACTOR,
    DEFAULT_GALAXY_TYPE,
    DEFAULT_LINKED_STARS_PER_PLAYER,
    DEFAULT_PLAYER_LIMIT,
    DEFAULT_RESOURCE_DISTRIBUTION,
    DEFAULT_STARS_PER_PLAYER,
    FEATURE_DIVISOR,
    GALAXY_TYPES,
    MAX_NATURAL_RESOURCES,
    MIN_NATURAL_RESOURCES,
    RESOURCE_DISTRIBUTIONS,
    RNG_SEED_DEFAULT,
    SPECIAL_RESOURCE_RANGE,
    WORMHOLE_DIVISOR,
)
from .geometry import get_galaxy_center, get_galaxy_center_of_mass
from .naming import get_random_star_names
from .rng import GameRNG, take_shuffled

__all__ = [
    "BLACK_HOLE_RESOURCE_FACTOR",
    "DEFAULT_GALAXY_TYPE",
    "DEFAULT_LINKED_STARS_PER_PLAYER",
    "DEFAULT_PLAYER_LIMIT",
    "DEFAULT_RESOURCE_DISTRIBUTION",
    "DEFAULT_STARS_PER_PLAYER",
    "FEATURE_DIVISOR",
    "GALAXY_TYPES",
    "MAX_NATURAL_RESOURCES",
    "MIN_NATURAL_RESOURCES",
    "RESOURCE_DISTRIBUTIONS",
    "RNG_SEED_DEFAULT",
    "SPECIAL_RESOURCE_RANGE",
    "WORMHOLE_DIVISOR",
    "get_galaxy_center",
    "get_galaxy_center_of_mass",
    "get_random_star_names",
    "GameRNG",
    "take_shuffled",
]
