"""Galaxy generation engine components."""

from .galaxy_assembler import generate_stars
from .galaxy_generator import generate_galaxy
from .layouts import CircularLocationStrategy, CustomLocationStrategy, default_registry
from .star_factory import StarFactory, is_dead_star
from .strategies import LocationRequest, LocationStrategy, StrategyRegistry
from .terrain import TerrainGenerator, feature_quota, generate_terrain

__all__ = [
    "generate_stars",
    "generate_galaxy",
    "CircularLocationStrategy",
    "CustomLocationStrategy",
    "default_registry",
    "StarFactory",
    "is_dead_star",
    "LocationRequest",
    "LocationStrategy",
    "StrategyRegistry",
    "TerrainGenerator",
    "feature_quota",
    "generate_terrain",
]
