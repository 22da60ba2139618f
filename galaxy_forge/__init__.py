"""Galaxy Forge - procedural galaxy composition and terrain layering."""

from .engine import generate_galaxy, generate_stars, generate_terrain
from .errors import ConfigurationError, GalaxyGenerationError, PreconditionError

__all__ = [
    "generate_galaxy",
    "generate_stars",
    "generate_terrain",
    "ConfigurationError",
    "GalaxyGenerationError",
    "PreconditionError",
]
