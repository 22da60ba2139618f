"""Data models for Galaxy Forge."""

from .galaxy import (
    TERRAIN_FEATURES,
    AssemblyResult,
    Galaxy,
    GalaxyConfig,
    TerrainSettings,
    is_split_resources,
)
from .star import Location, NaturalResources, Star

__all__ = [
    "TERRAIN_FEATURES",
    "AssemblyResult",
    "Galaxy",
    "GalaxyConfig",
    "TerrainSettings",
    "is_split_resources",
    "Location",
    "NaturalResources",
    "Star",
]
