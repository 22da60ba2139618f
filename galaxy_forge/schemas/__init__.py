"""Pydantic schemas for JSON payloads accepted by Galaxy Forge."""

from .layout import CustomGalaxyLayout, CustomStarSchema
from .settings import GalaxySettings

__all__ = [
    "CustomGalaxyLayout",
    "CustomStarSchema",
    "GalaxySettings",
]
