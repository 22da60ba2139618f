"""Pydantic schema for galaxy settings supplied as JSON."""

from pydantic import BaseModel, Field

from ..models.galaxy import GalaxyConfig, TerrainSettings
from ..utils import (
    DEFAULT_GALAXY_TYPE,
    DEFAULT_LINKED_STARS_PER_PLAYER,
    DEFAULT_PLAYER_LIMIT,
    DEFAULT_RESOURCE_DISTRIBUTION,
    DEFAULT_STARS_PER_PLAYER,
    MAX_NATURAL_RESOURCES,
    MIN_NATURAL_RESOURCES,
)


class GalaxySettings(BaseModel):
    """Galaxy settings as they arrive from a game-creation payload."""

    galaxyType: str = Field(default=DEFAULT_GALAXY_TYPE)  # noqa: N815
    resourceDistribution: str = Field(  # noqa: N815
        default=DEFAULT_RESOURCE_DISTRIBUTION, description="'random' or 'weightedCenter'"
    )
    playerLimit: int = Field(default=DEFAULT_PLAYER_LIMIT, ge=1)  # noqa: N815
    starsPerPlayer: int = Field(default=DEFAULT_STARS_PER_PLAYER, ge=1)  # noqa: N815
    linkedStarsPerPlayer: int = Field(default=DEFAULT_LINKED_STARS_PER_PLAYER, ge=0)  # noqa: N815
    splitResources: bool = Field(default=False)  # noqa: N815
    minNaturalResources: int = Field(default=MIN_NATURAL_RESOURCES, ge=0)  # noqa: N815
    maxNaturalResources: int = Field(default=MAX_NATURAL_RESOURCES, ge=0)  # noqa: N815
    randomWarpGates: int = Field(default=0, ge=0, le=100)  # noqa: N815
    randomWormHoles: int = Field(default=0, ge=0, le=100)  # noqa: N815
    randomNebulas: int = Field(default=0, ge=0, le=100)  # noqa: N815
    randomAsteroidFields: int = Field(default=0, ge=0, le=100)  # noqa: N815
    randomBinaryStars: int = Field(default=0, ge=0, le=100)  # noqa: N815
    randomBlackHoles: int = Field(default=0, ge=0, le=100)  # noqa: N815
    randomPulsars: int = Field(default=0, ge=0, le=100)  # noqa: N815

    def to_config(self) -> GalaxyConfig:
        """Convert to the in-process configuration object.

        Raises:
            ValueError: If the combined settings are inconsistent
        """
        return GalaxyConfig(
            galaxy_type=self.galaxyType,
            resource_distribution=self.resourceDistribution,
            player_limit=self.playerLimit,
            stars_per_player=self.starsPerPlayer,
            linked_stars_per_player=self.linkedStarsPerPlayer,
            split_resources=self.splitResources,
            min_natural_resources=self.minNaturalResources,
            max_natural_resources=self.maxNaturalResources,
            terrain=TerrainSettings(
                warp_gates=self.randomWarpGates,
                wormholes=self.randomWormHoles,
                nebulas=self.randomNebulas,
                asteroid_fields=self.randomAsteroidFields,
                binary_stars=self.randomBinaryStars,
                black_holes=self.randomBlackHoles,
                pulsars=self.randomPulsars,
            ),
        )
