"""Galaxy configuration and generation results."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..utils import (
    DEFAULT_GALAXY_TYPE,
    DEFAULT_LINKED_STARS_PER_PLAYER,
    DEFAULT_PLAYER_LIMIT,
    DEFAULT_RESOURCE_DISTRIBUTION,
    DEFAULT_STARS_PER_PLAYER,
    GALAXY_TYPES,
    MAX_NATURAL_RESOURCES,
    MIN_NATURAL_RESOURCES,
    RESOURCE_DISTRIBUTIONS,
    GameRNG,
    get_galaxy_center,
    get_galaxy_center_of_mass,
)
from .star import Star

TERRAIN_FEATURES = (
    "warp_gates",
    "wormholes",
    "nebulas",
    "asteroid_fields",
    "binary_stars",
    "black_holes",
    "pulsars",
)


@dataclass
class TerrainSettings:
    """Percentage of eligible stars that receive each terrain feature.

    A percentage of 0 disables the feature's pass entirely.
    """

    warp_gates: int = 0
    wormholes: int = 0
    nebulas: int = 0
    asteroid_fields: int = 0
    binary_stars: int = 0
    black_holes: int = 0
    pulsars: int = 0

    def __post_init__(self):
        """Validate percentages after initialization."""
        for feature in TERRAIN_FEATURES:
            percentage = getattr(self, feature)
            if not (0 <= percentage <= 100):
                raise ValueError(f"Invalid {feature} percentage: {percentage} (must be 0-100)")

    def is_enabled(self, feature: str) -> bool:
        return getattr(self, feature) > 0


@dataclass
class GalaxyConfig:
    """Everything galaxy generation needs to know about a game."""

    galaxy_type: str = DEFAULT_GALAXY_TYPE
    resource_distribution: str = DEFAULT_RESOURCE_DISTRIBUTION
    player_limit: int = DEFAULT_PLAYER_LIMIT
    stars_per_player: int = DEFAULT_STARS_PER_PLAYER
    linked_stars_per_player: int = DEFAULT_LINKED_STARS_PER_PLAYER
    split_resources: bool = False  # Each resource channel sourced from a distinct star type
    min_natural_resources: int = MIN_NATURAL_RESOURCES
    max_natural_resources: int = MAX_NATURAL_RESOURCES
    terrain: TerrainSettings = field(default_factory=TerrainSettings)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.galaxy_type not in GALAXY_TYPES:
            raise ValueError(f"Invalid galaxy_type: {self.galaxy_type} (must be one of {GALAXY_TYPES})")
        if self.resource_distribution not in RESOURCE_DISTRIBUTIONS:
            raise ValueError(
                f"Invalid resource_distribution: {self.resource_distribution} "
                f"(must be one of {RESOURCE_DISTRIBUTIONS})"
            )
        if self.player_limit < 1:
            raise ValueError(f"Invalid player_limit: {self.player_limit} (must be >= 1)")
        if self.stars_per_player < 1:
            raise ValueError(f"Invalid stars_per_player: {self.stars_per_player} (must be >= 1)")
        if not (0 <= self.linked_stars_per_player < self.stars_per_player):
            raise ValueError(
                f"Invalid linked_stars_per_player: {self.linked_stars_per_player} "
                f"(must be 0-{self.stars_per_player - 1})"
            )
        if not (0 <= self.min_natural_resources <= self.max_natural_resources):
            raise ValueError(
                f"Invalid natural resource range: {self.min_natural_resources}-{self.max_natural_resources}"
            )

    @property
    def star_count(self) -> int:
        """Total number of stars the galaxy should contain."""
        return self.stars_per_player * self.player_limit


def is_split_resources(config: GalaxyConfig) -> bool:
    """Check whether the game sources each resource from a distinct star type."""
    return config.split_resources


@dataclass
class AssemblyResult:
    """Stars produced by assembly, with home clusters grouped.

    linked_stars is index-aligned with home_stars: linked_stars[i] holds the
    satellite ids of home_stars[i].
    """

    stars: List[Star] = field(default_factory=list)
    home_stars: List[str] = field(default_factory=list)
    linked_stars: List[List[str]] = field(default_factory=list)

    def __post_init__(self):
        """Validate grouping after initialization."""
        if len(self.home_stars) != len(self.linked_stars):
            raise ValueError(
                f"home_stars ({len(self.home_stars)}) and linked_stars "
                f"({len(self.linked_stars)}) must be the same length"
            )


@dataclass
class Galaxy:
    """A fully generated galaxy ready for player assignment and persistence."""

    seed: int
    config: GalaxyConfig
    stars: List[Star] = field(default_factory=list)
    home_stars: List[str] = field(default_factory=list)
    linked_stars: List[List[str]] = field(default_factory=list)
    rng: GameRNG | None = None  # Positioned after the last generation draw

    def __post_init__(self):
        """Initialize RNG if not provided."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)

    def get_star(self, star_id: str) -> Optional[Star]:
        """Look up a star by id, or None if it is not in this galaxy."""
        return next((s for s in self.stars if s.id == star_id), None)

    def all_linked_star_ids(self) -> List[str]:
        """Flatten every home cluster's satellite ids."""
        return [star_id for cluster in self.linked_stars for star_id in cluster]

    def center(self) -> tuple[float, float]:
        """Midpoint of the galaxy's bounding box."""
        return get_galaxy_center(self.stars)

    def center_of_mass(self) -> tuple[float, float]:
        """Mean position of all stars."""
        return get_galaxy_center_of_mass(self.stars)
