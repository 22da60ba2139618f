"""Star system data model."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class NaturalResources:
    """Baseline productivity of a star on each resource channel."""

    economy: int
    industry: int
    science: int

    def __post_init__(self):
        """Validate resource values after initialization."""
        for channel in ("economy", "industry", "science"):
            value = getattr(self, channel)
            if value < 0:
                raise ValueError(f"Invalid {channel}: {value} (must be >= 0)")

    def copy(self) -> "NaturalResources":
        """Return an independent copy of these resources."""
        return NaturalResources(economy=self.economy, industry=self.industry, science=self.science)


@dataclass
class Star:
    """Represents a star system in a generated galaxy.

    Stars are created unowned (or author-owned in custom galaxies) by the
    star factory. The terrain layer then sets the feature flags below and
    may overwrite natural resources. Feature flags are independent, so one
    star can be both a nebula and an asteroid field.
    """

    id: str  # Unique identifier (e.g., "star-001")
    name: str  # Unique human-readable name
    x: float
    y: float
    natural_resources: NaturalResources
    owned_by_player_id: Optional[str] = None  # Only set by custom galaxies
    home_star: bool = False
    warp_gate: bool = False
    worm_hole_to_star_id: Optional[str] = None  # Paired wormhole star, always mutual
    is_nebula: bool = False
    is_asteroid_field: bool = False
    is_binary_star: bool = False
    is_black_hole: bool = False
    is_pulsar: bool = False

    def __post_init__(self):
        """Validate star data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.name:
            raise ValueError("name cannot be empty")
        if self.worm_hole_to_star_id == self.id:
            raise ValueError(f"Star {self.id} cannot be a wormhole to itself")

    def terrain_features(self) -> List[str]:
        """List the terrain features this star carries.

        Returns:
            Feature names in terrain pass order
        """
        flags = [
            ("warp_gate", self.warp_gate),
            ("wormhole", self.worm_hole_to_star_id is not None),
            ("nebula", self.is_nebula),
            ("asteroid_field", self.is_asteroid_field),
            ("binary_star", self.is_binary_star),
            ("black_hole", self.is_black_hole),
            ("pulsar", self.is_pulsar),
        ]
        return [name for name, present in flags if present]


@dataclass
class Location:
    """A raw star position produced by a location strategy.

    Home locations carry their satellite locations in linked_locations; those
    satellites are also present in the strategy's flat output with
    linked=True and must only be materialized through their home location.
    """

    x: float
    y: float
    home_star: bool = False
    linked: bool = False
    linked_locations: List["Location"] = field(default_factory=list)
    resources: Optional[NaturalResources] = None
    owned_by_player_id: Optional[str] = None  # Custom galaxies only
    name: Optional[str] = None  # Reserved name, set during assembly

    def __post_init__(self):
        """Validate location data after initialization."""
        if self.linked_locations and not self.home_star:
            raise ValueError("Only home locations can have linked locations")
        if self.home_star and self.linked:
            raise ValueError("A home location cannot itself be linked")
