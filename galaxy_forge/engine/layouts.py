"""Built-in location strategies: circular and custom galaxies."""

import math
from typing import Dict, List

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models import GalaxyConfig, Location, NaturalResources
from ..schemas import CustomGalaxyLayout
from ..utils import GameRNG
from ..utils.constants import HOME_CLUSTER_RADIUS, STAR_SPACING
from .strategies import LocationRequest, LocationStrategy, StrategyRegistry


class CircularLocationStrategy(LocationStrategy):
    """Stars spread over a disc with home clusters evenly spaced on a ring.

    Algorithm:
    1. Size the disc so stars sit roughly STAR_SPACING apart
    2. Place one home anchor per player on a ring at 3/4 of the radius,
       evenly spaced, with a random rotation
    3. Place linked_stars_per_player satellites around each anchor
    4. Scatter the remaining stars uniformly over the disc
    """

    def generate_locations(self, request: LocationRequest) -> List[Location]:
        rng = request.rng
        config = request.config
        star_count = request.star_count
        player_limit = request.player_limit

        if player_limit < 1:
            raise ConfigurationError(f"Invalid player limit: {player_limit} (must be >= 1)")
        if star_count < player_limit:
            raise ConfigurationError(
                f"Cannot place {player_limit} home stars in a galaxy of {star_count} stars"
            )

        linked_per_home = min(config.linked_stars_per_player, star_count // player_limit - 1)
        radius = STAR_SPACING * math.sqrt(star_count / math.pi)

        locations: List[Location] = []

        rotation = rng.uniform(0, 2 * math.pi)
        for i in range(player_limit):
            angle = rotation + 2 * math.pi * i / player_limit
            home = Location(
                x=radius * 0.75 * math.cos(angle),
                y=radius * 0.75 * math.sin(angle),
                home_star=True,
                resources=NaturalResources(
                    economy=config.max_natural_resources,
                    industry=config.max_natural_resources,
                    science=config.max_natural_resources,
                ),
            )
            locations.append(home)

            for _ in range(linked_per_home):
                offset_angle = rng.uniform(0, 2 * math.pi)
                offset = rng.uniform(HOME_CLUSTER_RADIUS / 2, HOME_CLUSTER_RADIUS)
                x = home.x + offset * math.cos(offset_angle)
                y = home.y + offset * math.sin(offset_angle)
                linked = Location(
                    x=x,
                    y=y,
                    linked=True,
                    resources=_generate_resources(
                        rng, config, request.resource_distribution, math.hypot(x, y) / radius
                    ),
                )
                home.linked_locations.append(linked)
                locations.append(linked)

        while len(locations) < star_count:
            distance = radius * math.sqrt(rng.random())
            angle = rng.uniform(0, 2 * math.pi)
            locations.append(
                Location(
                    x=distance * math.cos(angle),
                    y=distance * math.sin(angle),
                    resources=_generate_resources(
                        rng, config, request.resource_distribution, distance / radius
                    ),
                )
            )

        return locations


class CustomLocationStrategy(LocationStrategy):
    """Locations taken verbatim from a hand-authored JSON layout."""

    def generate_locations(self, request: LocationRequest) -> List[Location]:
        if not request.custom_layout:
            raise ConfigurationError("Custom galaxies require a layout payload")

        try:
            layout = CustomGalaxyLayout.model_validate_json(request.custom_layout)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid custom galaxy layout: {e}") from e

        locations_by_id: Dict[str, Location] = {}
        for star in layout.stars:
            if star.id in locations_by_id:
                raise ConfigurationError(f"Duplicate star id in custom galaxy layout: {star.id}")
            locations_by_id[star.id] = Location(
                x=star.x,
                y=star.y,
                home_star=star.homeStar,
                resources=NaturalResources(
                    economy=star.economy, industry=star.industry, science=star.science
                ),
                owned_by_player_id=star.playerId,
            )

        for star in layout.stars:
            if star.linkedStars and not star.homeStar:
                raise ConfigurationError(f"Star {star.id} links other stars but is not a home star")
            home = locations_by_id[star.id]
            for linked_id in star.linkedStars:
                linked = locations_by_id.get(linked_id)
                if linked is None:
                    raise ConfigurationError(f"Star {star.id} links unknown star {linked_id}")
                if linked.home_star or linked.linked:
                    raise ConfigurationError(
                        f"Star {linked_id} cannot be linked to {star.id}: it is a home star or already linked"
                    )
                linked.linked = True
                home.linked_locations.append(linked)

        home_count = sum(1 for star in layout.stars if star.homeStar)
        if home_count != request.player_limit:
            raise ConfigurationError(
                f"Custom galaxy has {home_count} home stars but the game is for {request.player_limit} players"
            )

        return list(locations_by_id.values())


def _generate_resources(
    rng: GameRNG, config: GalaxyConfig, distribution: str, distance_ratio: float
) -> NaturalResources:
    """Draw natural resources for a non-home star.

    Args:
        rng: Generation RNG
        config: Galaxy configuration (resource bounds)
        distribution: "random" or "weightedCenter"
        distance_ratio: Distance from the galactic centre as a fraction of the radius

    Returns:
        Resources for all three channels
    """
    low = config.min_natural_resources
    high = config.max_natural_resources

    if distribution == "weightedCenter":
        # Raise the floor towards the maximum for central stars
        weight = max(0.0, 1.0 - distance_ratio)
        low = low + (high - low) * weight * 0.5

    return NaturalResources(
        economy=rng.randint_between(low, high),
        industry=rng.randint_between(low, high),
        science=rng.randint_between(low, high),
    )


def default_registry() -> StrategyRegistry:
    """Build a registry holding the built-in topologies.

    Returns:
        A new registry; callers may register or unregister freely
    """
    return StrategyRegistry(
        {
            "circular": CircularLocationStrategy(),
            "custom": CustomLocationStrategy(),
        }
    )
