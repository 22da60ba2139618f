"""Galaxy assembly: locations to named stars grouped into home clusters."""

import logging
from typing import Callable, List, Optional

from ..errors import PreconditionError
from ..models import AssemblyResult, GalaxyConfig, Location, Star
from ..utils import GameRNG, get_random_star_names
from .layouts import default_registry
from .star_factory import StarFactory
from .strategies import LocationRequest, StrategyRegistry

logger = logging.getLogger(__name__)


def generate_stars(
    rng: GameRNG,
    config: GalaxyConfig,
    star_count: int,
    player_limit: int,
    custom_layout: Optional[str] = None,
    custom_seed: Optional[str] = None,
    *,
    registry: Optional[StrategyRegistry] = None,
    star_factory: Optional[StarFactory] = None,
    name_source: Optional[Callable[[int], List[str]]] = None,
) -> AssemblyResult:
    """Generate every star of a galaxy and group the home clusters.

    Algorithm:
    1. Look up the location strategy for config.galaxy_type
    2. Generate locations; linked satellites are only reachable through
       their home location
    3. Reserve one unique name per star, in creation order
    4. Create each primary star; for home stars, create their linked stars
       right after and record the cluster

    Args:
        rng: Shared generation RNG
        config: Galaxy configuration
        star_count: Number of stars requested from the strategy
        player_limit: Number of player slots (home clusters)
        custom_layout: JSON layout payload for custom galaxies
        custom_seed: Seed string for irregular galaxies
        registry: Topology registry (defaults to the built-ins)
        star_factory: Star factory (defaults to a fresh one)
        name_source: Returns the requested number of unique names
            (defaults to the star catalogue shuffled with rng)

    Returns:
        Stars plus index-aligned home_stars / linked_stars id lists

    Raises:
        ConfigurationError: If the topology is unknown or disabled, or the
            strategy rejects the configuration
        PreconditionError: If the name pool cannot name every star
    """
    registry = registry or default_registry()
    star_factory = star_factory or StarFactory()
    if name_source is None:
        name_source = lambda count: get_random_star_names(rng, count)  # noqa: E731

    strategy = registry.get(config.galaxy_type)

    locations = strategy.generate_locations(
        LocationRequest(
            rng=rng,
            config=config,
            star_count=star_count,
            resource_distribution=config.resource_distribution,
            player_limit=player_limit,
            custom_layout=custom_layout,
            custom_seed=custom_seed,
        )
    )

    primaries = [location for location in locations if not location.linked]
    required = len(primaries) + sum(
        len(location.linked_locations) for location in primaries if location.home_star
    )

    names = name_source(required)
    if len(set(names[:required])) < required:
        raise PreconditionError(
            f"Star name pool has {len(set(names))} unique names but {required} stars need naming"
        )
    name_iter = iter(names)

    is_custom_galaxy = config.galaxy_type == "custom"

    def create_star(location: Location) -> Star:
        location.name = next(name_iter)
        if is_custom_galaxy:
            return star_factory.generate_custom_galaxy_star(location.name, location)
        return star_factory.generate_unowned_star(location.name, location, location.resources)

    result = AssemblyResult()
    for location in primaries:
        star = create_star(location)
        result.stars.append(star)

        if location.home_star:
            cluster = []
            for linked_location in location.linked_locations:
                linked_star = create_star(linked_location)
                result.stars.append(linked_star)
                cluster.append(linked_star.id)

            result.home_stars.append(star.id)
            result.linked_stars.append(cluster)

    logger.info(
        f"Assembled {config.galaxy_type} galaxy: {len(result.stars)} stars, "
        f"{len(result.home_stars)} home clusters"
    )

    return result
