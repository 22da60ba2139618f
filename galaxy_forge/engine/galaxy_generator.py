"""Complete galaxy generation from a seed."""

import logging
from typing import Optional

from ..models import Galaxy, GalaxyConfig
from ..utils import GameRNG
from .galaxy_assembler import generate_stars
from .strategies import StrategyRegistry
from .terrain import generate_terrain

logger = logging.getLogger(__name__)


def generate_galaxy(
    seed: int,
    config: GalaxyConfig,
    custom_layout: Optional[str] = None,
    custom_seed: Optional[str] = None,
    *,
    registry: Optional[StrategyRegistry] = None,
) -> Galaxy:
    """Generate a galaxy with home clusters and terrain.

    Algorithm:
    1. Seed one GameRNG used by every later step
    2. Assemble stars, home stars and linked stars
    3. Layer terrain over everything outside the starting clusters

    Args:
        seed: RNG seed for deterministic generation
        config: Galaxy configuration
        custom_layout: JSON layout payload for custom galaxies
        custom_seed: Seed string for irregular galaxies
        registry: Topology registry (defaults to the built-ins)

    Returns:
        Galaxy ready for player assignment

    Raises:
        GalaxyGenerationError: On any configuration or precondition failure;
            nothing partial is returned
    """
    rng = GameRNG(seed)

    result = generate_stars(
        rng,
        config,
        config.star_count,
        config.player_limit,
        custom_layout,
        custom_seed,
        registry=registry,
    )

    galaxy = Galaxy(
        seed=seed,
        config=config,
        stars=result.stars,
        home_stars=result.home_stars,
        linked_stars=result.linked_stars,
        rng=rng,
    )

    generate_terrain(
        rng,
        config,
        galaxy.stars,
        config.player_limit,
        excluded_star_ids=galaxy.all_linked_star_ids(),
    )

    logger.info(f"Generated galaxy with seed {seed}: {len(galaxy.stars)} stars")
    return galaxy
