"""Terrain layering over an assembled star population.

Seven feature passes run in a fixed order:
1. Warp gates
2. Wormholes (paired, always mutual)
3. Nebulas
4. Asteroid fields
5. Binary stars
6. Black holes
7. Pulsars

Each pass is skipped when its percentage is 0. Otherwise it computes a quota
from the non-home star count, filters the eligible stars, shuffles them with
the shared RNG and marks the first quota of them. Every pass draws from the
same GameRNG, so one seed reproduces the whole terrain layer.

A pass only excludes stars already carrying its own feature, so one star can
end up with several features (e.g. nebula and asteroid field).
"""

import logging
import math
from typing import Callable, Iterable, List

from ..models import GalaxyConfig, Star, is_split_resources
from ..utils import (
    BLACK_HOLE_RESOURCE_FACTOR,
    FEATURE_DIVISOR,
    SPECIAL_RESOURCE_RANGE,
    WORMHOLE_DIVISOR,
    GameRNG,
    take_shuffled,
)
from .star_factory import is_dead_star as default_is_dead_star

logger = logging.getLogger(__name__)


def feature_quota(star_count: int, player_count: int, percentage: int, divisor: int = FEATURE_DIVISOR) -> int:
    """Number of stars (or wormhole pairs) a pass selects.

    Computes floor((star_count - player_count) / divisor * percentage) in
    integer arithmetic.

    Examples:
        >>> feature_quota(100, 4, 10)
        9
        >>> feature_quota(100, 4, 10, divisor=200)
        4
    """
    return max(star_count - player_count, 0) * percentage // divisor


class TerrainGenerator:
    """Applies the terrain feature passes to a star collection in place.

    Each pass is an independent method; generate() runs them in order.
    """

    def __init__(
        self,
        rng: GameRNG,
        config: GalaxyConfig,
        player_count: int,
        is_dead_star: Callable[[Star], bool] = default_is_dead_star,
        excluded_star_ids: Iterable[str] = (),
    ):
        """Initialize terrain generator.

        Args:
            rng: Shared generation RNG
            config: Galaxy configuration (percentages, split resources mode)
            player_count: Number of players; their home stars shrink the quota base
            is_dead_star: Predicate for stars that may not receive features
            excluded_star_ids: Stars that never receive features (linked home stars)
        """
        self.rng = rng
        self.config = config
        self.player_count = player_count
        self.is_dead_star = is_dead_star
        self.excluded_star_ids = set(excluded_star_ids)

    def generate(self, stars: List[Star]) -> None:
        """Run every enabled pass in order."""
        terrain = self.config.terrain
        passes = [
            ("warp_gates", self.generate_warp_gates),
            ("wormholes", self.generate_wormholes),
            ("nebulas", self.generate_nebulas),
            ("asteroid_fields", self.generate_asteroid_fields),
            ("binary_stars", self.generate_binary_stars),
            ("black_holes", self.generate_black_holes),
            ("pulsars", self.generate_pulsars),
        ]
        for feature, generate_pass in passes:
            if not terrain.is_enabled(feature):
                logger.debug(f"Terrain pass {feature} disabled, skipping")
                continue
            generate_pass(stars)

    # =========================================================================
    # SELECTION
    # =========================================================================

    def _select(
        self,
        stars: List[Star],
        feature: str,
        has_feature: Callable[[Star], bool],
        divisor: int = FEATURE_DIVISOR,
        stars_per_unit: int = 1,
    ) -> List[Star]:
        """Pick the winners of one pass.

        Args:
            stars: Whole star collection
            feature: TerrainSettings field holding the percentage
            has_feature: True for stars that already carry this pass's feature
            divisor: 100 for single-star features, 200 for wormholes
            stars_per_unit: Stars consumed per quota unit (2 for wormhole pairs)

        Returns:
            Up to quota * stars_per_unit stars, in shuffled order
        """
        percentage = getattr(self.config.terrain, feature)
        count = feature_quota(len(stars), self.player_count, percentage, divisor)

        eligible = [
            s
            for s in stars
            if not s.home_star
            and s.id not in self.excluded_star_ids
            and not has_feature(s)
            and not self.is_dead_star(s)
        ]
        winners = take_shuffled(self.rng, eligible, count * stars_per_unit)

        logger.debug(
            f"Terrain pass {feature}: quota {count} at {percentage}%, "
            f"{len(eligible)} eligible, {len(winners)} selected"
        )
        return winners

    def _special_resources(self) -> int:
        low, high = SPECIAL_RESOURCE_RANGE
        max_resources = self.config.max_natural_resources
        return self.rng.randint_between(max_resources * low, max_resources * high)

    # =========================================================================
    # FEATURE PASSES
    # =========================================================================

    def generate_warp_gates(self, stars: List[Star]) -> None:
        for star in self._select(stars, "warp_gates", lambda s: s.warp_gate):
            star.warp_gate = True

    def generate_wormholes(self, stars: List[Star]) -> None:
        """Pair up winners consecutively; both sides are written together."""
        winners = self._select(
            stars,
            "wormholes",
            lambda s: s.worm_hole_to_star_id is not None,
            divisor=WORMHOLE_DIVISOR,
            stars_per_unit=2,
        )
        for i in range(len(winners) // 2):
            star_a = winners[i * 2]
            star_b = winners[i * 2 + 1]
            star_a.worm_hole_to_star_id = star_b.id
            star_b.worm_hole_to_star_id = star_a.id

    def generate_nebulas(self, stars: List[Star]) -> None:
        """Nebulas are the science source in split resources mode."""
        split = is_split_resources(self.config)
        for star in self._select(stars, "nebulas", lambda s: s.is_nebula):
            star.is_nebula = True
            if split:
                star.natural_resources.science = self._special_resources()

    def generate_asteroid_fields(self, stars: List[Star]) -> None:
        """Asteroid fields are the economy source in split resources mode."""
        split = is_split_resources(self.config)
        for star in self._select(stars, "asteroid_fields", lambda s: s.is_asteroid_field):
            star.is_asteroid_field = True
            if split:
                star.natural_resources.economy = self._special_resources()

    def generate_binary_stars(self, stars: List[Star]) -> None:
        """Binary stars boost industry (split mode) or every channel equally."""
        split = is_split_resources(self.config)
        for star in self._select(stars, "binary_stars", lambda s: s.is_binary_star):
            star.is_binary_star = True
            resources = self._special_resources()
            if split:
                star.natural_resources.industry = resources
            else:
                star.natural_resources.economy = resources
                star.natural_resources.industry = resources
                star.natural_resources.science = resources

    def generate_black_holes(self, stars: List[Star]) -> None:
        for star in self._select(stars, "black_holes", lambda s: s.is_black_hole):
            star.is_black_hole = True
            resources = star.natural_resources
            resources.economy = _scale_down(resources.economy)
            resources.industry = _scale_down(resources.industry)
            resources.science = _scale_down(resources.science)

    def generate_pulsars(self, stars: List[Star]) -> None:
        for star in self._select(stars, "pulsars", lambda s: s.is_pulsar):
            star.is_pulsar = True


def _scale_down(value: int) -> int:
    # round off float noise so exact multiples do not ceil up
    return math.ceil(round(value * BLACK_HOLE_RESOURCE_FACTOR, 9))


def generate_terrain(
    rng: GameRNG,
    config: GalaxyConfig,
    stars: List[Star],
    player_count: int,
    *,
    is_dead_star: Callable[[Star], bool] = default_is_dead_star,
    excluded_star_ids: Iterable[str] = (),
) -> None:
    """Apply all enabled terrain passes to stars in place.

    Home stars are skipped through their home_star flag. Linked stars carry no
    flag of their own, so callers that want starting clusters kept free of
    terrain must pass their ids in excluded_star_ids (generate_galaxy does).

    Args:
        rng: Shared generation RNG
        config: Galaxy configuration
        stars: Assembled stars (mutated in place)
        player_count: Number of players
        is_dead_star: Predicate for stars that may not receive features
        excluded_star_ids: Star ids that never receive features
    """
    TerrainGenerator(
        rng,
        config,
        player_count,
        is_dead_star=is_dead_star,
        excluded_star_ids=excluded_star_ids,
    ).generate(stars)
