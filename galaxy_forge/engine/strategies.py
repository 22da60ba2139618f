"""Location strategy interface and the topology registry.

Each galaxy topology ("circular", "spiral", ...) is a LocationStrategy
registered under its tag. The assembler looks strategies up by tag, so a new
topology is added by registering it rather than by editing the assembler.
"""

import abc
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..errors import ConfigurationError
from ..models import GalaxyConfig, Location
from ..utils import GameRNG

logger = logging.getLogger(__name__)


@dataclass
class LocationRequest:
    """Everything any topology may need to produce star locations.

    Strategies read only the fields they use: most need config, star_count
    and resource_distribution; irregular layouts also use rng, player_limit
    and custom_seed; custom layouts use custom_layout and player_limit.
    """

    rng: GameRNG
    config: GalaxyConfig
    star_count: int
    resource_distribution: str
    player_limit: int
    custom_layout: Optional[str] = None  # JSON layout payload
    custom_seed: Optional[str] = None


class LocationStrategy(abc.ABC):
    """Produces raw star locations for one galaxy topology."""

    @abc.abstractmethod
    def generate_locations(self, request: LocationRequest) -> List[Location]:
        """Generate star locations.

        Home locations must carry their satellites in linked_locations, and
        those satellites must also appear in the returned list with
        linked=True.
        """
        ...


class StrategyRegistry:
    """Maps topology tags to location strategies."""

    def __init__(self, strategies: Optional[Dict[str, LocationStrategy]] = None):
        self._strategies: Dict[str, LocationStrategy] = dict(strategies or {})

    def register(self, tag: str, strategy: LocationStrategy) -> None:
        """Register (or replace) the strategy for a topology tag."""
        if tag in self._strategies:
            logger.debug(f"Replacing location strategy for galaxy type {tag}")
        self._strategies[tag] = strategy

    def unregister(self, tag: str) -> None:
        """Disable a topology. Unknown tags are ignored."""
        self._strategies.pop(tag, None)

    def get(self, tag: str) -> LocationStrategy:
        """Look up the strategy for a topology tag.

        Raises:
            ConfigurationError: If no strategy is registered for the tag
        """
        strategy = self._strategies.get(tag)
        if strategy is None:
            raise ConfigurationError(f"Galaxy type {tag} is not supported or has been disabled.")
        return strategy

    def tags(self) -> List[str]:
        return sorted(self._strategies)

    def __contains__(self, tag: str) -> bool:
        return tag in self._strategies
