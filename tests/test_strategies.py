"""Tests for the topology registry and built-in location strategies."""

import json

import pytest

from galaxy_forge.engine import (
    CircularLocationStrategy,
    CustomLocationStrategy,
    LocationRequest,
    StrategyRegistry,
    default_registry,
)
from galaxy_forge.errors import ConfigurationError
from galaxy_forge.models import GalaxyConfig
from galaxy_forge.utils import GameRNG


def _request(config, star_count=None, custom_layout=None, seed=42):
    return LocationRequest(
        rng=GameRNG(seed),
        config=config,
        star_count=config.star_count if star_count is None else star_count,
        resource_distribution=config.resource_distribution,
        player_limit=config.player_limit,
        custom_layout=custom_layout,
    )


class TestStrategyRegistry:
    """Test topology lookup."""

    def test_default_registry_tags(self):
        """Test that the built-in topologies are registered."""
        assert default_registry().tags() == ["circular", "custom"]

    def test_unknown_tag_raises(self):
        """Test that unregistered topologies fail with a configuration error."""
        with pytest.raises(ConfigurationError, match="spiral is not supported"):
            default_registry().get("spiral")

    def test_unregister_disables_topology(self):
        """Test that a disabled topology can no longer be looked up."""
        registry = default_registry()
        registry.unregister("circular")
        assert "circular" not in registry
        with pytest.raises(ConfigurationError):
            registry.get("circular")

    def test_register_new_topology(self):
        """Test adding a topology by registration."""
        registry = StrategyRegistry()
        strategy = CircularLocationStrategy()
        registry.register("spiral", strategy)
        assert registry.get("spiral") is strategy


class TestCircularLocationStrategy:
    """Test the built-in circular layout."""

    def test_location_counts(self):
        """Test that the strategy returns exactly star_count locations."""
        config = GalaxyConfig(player_limit=4, stars_per_player=20, linked_stars_per_player=2)
        locations = CircularLocationStrategy().generate_locations(_request(config))

        assert len(locations) == 80
        homes = [l for l in locations if l.home_star]
        assert len(homes) == 4
        assert sum(1 for l in locations if l.linked) == 8
        for home in homes:
            assert len(home.linked_locations) == 2
            assert all(linked.linked for linked in home.linked_locations)
            assert all(linked in locations for linked in home.linked_locations)

    def test_home_resources_maximal(self):
        """Test that home anchors get the maximum natural resources."""
        config = GalaxyConfig(max_natural_resources=40)
        locations = CircularLocationStrategy().generate_locations(_request(config))
        for home in (l for l in locations if l.home_star):
            assert home.resources.economy == 40
            assert home.resources.industry == 40
            assert home.resources.science == 40

    def test_resources_within_bounds(self):
        """Test that every generated channel respects the configured range."""
        for distribution in ("random", "weightedCenter"):
            config = GalaxyConfig(
                resource_distribution=distribution, min_natural_resources=10, max_natural_resources=50
            )
            for location in CircularLocationStrategy().generate_locations(_request(config)):
                for value in (location.resources.economy, location.resources.industry, location.resources.science):
                    assert 10 <= value <= 50

    def test_deterministic(self):
        """Test that the same seed produces the same layout."""
        config = GalaxyConfig()
        first = CircularLocationStrategy().generate_locations(_request(config, seed=5))
        second = CircularLocationStrategy().generate_locations(_request(config, seed=5))
        assert [(l.x, l.y, l.resources) for l in first] == [(l.x, l.y, l.resources) for l in second]

    def test_too_few_stars(self):
        """Test that every player needs at least a home star."""
        config = GalaxyConfig(player_limit=4)
        with pytest.raises(ConfigurationError):
            CircularLocationStrategy().generate_locations(_request(config, star_count=3))

    def test_no_players(self):
        """Test that a player limit below one is rejected."""
        request = _request(GalaxyConfig(), star_count=10)
        request.player_limit = 0
        with pytest.raises(ConfigurationError):
            CircularLocationStrategy().generate_locations(request)

    def test_small_galaxy_shrinks_clusters(self):
        """Test that clusters shrink to fit when star_count is tight."""
        config = GalaxyConfig(player_limit=2, stars_per_player=10, linked_stars_per_player=5)
        locations = CircularLocationStrategy().generate_locations(_request(config, star_count=4))
        assert len(locations) == 4
        assert all(len(l.linked_locations) == 1 for l in locations if l.home_star)


class TestCustomLocationStrategy:
    """Test hand-authored layouts."""

    def test_parses_layout(self, custom_layout):
        """Test that a valid layout becomes home, linked and neutral locations."""
        config = GalaxyConfig(galaxy_type="custom", player_limit=2)
        locations = CustomLocationStrategy().generate_locations(
            _request(config, custom_layout=json.dumps(custom_layout))
        )

        assert len(locations) == 5
        home = locations[0]
        assert home.home_star
        assert home.owned_by_player_id == "p1"
        assert home.resources.economy == 20
        assert home.linked_locations == [locations[1]]
        assert locations[1].linked
        assert not locations[4].linked and not locations[4].home_star

    def test_missing_payload(self):
        """Test that custom galaxies need a layout."""
        config = GalaxyConfig(galaxy_type="custom", player_limit=2)
        with pytest.raises(ConfigurationError):
            CustomLocationStrategy().generate_locations(_request(config))

    def test_invalid_json(self):
        """Test that malformed payloads raise configuration errors."""
        config = GalaxyConfig(galaxy_type="custom", player_limit=2)
        with pytest.raises(ConfigurationError, match="Invalid custom galaxy layout"):
            CustomLocationStrategy().generate_locations(_request(config, custom_layout="{not json"))

    def test_wrong_home_count(self, custom_layout):
        """Test that home stars must match the player limit."""
        config = GalaxyConfig(galaxy_type="custom", player_limit=3)
        with pytest.raises(ConfigurationError, match="2 home stars"):
            CustomLocationStrategy().generate_locations(
                _request(config, custom_layout=json.dumps(custom_layout))
            )

    def test_unknown_linked_star(self, custom_layout):
        """Test that links must reference stars in the layout."""
        custom_layout["stars"][0]["linkedStars"] = ["missing"]
        config = GalaxyConfig(galaxy_type="custom", player_limit=2)
        with pytest.raises(ConfigurationError, match="unknown star missing"):
            CustomLocationStrategy().generate_locations(_request(config, custom_layout=json.dumps(custom_layout)))

    def test_star_linked_twice(self, custom_layout):
        """Test that a satellite belongs to one home star only."""
        custom_layout["stars"][2]["linkedStars"] = ["l1"]
        config = GalaxyConfig(galaxy_type="custom", player_limit=2)
        with pytest.raises(ConfigurationError, match="already linked"):
            CustomLocationStrategy().generate_locations(_request(config, custom_layout=json.dumps(custom_layout)))
