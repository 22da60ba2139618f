"""Tests for complete galaxy generation."""

import json

import pytest

from galaxy_forge.engine import generate_galaxy
from galaxy_forge.errors import ConfigurationError, GalaxyGenerationError
from galaxy_forge.models import GalaxyConfig, TerrainSettings


def _terrain_config(**overrides):
    settings = dict(
        player_limit=4,
        stars_per_player=20,
        linked_stars_per_player=2,
        terrain=TerrainSettings(
            warp_gates=10,
            wormholes=10,
            nebulas=10,
            asteroid_fields=10,
            binary_stars=10,
            black_holes=5,
            pulsars=5,
        ),
    )
    settings.update(overrides)
    return GalaxyConfig(**settings)


class TestGenerateGalaxy:
    """Test the seed to galaxy workflow."""

    def test_generate_galaxy_seed_42(self):
        """Test basic galaxy properties."""
        galaxy = generate_galaxy(42, _terrain_config())

        assert galaxy.seed == 42
        assert len(galaxy.stars) == 80
        assert len(galaxy.home_stars) == 4
        assert len(galaxy.linked_stars) == 4
        assert galaxy.rng is not None

    def test_linked_ids_exist(self):
        """Test that every home and linked id refers to a generated star."""
        galaxy = generate_galaxy(42, _terrain_config())

        for star_id in galaxy.home_stars + galaxy.all_linked_star_ids():
            assert galaxy.get_star(star_id) is not None

    def test_starting_clusters_have_no_terrain(self):
        """Test that home and linked stars never carry features."""
        for seed in range(10):
            galaxy = generate_galaxy(seed, _terrain_config())
            for star_id in galaxy.home_stars + galaxy.all_linked_star_ids():
                assert galaxy.get_star(star_id).terrain_features() == [], f"seed {seed}"

    def test_warp_gate_quota(self):
        """Test that the quota is based on every non-home star."""
        galaxy = generate_galaxy(42, _terrain_config())

        # floor((80 - 4) / 100 * 10)
        assert sum(1 for s in galaxy.stars if s.warp_gate) == 7
        assert sum(1 for s in galaxy.stars if s.worm_hole_to_star_id) == 6

    def test_wormholes_mutual(self):
        """Test wormhole symmetry across seeds."""
        for seed in range(10):
            galaxy = generate_galaxy(seed, _terrain_config())
            for star in galaxy.stars:
                if star.worm_hole_to_star_id:
                    partner = galaxy.get_star(star.worm_hole_to_star_id)
                    assert partner.id != star.id
                    assert partner.worm_hole_to_star_id == star.id

    def test_names_unique(self):
        """Test that no two stars share a name."""
        galaxy = generate_galaxy(42, _terrain_config(player_limit=10, stars_per_player=50))

        names = [s.name for s in galaxy.stars]
        assert len(names) == 500
        assert len(set(names)) == 500

    def test_deterministic_generation(self):
        """Test that the same seed produces the same galaxy."""
        galaxy1 = generate_galaxy(42, _terrain_config(split_resources=True))
        galaxy2 = generate_galaxy(42, _terrain_config(split_resources=True))

        assert galaxy1.stars == galaxy2.stars
        assert galaxy1.home_stars == galaxy2.home_stars
        assert galaxy1.linked_stars == galaxy2.linked_stars
        assert galaxy1.rng.get_state() == galaxy2.rng.get_state()

    def test_different_seeds_produce_different_galaxies(self):
        """Test that the seed changes the galaxy."""
        galaxy1 = generate_galaxy(42, _terrain_config())
        galaxy2 = generate_galaxy(123, _terrain_config())

        differences = sum(1 for s1, s2 in zip(galaxy1.stars, galaxy2.stars) if (s1.x, s1.y) != (s2.x, s2.y))
        assert differences > 0

    def test_custom_galaxy(self, custom_layout):
        """Test generation from a hand-authored layout."""
        config = GalaxyConfig(
            galaxy_type="custom",
            player_limit=2,
            terrain=TerrainSettings(warp_gates=100),
        )
        galaxy = generate_galaxy(42, config, json.dumps(custom_layout))

        assert len(galaxy.stars) == 5
        owners = [galaxy.get_star(star_id).owned_by_player_id for star_id in galaxy.home_stars]
        assert owners == ["p1", "p2"]
        # only the neutral star is outside the starting clusters
        assert [s.warp_gate for s in galaxy.stars] == [False, False, False, False, True]

    def test_unsupported_topology(self):
        """Test that topologies without a strategy fail."""
        with pytest.raises(ConfigurationError):
            generate_galaxy(42, _terrain_config(galaxy_type="irregular"))

    def test_errors_share_base_class(self):
        """Test that callers can catch every generation failure at once."""
        with pytest.raises(GalaxyGenerationError):
            generate_galaxy(42, GalaxyConfig(galaxy_type="custom", player_limit=2))

    def test_large_galaxy_named(self):
        """Test that a galaxy of more than a thousand stars gets unique names."""
        config = GalaxyConfig(player_limit=8, stars_per_player=150)
        galaxy = generate_galaxy(42, config)

        names = [s.name for s in galaxy.stars]
        assert len(names) == 1200
        assert len(set(names)) == 1200
