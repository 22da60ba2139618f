#!/usr/bin/env python3
"""Galaxy Forge - command line entry point.

Generates a galaxy (stars, home clusters and terrain) from a seed and
prints a summary, optionally saving the result as JSON.
"""

import argparse
import logging
import sys
from collections import Counter

from pydantic import ValidationError

from galaxy_forge.engine import generate_galaxy
from galaxy_forge.errors import GalaxyGenerationError
from galaxy_forge.models import Galaxy, GalaxyConfig, TerrainSettings
from galaxy_forge.schemas import GalaxySettings
from galaxy_forge.utils import (
    DEFAULT_GALAXY_TYPE,
    DEFAULT_LINKED_STARS_PER_PLAYER,
    DEFAULT_PLAYER_LIMIT,
    DEFAULT_RESOURCE_DISTRIBUTION,
    DEFAULT_STARS_PER_PLAYER,
    GALAXY_TYPES,
    RESOURCE_DISTRIBUTIONS,
    RNG_SEED_DEFAULT,
)
from galaxy_forge.utils.serialization import save_galaxy


def build_config(args: argparse.Namespace) -> GalaxyConfig:
    """Build the galaxy configuration from a settings file or CLI flags."""
    if args.settings:
        with open(args.settings) as f:
            return GalaxySettings.model_validate_json(f.read()).to_config()

    return GalaxyConfig(
        galaxy_type=args.galaxy_type,
        resource_distribution=args.resource_distribution,
        player_limit=args.players,
        stars_per_player=args.stars_per_player,
        linked_stars_per_player=args.linked_stars,
        split_resources=args.split_resources,
        terrain=TerrainSettings(
            warp_gates=args.warp_gates,
            wormholes=args.wormholes,
            nebulas=args.nebulas,
            asteroid_fields=args.asteroid_fields,
            binary_stars=args.binary_stars,
            black_holes=args.black_holes,
            pulsars=args.pulsars,
        ),
    )


def print_summary(galaxy: Galaxy) -> None:
    """Print star totals, home clusters and terrain counts."""
    print("\n" + "=" * 60)
    print(f"Galaxy (seed {galaxy.seed}, {galaxy.config.galaxy_type})")
    print("=" * 60)
    print(f"Stars: {len(galaxy.stars)}")
    print(f"Home clusters: {len(galaxy.home_stars)}")
    for home_id, cluster in zip(galaxy.home_stars, galaxy.linked_stars):
        home = galaxy.get_star(home_id)
        linked_names = ", ".join(galaxy.get_star(star_id).name for star_id in cluster) or "-"
        print(f"  {home.name} ({home.id}): {linked_names}")

    features = Counter(feature for star in galaxy.stars for feature in star.terrain_features())
    print("Terrain:")
    for feature in ("warp_gate", "wormhole", "nebula", "asteroid_field", "binary_star", "black_hole", "pulsar"):
        print(f"  {feature}: {features.get(feature, 0)}")

    center_x, center_y = galaxy.center()
    mass_x, mass_y = galaxy.center_of_mass()
    print(f"Center: ({center_x:.1f}, {center_y:.1f})  Center of mass: ({mass_x:.1f}, {mass_y:.1f})")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Galaxy Forge - procedural galaxy and terrain generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                       # Default circular galaxy, seed 42
  %(prog)s --players 6 --warp-gates 10 --nebulas 5
  %(prog)s --split-resources --binary-stars 10    # Split resources mode
  %(prog)s --galaxy-type custom --layout map.json --players 2
  %(prog)s --settings settings.json --save galaxy.json
        """,
    )

    parser.add_argument(
        "--seed", type=int, default=RNG_SEED_DEFAULT, help=f"Random seed (default: {RNG_SEED_DEFAULT})"
    )
    parser.add_argument("--settings", type=str, metavar="FILE", help="Read galaxy settings from a JSON file")
    parser.add_argument(
        "--galaxy-type",
        choices=GALAXY_TYPES,
        default=DEFAULT_GALAXY_TYPE,
        help=f"Galaxy topology (default: {DEFAULT_GALAXY_TYPE})",
    )
    parser.add_argument(
        "--resource-distribution", choices=RESOURCE_DISTRIBUTIONS, default=DEFAULT_RESOURCE_DISTRIBUTION
    )
    parser.add_argument(
        "--players", type=int, default=DEFAULT_PLAYER_LIMIT, help=f"Player limit (default: {DEFAULT_PLAYER_LIMIT})"
    )
    parser.add_argument(
        "--stars-per-player",
        type=int,
        default=DEFAULT_STARS_PER_PLAYER,
        help=f"Stars per player (default: {DEFAULT_STARS_PER_PLAYER})",
    )
    parser.add_argument(
        "--linked-stars",
        type=int,
        default=DEFAULT_LINKED_STARS_PER_PLAYER,
        help=f"Linked stars per home star (default: {DEFAULT_LINKED_STARS_PER_PLAYER})",
    )
    parser.add_argument("--split-resources", action="store_true", help="Enable split resources mode")
    for feature in ("warp-gates", "wormholes", "nebulas", "asteroid-fields", "binary-stars", "black-holes", "pulsars"):
        parser.add_argument(f"--{feature}", type=int, default=0, metavar="PCT", help=f"Percentage of {feature}")
    parser.add_argument("--layout", type=str, metavar="FILE", help="Custom galaxy layout JSON file")
    parser.add_argument("--save", type=str, metavar="FILE", help="Save galaxy to JSON file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        config = build_config(args)
    except (ValidationError, ValueError) as e:
        print(f"Error: invalid galaxy settings: {e}")
        sys.exit(1)

    custom_layout = None
    if args.layout:
        try:
            with open(args.layout) as f:
                custom_layout = f.read()
        except FileNotFoundError:
            print(f"Error: File {args.layout} not found.")
            sys.exit(1)

    print(f"Generating galaxy with seed {args.seed}...")
    try:
        galaxy = generate_galaxy(args.seed, config, custom_layout)
    except GalaxyGenerationError as e:
        print(f"Error generating galaxy: {e.message}")
        sys.exit(1)

    print_summary(galaxy)

    if args.save:
        save_galaxy(galaxy, args.save)
        print(f"\nGalaxy saved to {args.save}")


if __name__ == "__main__":
    main()
