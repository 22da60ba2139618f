"""Galaxy serialization to/from JSON.

This module provides functions to save and load generated galaxies, so a
galaxy can be handed to persistence or inspected after generation.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from ..models.galaxy import Galaxy, GalaxyConfig, TerrainSettings
from ..models.star import NaturalResources, Star
from .rng import GameRNG


def save_galaxy(galaxy: Galaxy, filepath: str) -> None:
    """Save a galaxy to a JSON file.

    Args:
        galaxy: Galaxy to save
        filepath: Destination path (parent directories are created)
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(_serialize_galaxy(galaxy), f, indent=2)


def load_galaxy(filepath: str) -> Galaxy:
    """Load a galaxy from a JSON file.

    Args:
        filepath: Path to saved galaxy file

    Returns:
        Loaded Galaxy object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    with open(filepath) as f:
        galaxy_dict = json.load(f)

    return _deserialize_galaxy(galaxy_dict)


def _serialize_galaxy(galaxy: Galaxy) -> dict[str, Any]:
    """Convert Galaxy object to JSON-compatible dictionary."""
    return {
        "seed": galaxy.seed,
        "config": asdict(galaxy.config),
        "stars": [_serialize_star(s) for s in galaxy.stars],
        "home_stars": galaxy.home_stars,
        "linked_stars": galaxy.linked_stars,
        "rng_state": galaxy.rng.get_state(),  # Continue the same draw sequence after loading
    }


def _deserialize_galaxy(data: dict[str, Any]) -> Galaxy:
    """Reconstruct Galaxy object from dictionary."""
    rng = GameRNG(data["seed"])
    if "rng_state" in data:
        # JSON turns the state tuple (version, inner tuple, gauss_next) into lists
        state = data["rng_state"]
        if isinstance(state, list):
            state = (state[0], tuple(state[1]), state[2])
        rng.set_state(state)

    config_data = dict(data["config"])
    config_data["terrain"] = TerrainSettings(**config_data.get("terrain", {}))

    return Galaxy(
        seed=data["seed"],
        config=GalaxyConfig(**config_data),
        stars=[_deserialize_star(s) for s in data["stars"]],
        home_stars=data.get("home_stars", []),
        linked_stars=data.get("linked_stars", []),
        rng=rng,
    )


def _serialize_star(star: Star) -> dict[str, Any]:
    """Convert Star to dictionary."""
    return {
        "id": star.id,
        "name": star.name,
        "x": star.x,
        "y": star.y,
        "natural_resources": asdict(star.natural_resources),
        "owned_by_player_id": star.owned_by_player_id,
        "home_star": star.home_star,
        "warp_gate": star.warp_gate,
        "worm_hole_to_star_id": star.worm_hole_to_star_id,
        "is_nebula": star.is_nebula,
        "is_asteroid_field": star.is_asteroid_field,
        "is_binary_star": star.is_binary_star,
        "is_black_hole": star.is_black_hole,
        "is_pulsar": star.is_pulsar,
    }


def _deserialize_star(data: dict[str, Any]) -> Star:
    """Reconstruct Star from dictionary."""
    return Star(
        id=data["id"],
        name=data["name"],
        x=data["x"],
        y=data["y"],
        natural_resources=NaturalResources(**data["natural_resources"]),
        owned_by_player_id=data.get("owned_by_player_id"),
        home_star=data.get("home_star", False),
        warp_gate=data.get("warp_gate", False),
        worm_hole_to_star_id=data.get("worm_hole_to_star_id"),
        is_nebula=data.get("is_nebula", False),
        is_asteroid_field=data.get("is_asteroid_field", False),
        is_binary_star=data.get("is_binary_star", False),
        is_black_hole=data.get("is_black_hole", False),
        is_pulsar=data.get("is_pulsar", False),
    )
