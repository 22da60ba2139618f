"""Shared fixtures for Galaxy Forge tests."""

import copy

import pytest

CUSTOM_LAYOUT = {
    "stars": [
        {"id": "h1", "x": 0, "y": 0, "economy": 20, "industry": 15, "science": 10,
         "homeStar": True, "playerId": "p1", "linkedStars": ["l1"]},
        {"id": "l1", "x": 10, "y": 0, "economy": 5, "industry": 5, "science": 5},
        {"id": "h2", "x": 100, "y": 100, "economy": 20, "industry": 15, "science": 10,
         "homeStar": True, "playerId": "p2", "linkedStars": ["l2"]},
        {"id": "l2", "x": 90, "y": 100, "economy": 5, "industry": 5, "science": 5},
        {"id": "n1", "x": 50, "y": 50, "economy": 30, "industry": 0, "science": 12},
    ]
}


@pytest.fixture
def custom_layout():
    """A two-player custom layout: two home clusters of two stars plus one neutral star."""
    return copy.deepcopy(CUSTOM_LAYOUT)
