"""Tests for galaxy bounding queries."""

import pytest

from galaxy_forge.models import Location
from galaxy_forge.utils import get_galaxy_center, get_galaxy_center_of_mass


def _locations(*points):
    return [Location(x=x, y=y) for x, y in points]


class TestGalaxyCenter:
    """Test bounding box midpoint."""

    def test_empty_returns_origin(self):
        """Test that no locations gives (0, 0)."""
        assert get_galaxy_center([]) == (0, 0)

    def test_two_points(self):
        """Test midpoint of two opposite corners."""
        assert get_galaxy_center(_locations((0, 0), (10, 10))) == (5, 5)

    def test_duplicates_do_not_shift_center(self):
        """Test that the bounding box ignores point density."""
        assert get_galaxy_center(_locations((0, 0), (0, 0), (10, 10))) == (5, 5)

    def test_negative_coordinates(self):
        """Test bounding box spanning the origin."""
        assert get_galaxy_center(_locations((-10, -4), (30, 8), (5, -20))) == (10, -6)

    def test_single_point(self):
        """Test that a single location is its own center."""
        assert get_galaxy_center(_locations((7, -3))) == (7, -3)

    def test_does_not_mutate_input(self):
        """Test that the input order is preserved."""
        locations = _locations((10, 10), (0, 0), (5, 5))
        get_galaxy_center(locations)
        assert [(l.x, l.y) for l in locations] == [(10, 10), (0, 0), (5, 5)]


class TestGalaxyCenterOfMass:
    """Test mean position."""

    def test_empty_returns_origin(self):
        """Test that no locations gives (0, 0)."""
        assert get_galaxy_center_of_mass([]) == (0, 0)

    def test_two_points(self):
        """Test mean of two points."""
        assert get_galaxy_center_of_mass(_locations((0, 0), (10, 10))) == (5, 5)

    def test_duplicates_shift_center_of_mass(self):
        """Test that repeated points pull the mean towards them."""
        x, y = get_galaxy_center_of_mass(_locations((0, 0), (0, 0), (10, 10)))
        assert x == pytest.approx(10 / 3)
        assert y == pytest.approx(10 / 3)

    def test_accepts_generator(self):
        """Test that any iterable of positions works."""
        x, y = get_galaxy_center_of_mass(l for l in _locations((2, 4), (4, 8)))
        assert (x, y) == (3, 6)
