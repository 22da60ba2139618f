"""Bounding queries over star locations.

Both functions accept anything with ``x`` and ``y`` attributes (locations or
stars) and never mutate their input.
"""

from typing import Iterable, Protocol


class HasCoordinates(Protocol):
    x: float
    y: float


def get_galaxy_center(locations: Iterable[HasCoordinates]) -> tuple[float, float]:
    """Return the midpoint of the axis-aligned bounding box.

    Args:
        locations: Star locations

    Returns:
        (x, y) midpoint of the min/max extents, (0, 0) for no locations

    Examples:
        >>> get_galaxy_center([])
        (0, 0)
    """
    min_x = max_x = min_y = max_y = None
    for location in locations:
        if min_x is None:
            min_x = max_x = location.x
            min_y = max_y = location.y
            continue
        min_x = min(min_x, location.x)
        max_x = max(max_x, location.x)
        min_y = min(min_y, location.y)
        max_y = max(max_y, location.y)

    if min_x is None:
        return (0, 0)

    return ((min_x + max_x) / 2, (min_y + max_y) / 2)


def get_galaxy_center_of_mass(locations: Iterable[HasCoordinates]) -> tuple[float, float]:
    """Return the arithmetic mean of all coordinates.

    Args:
        locations: Star locations

    Returns:
        (x, y) mean position, (0, 0) for no locations
    """
    total_x = 0.0
    total_y = 0.0
    count = 0
    for location in locations:
        total_x += location.x
        total_y += location.y
        count += 1

    if count == 0:
        return (0, 0)

    return (total_x / count, total_y / count)
