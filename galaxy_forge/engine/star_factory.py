"""Star instantiation from strategy locations."""

from ..models import Location, NaturalResources, Star


class StarFactory:
    """Creates stars with deterministic sequential ids.

    One factory is used per generated galaxy, so ids run star-001, star-002,
    ... in creation order.
    """

    def __init__(self, id_prefix: str = "star"):
        self.id_prefix = id_prefix
        self._created = 0

    def _next_id(self) -> str:
        self._created += 1
        return f"{self.id_prefix}-{self._created:03d}"

    def generate_unowned_star(
        self, name: str, location: Location, resources: NaturalResources | None
    ) -> Star:
        """Create an unowned star.

        Args:
            name: Unique star name
            location: Strategy location (position and home flag)
            resources: Natural resources to copy onto the star

        Returns:
            New unowned star

        Raises:
            ValueError: If no resources were supplied
        """
        if resources is None:
            raise ValueError(f"Location ({location.x}, {location.y}) has no natural resources")

        return Star(
            id=self._next_id(),
            name=name,
            x=location.x,
            y=location.y,
            natural_resources=resources.copy(),
            home_star=location.home_star,
        )

    def generate_custom_galaxy_star(self, name: str, location: Location) -> Star:
        """Create a star exactly as a custom layout author specified it."""
        resources = location.resources or NaturalResources(economy=0, industry=0, science=0)

        return Star(
            id=self._next_id(),
            name=name,
            x=location.x,
            y=location.y,
            natural_resources=resources.copy(),
            owned_by_player_id=location.owned_by_player_id,
            home_star=location.home_star,
        )


def is_dead_star(star: Star) -> bool:
    """Check if a star has no natural resources left on any channel."""
    resources = star.natural_resources
    return resources.economy <= 0 and resources.industry <= 0 and resources.science <= 0
