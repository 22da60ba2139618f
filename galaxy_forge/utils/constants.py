"""Galaxy generation defaults and game constants."""

# Topologies
GALAXY_TYPES = (
    "circular",
    "spiral",
    "doughnut",
    "circular-balanced",
    "irregular",
    "custom",
)
DEFAULT_GALAXY_TYPE = "circular"

# Resource distribution modes understood by the built-in strategies
RESOURCE_DISTRIBUTIONS = ("random", "weightedCenter")
DEFAULT_RESOURCE_DISTRIBUTION = "random"

# Players and star counts
DEFAULT_PLAYER_LIMIT = 4
DEFAULT_STARS_PER_PLAYER = 20
DEFAULT_LINKED_STARS_PER_PLAYER = 2

# Natural resources (per channel)
MIN_NATURAL_RESOURCES = 10
MAX_NATURAL_RESOURCES = 50

# Terrain
SPECIAL_RESOURCE_RANGE = (1.5, 3.0)  # Multipliers of MAX_NATURAL_RESOURCES
BLACK_HOLE_RESOURCE_FACTOR = 0.2
FEATURE_DIVISOR = 100  # Single-star features
WORMHOLE_DIVISOR = 200  # Wormholes consume stars in pairs

# Circular layout geometry
STAR_SPACING = 40  # Average distance between neighbouring stars
HOME_CLUSTER_RADIUS = 30  # Linked stars sit this close to their home star

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
