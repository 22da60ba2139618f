"""Seedable RNG wrapper for deterministic galaxy generation."""

import math
import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic generation.

    All randomness in galaxy generation goes through one instance of this
    class, passed explicitly to every step, so the same seed always yields
    the same galaxy and two generations never share a draw sequence.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def randint_between(self, low: float, high: float) -> int:
        """Return random integer in [ceil(low), floor(high)], inclusive.

        Used for resource values derived from fractional multipliers of the
        natural resource constants.

        Args:
            low: Lower bound (may be fractional)
            high: Upper bound (may be fractional)

        Returns:
            Random integer within the bounds

        Raises:
            ValueError: If no integer lies between the bounds
        """
        lower = math.ceil(low)
        upper = math.floor(high)
        if lower > upper:
            raise ValueError(f"No integer between {low} and {high}")
        return self.rng.randint(lower, upper)

    def uniform(self, a: float, b: float) -> float:
        """Return random float in range [a, b]."""
        return self.rng.uniform(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def shuffle(self, seq):
        """Shuffle sequence in place.

        Fisher-Yates: consumes exactly len(seq) - 1 draws, so shuffles
        keep the draw sequence aligned across runs.

        Args:
            seq: Mutable sequence to shuffle
        """
        self.rng.shuffle(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def get_state(self):
        """Get the current state of the RNG for serialization.

        Returns:
            RNG state tuple that can be used with set_state
        """
        return self.rng.getstate()

    def set_state(self, state):
        """Set the state of the RNG for deserialization.

        Args:
            state: RNG state tuple from get_state
        """
        self.rng.setstate(state)


def take_shuffled(rng: GameRNG, items: list, count: int) -> list:
    """Shuffle items in place and return the first count of them.

    This is sampling without replacement expressed as shuffle-then-slice,
    which keeps the number of draws fixed for a given list length.

    Args:
        rng: Shared generation RNG
        items: Candidates (shuffled in place)
        count: Number of winners wanted

    Returns:
        Up to count items, fewer if there are not enough candidates
    """
    rng.shuffle(items)
    return items[: max(count, 0)]
