"""Seedable RNG wrapper for reproducible procedural content."""

import random


class SectorRNG:
    """Wrapper around Python's random.Random seeded from a sector identity.

    Procedural decoration goes through an instance of this class rather than
    the module-level random functions, so the same seed always yields the same
    sequence and no global state is shared between sessions.
    """

    def __init__(self, seed: str):
        """Initialize RNG with given seed.

        Args:
            seed: String seed (typically the sector name). String seeds are
                hashed with SHA-512, so results do not depend on PYTHONHASHSEED.
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b.

        Args:
            a: Lower bound
            b: Upper bound

        Returns:
            Random float between a and b
        """
        return self.rng.uniform(a, b)
