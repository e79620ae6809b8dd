"""
Lucky Toss - Randomness Sources

The engine never calls the ``random`` module directly. Every draw (die faces,
computer decisions, sudden-death rolls) goes through a RandomSource so tests
and simulations can substitute a seeded or scripted generator.
"""

import random
from typing import Protocol, runtime_checkable

from src.engine.base import DIE_FACES


@runtime_checkable
class RandomSource(Protocol):
    """Capability producing uniform dice faces and uniform booleans."""

    def roll_die(self) -> int:
        """Return a uniform integer in [1, 6]."""
        ...

    def flip(self) -> bool:
        """Return a uniform boolean."""
        ...


class SeededRandomSource:
    """
    RandomSource backed by a private ``random.Random`` instance.

    Passing a seed makes every draw reproducible; ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def roll_die(self) -> int:
        return self._random.randint(1, DIE_FACES)

    def flip(self) -> bool:
        return self._random.random() < 0.5


def roll_hand(rng: RandomSource, count: int) -> list[int]:
    """Roll ``count`` fresh dice."""
    return [rng.roll_die() for _ in range(count)]
