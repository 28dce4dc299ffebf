"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

import secrets
from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")

_MAX_RANDOM_SEED = 2**31 - 1


class RNG:
    """Seedable random source injected into every component that rolls dice."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbelow(_MAX_RANDOM_SEED)
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)
