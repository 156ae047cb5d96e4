"""Seeded random helpers for reproducible runs."""

from __future__ import annotations

import random
import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


def generate_seed() -> int:
    """Return a positive 63-bit seed for ad-hoc runs."""
    return secrets.randbits(63) or 1


class GameRNG:
    """Thin wrapper over ``random.Random`` that remembers its seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random()
        self.__seed_value: int | None = None
        self._seed(seed)

    def _seed(self, value: int | None) -> None:
        if value is None:
            value = generate_seed()
        try:
            normalized = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid seed value: {value}") from exc
        self.__seed_value = normalized
        self._random.seed(normalized)

    @property
    def seed_value(self) -> int | None:
        return self.__seed_value

    def random(self) -> float:
        """Return a float in the range [0.0, 1.0)."""
        return self._random.random()

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]


_GLOBAL_RNG = GameRNG()


def get_rng() -> GameRNG:
    return _GLOBAL_RNG


def seed_rng(seed: int | None) -> int:
    _GLOBAL_RNG._seed(seed)
    assert _GLOBAL_RNG.seed_value is not None
    return _GLOBAL_RNG.seed_value


__all__ = [
    "GameRNG",
    "generate_seed",
    "get_rng",
    "seed_rng",
]
