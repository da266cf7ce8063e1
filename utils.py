"""Randomness sources shared by the sampler and the drop calculator.

Every random decision made while rolling goes through a RandomProvider, so a
seeded provider makes a whole loot evaluation reproducible.
"""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional, Protocol, Sequence


class RandomProvider(Protocol):
    """Protocol for random number generation (for testability)."""
    def random(self) -> float: ...
    def uniform(self, a: float, b: float) -> float: ...
    def randint(self, a: int, b: int) -> int: ...
    def choice(self, seq: Sequence[Any]) -> Any: ...


class DefaultRandomProvider:
    """Bridges to Python's random module, seeded from process entropy."""

    def random(self) -> float:
        return random.random()

    def uniform(self, a: float, b: float) -> float:
        return random.uniform(a, b)

    def randint(self, a: int, b: int) -> int:
        return random.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        return random.choice(seq)


class SeededRandomProvider:
    """Owns a private generator; the same seed always replays the same draws.

    Args:
        seed: Explicit seed, or None to seed from process entropy
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def __repr__(self) -> str:
        return f"SeededRandomProvider(seed={self.seed!r})"

    def fork(self, salt: str) -> SeededRandomProvider:
        """Derive an independent, reproducible provider for a named sub-stream."""
        if self.seed is None:
            raise ValueError("Cannot fork a provider that was not given an explicit seed")
        digest = hashlib.sha256(f"{self.seed}:{salt}".encode("utf-8")).hexdigest()
        return SeededRandomProvider(int(digest[:16], 16))

    def random(self) -> float:
        return self._random.random()

    def uniform(self, a: float, b: float) -> float:
        return self._random.uniform(a, b)

    def randint(self, a: int, b: int) -> int:
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        return self._random.choice(seq)
