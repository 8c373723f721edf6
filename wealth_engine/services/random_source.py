"""Pluggable uniform sources and a Box-Muller standard-normal sampler."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

_BLOCK_SIZE = 4096


class RandomSource(ABC):
    """Supplies uniform draws; derives standard-normal shocks from them."""

    @abstractmethod
    def uniform(self) -> float:
        """Return a uniform draw in ``[0, 1)``."""

    def standard_normal(self) -> float:
        """Box-Muller transform over two uniforms.

        ``u`` is resampled while zero so ``log(u)`` stays finite; ``v`` is
        resampled the same way to keep the pairing of draws symmetric.
        """

        u = 0.0
        while u == 0.0:
            u = self.uniform()
        v = 0.0
        while v == 0.0:
            v = self.uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


class SeededRandomSource(RandomSource):
    """numpy-backed source; the same seed replays the same sequence."""

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)
        self._buffer: list[float] = []
        self._position = 0

    def uniform(self) -> float:
        if self._position >= len(self._buffer):
            self._buffer = self._rng.random(_BLOCK_SIZE).tolist()
            self._position = 0
        value = self._buffer[self._position]
        self._position += 1
        return value


class FixedRandomSource(RandomSource):
    """Cycles through a fixed list of uniforms. Handy for tests and examples."""

    def __init__(self, values: Sequence[float]):
        if not values:
            raise ValueError("FixedRandomSource needs at least one value")
        if all(value == 0.0 for value in values):
            raise ValueError("FixedRandomSource needs at least one non-zero value")
        self._values = [float(value) for value in values]
        self._position = 0

    def uniform(self) -> float:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value


__all__ = ["FixedRandomSource", "RandomSource", "SeededRandomSource"]
