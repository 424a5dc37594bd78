from __future__ import annotations

import math
import random


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_coinflip(self) -> bool:
        return self._random.randrange(2) == 1

    def next_gauss(self, mean: float, std: float) -> float:
        return self._random.gauss(mean, std)

    def next_angle(self) -> float:
        return self._random.uniform(0.0, 2.0 * math.pi)
