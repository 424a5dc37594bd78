from __future__ import annotations

import dataclasses
import math
from typing import Iterator, List

from pygame.math import Vector2

from ...config import AntConfig
from ...rng import DeterministicRng
from ..systems.foraging import update_ant
from ..utils.math2d import from_polar
from .agent import Ant
from .anthill import Anthill
from .food import Food
from .geometry import Circle
from .obstacles import Obstacles
from .pheromones import Pheromones


class Ants:
    """The ant population and the random stream every ant draws from.

    Ants are updated in insertion order against shared food, trails and nest,
    so with a fixed seed the earlier ant always wins a contested particle.
    """

    def __init__(self, seed: int = 0, config: AntConfig | None = None):
        self._config = config if config is not None else AntConfig()
        self._rng = DeterministicRng(seed)
        self._ants: List[Ant] = []

    @property
    def config(self) -> AntConfig:
        return self._config

    @property
    def rng(self) -> DeterministicRng:
        return self._rng

    def __iter__(self) -> Iterator[Ant]:
        return iter(self._ants)

    def __len__(self) -> int:
        return len(self._ants)

    def __getitem__(self, index: int) -> Ant:
        return self._ants[index]

    def add_ant(self, position: Vector2 | Ant, velocity: Vector2 | None = None, has_food: bool = False) -> None:
        if isinstance(position, Ant):
            self._ants.append(dataclasses.replace(position))
            return
        if velocity is None:
            raise ValueError("an ant needs a velocity")
        self._ants.append(Ant(position=position, velocity=velocity, has_food=has_food))

    def add_ants_around_circle(self, circle: Circle, count: int) -> None:
        if count < 0:
            raise ValueError(f"number of ants can't be negative, got {count}")
        for _ in range(count):
            angle = self._rng.next_angle()
            position = circle.center + from_polar(circle.radius, angle)
            heading = angle + self._rng.next_range(-math.pi / 2.0, math.pi / 2.0)
            self._ants.append(Ant(position=position, velocity=from_polar(self._config.speed, heading)))

    def update(
        self,
        food: Food,
        to_anthill: Pheromones,
        to_food: Pheromones,
        anthill: Anthill,
        obstacles: Obstacles,
        delta_time: float,
    ) -> None:
        for ant in self._ants:
            update_ant(ant, food, to_anthill, to_food, anthill, obstacles, self._rng, delta_time, self._config)
