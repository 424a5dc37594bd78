from __future__ import annotations

from enum import Enum
from typing import Iterator, List

from pygame.math import Vector2

from ...config import PheromoneConfig
from .geometry import Circle

MIN_INTENSITY = 0
MAX_INTENSITY = 100


class PheromoneType(str, Enum):
    # Laid by ants searching for food, followed back to the nest.
    TO_ANTHILL = "ToAnthill"
    # Laid by ants carrying food, followed towards the food.
    TO_FOOD = "ToFood"


class PheromoneParticle:
    __slots__ = ("_position", "_intensity")

    def __init__(self, position: Vector2, intensity: int):
        if not MIN_INTENSITY <= intensity <= MAX_INTENSITY:
            raise ValueError(
                f"pheromone intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}, got {intensity}"
            )
        if intensity != int(intensity):
            raise ValueError(f"pheromone intensity must be a whole number, got {intensity}")
        self._position = Vector2(position)
        self._intensity = int(intensity)

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def intensity(self) -> int:
        return self._intensity

    def decrease_intensity(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"intensity decrease must be non-negative, got {amount}")
        self._intensity = max(MIN_INTENSITY, self._intensity - amount)

    def has_evaporated(self) -> bool:
        return self._intensity == MIN_INTENSITY


class Pheromones:
    def __init__(self, pheromone_type: PheromoneType, config: PheromoneConfig | None = None):
        self._type = PheromoneType(pheromone_type)
        self._config = config if config is not None else PheromoneConfig()
        self._particles: List[PheromoneParticle] = []
        self._time_since_last_evaporation = 0.0

    @property
    def type(self) -> PheromoneType:
        return self._type

    def __iter__(self) -> Iterator[PheromoneParticle]:
        return iter(self._particles)

    def __len__(self) -> int:
        return len(self._particles)

    def add_pheromone_particle(self, position: Vector2 | PheromoneParticle, intensity: int | None = None) -> None:
        if isinstance(position, PheromoneParticle):
            self._particles.append(PheromoneParticle(position.position, position.intensity))
            return
        if intensity is None:
            intensity = self._config.default_intensity
        self._particles.append(PheromoneParticle(position, intensity))

    def get_intensity_in_circle(self, circle: Circle) -> int:
        return sum(particle.intensity for particle in self._particles if circle.is_inside(particle.position))

    def update_particles_evaporation(self, delta_time: float) -> None:
        if delta_time < 0.0:
            raise ValueError(f"delta_time can't be negative, got {delta_time}")

        self._time_since_last_evaporation += delta_time
        period = self._config.evaporation_period
        if self._time_since_last_evaporation < period:
            return
        self._time_since_last_evaporation -= period

        step = self._config.evaporation_step
        for particle in self._particles:
            particle.decrease_intensity(step)
        self._particles = [particle for particle in self._particles if not particle.has_evaporated()]

    def clear(self) -> None:
        self._particles.clear()
        self._time_since_last_evaporation = 0.0
