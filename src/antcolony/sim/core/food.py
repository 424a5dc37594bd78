from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

from pygame.math import Vector2

from ...rng import DeterministicRng
from ..utils.math2d import rotate
from ..utils.records import RecordFormatError, RecordReader, write_records
from .geometry import Circle, shapes_intersect
from .obstacles import Obstacles

logger = logging.getLogger(__name__)

_UP = Vector2(0.0, 1.0)


class FoodParticle:
    __slots__ = ("_position",)

    def __init__(self, position: Vector2):
        self._position = Vector2(position)

    @property
    def position(self) -> Vector2:
        return self._position


class CircleWithFood:
    """A cluster of food particles scattered inside one circle.

    Particle offsets from the center follow a half-normal distribution with
    sigma = radius / 3, so about 99.7% of them land inside the circle; the
    rest are clamped onto its boundary.
    """

    def __init__(self, circle: Circle, particle_count: int, obstacles: Obstacles, rng: DeterministicRng):
        if particle_count < 0:
            raise ValueError(f"particle count can't be negative, got {particle_count}")
        if obstacles.any_obstacles_in_circle(circle):
            raise ValueError("a food circle can't intersect any obstacle")

        self._circle = Circle(circle.center, circle.radius)
        self._particles: List[FoodParticle] = []
        radius = circle.radius
        sigma = radius / 3.0
        for _ in range(particle_count):
            angle = rng.next_angle()
            distance = min(abs(rng.next_gauss(0.0, sigma)), radius)
            self._particles.append(FoodParticle(rotate(_UP, angle) * distance + circle.center))

    @property
    def circle(self) -> Circle:
        return self._circle

    def __iter__(self) -> Iterator[FoodParticle]:
        return iter(self._particles)

    def __len__(self) -> int:
        return len(self._particles)

    def remove_one_food_particle_in_circle(self, circle: Circle) -> bool:
        for index, particle in enumerate(self._particles):
            if circle.is_inside(particle.position):
                del self._particles[index]
                return True
        return False

    def is_there_food_left(self) -> bool:
        return bool(self._particles)


class Food:
    def __init__(self, seed: int = 0):
        self._rng = DeterministicRng(seed)
        self._clusters: List[CircleWithFood] = []

    @property
    def clusters(self) -> List[CircleWithFood]:
        return self._clusters

    def __iter__(self) -> Iterator[FoodParticle]:
        # Removing food while iterating invalidates the traversal.
        for cluster in self._clusters:
            yield from cluster

    def __len__(self) -> int:
        return sum(len(cluster) for cluster in self._clusters)

    def generate_food_in_circle(self, circle: Circle, particle_count: int, obstacles: Obstacles) -> bool:
        if particle_count < 0:
            raise ValueError(f"particle count can't be negative, got {particle_count}")
        if obstacles.any_obstacles_in_circle(circle):
            logger.debug("Refused food placement at (%s, %s): circle touches an obstacle", circle.center.x, circle.center.y)
            return False
        if particle_count == 0:
            return True

        self._clusters.append(CircleWithFood(circle, particle_count, obstacles, self._rng))
        return True

    def is_there_food_left(self) -> bool:
        return bool(self._clusters)

    def remove_one_food_particle_in_circle(self, circle: Circle) -> bool:
        for index, cluster in enumerate(self._clusters):
            if not shapes_intersect(circle, cluster.circle):
                continue
            if cluster.remove_one_food_particle_in_circle(circle):
                if not cluster.is_there_food_left():
                    del self._clusters[index]
                return True
        return False

    def load_from_file(self, obstacles: Obstacles, path: Path | str) -> bool:
        try:
            reader = RecordReader.from_path(path)
            count = reader.next_count()
            records = []
            for _ in range(count):
                center = Vector2(reader.next_float(), reader.next_float())
                circle = Circle(center, reader.next_float())
                particle_count = reader.next_count()
                if obstacles.any_obstacles_in_circle(circle):
                    raise RecordFormatError(f"food circle at ({center.x}, {center.y}) intersects an obstacle")
                records.append((circle, particle_count))
            reader.expect_end()
        except OSError as error:
            logger.error("Couldn't open food file %s: %s", path, error)
            return False
        except (RecordFormatError, ValueError) as error:
            logger.error("Food file %s is badly formatted: %s", path, error)
            return False

        for circle, particle_count in records:
            if particle_count == 0:
                continue
            self._clusters.append(CircleWithFood(circle, particle_count, obstacles, self._rng))
        logger.info("Loaded %d food clusters from %s", len(records), path)
        return True

    def save_to_file(self, path: Path | str) -> bool:
        rows = [
            (cluster.circle.center.x, cluster.circle.center.y, cluster.circle.radius, len(cluster))
            for cluster in self._clusters
        ]
        try:
            write_records(path, [str(len(rows))], rows)
        except OSError as error:
            logger.error("Couldn't write food file %s: %s", path, error)
            return False
        return True
