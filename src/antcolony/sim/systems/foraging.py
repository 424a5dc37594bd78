from __future__ import annotations

from typing import List

from ...config import AntConfig
from ...rng import DeterministicRng
from ..core.agent import Ant
from ..core.anthill import Anthill
from ..core.food import Food
from ..core.geometry import Circle
from ..core.obstacles import Obstacles
from ..core.pheromones import Pheromones, PheromoneType
from ..utils.math2d import rotate
from . import steering
from .vision import make_vision_circles, update_vision_circles


def _check_polarity(pheromones: Pheromones, expected: PheromoneType, name: str) -> None:
    if pheromones.type is not expected:
        raise ValueError(f"{name} must be of type {expected.name}, got {pheromones.type.name}")


def advance_release_timer(ant: Ant, delta_time: float, period: float) -> bool:
    """Accumulate elapsed time and report whether a pheromone is due this tick.

    At most one release fires per tick; only one period is folded back out of
    the accumulator.
    """

    ant.time_since_last_pheromone_release += delta_time
    if ant.time_since_last_pheromone_release > period:
        ant.time_since_last_pheromone_release -= period
        return True
    return False


def _pick_up_food(ant: Ant, circles: List[Circle], food: Food, config: AntConfig) -> None:
    for circle in circles:
        if food.remove_one_food_particle_in_circle(circle):
            ant.has_food = True
            # Head back the way it came.
            ant.velocity *= -1.0
            update_vision_circles(circles, ant.position, ant.velocity, config)
            return


def update_ant(
    ant: Ant,
    food: Food,
    to_anthill: Pheromones,
    to_food: Pheromones,
    anthill: Anthill,
    obstacles: Obstacles,
    rng: DeterministicRng,
    delta_time: float,
    config: AntConfig,
) -> None:
    _check_polarity(to_anthill, PheromoneType.TO_ANTHILL, "to_anthill")
    _check_polarity(to_food, PheromoneType.TO_FOOD, "to_food")
    if delta_time < 0.0:
        raise ValueError(f"delta_time can't be negative, got {delta_time}")

    release = advance_release_timer(ant, delta_time, config.pheromone_release_period)

    ant.position += ant.velocity * delta_time
    circles = make_vision_circles(ant.position, ant.velocity, config)

    if ant.has_food:
        if anthill.is_inside(ant.position):
            anthill.add_food()
            ant.has_food = False
        elif release:
            to_food.add_pheromone_particle(ant.position)
    else:
        if release:
            to_anthill.add_pheromone_particle(ant.position)
        _pick_up_food(ant, circles, food, config)

    avoid_angle = steering.angle_to_avoid_obstacles(circles, obstacles, rng, config)
    if avoid_angle != 0.0:
        ant.velocity = rotate(ant.velocity, avoid_angle)
        update_vision_circles(circles, ant.position, ant.velocity, config)

    trail = to_anthill if ant.has_food else to_food
    angle = steering.angle_from_pheromones(circles, trail, config)
    angle += steering.random_turning(rng, config)
    ant.velocity = rotate(ant.velocity, angle)
