from __future__ import annotations

from typing import Sequence

from ...config import AntConfig
from ...rng import DeterministicRng
from ..core.geometry import Circle
from ..core.obstacles import Obstacles
from ..core.pheromones import Pheromones
from .vision import CENTER, LEFT, RIGHT


def angle_to_avoid_obstacles(
    circles: Sequence[Circle],
    obstacles: Obstacles,
    rng: DeterministicRng,
    config: AntConfig,
) -> float:
    blocked_left = obstacles.any_obstacles_in_circle(circles[LEFT])
    blocked_ahead = obstacles.any_obstacles_in_circle(circles[CENTER])
    blocked_right = obstacles.any_obstacles_in_circle(circles[RIGHT])

    if blocked_ahead and not blocked_left and not blocked_right:
        # Nothing says which side is better: pick one at random.
        return config.obstacle_ahead_angle * (1.0 if rng.next_coinflip() else -1.0)

    angle = 0.0
    if blocked_left:
        angle -= config.obstacle_side_angle
    if blocked_right:
        angle += config.obstacle_side_angle
    if blocked_ahead:
        angle = 2.0 * config.obstacle_ahead_angle - config.obstacle_ahead_multiplier * angle
    return angle


def angle_from_pheromones(circles: Sequence[Circle], pheromones: Pheromones, config: AntConfig) -> float:
    step = config.pheromone_steer_angle
    weighted_angle = 0.0
    total_weight = 0
    offset = step
    for circle in circles:
        weight = pheromones.get_intensity_in_circle(circle)
        weighted_angle += offset * weight
        total_weight += weight
        offset -= step

    if total_weight == 0:
        return 0.0
    return weighted_angle / total_weight


def random_turning(rng: DeterministicRng, config: AntConfig) -> float:
    return rng.next_gauss(0.0, config.wander_std)
