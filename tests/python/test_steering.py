from __future__ import annotations

import math

import pytest
from pygame.math import Vector2
from pytest import approx

from antcolony.config import AntConfig
from antcolony.rng import DeterministicRng
from antcolony.sim.core.geometry import Circle, Rectangle
from antcolony.sim.core.obstacles import Obstacles
from antcolony.sim.core.pheromones import Pheromones, PheromoneType
from antcolony.sim.systems.steering import angle_from_pheromones, angle_to_avoid_obstacles, random_turning

_CENTERS = (Vector2(-10.0, 0.0), Vector2(0.0, 0.0), Vector2(10.0, 0.0))


def _circles() -> list[Circle]:
    return [Circle(center, 1.0) for center in _CENTERS]


def _blocking(*indices: int) -> Obstacles:
    obstacles = Obstacles()
    for index in indices:
        center = _CENTERS[index]
        obstacles.add_obstacle(Rectangle(Vector2(center.x - 0.1, center.y + 0.1), 0.2, 0.2))
    return obstacles


@pytest.mark.parametrize(
    "blocked, expected",
    [
        ((), 0.0),
        ((0,), -math.pi / 6.0),
        ((2,), math.pi / 6.0),
        ((0, 2), 0.0),
        ((0, 1), math.pi + 4.0 * math.pi / 6.0),
        ((1, 2), math.pi - 4.0 * math.pi / 6.0),
        ((0, 1, 2), math.pi),
    ],
)
def test_obstacle_avoidance_policy(blocked, expected):
    angle = angle_to_avoid_obstacles(_circles(), _blocking(*blocked), DeterministicRng(1), AntConfig())
    assert angle == approx(expected, abs=1e-12)


def test_nothing_blocked_returns_exact_zero_without_drawing():
    rng = DeterministicRng(5)
    assert angle_to_avoid_obstacles(_circles(), Obstacles(), rng, AntConfig()) == 0.0
    assert rng.next_angle() == DeterministicRng(5).next_angle()


def test_blocked_ahead_only_turns_a_right_angle_either_way():
    rng = DeterministicRng(3)
    obstacles = _blocking(1)
    seen = {angle_to_avoid_obstacles(_circles(), obstacles, rng, AntConfig()) for _ in range(64)}
    assert seen == {math.pi / 2.0, -math.pi / 2.0}


def test_pheromone_steering_is_intensity_weighted():
    field = Pheromones(PheromoneType.TO_FOOD)
    field.add_pheromone_particle(_CENTERS[0], 30)
    field.add_pheromone_particle(_CENTERS[2], 10)
    angle = angle_from_pheromones(_circles(), field, AntConfig())
    assert angle == approx(math.pi / 12.0)


def test_pheromone_steering_without_signal_is_zero():
    field = Pheromones(PheromoneType.TO_FOOD)
    assert angle_from_pheromones(_circles(), field, AntConfig()) == 0.0

    field.add_pheromone_particle(Vector2(50.0, 50.0), 100)
    assert angle_from_pheromones(_circles(), field, AntConfig()) == 0.0

    field.add_pheromone_particle(_CENTERS[1], 100)
    assert angle_from_pheromones(_circles(), field, AntConfig()) == 0.0


def test_pheromone_steering_turns_fully_towards_single_side():
    field = Pheromones(PheromoneType.TO_ANTHILL)
    field.add_pheromone_particle(_CENTERS[2], 1)
    config = AntConfig(pheromone_steer_angle=0.4)
    assert angle_from_pheromones(_circles(), field, config) == approx(-0.4)


def test_random_turning():
    assert random_turning(DeterministicRng(1), AntConfig(wander_std=0.0)) == 0.0
    draws = [random_turning(DeterministicRng(seed), AntConfig()) for seed in range(200)]
    assert any(draw != 0.0 for draw in draws)
    assert abs(sum(draws) / len(draws)) < AntConfig().wander_std
