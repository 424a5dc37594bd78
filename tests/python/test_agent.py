from __future__ import annotations

import dataclasses
import math

import pytest
from pygame.math import Vector2
from pytest import approx

from antcolony.config import AntConfig
from antcolony.sim.core.agent import Ant
from antcolony.sim.systems.vision import CENTER, LEFT, RIGHT, make_vision_circles, update_vision_circles


def test_ant_rejects_null_velocity():
    with pytest.raises(ValueError):
        Ant(position=Vector2(), velocity=Vector2())


def test_ant_uses_slots_and_copies_vectors():
    position = Vector2(1.0, 2.0)
    velocity = Vector2(0.5, 0.0)
    ant = Ant(position=position, velocity=velocity)
    position.x = 9.0
    velocity.x = 9.0

    assert not hasattr(ant, "__dict__")
    assert ant.position == Vector2(1.0, 2.0)
    assert ant.velocity == Vector2(0.5, 0.0)
    assert not ant.has_food
    assert ant.time_since_last_pheromone_release == 0.0

    clone = dataclasses.replace(ant)
    clone.position.x = -1.0
    assert ant.position.x == 1.0


def test_facing_angle_follows_velocity():
    assert Ant(Vector2(), Vector2(0.0, 1.0)).facing_angle == approx(math.pi / 2.0)
    assert Ant(Vector2(), Vector2(-1.0, -1.0)).facing_angle == approx(-3.0 * math.pi / 4.0)


@pytest.mark.parametrize("heading", [0.0, 0.3, 1.7, math.pi, -2.2, -math.pi / 2.0])
def test_vision_circles_sit_at_fixed_distance_and_bearing(heading: float):
    config = AntConfig(vision_radius=0.2, vision_distance=1.5, vision_angle=math.pi / 5.0)
    position = Vector2(3.0, -2.0)
    velocity = Vector2(2.0 * math.cos(heading), 2.0 * math.sin(heading))
    circles = make_vision_circles(position, velocity, config)

    assert len(circles) == 3
    expected = {LEFT: config.vision_angle, CENTER: 0.0, RIGHT: -config.vision_angle}
    for index, bearing in expected.items():
        circle = circles[index]
        offset = circle.center - position
        assert circle.radius == approx(0.2)
        assert offset.length() == approx(1.5)
        relative = math.atan2(offset.y, offset.x) - heading
        relative = math.atan2(math.sin(relative), math.cos(relative))
        assert relative == approx(bearing, abs=1e-9)


def test_left_is_counter_clockwise_from_heading():
    config = AntConfig(vision_distance=1.0, vision_angle=math.pi / 2.0)
    circles = make_vision_circles(Vector2(), Vector2(1.0, 0.0), config)
    assert circles[LEFT].center.y == approx(1.0)
    assert circles[CENTER].center.x == approx(1.0)
    assert circles[RIGHT].center.y == approx(-1.0)


def test_update_vision_circles_reuses_instances():
    config = AntConfig()
    circles = make_vision_circles(Vector2(), Vector2(1.0, 0.0), config)
    ids = [id(circle) for circle in circles]
    update_vision_circles(circles, Vector2(5.0, 5.0), Vector2(0.0, -3.0), config)
    assert [id(circle) for circle in circles] == ids
    assert circles[CENTER].center.x == approx(5.0)
    assert circles[CENTER].center.y == approx(5.0 - config.vision_distance)
