from __future__ import annotations

from pygame.math import Vector2

from antcolony.sim.core.geometry import Circle, Rectangle
from antcolony.sim.core.obstacles import Obstacles


def _make_obstacles() -> Obstacles:
    obstacles = Obstacles()
    obstacles.add_obstacle(Vector2(1.0, 1.5), 2.0, 0.5)
    obstacles.add_obstacle(Vector2(-3.0, 0.0), 1.5, 1.0)
    obstacles.add_obstacle(Rectangle(Vector2(-1.0, 3.0), 0.2, 3.0))
    obstacles.add_obstacle(Rectangle(Vector2(4.0, 1.0), 1.0, 4.0))
    return obstacles


def test_add_obstacle_and_count():
    obstacles = _make_obstacles()
    assert len(obstacles) == 4
    obstacles.add_obstacle(Vector2(2.0, -1.0), 0.5, 1.0)
    assert len(obstacles) == 5


def test_any_obstacles_in_circle():
    obstacles = _make_obstacles()
    assert not obstacles.any_obstacles_in_circle(Circle(Vector2(1.0, 0.0), 0.5))
    assert obstacles.any_obstacles_in_circle(Circle(Vector2(3.5, 1.5), 1.0))
    assert obstacles.any_obstacles_in_circle(Circle(Vector2(2.5, -1.0), 1.5))
    assert obstacles.any_obstacles_in_circle(Circle(Vector2(3.5, -3.0), 0.5))


def test_empty_field_never_blocks():
    assert not Obstacles().any_obstacles_in_circle(Circle(Vector2(), 100.0))


def test_iteration_preserves_insertion_order():
    obstacles = _make_obstacles()
    assert [rect.left for rect in obstacles] == [1.0, -3.0, -1.0, 4.0]
