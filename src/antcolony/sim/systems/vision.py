from __future__ import annotations

from typing import List

from pygame.math import Vector2

from ...config import AntConfig
from ..core.geometry import Circle
from ..utils.math2d import rotate

LEFT = 0
CENTER = 1
RIGHT = 2


def vision_bearings(config: AntConfig) -> tuple[float, float, float]:
    return (config.vision_angle, 0.0, -config.vision_angle)


def update_vision_circles(circles: List[Circle], position: Vector2, velocity: Vector2, config: AntConfig) -> None:
    """Recompute the [left, center, right] circles in place from position and heading.

    ``velocity`` must not be the zero vector.
    """

    facing = velocity / velocity.length()
    for circle, bearing in zip(circles, vision_bearings(config)):
        circle.radius = config.vision_radius
        circle.center = position + rotate(facing, bearing) * config.vision_distance


def make_vision_circles(position: Vector2, velocity: Vector2, config: AntConfig) -> List[Circle]:
    circles = [Circle(position, config.vision_radius) for _ in range(3)]
    update_vision_circles(circles, position, velocity, config)
    return circles
