from __future__ import annotations

import math

from pygame.math import Vector2


def rotate(vector: Vector2, angle: float) -> Vector2:
    """Return ``vector`` rotated counter-clockwise by ``angle`` radians."""
    return vector.rotate_rad(angle)


def from_polar(length: float, angle: float) -> Vector2:
    return Vector2(length * math.cos(angle), length * math.sin(angle))


def heading_from_velocity(vector: Vector2) -> float:
    if vector.x == 0.0 and vector.y == 0.0:
        return 0.0
    return math.atan2(vector.y, vector.x)


def clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
