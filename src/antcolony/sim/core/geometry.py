from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2

from ..utils.math2d import clamp_value


class Circle:
    __slots__ = ("_center", "_radius")

    def __init__(self, center: Vector2, radius: float):
        self._center = Vector2(center)
        self._radius = _check_radius(radius)

    @property
    def center(self) -> Vector2:
        return self._center

    @center.setter
    def center(self, value: Vector2) -> None:
        self._center = Vector2(value)

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = _check_radius(value)

    def is_inside(self, point: Vector2) -> bool:
        dx = point.x - self._center.x
        dy = point.y - self._center.y
        return dx * dx + dy * dy <= self._radius * self._radius

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self._center == other._center and self._radius == other._radius

    def __repr__(self) -> str:
        return f"Circle(center=({self._center.x}, {self._center.y}), radius={self._radius})"


def _check_radius(radius: float) -> float:
    radius = float(radius)
    if not radius > 0.0:
        raise ValueError(f"circle radius must be positive, got {radius}")
    return radius


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned box anchored at its top-left corner.

    The y axis points up, so the box spans ``[left, left + width]`` on x and
    ``[top - height, top]`` on y.
    """

    top_left: Vector2
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0.0 or self.height < 0.0:
            raise ValueError(f"rectangle sides can't be negative, got {self.width}x{self.height}")
        object.__setattr__(self, "top_left", Vector2(self.top_left))

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def right(self) -> float:
        return self.top_left.x + self.width

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def bottom(self) -> float:
        return self.top_left.y - self.height


def circle_intersects_rectangle(circle: Circle, rectangle: Rectangle) -> bool:
    center = circle.center
    nearest_x = clamp_value(center.x, rectangle.left, rectangle.right)
    nearest_y = clamp_value(center.y, rectangle.bottom, rectangle.top)
    dx = center.x - nearest_x
    dy = center.y - nearest_y
    return dx * dx + dy * dy <= circle.radius * circle.radius


def circles_intersect(first: Circle, second: Circle) -> bool:
    reach = first.radius + second.radius
    return first.center.distance_squared_to(second.center) <= reach * reach


def shapes_intersect(first: Circle | Rectangle, second: Circle | Rectangle) -> bool:
    if isinstance(first, Circle) and isinstance(second, Circle):
        return circles_intersect(first, second)
    if isinstance(first, Circle) and isinstance(second, Rectangle):
        return circle_intersects_rectangle(first, second)
    if isinstance(first, Rectangle) and isinstance(second, Circle):
        return circle_intersects_rectangle(second, first)
    raise TypeError(f"unsupported shapes: {type(first).__name__} and {type(second).__name__}")
