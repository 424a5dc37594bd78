from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2

from ..utils.math2d import heading_from_velocity


@dataclass(slots=True)
class Ant:
    position: Vector2
    # Encodes the facing direction too, so it is never the zero vector.
    velocity: Vector2
    has_food: bool = False
    time_since_last_pheromone_release: float = 0.0

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)
        if self.velocity.length_squared() == 0.0:
            raise ValueError("the ant's velocity can't be null")

    @property
    def facing_angle(self) -> float:
        return heading_from_velocity(self.velocity)
