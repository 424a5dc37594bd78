from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    ants: int
    carrying: int
    anthill_food: int
    food_left: int
    to_anthill_pheromones: int
    to_food_pheromones: int
    tick_duration_ms: float = 0.0
