from __future__ import annotations

from typing import TYPE_CHECKING

from ..types.metrics import TickMetrics

if TYPE_CHECKING:
    from ..core.world import World


def create_metrics(world: World, tick: int, duration_ms: float) -> TickMetrics:
    return TickMetrics(
        tick=tick,
        ants=len(world.ants),
        carrying=sum(1 for ant in world.ants if ant.has_food),
        anthill_food=world.anthill.food_counter,
        food_left=len(world.food),
        to_anthill_pheromones=len(world.to_anthill),
        to_food_pheromones=len(world.to_food),
        tick_duration_ms=duration_ms,
    )
