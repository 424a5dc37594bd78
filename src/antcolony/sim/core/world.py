from __future__ import annotations

import logging
from pathlib import Path
from time import perf_counter
from typing import Any, Dict

from pygame.math import Vector2

from ...config import SimulationConfig
from ..systems import metrics as metrics_system
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotAnthill, SnapshotFields, SnapshotMetadata
from .agent import Ant
from .anthill import Anthill
from .colony import Ants
from .food import Food
from .geometry import Circle, Rectangle
from .obstacles import Obstacles
from .pheromones import Pheromones, PheromoneType

logger = logging.getLogger(__name__)

OBSTACLES_FILE = "obstacles.txt"
FOOD_FILE = "food.txt"
ANTHILL_FILE = "anthill.txt"


class World:
    def __init__(self, config: SimulationConfig):
        self._config = config
        self._metrics: TickMetrics | None = None
        self._build()

    def _build(self) -> None:
        config = self._config
        self._obstacles = Obstacles()
        for rect in config.obstacles:
            self._obstacles.add_obstacle(Rectangle(Vector2(rect.top_left), rect.width, rect.height))

        anthill = config.anthill
        self._anthill = Anthill(Vector2(anthill.center), anthill.radius, anthill.food_counter)

        self._food = Food(config.food_seed)
        for patch in config.food_patches:
            placed = self._food.generate_food_in_circle(
                Circle(Vector2(patch.center), patch.radius), patch.particles, self._obstacles
            )
            if not placed:
                logger.warning("Skipped food patch at %s: it overlaps an obstacle", patch.center)

        self._to_anthill = Pheromones(PheromoneType.TO_ANTHILL, config.pheromones)
        self._to_food = Pheromones(PheromoneType.TO_FOOD, config.pheromones)

        self._ants = Ants(config.seed, config.ant)
        self._ants.add_ants_around_circle(self._anthill.circle, config.initial_ants)

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def ants(self) -> Ants:
        return self._ants

    @property
    def food(self) -> Food:
        return self._food

    @property
    def obstacles(self) -> Obstacles:
        return self._obstacles

    @property
    def anthill(self) -> Anthill:
        return self._anthill

    @property
    def to_anthill(self) -> Pheromones:
        return self._to_anthill

    @property
    def to_food(self) -> Pheromones:
        return self._to_food

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        self._metrics = None
        self._build()

    def step(self, tick: int) -> TickMetrics:
        start = perf_counter()
        dt = self._config.time_step
        self._ants.update(self._food, self._to_anthill, self._to_food, self._anthill, self._obstacles, dt)
        self._to_anthill.update_particles_evaporation(dt)
        self._to_food.update_particles_evaporation(dt)
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(self, tick, duration_ms)
        return self._metrics

    def snapshot(self, tick: int) -> Snapshot:
        metrics = self._metrics if self._metrics is not None else metrics_system.create_metrics(self, tick, 0.0)
        metadata = SnapshotMetadata(
            sim_dt=self._config.time_step,
            tick_rate=0.0 if self._config.time_step <= 0 else 1.0 / self._config.time_step,
            seed=self._config.seed,
            food_seed=self._config.food_seed,
            config_version=self._config.config_version,
        )
        fields = SnapshotFields(
            food=[(particle.position.x, particle.position.y) for particle in self._food],
            to_anthill=[(p.position.x, p.position.y, p.intensity) for p in self._to_anthill],
            to_food=[(p.position.x, p.position.y, p.intensity) for p in self._to_food],
        )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            ants=[self._ant_snapshot(ant) for ant in self._ants],
            anthill=SnapshotAnthill(
                x=self._anthill.center.x,
                y=self._anthill.center.y,
                radius=self._anthill.radius,
                food_counter=self._anthill.food_counter,
            ),
            obstacles=[
                {"x": rect.left, "y": rect.top, "width": rect.width, "height": rect.height}
                for rect in self._obstacles
            ],
            metadata=metadata,
            fields=fields,
        )

    @staticmethod
    def _ant_snapshot(ant: Ant) -> Dict[str, Any]:
        return {
            "x": ant.position.x,
            "y": ant.position.y,
            "heading": ant.facing_angle,
            "has_food": ant.has_food,
        }

    def save(self, directory: Path | str) -> bool:
        directory = Path(directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            logger.error("Couldn't create scenario directory %s: %s", directory, error)
            return False
        saved = (
            self._obstacles.save_to_file(directory / OBSTACLES_FILE)
            and self._food.save_to_file(directory / FOOD_FILE)
            and self._anthill.save_to_file(directory / ANTHILL_FILE)
        )
        if saved:
            logger.info("Saved scenario to %s", directory)
        return saved

    def load(self, directory: Path | str) -> bool:
        """Replace obstacles, food and nest with the scenario stored in ``directory``.

        Nothing changes unless all three files load. Ants and trails are kept.
        """

        directory = Path(directory)
        obstacles = Obstacles()
        anthill = Anthill(self._anthill.circle, food_counter=0)
        food = Food(self._config.food_seed)
        loaded = (
            obstacles.load_from_file(directory / OBSTACLES_FILE)
            and anthill.load_from_file(directory / ANTHILL_FILE)
            and food.load_from_file(obstacles, directory / FOOD_FILE)
        )
        if not loaded:
            return False

        self._obstacles = obstacles
        self._anthill = anthill
        self._food = food
        logger.info("Loaded scenario from %s", directory)
        return True
