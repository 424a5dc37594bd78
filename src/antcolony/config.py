from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml


@dataclass
class AntConfig:
    speed: float = 0.1
    vision_radius: float = 0.02
    vision_distance: float = 0.03
    vision_angle: float = math.pi / 4.0
    pheromone_release_period: float = 0.1
    obstacle_side_angle: float = math.pi / 6.0
    obstacle_ahead_angle: float = math.pi / 2.0
    obstacle_ahead_multiplier: float = 4.0
    pheromone_steer_angle: float = math.pi / 6.0
    wander_std: float = math.pi / 50.0


@dataclass
class PheromoneConfig:
    evaporation_period: float = 0.1
    evaporation_step: int = 1
    default_intensity: int = 100


@dataclass
class AnthillConfig:
    center: tuple[float, float] = (0.3, 0.0)
    radius: float = 0.05
    food_counter: int = 0


@dataclass
class RectangleConfig:
    top_left: tuple[float, float] = (0.0, 0.0)
    width: float = 0.0
    height: float = 0.0


@dataclass
class FoodPatchConfig:
    center: tuple[float, float] = (0.0, 0.0)
    radius: float = 0.1
    particles: int = 500


def _default_obstacles() -> List[RectangleConfig]:
    # Arena walls first, then the inner block.
    return [
        RectangleConfig(top_left=(-2.0, 1.0), width=4.0, height=0.02),
        RectangleConfig(top_left=(-2.0, 1.0), width=0.02, height=2.0),
        RectangleConfig(top_left=(2.0, 1.0), width=0.02, height=2.0),
        RectangleConfig(top_left=(-2.0, -1.0), width=4.0, height=0.02),
        RectangleConfig(top_left=(-0.5, -0.5), width=0.5, height=0.2),
    ]


def _default_food_patches() -> List[FoodPatchConfig]:
    return [
        FoodPatchConfig(center=(0.0, 0.5)),
        FoodPatchConfig(center=(-1.2, 0.3)),
        FoodPatchConfig(center=(1.3, -0.4)),
        FoodPatchConfig(center=(-0.5, -0.85)),
    ]


@dataclass
class SimulationConfig:
    time_step: float = 1.0 / 60.0
    initial_ants: int = 50
    seed: int = 42
    food_seed: int = 12
    config_version: str = "v1"
    ant: AntConfig = field(default_factory=AntConfig)
    pheromones: PheromoneConfig = field(default_factory=PheromoneConfig)
    anthill: AnthillConfig = field(default_factory=AnthillConfig)
    obstacles: List[RectangleConfig] = field(default_factory=_default_obstacles)
    food_patches: List[FoodPatchConfig] = field(default_factory=_default_food_patches)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def _pair(value: tuple[float, float] | list[float] | None, default: tuple[float, float]) -> tuple[float, float]:
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    return default


def load_config(raw: dict) -> SimulationConfig:
    ant = AntConfig(**raw.get("ant", {}))
    pheromones = PheromoneConfig(**raw.get("pheromones", {}))

    anthill_raw = dict(raw.get("anthill", {}))
    anthill = AnthillConfig(
        center=_pair(anthill_raw.pop("center", None), AnthillConfig().center),
        **anthill_raw,
    )

    sim_values = {
        k: v for k, v in raw.items() if k not in {"ant", "pheromones", "anthill", "obstacles", "food_patches"}
    }
    config = SimulationConfig(ant=ant, pheromones=pheromones, anthill=anthill, **sim_values)

    if "obstacles" in raw:
        config.obstacles = [
            RectangleConfig(
                top_left=_pair(entry.get("top_left"), (0.0, 0.0)),
                **{k: v for k, v in entry.items() if k != "top_left"},
            )
            for entry in raw["obstacles"] or []
        ]
    if "food_patches" in raw:
        config.food_patches = [
            FoodPatchConfig(
                center=_pair(entry.get("center"), (0.0, 0.0)),
                **{k: v for k, v in entry.items() if k != "center"},
            )
            for entry in raw["food_patches"] or []
        ]
    return config
