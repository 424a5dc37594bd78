from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics
    ants: List[Dict[str, Any]]
    anthill: "SnapshotAnthill"
    obstacles: List[Dict[str, float]]
    metadata: "SnapshotMetadata"
    fields: "SnapshotFields"


@dataclass(slots=True)
class SnapshotAnthill:
    x: float
    y: float
    radius: float
    food_counter: int


@dataclass(slots=True)
class SnapshotMetadata:
    sim_dt: float
    tick_rate: float
    seed: int
    food_seed: int
    config_version: str


@dataclass(slots=True)
class SnapshotFields:
    food: List[tuple[float, float]]
    to_anthill: List[tuple[float, float, int]]
    to_food: List[tuple[float, float, int]]
