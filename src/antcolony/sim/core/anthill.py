from __future__ import annotations

import logging
from pathlib import Path

from pygame.math import Vector2

from ..utils.records import RecordFormatError, RecordReader, write_records
from .geometry import Circle

logger = logging.getLogger(__name__)


class Anthill:
    def __init__(self, center: Vector2 | Circle, radius: float | None = None, food_counter: int = 0):
        if isinstance(center, Circle):
            circle = Circle(center.center, center.radius)
        else:
            if radius is None:
                raise ValueError("an anthill needs a radius")
            circle = Circle(center, radius)
        if food_counter < 0:
            raise ValueError(f"the food counter can't be negative, got {food_counter}")
        if food_counter != int(food_counter):
            raise ValueError(f"the food counter must be a whole number, got {food_counter}")
        self._circle = circle
        self._food_counter = int(food_counter)

    @property
    def circle(self) -> Circle:
        return self._circle

    @property
    def center(self) -> Vector2:
        return self._circle.center

    @property
    def radius(self) -> float:
        return self._circle.radius

    @property
    def food_counter(self) -> int:
        return self._food_counter

    def is_inside(self, position: Vector2) -> bool:
        return self._circle.is_inside(position)

    def add_food(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"the amount of food added can't be negative, got {amount}")
        if amount != int(amount):
            raise ValueError(f"the amount of food added must be a whole number, got {amount}")
        self._food_counter += int(amount)

    def load_from_file(self, path: Path | str) -> bool:
        try:
            reader = RecordReader.from_path(path)
            center = Vector2(reader.next_float(), reader.next_float())
            circle = Circle(center, reader.next_float())
            food_counter = reader.next_count()
            reader.expect_end()
        except OSError as error:
            logger.error("Couldn't open anthill file %s: %s", path, error)
            return False
        except (RecordFormatError, ValueError) as error:
            logger.error("Anthill file %s is badly formatted: %s", path, error)
            return False

        self._circle = circle
        self._food_counter = food_counter
        return True

    def save_to_file(self, path: Path | str) -> bool:
        row = (self.center.x, self.center.y, self.radius, self._food_counter)
        try:
            write_records(path, [], [row])
        except OSError as error:
            logger.error("Couldn't write anthill file %s: %s", path, error)
            return False
        return True
