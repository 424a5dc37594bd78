from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

from pygame.math import Vector2

from ..utils.records import RecordFormatError, RecordReader, write_records
from .geometry import Circle, Rectangle, shapes_intersect

logger = logging.getLogger(__name__)


class Obstacles:
    def __init__(self) -> None:
        self._rectangles: List[Rectangle] = []

    def add_obstacle(self, top_left: Vector2 | Rectangle, width: float = 0.0, height: float = 0.0) -> None:
        if isinstance(top_left, Rectangle):
            self._rectangles.append(top_left)
        else:
            self._rectangles.append(Rectangle(top_left, width, height))

    def any_obstacles_in_circle(self, circle: Circle) -> bool:
        return any(shapes_intersect(circle, rectangle) for rectangle in self._rectangles)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._rectangles)

    def __len__(self) -> int:
        return len(self._rectangles)

    def load_from_file(self, path: Path | str) -> bool:
        try:
            reader = RecordReader.from_path(path)
            count = reader.next_count()
            loaded = [
                Rectangle(Vector2(reader.next_float(), reader.next_float()), reader.next_float(), reader.next_float())
                for _ in range(count)
            ]
            reader.expect_end()
        except OSError as error:
            logger.error("Couldn't open obstacles file %s: %s", path, error)
            return False
        except (RecordFormatError, ValueError) as error:
            logger.error("Obstacles file %s is badly formatted: %s", path, error)
            return False

        self._rectangles.extend(loaded)
        logger.info("Loaded %d obstacles from %s", len(loaded), path)
        return True

    def save_to_file(self, path: Path | str) -> bool:
        rows = [(r.left, r.top, float(r.width), float(r.height)) for r in self._rectangles]
        try:
            write_records(path, [str(len(rows))], rows)
        except OSError as error:
            logger.error("Couldn't write obstacles file %s: %s", path, error)
            return False
        return True
