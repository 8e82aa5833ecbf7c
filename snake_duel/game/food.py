"""
Food - The single food item both snakes compete for.
"""
import random
from typing import Dict, Iterable, Optional

from .grid import Grid, Point


class Food:
    """Food position on the grid, respawned on a free cell after it is eaten."""

    def __init__(self, grid: Grid, position: Optional[Point] = None):
        self.grid = grid
        self.position: Point = position if position is not None else Point(0, 0)

    def respawn(self, excluded: Iterable[Point], rng: Optional[random.Random] = None) -> Point:
        """
        Place food at random location not in ``excluded``.

        Args:
            excluded: Cells the food must not land on (snake bodies)
            rng: Random source

        Returns:
            The new position
        """
        rng = rng if rng is not None else random.Random()
        blocked = set(excluded)
        attempts = 0
        max_attempts = self.grid.width * self.grid.height

        while attempts < max_attempts:
            candidate = Point(rng.randrange(self.grid.width), rng.randrange(self.grid.height))
            if candidate not in blocked:
                self.position = candidate
                return candidate
            attempts += 1

        # Fallback: find any empty cell (board is almost full)
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                point = Point(x, y)
                if point not in blocked:
                    self.position = point
                    return point

        return self.position

    def to_dict(self) -> Dict[str, int]:
        return self.position.to_dict()
