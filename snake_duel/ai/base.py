"""
Base class for the AI strategies.

A strategy is a MoveSource with a fixed grid and an injected random
generator, answering ``get_direction(ai_snake, food, opponent)``.
"""
import random
from abc import abstractmethod
from typing import Any, Dict, Optional

from ..core.move_source import MoveSource, WorldState
from ..game.grid import Direction, Grid, Point


def food_position(food: Any) -> Point:
    """Accept either a bare Point or a Food object with a ``position``."""
    position = getattr(food, "position", food)
    return Point(position[0], position[1])


class Strategy(MoveSource):
    """
    Abstract AI strategy.

    Subclasses implement ``get_direction``; they read the snakes they are
    given and never mutate them.
    """

    strategy_id: str = ""

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        """
        Initialize the strategy.

        Args:
            grid: Board the snakes live on
            rng: Random source; a fresh unseeded generator if omitted
        """
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.decisions = 0
        self.fallbacks = 0

    @classmethod
    def from_config(cls, grid: Grid, ai_config: Any = None,
                    rng: Optional[random.Random] = None) -> "Strategy":
        """Create the strategy from the ``ai`` config section."""
        return cls(grid, rng=rng)

    def decide(self, world: WorldState) -> Direction:
        self.decisions += 1
        return self.get_direction(world.me, world.food, world.opponent)

    @abstractmethod
    def get_direction(self, ai_snake: Any, food: Any, opponent: Any) -> Direction:
        """
        Choose the AI snake's next direction.

        Args:
            ai_snake: The snake being steered
            food: Food position (Point) or Food object
            opponent: The other snake

        Returns:
            A direction, or ``ai_snake.direction`` when there is no escape
        """
        pass

    def reset(self) -> None:
        self.decisions = 0
        self.fallbacks = 0

    def get_stats(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy_id,
            "decisions": self.decisions,
            "fallbacks": self.fallbacks,
        }
