"""
Reactive Strategy (Easy) - Random safe moves with an occasional pull toward food.
"""
import logging
import random
from typing import Any, Optional

from .base import Strategy, food_position
from ..game.grid import Direction, Grid, manhattan

logger = logging.getLogger(__name__)

DEFAULT_FOOD_BIAS = 0.2


class EasyStrategy(Strategy):
    """
    Picks among safe moves only.

    With probability ``food_bias`` it takes the safe move closest to the
    food (first minimum wins), otherwise a uniformly random safe move.
    """

    strategy_id = "easy"

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        food_bias: float = DEFAULT_FOOD_BIAS
    ):
        super().__init__(grid, rng)
        self.food_bias = food_bias

    @classmethod
    def from_config(cls, grid, ai_config=None, rng=None) -> "EasyStrategy":
        if ai_config is None:
            return cls(grid, rng=rng)
        return cls(grid, rng=rng, food_bias=ai_config.easy_food_bias)

    def get_direction(self, ai_snake: Any, food: Any, opponent: Any) -> Direction:
        head = ai_snake.body[0]
        valid_moves = self.grid.safe_neighbors(head, [ai_snake, opponent])

        if not valid_moves:
            logger.debug("%s has no safe move, keeping %s", self.strategy_id, ai_snake.direction.name)
            return ai_snake.direction

        if self.rng.random() < self.food_bias:
            target = food_position(food)
            best_move = min(valid_moves, key=lambda move: manhattan(move, target))
            return Direction.between(head, best_move)

        return Direction.between(head, self.rng.choice(valid_moves))
