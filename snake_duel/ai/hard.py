"""
Adversarial Strategy (Hard) - Depth-limited minimax with alpha-beta pruning.

The opponent is modeled as playing perfectly against the AI's own
heuristic (a worst-case assumption, not a prediction of the player).
Opponent moves are simulated on immutable snapshots, so the live snakes
are only ever read.
"""
import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .base import Strategy, food_position
from .medium import MediumStrategy
from ..game.grid import Direction, Grid, Point, euclidean, manhattan

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DEPTH = 3
DEFAULT_FLOOD_FILL_CAP = 15

# Terminal scores, from the AI's point of view
AI_TRAPPED_SCORE = -10000
OPPONENT_TRAPPED_SCORE = 10000
# Best root score below this means every line looks fatal
FALLBACK_THRESHOLD = -1000

# Evaluation weights
FOOD_DISTANCE_WEIGHT = 10
FREE_SPACE_WEIGHT = 50
LENGTH_WEIGHT = 100
PROXIMITY_RADIUS = 5
PROXIMITY_WEIGHT = 20
INTERCEPT_RADIUS = 5
INTERCEPT_BONUS = 200
CENTER_WEIGHT = 5


@dataclass(frozen=True)
class SnakeSnapshot:
    """Immutable copy of a snake body used for hypothetical positions."""
    body: Tuple[Point, ...]

    @classmethod
    def from_snake(cls, snake: Any) -> "SnakeSnapshot":
        return cls(tuple(snake.body))

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def with_head(self, cell: Point) -> "SnakeSnapshot":
        """Same body with only the head cell replaced; the tail does not shift."""
        return SnakeSnapshot((cell,) + self.body[1:])


class HardStrategy(Strategy):
    """
    Minimax over alternating AI / opponent head moves.

    Plies alternate starting with the opponent; leaves are scored with a
    weighted heuristic (food distance, free space, length advantage,
    opponent proximity, food intercept, center control). If every root move
    scores below FALLBACK_THRESHOLD, A* toward the food takes over.
    """

    strategy_id = "hard"

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        max_depth: int = DEFAULT_SEARCH_DEPTH,
        flood_fill_cap: int = DEFAULT_FLOOD_FILL_CAP,
        pathfinder: Optional[MediumStrategy] = None
    ):
        """
        Initialize the strategy.

        Args:
            grid: Board the snakes live on
            rng: Random source
            max_depth: Plies searched below each root move
            flood_fill_cap: Cell cap for the free-space term
            pathfinder: A* provider for the fallback
        """
        super().__init__(grid, rng)
        self.max_depth = max_depth
        self.flood_fill_cap = flood_fill_cap
        self.pathfinder = pathfinder if pathfinder is not None else MediumStrategy(grid)
        self.nodes_evaluated = 0

    @classmethod
    def from_config(cls, grid, ai_config=None, rng=None) -> "HardStrategy":
        if ai_config is None:
            return cls(grid, rng=rng)
        return cls(
            grid,
            rng=rng,
            max_depth=ai_config.hard_search_depth,
            flood_fill_cap=ai_config.hard_flood_fill_cap,
            pathfinder=MediumStrategy(grid, flood_fill_cap=ai_config.medium_flood_fill_cap),
        )

    def get_direction(self, ai_snake: Any, food: Any, opponent: Any) -> Direction:
        head = ai_snake.body[0]
        target = food_position(food)
        ai = SnakeSnapshot.from_snake(ai_snake)
        opp = SnakeSnapshot.from_snake(opponent)
        all_snakes = (ai, opp)

        valid_moves = self.grid.safe_neighbors(head, all_snakes)

        if not valid_moves:
            logger.debug("%s has no safe move, keeping %s", self.strategy_id, ai_snake.direction.name)
            return ai_snake.direction

        if len(valid_moves) == 1:
            return Direction.between(head, valid_moves[0])

        best_move = valid_moves[0]
        best_score = -math.inf

        for move in valid_moves:
            score = self.minimax(move, ai, opp, target, 0, False, -math.inf, math.inf)
            if score > best_score:
                best_score = score
                best_move = move

        if best_score < FALLBACK_THRESHOLD:
            path = self.pathfinder.find_path(head, target, all_snakes)
            if path:
                self.fallbacks += 1
                logger.debug("Minimax best score %.1f, falling back to A*", best_score)
                return Direction.between(head, path[0])

        return Direction.between(head, best_move)

    def minimax(
        self,
        ai_pos: Point,
        ai: SnakeSnapshot,
        opponent: SnakeSnapshot,
        food: Point,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Alpha-beta minimax over simulated head positions.

        Args:
            ai_pos: Simulated AI head
            ai: AI body snapshot (never moved during the search)
            opponent: Opponent snapshot, head possibly simulated
            food: Food position
            depth: Current ply
            maximizing: True on the AI's turn
            alpha: Best score the AI can already force
            beta: Best score the opponent can already force

        Returns:
            Score of the position from the AI's point of view
        """
        if depth >= self.max_depth:
            return self.evaluate(ai_pos, ai, opponent, food)

        all_snakes = (ai, opponent)

        # Simulated opponent head may have landed on the AI head
        if not self.grid.is_safe(ai_pos, all_snakes):
            return AI_TRAPPED_SCORE

        if maximizing:
            valid_moves = self.grid.safe_neighbors(ai_pos, all_snakes)
            if not valid_moves:
                return AI_TRAPPED_SCORE

            max_score = -math.inf
            for move in valid_moves:
                score = self.minimax(move, ai, opponent, food, depth + 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return max_score

        valid_moves = self.grid.safe_neighbors(opponent.head, all_snakes)
        if not valid_moves:
            return OPPONENT_TRAPPED_SCORE

        min_score = math.inf
        for move in valid_moves:
            score = self.minimax(ai_pos, ai, opponent.with_head(move), food, depth + 1, True, alpha, beta)
            min_score = min(min_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return min_score

    def evaluate(self, pos: Point, ai: Any, opponent: Any, food: Point) -> float:
        """Static score of the AI head sitting at ``pos``."""
        self.nodes_evaluated += 1
        all_snakes = (ai, opponent)
        opponent_head = opponent.body[0]
        score = 0.0

        distance_to_food = manhattan(pos, food)
        score -= distance_to_food * FOOD_DISTANCE_WEIGHT

        score += self.grid.flood_fill(pos, all_snakes, self.flood_fill_cap) * FREE_SPACE_WEIGHT

        score += (len(ai.body) - len(opponent.body)) * LENGTH_WEIGHT

        distance_to_opponent = manhattan(pos, opponent_head)
        if distance_to_opponent < PROXIMITY_RADIUS:
            score -= (PROXIMITY_RADIUS - distance_to_opponent) * PROXIMITY_WEIGHT

        if self.can_intercept(pos, opponent_head, food):
            score += INTERCEPT_BONUS

        score -= euclidean(pos, self.grid.center) * CENTER_WEIGHT

        return score

    @staticmethod
    def can_intercept(ai_pos: Point, opponent_pos: Point, food: Point) -> bool:
        """Heuristic: AI is strictly closer to the food and already near it."""
        ai_to_food = manhattan(ai_pos, food)
        return ai_to_food < manhattan(opponent_pos, food) and ai_to_food < INTERCEPT_RADIUS

    def reset(self) -> None:
        super().reset()
        self.nodes_evaluated = 0

    def get_stats(self) -> Dict[str, Any]:
        stats = super().get_stats()
        stats["nodes_evaluated"] = self.nodes_evaluated
        return stats
