"""
Pathfinding Strategy (Medium) - A* from head to food over the live grid.

When the food is unreachable the snake heads for whichever safe neighbor
opens onto the most free space (bounded flood fill).
"""
import heapq
import itertools
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from .base import Strategy, food_position
from ..game.grid import Direction, Grid, Point, manhattan

logger = logging.getLogger(__name__)

DEFAULT_FLOOD_FILL_CAP = 20


@dataclass
class SearchNode:
    """A* bookkeeping for one cell; lives only for one search call."""
    cell: Point
    g: int
    h: int
    parent: Optional["SearchNode"]
    seq: int  # insertion order, breaks ties between equal f

    @property
    def f(self) -> int:
        return self.g + self.h


def reconstruct_path(node: SearchNode) -> List[Point]:
    """Walk parent links back to the start. The start cell is excluded."""
    path = []
    current = node
    while current.parent is not None:
        path.append(current.cell)
        current = current.parent
    path.reverse()
    return path


class MediumStrategy(Strategy):
    """
    Shortest path to food with A*, falling back to the roomiest safe move.

    Ties on equal priority go to the node that entered the open set first,
    so the chosen path is reproducible.
    """

    strategy_id = "medium"

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        flood_fill_cap: int = DEFAULT_FLOOD_FILL_CAP
    ):
        super().__init__(grid, rng)
        self.flood_fill_cap = flood_fill_cap

    @classmethod
    def from_config(cls, grid, ai_config=None, rng=None) -> "MediumStrategy":
        if ai_config is None:
            return cls(grid, rng=rng)
        return cls(grid, rng=rng, flood_fill_cap=ai_config.medium_flood_fill_cap)

    def get_direction(self, ai_snake: Any, food: Any, opponent: Any) -> Direction:
        head = ai_snake.body[0]
        all_snakes = [ai_snake, opponent]

        path = self.find_path(head, food_position(food), all_snakes)
        if path:
            return Direction.between(head, path[0])

        self.fallbacks += 1
        logger.debug("No path from %s to food, falling back to safest move", head)
        return self.get_safest_move(ai_snake, all_snakes)

    def find_path(self, start: Point, goal: Point, snakes: Iterable[Any]) -> Optional[List[Point]]:
        """
        A* search with unit step cost and a Manhattan heuristic.

        Args:
            start: Starting cell (normally the head, which is occupied)
            goal: Target cell
            snakes: Snakes whose bodies block movement

        Returns:
            Cells from the first step up to and including the goal, or None
            if the open set runs dry first
        """
        snakes = list(snakes)
        counter = itertools.count()

        start_node = SearchNode(start, 0, manhattan(start, goal), None, next(counter))
        open_nodes: Dict[Point, SearchNode] = {start: start_node}
        open_heap: List[Tuple[int, int, Point]] = [(start_node.f, start_node.seq, start)]
        closed: Set[Point] = set()

        while open_heap:
            f, _, cell = heapq.heappop(open_heap)
            current = open_nodes.get(cell)

            # Entry superseded by an in-place update, or already closed
            if current is None or f != current.f:
                continue

            if cell == goal:
                return reconstruct_path(current)

            del open_nodes[cell]
            closed.add(cell)

            for neighbor in self.grid.safe_neighbors(cell, snakes):
                if neighbor in closed:
                    continue

                tentative_g = current.g + 1
                existing = open_nodes.get(neighbor)

                if existing is None:
                    node = SearchNode(neighbor, tentative_g, manhattan(neighbor, goal), current, next(counter))
                    open_nodes[neighbor] = node
                    heapq.heappush(open_heap, (node.f, node.seq, neighbor))
                elif tentative_g < existing.g:
                    existing.g = tentative_g
                    existing.parent = current
                    heapq.heappush(open_heap, (existing.f, existing.seq, neighbor))

        return None

    def get_safest_move(self, ai_snake: Any, all_snakes: Iterable[Any]) -> Direction:
        """
        Pick the safe neighbor with the most reachable space.

        Returns:
            Direction toward the roomiest safe neighbor (first wins ties), or
            the current direction if there is no safe neighbor
        """
        all_snakes = list(all_snakes)
        head = ai_snake.body[0]
        valid_moves = self.grid.safe_neighbors(head, all_snakes)

        if not valid_moves:
            logger.debug("%s has no safe move, keeping %s", self.strategy_id, ai_snake.direction.name)
            return ai_snake.direction

        best_move = valid_moves[0]
        best_space = -1

        for move in valid_moves:
            space = self.grid.flood_fill(move, all_snakes, self.flood_fill_cap)
            if space > best_space:
                best_space = space
                best_move = move

        return Direction.between(head, best_move)
