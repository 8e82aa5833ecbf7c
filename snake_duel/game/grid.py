"""
Grid Geometry & Collision Oracle - Pure spatial queries shared by every agent.

Nothing here keeps state between calls: the Grid only knows its bounds, and
snakes are passed in as anything exposing a head-first ``body`` sequence
(live Snake objects or search snapshots alike).
"""
import math
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Set, Tuple


class Point(NamedTuple):
    """A cell on the game grid."""
    x: int
    y: int

    def moved(self, direction: "Direction") -> "Point":
        """Get the adjacent point one step in the given direction."""
        return Point(self.x + direction.dx, self.y + direction.dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class Direction(Enum):
    """Axis-aligned unit moves. Declaration order is the neighbor scan order."""
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        """The 180-degree reversal of this direction."""
        return Direction((-self.dx, -self.dy))

    @classmethod
    def between(cls, start: Point, end: Point) -> "Direction":
        """
        Get the direction that moves from start onto an adjacent end cell.

        Raises:
            ValueError: If the two cells are not 4-connected neighbors
        """
        return cls((end[0] - start[0], end[1] - start[1]))


def neighbors(cell: Point) -> List[Point]:
    """The four adjacent cells, without bounds filtering."""
    return [cell.moved(direction) for direction in Direction]


def manhattan(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Manhattan (L1) distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Straight-line distance; used only for soft positional scoring."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


class Grid:
    """
    Bounded game board answering "can a snake legally be here" questions.

    ``is_safe`` is the single source of truth for legal occupancy. A snake's
    tail counts as occupied even if it would move away on the same tick.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize the grid.

        Args:
            width: Grid width in cells
            height: Grid height in cells
        """
        self.width = width
        self.height = height

    @property
    def center(self) -> Tuple[float, float]:
        """Geometric center of the board (may fall between cells)."""
        return (self.width / 2, self.height / 2)

    def is_wall(self, cell: Point) -> bool:
        """True if the cell lies outside the board."""
        return cell[0] < 0 or cell[0] >= self.width or cell[1] < 0 or cell[1] >= self.height

    @staticmethod
    def is_occupied(cell: Point, snakes: Iterable[Any]) -> bool:
        """True if the cell is any body cell (head included) of any snake."""
        return any(cell in snake.body for snake in snakes)

    def is_safe(self, cell: Point, snakes: Iterable[Any]) -> bool:
        """True if a snake could occupy this cell next."""
        return not self.is_wall(cell) and not self.is_occupied(cell, snakes)

    def safe_neighbors(self, cell: Point, snakes: Iterable[Any]) -> List[Point]:
        """Adjacent cells that pass ``is_safe``, in Direction order."""
        snakes = list(snakes)
        return [n for n in neighbors(cell) if self.is_safe(n, snakes)]

    def flood_fill(self, start: Point, snakes: Iterable[Any], cap: int) -> int:
        """
        Count cells reachable from start using BFS, stopping at cap.

        The start cell itself is counted and is not checked for safety.
        This detects traps - if few cells are reachable, the snake would be trapped.

        Args:
            start: Starting position to check from
            snakes: Snakes whose bodies block movement
            cap: Maximum number of cells to count

        Returns:
            Number of reachable cells, at most cap
        """
        occupied: Set[Point] = set()
        for snake in snakes:
            occupied.update(snake.body)

        visited = {start}
        queue = deque([start])
        count = 0

        while queue and count < cap:
            current = queue.popleft()
            count += 1

            for neighbor in neighbors(current):
                if neighbor in visited:
                    continue
                if not self.is_wall(neighbor) and neighbor not in occupied:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return count


def head_to_head_collision(snake1: Any, snake2: Any) -> bool:
    """True if both heads sit on the same cell."""
    return snake1.body[0] == snake2.body[0]


@dataclass(frozen=True)
class HeadToHeadOutcome:
    """Result of a head-to-head collision. A draw has no winner and two losers."""
    winner: Optional[Any]
    losers: Tuple[Any, ...]

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def apply(self) -> None:
        """Mark every losing snake dead."""
        for snake in self.losers:
            snake.alive = False


def resolve_head_to_head(snake1: Any, snake2: Any) -> HeadToHeadOutcome:
    """
    Decide a head-to-head collision: the strictly shorter snake survives.

    Equal lengths are an explicit draw where both snakes lose.
    """
    len1, len2 = len(snake1.body), len(snake2.body)
    if len1 < len2:
        return HeadToHeadOutcome(winner=snake1, losers=(snake2,))
    if len2 < len1:
        return HeadToHeadOutcome(winner=snake2, losers=(snake1,))
    return HeadToHeadOutcome(winner=None, losers=(snake1, snake2))
