"""
Snake Model - Body, direction and life/score state for one snake.

The same Snake class is used for the player and the AI; what differs is
the move source plugged into it.
"""
from typing import Any, Dict, List, NamedTuple, Optional, TYPE_CHECKING

from .grid import Direction, Grid, Point

if TYPE_CHECKING:
    from ..core.move_source import MoveSource, WorldState


FOOD_SCORE = 10
INITIAL_LENGTH = 3


class CollisionResult(NamedTuple):
    """Outcome of checking this snake's head against another snake."""
    collision: bool
    head_to_head: bool


class Snake:
    """
    A snake on the grid: head-first body, direction state, alive flag and score.

    ``set_direction`` only records a pending direction; it is committed on
    the next ``move`` so that two quick turns inside one tick cannot reverse
    the snake onto itself.
    """

    def __init__(
        self,
        start: Point,
        grid: Grid,
        name: str = "snake",
        move_source: Optional["MoveSource"] = None
    ):
        """
        Initialize the snake.

        Args:
            start: Head position; the body trails to the left of it
            grid: Board the snake lives on
            name: Display name ("player", "ai", ...)
            move_source: Optional source of directions for ``decide``
        """
        self.grid = grid
        self.name = name
        self.move_source = move_source

        # Snake state (initialized in reset)
        self.body: List[Point] = []
        self.direction: Direction = Direction.RIGHT
        self.pending_direction: Direction = Direction.RIGHT
        self.alive: bool = True
        self.score: int = 0

        self.reset(start)

    def reset(self, start: Point) -> None:
        """Restore the initial 3-cell, right-facing, alive state."""
        self.body = [Point(start.x - i, start.y) for i in range(INITIAL_LENGTH)]
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.alive = True
        self.score = 0
        if self.move_source is not None:
            self.move_source.reset()

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def set_direction(self, direction: Direction) -> None:
        """
        Request a direction for the next move.

        A request that exactly reverses the current direction is ignored.
        """
        if direction == self.direction.opposite:
            return
        self.pending_direction = direction

    def next_head(self) -> Point:
        """Where the head will land if the pending direction is committed."""
        return self.head.moved(self.pending_direction)

    def move(self, ate_food: bool = False) -> None:
        """
        Advance one cell in the pending direction.

        Hitting a wall or any pre-move body cell kills the snake and leaves
        the body untouched. Otherwise the new head is prepended and the tail
        is dropped, unless food was eaten (grow by one, +10 score).

        Args:
            ate_food: Whether the new head lands on food this tick
        """
        if not self.alive:
            return

        self.direction = self.pending_direction
        new_head = self.head.moved(self.direction)

        if not self.grid.is_safe(new_head, [self]):
            self.alive = False
            return

        self.body.insert(0, new_head)

        if ate_food:
            self.score += FOOD_SCORE
        else:
            self.body.pop()

    def check_collision_with_snake(self, other: Any) -> CollisionResult:
        """
        Check whether this snake's head sits on any cell of another snake.

        Returns:
            CollisionResult; head_to_head is set when the hit cell is the
            other snake's head
        """
        head = self.head
        for i, segment in enumerate(other.body):
            if segment == head:
                return CollisionResult(collision=True, head_to_head=i == 0)
        return CollisionResult(collision=False, head_to_head=False)

    def decide(self, world: "WorldState") -> Optional[Direction]:
        """
        Ask the move source for a direction and apply it.

        Args:
            world: Snapshot with this snake as ``world.me``

        Returns:
            The chosen direction, or None if there is no move source or the
            snake is dead
        """
        if self.move_source is None or not self.alive:
            return None

        direction = self.move_source.decide(world)
        if direction is not None:
            self.set_direction(direction)
        return direction

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "name": self.name,
            "body": [p.to_dict() for p in self.body],
            "direction": self.direction.name,
            "alive": self.alive,
            "score": self.score,
            "length": self.length,
        }
