"""
Human input move source - keyboard-driven directions for the player snake.
"""
from typing import List, Optional

from ..core.move_source import MoveSource, WorldState
from ..game.grid import Direction


class HumanInput(MoveSource):
    """
    Collects the directions requested by the front end between two ticks.

    Each request is checked against the snake's current direction, the same
    way a key press would be: a reversal is dropped and the latest remaining
    request wins. With nothing usable queued the snake keeps its direction.
    """

    def __init__(self):
        self._requests: List[Direction] = []

    def push(self, direction: Direction) -> None:
        """Record a requested direction."""
        self._requests.append(direction)

    @property
    def queued(self) -> Optional[Direction]:
        """Most recent request, or None."""
        return self._requests[-1] if self._requests else None

    def decide(self, world: WorldState) -> Direction:
        current = world.me.direction
        direction = current
        for request in self._requests:
            if request != current.opposite:
                direction = request
        self._requests.clear()
        return direction

    def reset(self) -> None:
        self._requests.clear()
