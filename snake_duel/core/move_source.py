"""
Abstract move source interface for Snake Duel.

Every snake is driven by a move source: the AI strategies (easy, medium,
hard) and the keyboard-driven human input all implement this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from ..game.grid import Direction, Point


@dataclass(frozen=True)
class WorldState:
    """
    Read-mostly snapshot handed to a move source each tick.

    ``me`` is the snake being asked for a move, ``opponent`` the other one.
    """
    me: Any
    opponent: Any
    food: Point


class MoveSource(ABC):
    """
    Abstract capability that picks a snake's next direction.

    Implementations must not mutate the snakes they are shown.
    """

    @abstractmethod
    def decide(self, world: WorldState) -> Direction:
        """
        Choose the next direction for ``world.me``.

        Args:
            world: Current snakes and food

        Returns:
            One of the four directions. Returning the snake's current
            direction means "no better choice found, keep going".
        """
        pass

    def reset(self) -> None:
        """
        Called when a match restarts.

        Use for clearing queued input or per-match state.
        """
        pass

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about recent decisions.

        Returns:
            Dictionary of counters (empty by default)
        """
        return {}
