"""
Renderer interface for Snake Duel.

A renderer turns the dictionary from DuelGame.get_state() into pixels on a
pygame surface; it never touches the game objects themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple


class RendererInterface(ABC):
    """Draws a duel state onto a surface it is handed each frame."""

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: Any) -> None:
        """
        Draw one frame.

        Args:
            game_state: Snapshot from DuelGame.get_state()
            surface: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """Window size in pixels needed for the whole board."""
        pass

    @abstractmethod
    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Fit the drawing into the given pixel rectangle."""
        pass
