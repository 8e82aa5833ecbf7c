"""
Duel Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from ..core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND = (26, 26, 46)
GRID_COLOR = (40, 40, 58)
PLAYER_HEAD_COLOR = (110, 210, 115)
PLAYER_BODY_COLOR = (76, 175, 80)
AI_HEAD_COLOR = (255, 110, 100)
AI_BODY_COLOR = (244, 67, 54)
DEAD_COLOR = (90, 90, 100)
FOOD_COLOR = (255, 107, 107)
TEXT_COLOR = (220, 220, 220)

HUD_HEIGHT = 32

SNAKE_COLORS = {
    "player": (PLAYER_HEAD_COLOR, PLAYER_BODY_COLOR),
    "ai": (AI_HEAD_COLOR, AI_BODY_COLOR),
}


class DuelRenderer(RendererInterface):
    """
    Renders the duel using Pygame: board, food, both snakes and a score line.
    """

    def __init__(
        self,
        cell_size: int = 25,
        grid_width: int = 30,
        grid_height: int = 20
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
        """
        self._cell_size = cell_size
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._offset_x = 0
        self._offset_y = HUD_HEIGHT
        self._font: Optional[Any] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Board plus the score line above it."""
        return (
            self._grid_width * self._cell_size,
            self._grid_height * self._cell_size + HUD_HEIGHT,
        )

    def get_cell_size(self) -> int:
        return self._cell_size

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Fit the board (and score line) into the given area."""
        self._offset_x = x
        self._offset_y = y + HUD_HEIGHT
        cell_w = width // self._grid_width
        cell_h = (height - HUD_HEIGHT) // self._grid_height
        self._cell_size = max(1, min(cell_w, cell_h))

    def cell_rect(self, x: int, y: int, inset: int = 0) -> "pygame.Rect":
        """Pixel rectangle of a grid cell, shrunk by ``inset`` on each side."""
        return pygame.Rect(
            self._offset_x + x * self._cell_size + inset,
            self._offset_y + y * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from DuelGame.get_state()
            surface: Pygame surface to draw on
        """
        width = game_state.get("width", self._grid_width)
        height = game_state.get("height", self._grid_height)
        game_width = width * self._cell_size
        game_height = height * self._cell_size

        surface.fill(BLACK)
        pygame.draw.rect(
            surface, BACKGROUND,
            pygame.Rect(self._offset_x, self._offset_y, game_width, game_height)
        )

        # Grid lines (subtle)
        for x in range(width + 1):
            start = (self._offset_x + x * self._cell_size, self._offset_y)
            end = (self._offset_x + x * self._cell_size, self._offset_y + game_height)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for y in range(height + 1):
            start = (self._offset_x, self._offset_y + y * self._cell_size)
            end = (self._offset_x + game_width, self._offset_y + y * self._cell_size)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        food = game_state["food"]
        pygame.draw.rect(surface, FOOD_COLOR, self.cell_rect(food["x"], food["y"], 2), border_radius=8)

        for key in ("player", "ai"):
            self._draw_snake(surface, game_state[key])

        self._draw_hud(surface, game_state)

    def _draw_snake(self, surface: pygame.Surface, snake: Dict[str, Any]) -> None:
        head_color, body_color = SNAKE_COLORS.get(snake["name"], SNAKE_COLORS["player"])
        if not snake["alive"]:
            head_color = body_color = DEAD_COLOR

        for i, segment in enumerate(snake["body"]):
            color = head_color if i == 0 else body_color
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(surface, color, self.cell_rect(segment["x"], segment["y"], 1),
                             border_radius=border_radius)

        if snake["body"]:
            self._draw_eyes(surface, snake["body"][0], snake["direction"])

    def _draw_eyes(self, surface: pygame.Surface, head: Dict[str, int], direction: str):
        """Draw eyes on the snake's head, facing its direction."""
        cx = self._offset_x + head["x"] * self._cell_size + self._cell_size // 2
        cy = self._offset_y + head["y"] * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        if direction == "RIGHT":
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == "DOWN":
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == "LEFT":
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)

    def _draw_hud(self, surface: pygame.Surface, game_state: Dict[str, Any]) -> None:
        """Score line above the board."""
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 20, bold=True)

        text = "Player {}   AI {}   [{}]".format(
            game_state["player_score"], game_state["ai_score"], game_state.get("difficulty", "")
        )
        label = self._font.render(text, True, TEXT_COLOR)
        surface.blit(label, (self._offset_x + 8, self._offset_y - HUD_HEIGHT + 6))

    def render_message(self, surface: pygame.Surface, title: str, subtitle: str = "") -> None:
        """Centered overlay text for pause and game over screens."""
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 20, bold=True)

        board_w, board_h = self.get_preferred_size()
        center_x = self._offset_x + board_w // 2
        center_y = self._offset_y + (board_h - HUD_HEIGHT) // 2

        for offset, line in ((-14, title), (14, subtitle)):
            if not line:
                continue
            label = self._font.render(line, True, WHITE)
            rect = label.get_rect(center=(center_x, center_y + offset))
            surface.blit(label, rect)
