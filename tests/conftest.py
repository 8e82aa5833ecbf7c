"""
Pytest configuration and fixtures for Snake Duel tests.

This module sets up pygame mocking to allow testing the renderer
without requiring a display, and provides grid/snake builders for
hand-crafted board positions.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from snake_duel.game.grid import Direction, Grid, Point
from snake_duel.game.snake import Snake


def create_mock_pygame():
    """Create a mock of the parts of pygame the renderer touches."""
    mock_pygame = MagicMock()

    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 750
    mock_surface.get_height.return_value = 532
    mock_pygame.display.set_mode.return_value = mock_surface

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_font.size.return_value = (100, 30)
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame for the whole run.

    Renderer modules must be imported inside tests so they pick up the mock.
    """
    mock_pygame = create_mock_pygame()

    original_pygame = sys.modules.get('pygame')
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_width.return_value = 750
    screen.get_height.return_value = 532
    return screen


@pytest.fixture
def grid():
    """The standard 30x20 board."""
    return Grid(30, 20)


@pytest.fixture
def small_grid():
    """A 10x10 board for hand-built positions."""
    return Grid(10, 10)


@pytest.fixture
def make_snake():
    """
    Build a snake with an arbitrary head-first body.

    Usage:
        snake = make_snake(grid, [(5, 5), (4, 5), (3, 5)], Direction.RIGHT)
    """
    def _make(grid, body, direction=Direction.RIGHT, name="ai", move_source=None):
        cells = [Point(x, y) for x, y in body]
        snake = Snake(cells[0], grid, name=name, move_source=move_source)
        snake.body = cells
        snake.direction = direction
        snake.pending_direction = direction
        return snake
    return _make


@pytest.fixture
def boxed_in_body():
    """
    Body whose head (5, 5) is surrounded on all four sides by the snake itself.

    The head arrived from (5, 4), so the snake is facing DOWN.
    """
    return [(5, 5), (5, 4), (6, 4), (6, 5), (6, 6), (5, 6), (4, 6), (4, 5)]


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom sources."""
    return FixedRandom
