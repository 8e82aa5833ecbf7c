"""
Duel Game Core - Player snake vs AI snake, pure game logic without rendering.

One tick: both move sources decide, food is detected against each snake's
next head, both snakes move, food respawns if eaten, snake-vs-snake
collisions are resolved and game over is checked.
"""
import logging
import random
from enum import Enum
from typing import Any, Dict, Optional

from .food import Food
from .grid import Grid, Point, resolve_head_to_head
from .snake import Snake
from ..ai.registry import StrategyRegistry
from ..core.move_source import MoveSource, WorldState
from ..utils.config_loader import Config

logger = logging.getLogger(__name__)

PLAYER_START_X = 5
AI_START_OFFSET = 6  # cells from the right edge


class GameStatus(Enum):
    """Match lifecycle."""
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Winner(Enum):
    PLAYER = "player"
    AI = "ai"
    DRAW = "draw"


class DuelGame:
    """
    Two-snake match on a fixed grid with a single food item.

    The player snake starts on the left, the AI snake on the right, both
    facing right. Each snake is driven by its move source; a snake without
    one simply keeps its current direction.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        player_source: Optional[MoveSource] = None,
        ai_source: Optional[MoveSource] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the game.

        Args:
            config: Settings (defaults if omitted)
            player_source: Move source for the player snake (e.g. HumanInput)
            ai_source: Move source for the AI snake; built from the
                configured difficulty if omitted
            rng: Random source for food placement and the default AI
        """
        self.config = config if config is not None else Config()
        self.grid = Grid(self.config.game.grid_width, self.config.game.grid_height)
        self.rng = rng if rng is not None else random.Random(self.config.ai.seed)

        if ai_source is None:
            ai_source = StrategyRegistry.create(
                self.config.game.difficulty, self.grid, self.config.ai, rng=self.rng
            )

        self.player = Snake(self.player_start, self.grid, "player", player_source)
        self.ai = Snake(self.ai_start, self.grid, "ai", ai_source)
        self.food = Food(self.grid)

        self.status = GameStatus.MENU
        self.winner: Optional[Winner] = None
        self.tick_count = 0

        self.respawn_food()

    @property
    def player_start(self) -> Point:
        return Point(PLAYER_START_X, self.grid.height // 2)

    @property
    def ai_start(self) -> Point:
        return Point(self.grid.width - AI_START_OFFSET, self.grid.height // 2)

    @property
    def tick_interval_ms(self) -> int:
        """Milliseconds between ticks for the configured difficulty."""
        return self.config.speed.interval_for(self.config.game.difficulty)

    def respawn_food(self) -> Point:
        """Move the food to a cell not covered by either snake."""
        return self.food.respawn(self.player.body + self.ai.body, self.rng)

    def start(self) -> None:
        self.status = GameStatus.PLAYING

    def pause(self) -> None:
        if self.status == GameStatus.PLAYING:
            self.status = GameStatus.PAUSED

    def resume(self) -> None:
        if self.status == GameStatus.PAUSED:
            self.status = GameStatus.PLAYING

    def toggle_pause(self) -> None:
        if self.status == GameStatus.PLAYING:
            self.pause()
        else:
            self.resume()

    def restart(self) -> Dict[str, Any]:
        """Reset both snakes and the food, then start playing."""
        self.player.reset(self.player_start)
        self.ai.reset(self.ai_start)
        self.winner = None
        self.tick_count = 0
        self.respawn_food()
        self.start()
        return self.get_state()

    def tick(self) -> Dict[str, Any]:
        """
        Advance the match by one step (no-op unless playing).

        Returns:
            Game state after the tick
        """
        if self.status != GameStatus.PLAYING:
            return self.get_state()

        self.tick_count += 1
        food = self.food.position

        self.ai.decide(WorldState(me=self.ai, opponent=self.player, food=food))
        self.player.decide(WorldState(me=self.player, opponent=self.ai, food=food))

        player_ate = self.player.alive and self.player.next_head() == food
        ai_ate = self.ai.alive and self.ai.next_head() == food

        self.player.move(player_ate)
        self.ai.move(ai_ate)

        if (player_ate and self.player.alive) or (ai_ate and self.ai.alive):
            self.respawn_food()

        self.check_collisions()
        self.check_game_over()

        return self.get_state()

    def check_collisions(self) -> None:
        """Resolve player-vs-AI contact after both snakes have moved."""
        player_hit = self.player.check_collision_with_snake(self.ai)
        if player_hit.collision:
            if player_hit.head_to_head:
                resolve_head_to_head(self.player, self.ai).apply()
            else:
                self.player.alive = False

        ai_hit = self.ai.check_collision_with_snake(self.player)
        if ai_hit.collision and not ai_hit.head_to_head:
            self.ai.alive = False

    def check_game_over(self) -> None:
        if self.player.alive and self.ai.alive:
            return
        self.status = GameStatus.GAME_OVER
        self.winner = self.determine_winner()
        logger.info(
            "Game over after %d ticks: winner=%s player=%d ai=%d",
            self.tick_count, self.winner.value, self.player.score, self.ai.score
        )

    def determine_winner(self) -> Winner:
        """Survivor wins; with both alive or both dead, compare scores."""
        if not self.player.alive and not self.ai.alive:
            return Winner.DRAW
        if not self.player.alive:
            return Winner.AI
        if not self.ai.alive:
            return Winner.PLAYER

        if self.player.score > self.ai.score:
            return Winner.PLAYER
        if self.ai.score > self.player.score:
            return Winner.AI
        return Winner.DRAW

    def run_headless(self, max_ticks: int = 1000) -> Dict[str, Any]:
        """
        Play until game over or the tick limit, without rendering.

        Returns:
            Final game state
        """
        if self.status != GameStatus.PLAYING:
            self.start()

        while self.status == GameStatus.PLAYING and self.tick_count < max_ticks:
            self.tick()

        return self.get_state()

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "player": self.player.to_dict(),
            "ai": self.ai.to_dict(),
            "food": self.food.to_dict(),
            "status": self.status.value,
            "winner": self.winner.value if self.winner else None,
            "player_score": self.player.score,
            "ai_score": self.ai.score,
            "difficulty": self.config.game.difficulty,
            "tick": self.tick_count,
            "width": self.grid.width,
            "height": self.grid.height,
        }
