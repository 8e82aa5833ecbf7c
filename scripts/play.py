#!/usr/bin/env python3
"""
Human vs AI Mode - Play against the AI snake.

Controls:
    Arrow Keys or WASD: Move the green snake
    Space: Pause / resume
    R: Restart game
    ESC: Quit

Usage:
    python scripts/play.py                       # Difficulty from config
    python scripts/play.py --difficulty hard
    python scripts/play.py --seed 42             # Reproducible food and AI choices
"""
import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame
from snake_duel.ai import HumanInput, StrategyRegistry
from snake_duel.game.duel_game import DuelGame, GameStatus, Winner
from snake_duel.game.grid import Direction
from snake_duel.game.renderer import DuelRenderer
from snake_duel.utils.config_loader import ConfigError, load_config, validate_config
from snake_duel.utils.logging_setup import setup_logging


KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

RESULT_MESSAGES = {
    Winner.PLAYER: "You win!",
    Winner.AI: "The AI wins",
    Winner.DRAW: "Draw",
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Snake Duel - Human vs AI")
    parser.add_argument(
        "-d", "--difficulty",
        choices=StrategyRegistry.list_strategies(),
        default=None,
        help="AI difficulty (default: from config)"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to config file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()

    try:
        config = load_config(args.config)
        if args.difficulty:
            config.game.difficulty = args.difficulty
        if args.seed is not None:
            config.ai.seed = args.seed
        validate_config(config)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    setup_logging(config.logging)

    human = HumanInput()
    game = DuelGame(config, player_source=human)
    renderer = DuelRenderer(
        cell_size=config.visualization.cell_size,
        grid_width=config.game.grid_width,
        grid_height=config.game.grid_height
    )

    pygame.init()
    screen = pygame.display.set_mode(renderer.get_preferred_size())
    pygame.display.set_caption(f"Snake Duel - {config.game.difficulty.title()}")

    print("\n" + "=" * 50)
    print(f"Snake Duel - Human vs {config.game.difficulty.title()} AI")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  Space: Pause")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    running = True
    clock = pygame.time.Clock()
    last_tick_time = pygame.time.get_ticks()
    game.start()

    while running:
        current_time = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.restart()
                    last_tick_time = current_time
                elif event.key == pygame.K_SPACE:
                    game.toggle_pause()
                elif event.key in KEY_DIRECTIONS:
                    human.push(KEY_DIRECTIONS[event.key])

        if game.status == GameStatus.PLAYING and current_time - last_tick_time >= game.tick_interval_ms:
            game.tick()
            last_tick_time = current_time

            if game.status == GameStatus.GAME_OVER:
                print(f"{RESULT_MESSAGES[game.winner]}  Player {game.player.score} | AI {game.ai.score}")

        renderer.render(game.get_state(), screen)

        if game.status == GameStatus.PAUSED:
            renderer.render_message(screen, "PAUSED", "Press Space to resume")
        elif game.status == GameStatus.GAME_OVER:
            renderer.render_message(screen, RESULT_MESSAGES[game.winner], "Press R to restart")

        pygame.display.flip()
        clock.tick(config.visualization.render_fps)

    pygame.quit()


if __name__ == "__main__":
    main()
