#!/usr/bin/env python3
"""
Snake Duel - Strategy Evaluation Script

Pit two AI strategies against each other in headless matches and report
score statistics and win rates. The "player" side is driven by --opponent.

Usage:
    python scripts/evaluate.py --ai hard --opponent medium
    python scripts/evaluate.py --ai medium --opponent easy --games 200 --seed 7
    python scripts/evaluate.py --ai hard --opponent hard --json
"""
import sys
import json
import random
import argparse
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from snake_duel.ai import StrategyRegistry
from snake_duel.game.duel_game import DuelGame
from snake_duel.game.grid import Grid
from snake_duel.utils.config_loader import ConfigError, load_config


def parse_args():
    """Parse command line arguments."""
    strategies = StrategyRegistry.list_strategies()
    parser = argparse.ArgumentParser(
        description="Snake Duel - Evaluate AI strategies against each other",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/evaluate.py --ai hard --opponent medium
  python scripts/evaluate.py --ai medium --opponent easy --games 200 --seed 7
  python scripts/evaluate.py --ai hard --opponent hard --json
"""
    )

    parser.add_argument("--ai", choices=strategies, default="hard", help="Strategy for the AI snake")
    parser.add_argument("--opponent", choices=strategies, default="medium",
                        help="Strategy for the player snake")
    parser.add_argument("--games", type=int, default=50, help="Number of matches (default: 50)")
    parser.add_argument("--max-ticks", type=int, default=2000, help="Tick limit per match")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument("--config", type=str, default=None, help="Path to config file")
    parser.add_argument("--json", action="store_true", help="Output results in JSON format")
    parser.add_argument("--quiet", action="store_true", help="Minimal output")

    return parser.parse_args()


def score_summary(scores: np.ndarray) -> Dict[str, float]:
    """Mean/median/std/min/max of an array of scores."""
    return {
        "mean": float(np.mean(scores)),
        "median": float(np.median(scores)),
        "stdev": float(np.std(scores, ddof=1)) if len(scores) > 1 else 0.0,
        "min": int(np.min(scores)),
        "max": int(np.max(scores)),
    }


def evaluate(ai_id: str, opponent_id: str, games: int, max_ticks: int,
             seed: Optional[int], config, quiet: bool = False) -> Dict[str, Any]:
    """Run ``games`` headless matches and collect statistics."""
    grid = Grid(config.game.grid_width, config.game.grid_height)
    ai_scores = np.zeros(games, dtype=np.int64)
    opponent_scores = np.zeros(games, dtype=np.int64)
    lengths = np.zeros(games, dtype=np.int64)
    outcomes = {"ai": 0, "player": 0, "draw": 0}

    for game_index in range(games):
        game_seed = None if seed is None else seed + game_index
        rng = random.Random(game_seed)

        game = DuelGame(
            config,
            player_source=StrategyRegistry.create(opponent_id, grid, config.ai, random.Random(rng.getrandbits(32))),
            ai_source=StrategyRegistry.create(ai_id, grid, config.ai, random.Random(rng.getrandbits(32))),
            rng=rng,
        )
        state = game.run_headless(max_ticks)

        ai_scores[game_index] = state["ai_score"]
        opponent_scores[game_index] = state["player_score"]
        lengths[game_index] = state["tick"]
        outcomes[state["winner"] or game.determine_winner().value] += 1

        if not quiet and (game_index + 1) % 10 == 0:
            print(f"Game {game_index + 1}/{games}: AI {state['ai_score']} vs {state['player_score']}")

    return {
        "ai": ai_id,
        "opponent": opponent_id,
        "games": games,
        "ai_scores": score_summary(ai_scores),
        "opponent_scores": score_summary(opponent_scores),
        "ticks": score_summary(lengths),
        "ai_wins": outcomes["ai"],
        "opponent_wins": outcomes["player"],
        "draws": outcomes["draw"],
        "ai_win_rate": outcomes["ai"] / games,
    }


def main():
    """Main entry point."""
    args = parse_args()

    if args.games <= 0:
        print("Error: --games must be positive")
        sys.exit(1)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        if args.json:
            print(json.dumps({"error": str(e)}))
        else:
            print(f"Error: {e}")
        sys.exit(1)

    if not args.quiet and not args.json:
        print("=" * 60)
        print(f"Snake Duel - {args.ai} (AI) vs {args.opponent} (player)")
        print("=" * 60)
        print(f"Games: {args.games}   Grid: {config.game.grid_width}x{config.game.grid_height}")
        print("=" * 60)

    results = evaluate(
        args.ai, args.opponent, args.games, args.max_ticks, args.seed,
        config, quiet=args.quiet or args.json
    )

    if args.json:
        results["success"] = True
        print(json.dumps(results, indent=2))
    else:
        print("\n" + "=" * 60)
        print("Evaluation Results")
        print("=" * 60)
        print(f"AI wins:        {results['ai_wins']}  ({results['ai_win_rate']:.1%})")
        print(f"Opponent wins:  {results['opponent_wins']}")
        print(f"Draws:          {results['draws']}")
        print(f"AI mean score:  {results['ai_scores']['mean']:.2f} (std {results['ai_scores']['stdev']:.2f})")
        print(f"Opp mean score: {results['opponent_scores']['mean']:.2f} "
              f"(std {results['opponent_scores']['stdev']:.2f})")
        print(f"Mean ticks:     {results['ticks']['mean']:.1f}")
        print("=" * 60)


if __name__ == "__main__":
    main()
