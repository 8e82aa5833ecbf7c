"""
Strategy registry for Snake Duel.

Central registry for discovering and instantiating AI strategies by
difficulty name.
"""

import random
from typing import Any, Dict, List, Optional, Type

from .base import Strategy
from ..game.grid import Grid


class StrategyRegistry:
    """
    Central registry for all available AI strategies.

    Strategies are registered in ``snake_duel.ai`` using StrategyRegistry.register().
    """

    _strategies: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        strategy_id: str,
        strategy_class: Type[Strategy],
        description: str = ""
    ) -> None:
        """
        Register a strategy with the registry.

        Args:
            strategy_id: Unique identifier (e.g., "easy", "hard")
            strategy_class: The strategy implementation class
            description: Human-readable description
        """
        cls._strategies[strategy_id] = {
            'strategy_class': strategy_class,
            'description': description,
        }

    @classmethod
    def get_strategy(cls, strategy_id: str) -> Optional[Dict[str, Any]]:
        """
        Get strategy components by ID.

        Returns:
            Dictionary with the strategy class, or None if not found
        """
        return cls._strategies.get(strategy_id)

    @classmethod
    def list_strategies(cls) -> List[str]:
        """List all registered strategy IDs."""
        return list(cls._strategies.keys())

    @classmethod
    def get_description(cls, strategy_id: str) -> str:
        """Get description for a strategy ("" if unknown)."""
        strategy = cls._strategies.get(strategy_id)
        return strategy['description'] if strategy else ""

    @classmethod
    def is_available(cls, strategy_id: str) -> bool:
        """Check if a strategy is registered."""
        return strategy_id in cls._strategies

    @classmethod
    def create(
        cls,
        strategy_id: str,
        grid: Grid,
        ai_config: Any = None,
        rng: Optional[random.Random] = None
    ) -> Strategy:
        """
        Create a strategy instance.

        Args:
            strategy_id: The strategy identifier
            grid: Board the strategy plays on
            ai_config: Optional ``ai`` config section
            rng: Optional random source (seeded for reproducible play)

        Returns:
            Strategy instance

        Raises:
            ValueError: If strategy is not registered
        """
        strategy_data = cls._strategies.get(strategy_id)
        if not strategy_data:
            raise ValueError(f"Unknown strategy: {strategy_id}")
        return strategy_data['strategy_class'].from_config(grid, ai_config, rng)
