"""
AI module for Snake Duel.

Importing this module populates the StrategyRegistry with the three
difficulty levels.
"""

from .registry import StrategyRegistry
from .base import Strategy
from .easy import EasyStrategy
from .medium import MediumStrategy
from .hard import HardStrategy, SnakeSnapshot
from .human import HumanInput

StrategyRegistry.register(
    "easy", EasyStrategy,
    description="Random safe moves, sometimes steering toward food"
)
StrategyRegistry.register(
    "medium", MediumStrategy,
    description="A* shortest path to food with a free-space fallback"
)
StrategyRegistry.register(
    "hard", HardStrategy,
    description="Minimax with alpha-beta pruning and heuristic evaluation"
)

__all__ = [
    'StrategyRegistry',
    'Strategy',
    'EasyStrategy',
    'MediumStrategy',
    'HardStrategy',
    'SnakeSnapshot',
    'HumanInput',
]
