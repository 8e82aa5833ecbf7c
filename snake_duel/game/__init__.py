"""
Game module for Snake Duel.

Grid geometry, the snake model and food. Match orchestration lives in
``snake_duel.game.duel_game`` and the pygame renderer in
``snake_duel.game.renderer``.
"""

from .grid import (
    Direction,
    Grid,
    HeadToHeadOutcome,
    Point,
    euclidean,
    head_to_head_collision,
    manhattan,
    neighbors,
    resolve_head_to_head,
)
from .snake import CollisionResult, Snake
from .food import Food

__all__ = [
    'Direction',
    'Grid',
    'HeadToHeadOutcome',
    'Point',
    'euclidean',
    'head_to_head_collision',
    'manhattan',
    'neighbors',
    'resolve_head_to_head',
    'CollisionResult',
    'Snake',
    'Food',
]
