"""
Core abstractions for Snake Duel.

Provides abstract interfaces that all move sources and renderers must implement.
"""

from .move_source import MoveSource, WorldState
from .renderer_interface import RendererInterface

__all__ = [
    'MoveSource',
    'WorldState',
    'RendererInterface',
]
