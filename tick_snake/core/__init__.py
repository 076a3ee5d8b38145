"""
Core abstractions for Tick Snake.

Provides abstract interfaces that games and renderers implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
]
