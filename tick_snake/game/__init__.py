"""
Snake game module for Tick Snake.

The renderer and key bindings need pygame and are imported from their own
modules.
"""

from .config import SnakeConfig, AREA_SIZE, MINIMUM_TAIL_LENGTH, TICK_RATE_HZ
from .state import GameState, Direction, Point
from .snapshot import RenderSnapshot, GameObject
from .loop import GameLoop, ControlSignal
from .timing import TickScheduler, TICK_PERIOD_NS, period_from_rate

__all__ = [
    'SnakeConfig',
    'GameState',
    'GameLoop',
    'ControlSignal',
    'RenderSnapshot',
    'GameObject',
    'TickScheduler',
    'Direction',
    'Point',
    'AREA_SIZE',
    'MINIMUM_TAIL_LENGTH',
    'TICK_RATE_HZ',
    'TICK_PERIOD_NS',
    'period_from_rate',
]
