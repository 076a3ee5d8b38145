"""
Key bindings - pygame key codes to control signals.
"""
from typing import Dict

from .loop import ControlSignal


def default_key_map() -> Dict[int, ControlSignal]:
    """
    Build the default bindings.

    Arrow keys and WASD steer, R restarts, Escape quits.

    Returns:
        Dictionary of pygame key code -> ControlSignal
    """
    import pygame

    return {
        pygame.K_ESCAPE: ControlSignal.QUIT,
        pygame.K_r: ControlSignal.RESTART,
        pygame.K_UP: ControlSignal.UP,
        pygame.K_w: ControlSignal.UP,
        pygame.K_RIGHT: ControlSignal.RIGHT,
        pygame.K_d: ControlSignal.RIGHT,
        pygame.K_DOWN: ControlSignal.DOWN,
        pygame.K_s: ControlSignal.DOWN,
        pygame.K_LEFT: ControlSignal.LEFT,
        pygame.K_a: ControlSignal.LEFT,
    }
