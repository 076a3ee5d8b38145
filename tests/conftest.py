"""
Pytest configuration and fixtures for Tick Snake tests.

This module sets up pygame mocking so the renderer and key bindings can be
tested without a display or actual pygame initialization.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def create_mock_pygame():
    """Create a mock of the parts of pygame the game touches."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 416
    mock_surface.get_height.return_value = 473
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114
    mock_pygame.K_SPACE = 32

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect records its geometry so draw calls can be inspected
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before the renderer module is imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_surface(mock_pygame_module):
    """Provide a mock pygame surface."""
    surface = MagicMock()
    surface.fill.return_value = None
    surface.blit.return_value = None
    return surface


@pytest.fixture
def key_map():
    """Plain integer bindings so loop tests don't depend on pygame."""
    from tick_snake.game import ControlSignal

    return {
        27: ControlSignal.QUIT,
        114: ControlSignal.RESTART,
        273: ControlSignal.UP,
        275: ControlSignal.RIGHT,
        274: ControlSignal.DOWN,
        276: ControlSignal.LEFT,
    }


@pytest.fixture
def rng():
    """Deterministic random source for apple placement."""
    return random.Random(1234)


@pytest.fixture
def game(rng):
    """A default 20x20 game."""
    from tick_snake.game import GameState

    return GameState(rng=rng)


@pytest.fixture
def loop(key_map, game):
    """A game loop driving the default game."""
    from tick_snake.game import GameLoop

    return GameLoop(key_map, state=game)
