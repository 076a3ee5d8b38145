"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from ..core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
BLUE = (0, 0, 255)
CYAN = (0, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
GRAY = (136, 136, 136)

TILE_GAP = 2
HEADER_HEIGHT = 57
TEXT_PADDING = 8


def tile_color(index: int, count: int, shrinking: bool) -> Tuple[int, int, int]:
    """
    Pick the color for a snake tile.

    Args:
        index: Position in the body, tail first
        count: Number of body segments
        shrinking: Whether the body is longer than its tail length

    Returns:
        RGB color
    """
    if shrinking:
        return GRAY
    if index == count - 1:
        return YELLOW
    return GREEN


def score_text(game_state: Dict[str, Any]) -> str:
    """Header line shown above the board."""
    return f"Score = {game_state['score']}, Highscore = {game_state['high_score']}"


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake board using Pygame, implementing RendererInterface.

    Cells stretch to fill the render area, so tiles are only square when the
    area is.
    """

    def __init__(self, area_size: int = 20, cell_size: Tuple[int, int] = (20, 20)):
        """
        Initialize the renderer.

        Args:
            area_size: Grid size in cells (grid is square)
            cell_size: (width, height) of each cell in pixels
        """
        self._area_size = area_size
        self._cell_w, self._cell_h = cell_size
        self._offset_x = 0
        self._offset_y = 0

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._area_size * self._cell_w, self._area_size * self._cell_h)

    def get_cell_size(self) -> Tuple[int, int]:
        """Get the current (width, height) of a cell."""
        return (self._cell_w, self._cell_h)

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        self._cell_w = max(1, width // self._area_size)
        self._cell_h = max(1, height // self._area_size)

    def _cell_rect(self, x: int, y: int) -> "pygame.Rect":
        return pygame.Rect(
            self._offset_x + x * self._cell_w,
            self._offset_y + y * self._cell_h,
            self._cell_w - TILE_GAP,
            self._cell_h - TILE_GAP
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from RenderSnapshot.to_dict()
            surface: Pygame surface to draw on
        """
        width, height = self.get_preferred_size()
        board = pygame.Rect(self._offset_x, self._offset_y, width, height)
        pygame.draw.rect(surface, BLACK, board)

        apple = game_state["apple"]
        pygame.draw.rect(surface, RED, self._cell_rect(apple["x"], apple["y"]))

        snake = game_state["snake"]
        shrinking = game_state.get("shrinking", False)
        for i, segment in enumerate(snake):
            color = tile_color(i, len(snake), shrinking)
            pygame.draw.rect(surface, color, self._cell_rect(segment["x"], segment["y"]))


class StandaloneRenderer(SnakeRenderer):
    """
    Snake renderer with its own window and score header.
    Used by the play script.
    """

    def __init__(
        self,
        area_size: int = 20,
        window_size: Tuple[int, int] = (416, 473),
        title: str = "SnakeGame",
        surface: Optional[pygame.Surface] = None
    ):
        """
        Initialize standalone renderer with its own window.

        Args:
            area_size: Grid size in cells
            window_size: (width, height) of the window in pixels
            title: Window title
            surface: Existing surface to draw on instead of opening a window
        """
        super().__init__(area_size)

        self.window_width, self.window_height = window_size

        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode(window_size)
            pygame.display.set_caption(title)

        self.surface = surface
        self.font = pygame.font.Font(None, 28)
        self.set_render_area(
            0, HEADER_HEIGHT,
            self.window_width, self.window_height - HEADER_HEIGHT
        )

    def render_frame(self, game_state: Dict[str, Any], surface: Optional[pygame.Surface] = None):
        """
        Draw the header and board, then flip the display.

        Args:
            game_state: Dictionary from RenderSnapshot.to_dict()
            surface: Optional surface to render to
        """
        target = surface or self.surface

        if target is None:
            raise ValueError("No surface to render to")

        target.fill(BLACK)

        header = pygame.Rect(0, 0, self.window_width, HEADER_HEIGHT)
        pygame.draw.rect(target, BLUE, header)
        text = self.font.render(score_text(game_state), True, CYAN)
        target.blit(text, (TEXT_PADDING, TEXT_PADDING))

        self.render(game_state, target)

        pygame.display.flip()

    def close(self):
        """Close the renderer and pygame."""
        pygame.quit()
