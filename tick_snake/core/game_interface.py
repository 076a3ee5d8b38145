"""
Abstract game interface for Tick Snake.

A game is driven by a host that forwards key events and calls ``tick`` on a
fixed cadence. Games describe themselves with GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for the window
    version: str = "1.0.0"              # Game version
    supports_human: bool = True         # Can humans play?


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    Games own input translation and simulation stepping. Timing and drawing
    belong to the host.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def on_key_event(self, key_code: int, pressed: bool = True) -> Any:
        """
        Handle a raw key event from the host.

        Args:
            key_code: Host key code
            pressed: True for key down, False for key up

        Returns:
            The control signal the key produced
        """
        pass

    @abstractmethod
    def tick(self) -> Any:
        """
        Advance the game by one step.

        Returns:
            Snapshot of the state after the step
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
