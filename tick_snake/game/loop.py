"""
Game Loop - turns key events into headings and steps the simulation.

Key events may arrive on a different thread than ``tick``. The pending
direction lives in a single lock-guarded latch: the first direction key
after a tick is kept, later ones are dropped, and ``tick`` reads and clears
it in one step.
"""
import threading
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..core.game_interface import GameInterface, GameMetadata
from .config import SnakeConfig
from .snapshot import RenderSnapshot
from .state import Direction, GameState


class ControlSignal(Enum):
    """Logical controls a key can map to."""
    NONE = "none"
    QUIT = "quit"
    RESTART = "restart"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


_SIGNAL_DIRECTIONS = {
    ControlSignal.UP: Direction.UP,
    ControlSignal.RIGHT: Direction.RIGHT,
    ControlSignal.DOWN: Direction.DOWN,
    ControlSignal.LEFT: Direction.LEFT,
}


class GameLoop(GameInterface):
    """
    Drives a GameState one tick at a time.

    The loop does no timing of its own; a host calls ``tick`` on a fixed
    cadence and forwards key events to ``on_key_event``.
    """

    def __init__(
        self,
        key_map: Mapping[int, ControlSignal],
        state: Optional[GameState] = None,
        config: Optional[SnakeConfig] = None,
    ):
        """
        Initialize the loop.

        Args:
            key_map: Host key code -> control signal
            state: Game to drive (built from config if omitted)
            config: Simulation settings used when state is omitted
        """
        self.key_map = dict(key_map)
        self.state = state or GameState(config)

        self._lock = threading.Lock()
        self._pending: Optional[ControlSignal] = None
        self.snapshot = RenderSnapshot.capture(self.state)

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat apples, grow longer, don't bite your tail",
        )

    def on_key_event(self, key_code: int, pressed: bool = True) -> ControlSignal:
        """
        Translate a key event into a control signal.

        Args:
            key_code: Host key code
            pressed: True for key down, False for key up

        Returns:
            QUIT for quit keys, the latched signal when one was stored,
            RESTART after a restart, NONE when the event was ignored
        """
        signal = self.key_map.get(key_code, ControlSignal.NONE)

        if signal is ControlSignal.QUIT:
            return signal
        if not pressed or signal is ControlSignal.NONE:
            return ControlSignal.NONE

        with self._lock:
            if signal is ControlSignal.RESTART:
                self._pending = None
                self.state.reset()
                self.snapshot = RenderSnapshot.capture(self.state)
                return signal

            if self._pending is not None:
                return ControlSignal.NONE
            self._pending = signal
            return signal

    def tick(self) -> RenderSnapshot:
        """
        Run one simulation step.

        Returns:
            Snapshot of the game after the step
        """
        # Held for the whole step so a restart can't land mid-advance
        with self._lock:
            pending, self._pending = self._pending, None

            if pending is not None:
                self._apply(pending)

            self.state.advance()
            self.state.consume_apple_if_colocated()
            self.state.update_high_score()

            self.snapshot = RenderSnapshot.capture(self.state)
            return self.snapshot

    def _apply(self, signal: ControlSignal):
        """Turn the snake unless the signal points straight back."""
        direction = _SIGNAL_DIRECTIONS.get(signal)
        if direction is None:
            raise ValueError(f"Don't know how to handle {signal}")

        if direction is not self.state.direction.opposite:
            self.state.direction = direction

    @property
    def pending(self) -> Optional[ControlSignal]:
        """The latched signal waiting for the next tick, if any."""
        with self._lock:
            return self._pending

    def reset(self) -> Dict[str, Any]:
        with self._lock:
            self._pending = None
            self.state.reset()
            self.snapshot = RenderSnapshot.capture(self.state)
        return self.snapshot.to_dict()

    def get_state(self) -> Dict[str, Any]:
        return self.snapshot.to_dict()

    def get_score(self) -> int:
        return self.state.score
