"""
Render snapshots - immutable per-tick views of the game for the renderer.
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .state import Direction, GameState, Point


APPLE = "apple"
SNAKE = "snake"


@dataclass(frozen=True)
class GameObject:
    """A single thing to draw on the grid."""
    kind: str
    x: int
    y: int

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything the renderer needs for one frame."""
    apple: Point
    snake: Tuple[Point, ...]
    score: int
    high_score: int
    tail_length: int
    direction: Direction
    area_size: int

    @classmethod
    def capture(cls, state: GameState) -> "RenderSnapshot":
        """Copy the current state of a game."""
        return cls(
            apple=state.apple,
            snake=tuple(state.body),
            score=state.score,
            high_score=state.high_score,
            tail_length=state.tail_length,
            direction=state.direction,
            area_size=state.area_size,
        )

    @property
    def head(self) -> Point:
        return self.snake[-1]

    @property
    def is_shrinking(self) -> bool:
        """True while the body is longer than the tail length allows."""
        return len(self.snake) > self.tail_length

    @property
    def objects(self) -> Tuple[GameObject, ...]:
        """Apple first, then snake segments from tail to head."""
        apple = GameObject(APPLE, self.apple.x, self.apple.y)
        return (apple,) + tuple(GameObject(SNAKE, p.x, p.y) for p in self.snake)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the snapshot as a plain dictionary.

        Returns:
            Dictionary in the format renderers consume
        """
        return {
            "apple": self.apple.to_dict(),
            "snake": [p.to_dict() for p in self.snake],
            "objects": [o.to_dict() for o in self.objects],
            "score": self.score,
            "high_score": self.high_score,
            "tail_length": self.tail_length,
            "shrinking": self.is_shrinking,
            "direction": self.direction.name,
            "width": self.area_size,
            "height": self.area_size,
        }
