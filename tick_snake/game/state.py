"""
Snake Game State - Pure simulation without rendering or input.

Holds the snake body, the apple and the tail length, and advances them
one grid cell per call. The grid wraps on both axes.
"""
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Dict, List, Optional
import random

from .config import SnakeConfig


class Direction(Enum):
    """Snake movement directions as unit velocities (dx, dy)."""
    NONE = (0, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way (NONE is its own opposite)."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NONE: Direction.NONE,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """A cell on the game grid."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class GameState:
    """
    Core Snake simulation.

    The body is stored tail first, head last. Every ``advance`` appends a new
    head and evicts the oldest segments until the body fits ``tail_length``.
    Running into the body does not end the game; it shrinks the snake back to
    ``minimum_tail_length``.
    """

    def __init__(self, config: Optional[SnakeConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the game.

        Args:
            config: Simulation settings (defaults to a 20x20 grid)
            rng: Random source for apple placement (seeded from config if omitted)
        """
        self.config = (config or SnakeConfig()).validate()
        self.area_size = self.config.area_size
        self.minimum_tail_length = self.config.minimum_tail_length
        self.freeze_on_collision = self.config.freeze_on_collision
        self.max_trim_per_tick = self.config.max_trim_per_tick
        self.rng = rng or random.Random(self.config.seed)

        # Game state (initialized in reset)
        self.body: Deque[Point] = deque()
        self.apple: Point = Point(0, 0)
        self.direction: Direction = Direction.NONE
        self.tail_length: int = self.minimum_tail_length
        self._high_score: int = 0

        self.reset()

    def reset(self) -> None:
        """Put the snake and apple back at their starting cells. Keeps the high score."""
        center = self.area_size // 2
        apple = self.area_size * 2 // 3

        self.body = deque([Point(center, center)])
        self.apple = Point(apple, apple)
        self.direction = Direction.NONE
        self.tail_length = self.minimum_tail_length

    @property
    def head(self) -> Point:
        return self.body[-1]

    @property
    def snake(self) -> List[Point]:
        """Body segments from tail to head."""
        return list(self.body)

    @property
    def score(self) -> int:
        return self.tail_length - self.minimum_tail_length

    @property
    def high_score(self) -> int:
        return self._high_score

    def update_high_score(self) -> int:
        """Fold the current score into the running maximum and return it."""
        self._high_score = max(self._high_score, self.score)
        return self._high_score

    def advance(self, direction: Optional[Direction] = None) -> bool:
        """
        Move the snake one cell.

        Args:
            direction: Heading to move in (defaults to the current one)

        Returns:
            True if the new head ran into the body
        """
        if direction is not None:
            self.direction = direction

        head = self._next_head()
        collided = head in self.body
        if collided:
            self.tail_length = self.minimum_tail_length
            if self.freeze_on_collision:
                self.direction = Direction.NONE

        self.body.append(head)
        self._trim()
        return collided

    def consume_apple_if_colocated(self) -> bool:
        """
        Grow the snake if its head sits on the apple.

        Returns:
            True if the apple was eaten
        """
        if self.apple != self.head:
            return False

        self.tail_length += 1
        self._place_apple()
        return True

    def _next_head(self) -> Point:
        x = (self.head.x + self.direction.dx) % self.area_size
        y = (self.head.y + self.direction.dy) % self.area_size
        return Point(x, y)

    def _trim(self):
        """Drop the oldest segments while the body is longer than tail_length."""
        removed = 0
        while len(self.body) > self.tail_length:
            if self.max_trim_per_tick is not None and removed >= self.max_trim_per_tick:
                break
            self.body.popleft()
            removed += 1

    def _place_apple(self):
        """Place the apple on a random cell. It may land on the snake."""
        self.apple = Point(
            self.rng.randrange(self.area_size),
            self.rng.randrange(self.area_size),
        )
