"""
Snake game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


AREA_SIZE = 20
MINIMUM_TAIL_LENGTH = 5
TICK_RATE_HZ = 12.0


@dataclass
class SnakeConfig:
    """Configuration for the Snake simulation."""

    # Grid is square and wraps on both axes
    area_size: int = AREA_SIZE
    minimum_tail_length: int = MINIMUM_TAIL_LENGTH

    # Host drives ticks at this rate
    tick_rate_hz: float = TICK_RATE_HZ

    # Collision policy
    freeze_on_collision: bool = False
    max_trim_per_tick: Optional[int] = None

    # Apple placement
    seed: Optional[int] = None

    def validate(self) -> "SnakeConfig":
        """
        Check that the values describe a playable game.

        Returns:
            self, so calls can be chained

        Raises:
            ValueError: If any value is out of range
        """
        if self.area_size < 1:
            raise ValueError(f"area_size must be at least 1, got {self.area_size}")
        if self.minimum_tail_length < 1:
            raise ValueError(
                f"minimum_tail_length must be at least 1, got {self.minimum_tail_length}"
            )
        if self.tick_rate_hz <= 0:
            raise ValueError(f"tick_rate_hz must be positive, got {self.tick_rate_hz}")
        if self.max_trim_per_tick is not None and self.max_trim_per_tick < 1:
            raise ValueError(
                f"max_trim_per_tick must be at least 1 or unset, got {self.max_trim_per_tick}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "area_size": self.area_size,
            "minimum_tail_length": self.minimum_tail_length,
            "tick_rate_hz": self.tick_rate_hz,
            "freeze_on_collision": self.freeze_on_collision,
            "max_trim_per_tick": self.max_trim_per_tick,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary."""
        return cls(
            area_size=data.get("area_size", AREA_SIZE),
            minimum_tail_length=data.get("minimum_tail_length", MINIMUM_TAIL_LENGTH),
            tick_rate_hz=data.get("tick_rate_hz", TICK_RATE_HZ),
            freeze_on_collision=data.get("freeze_on_collision", False),
            max_trim_per_tick=data.get("max_trim_per_tick"),
            seed=data.get("seed"),
        )
