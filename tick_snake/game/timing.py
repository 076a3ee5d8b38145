"""
Fixed-rate tick scheduling against a host clock.
"""

NANOS_PER_SECOND = 1_000_000_000
TICK_PERIOD_NS = 83_333_333  # 12 ticks per second


def period_from_rate(rate_hz: float) -> int:
    """
    Convert a tick rate into a period.

    Args:
        rate_hz: Ticks per second

    Returns:
        Period in nanoseconds
    """
    if rate_hz <= 0:
        raise ValueError(f"Tick rate must be positive, got {rate_hz}")
    return int(NANOS_PER_SECOND / rate_hz)


class TickScheduler:
    """
    Decides when the next tick is due.

    The host passes in its own frame timestamps; a tick fires once more than
    one period has passed since the last tick that fired.
    """

    def __init__(self, period_ns: int = TICK_PERIOD_NS):
        if period_ns <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ns}")
        self.period_ns = period_ns
        self.last_tick_ns = 0

    def due(self, now_ns: int) -> bool:
        """
        Check the clock and claim a tick if one is due.

        Args:
            now_ns: Current host time in nanoseconds

        Returns:
            True if the caller should tick now
        """
        if now_ns - self.last_tick_ns > self.period_ns:
            self.last_tick_ns = now_ns
            return True
        return False
