from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DropScheduler:
    """Elapsed-time gravity.

    Gravity fires once the time since the last step exceeds the current
    interval; firing resets the elapsed time, so at most one step per tick.
    """

    gravity_interval: float = 0.5
    soft_drop_interval: float = 0.1
    soft_drop: bool = False
    elapsed: float = 0.0

    @property
    def interval(self) -> float:
        return self.soft_drop_interval if self.soft_drop else self.gravity_interval

    def advance(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed > self.interval:
            self.elapsed = 0.0
            return True
        return False

    def restart(self) -> None:
        """Behave as if a gravity step just happened."""
        self.elapsed = 0.0
