"""Frame timing: the time between frames and the total time run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameClock:
    """Tracks the delta between successive ticks and the elapsed total."""

    last: float | None = None
    delta_time: float = 0.0
    elapsed_time: float = 0.0

    def tick(self, now: float) -> float:
        """Record a frame at time ``now`` (seconds) and return the delta."""
        if self.last is None:
            delta = 0.0
        else:
            delta = now - self.last
            if delta < 0:
                raise ValueError(f"time went backwards: {now} < {self.last}")
        self.last = now
        self.delta_time = delta
        self.elapsed_time += delta
        return delta