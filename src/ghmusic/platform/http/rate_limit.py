"""Where: src/ghmusic/platform/http/rate_limit.py
What: Sequential throttle enforcing a minimum spacing between upstream calls.
Why: MusicBrainz asks for roughly 1 request per second and Kugou throttles bursts.
"""

from __future__ import annotations

import time
from typing import Callable


class Throttle:
    """Block the caller until ``min_interval`` seconds have passed since the last call.

    Calls are expected one at a time from a single control flow. The clock and
    the sleep function are injectable so tests can run without real delays.
    """

    def __init__(
        self,
        min_interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError(f"min_interval must be >= 0, got {min_interval}")
        self.min_interval: float = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_start: float | None = None

    @classmethod
    def disabled(cls) -> "Throttle":
        """Return a throttle that never sleeps."""

        return cls(0.0)

    def wait(self) -> float:
        """Delay until the spacing constraint is met; return the time slept."""

        slept = 0.0
        if self._last_start is not None and self.min_interval > 0:
            remaining = self.min_interval - (self._clock() - self._last_start)
            if remaining > 0:
                self._sleep(remaining)
                slept = remaining
        self._last_start = self._clock()
        return slept


__all__ = ["Throttle"]
