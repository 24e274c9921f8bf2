from __future__ import annotations

import time

# One frame at 60Hz, in milliseconds.
DEFAULT_FRAME_DURATION: float = 1000 / 60


def now() -> float:
    """Monotonic timestamp in milliseconds; the default start time for new queues."""
    return time.perf_counter() * 1000.0
