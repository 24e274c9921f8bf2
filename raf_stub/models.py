from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

FrameCallback = Callable[[float], object]


@dataclass(frozen=True, slots=True)
class PendingFrame:
    # Allocated by the queue on schedule; never reused.
    handle: int
    # Invoked once with the simulated frame time.
    callback: FrameCallback
