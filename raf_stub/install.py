from __future__ import annotations

import builtins
import logging
import warnings
from typing import Any, Callable, MutableMapping

from raf_stub import clock
from raf_stub.engine import FrameQueue, create_queue
from raf_stub.models import FrameCallback

logger = logging.getLogger(__name__)

SCHEDULE_NAME = "request_animation_frame"
CANCEL_NAME = "cancel_animation_frame"


class RequestAnimationFrame:
    """
    The installed schedule entry point.

    Calling it schedules a callback (like the native function). step/flush/reset
    hang off it so tests can drive the queue through the installed reference.
    """

    def __init__(self, queue: FrameQueue) -> None:
        self.queue = queue

    def __call__(self, callback: FrameCallback) -> int:
        return self.queue.schedule(callback)

    def __repr__(self) -> str:
        return f"RequestAnimationFrame({self.queue!r})"

    def step(self, steps: int = 1, duration: float | None = None) -> None:
        self.queue.advance(steps, duration)

    def flush(self, duration: float | None = None) -> None:
        self.queue.flush(duration)

    def reset(self) -> None:
        self.queue.reset()


def _assign(root: Any, name: str, value: Any) -> None:
    if isinstance(root, MutableMapping):
        root[name] = value
    else:
        setattr(root, name, value)


def replace_raf(
        roots: list[Any] | tuple[Any, ...] | None = None,
        *legacy_roots: Any,
        duration: float = clock.DEFAULT_FRAME_DURATION,
        start_time: float | None = None,
        now: Callable[[], float] = clock.now,
        schedule_name: str = SCHEDULE_NAME,
        cancel_name: str = CANCEL_NAME,
) -> FrameQueue:
    """
    Install a fresh frame queue onto each root and return it.

    Every root gets the same queue; each call creates a new one. Mapping roots
    (e.g. a fake `window` dict) get keys, anything else gets attributes.
    With no roots, the ambient global namespace (builtins) is patched.

    Passing roots positionally, replace_raf(a, b), is the old calling form:
    it still works but warns. Use replace_raf([a, b]).
    """
    if roots is not None and not isinstance(roots, (list, tuple)):
        warnings.warn(
            "replace_raf(root, ...) is deprecated; pass a list of roots: replace_raf([root, ...])",
            DeprecationWarning,
            stacklevel=2,
        )
        targets = [roots, *legacy_roots]
    else:
        targets = list(roots or [])

    if not targets:
        targets.append(builtins)

    queue = create_queue(duration, start_time, now=now)
    request = RequestAnimationFrame(queue)

    for root in targets:
        _assign(root, schedule_name, request)
        _assign(root, cancel_name, queue.cancel)
        logger.debug("installed %s/%s on %r", schedule_name, cancel_name, root)

    return queue
