from __future__ import annotations

import logging
import math
from typing import Callable

from raf_stub import clock
from raf_stub.event_sink import EventSink
from raf_stub.events import EventType
from raf_stub.models import FrameCallback, PendingFrame
from raf_stub.precise import add

logger = logging.getLogger(__name__)


class QueueConfigError(ValueError):
    """Raised when a frame duration or start time is not a finite number."""


class StepCountError(ValueError):
    """Raised when advance() is asked for a negative (or non-integer) number of steps."""


def _require_number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise QueueConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise QueueConfigError(f"{name} must be finite, got {value!r}")
    return value


class FrameQueue:
    """
    A controllable stand-in for requestAnimationFrame.

    Callbacks are only ever invoked from advance()/flush(), never from
    schedule(). Each single advance moves the simulated clock forward by one
    duration, then fires the frames that were pending when the advance began.
    Frames scheduled while a pass is running wait for the next advance.
    """

    def __init__(
            self,
            frame_duration: float = clock.DEFAULT_FRAME_DURATION,
            start_time: float | None = None,
            *,
            now: Callable[[], float] = clock.now,
            event_sink: EventSink | None = None,
    ) -> None:
        self._frame_duration = _require_number("frame_duration", frame_duration)
        if start_time is None:
            start_time = now()
        self._start_time = _require_number("start_time", start_time)
        self._current_time = self._start_time
        self._frames: dict[int, PendingFrame] = {}
        self._last_handle = 0
        self._frame_count = 0
        self._event_sink = event_sink

    def __repr__(self) -> str:
        return (
            f"FrameQueue(frame_duration={self._frame_duration!r}, "
            f"current_time={self._current_time!r}, pending={len(self._frames)})"
        )

    def __len__(self) -> int:
        return len(self._frames)

    def __contains__(self, handle: object) -> bool:
        return _is_handle(handle) and handle in self._frames

    @property
    def frame_duration(self) -> float:
        return self._frame_duration

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def frame_count(self) -> int:
        """Frames advanced since construction or the last reset()."""
        return self._frame_count

    @property
    def pending_handles(self) -> tuple[int, ...]:
        return tuple(self._frames)

    def schedule(self, callback: FrameCallback) -> int:
        """Queue callback for the next frame and return its handle."""
        self._last_handle += 1
        handle = self._last_handle
        self._frames[handle] = PendingFrame(handle=handle, callback=callback)

        if self._event_sink is not None:
            self._event_sink.emit(EventType.CALLBACK_SCHEDULED, handle=handle)
        return handle

    def cancel(self, handle: object) -> None:
        """Drop a pending frame. Unknown or malformed handles are ignored."""
        if not _is_handle(handle):
            return None
        frame = self._frames.pop(handle, None)
        if frame is not None and self._event_sink is not None:
            self._event_sink.emit(EventType.CALLBACK_CANCELLED, handle=handle)
        return None

    def advance(self, steps: int = 1, duration: float | None = None) -> None:
        """
        Fire `steps` frames one after another, each `duration` apart
        (default: the configured frame duration).

        advance(0) does nothing at all. Negative counts raise StepCountError.
        """
        if isinstance(steps, bool) or not isinstance(steps, int):
            raise StepCountError(f"steps must be an int, got {steps!r}")
        if steps < 0:
            raise StepCountError(f"steps must be >= 0, got {steps}")
        if steps == 0:
            return
        duration = self._resolve_duration(duration)
        for _ in range(steps):
            self._advance_once(duration)

    def step_debug(self, duration: float | None = None) -> tuple[float, list[int]]:
        """
        Advance exactly one frame, returning:
          (frame_time, handles_fired_in_order)

        Same rules as advance(1, duration); only adds observability.
        """
        duration = self._resolve_duration(duration)
        return self._advance_once(duration)

    def flush(self, duration: float | None = None) -> None:
        """
        Advance frame by frame until nothing is pending, including frames
        scheduled by callbacks fired during this flush.

        There is no iteration cap: a callback that always schedules another
        frame keeps flush() running forever.
        """
        duration = self._resolve_duration(duration)
        frames_run = 0
        while self._frames:
            self._advance_once(duration)
            frames_run += 1
        logger.debug("flush ran %d frame(s); time is now %r", frames_run, self._current_time)

    def reset(self) -> None:
        """Drop every pending frame uncalled and rewind time to the start time."""
        dropped = len(self._frames)
        self._frames.clear()
        self._current_time = self._start_time
        self._frame_count = 0

        if self._event_sink is not None:
            self._event_sink.emit(EventType.QUEUE_RESET, dropped=dropped)
        logger.debug("reset dropped %d pending frame(s)", dropped)

    def _resolve_duration(self, duration: float | None) -> float:
        if duration is None:
            return self._frame_duration
        return _require_number("duration", duration)

    def _advance_once(self, duration: float) -> tuple[float, list[int]]:
        self._current_time = add(self._current_time, duration)
        self._frame_count += 1
        frame_time = self._current_time

        sink = self._event_sink
        if sink is not None:
            sink.start_frame()
            sink.emit(EventType.FRAME_START, time=frame_time)

        # Iterate a copy; callbacks may schedule/cancel on the live dict.
        snapshot = list(self._frames.values())
        fired: list[int] = []
        for frame in snapshot:
            # cancelled (or reset) by an earlier callback in this pass
            if frame.handle not in self._frames:
                continue
            try:
                frame.callback(frame_time)
            finally:
                self._frames.pop(frame.handle, None)
            fired.append(frame.handle)
            if sink is not None:
                sink.emit(EventType.CALLBACK_FIRED, handle=frame.handle)

        if sink is not None:
            sink.emit(EventType.FRAME_END, fired=len(fired))
        return frame_time, fired


def _is_handle(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def create_queue(
        frame_duration: float = clock.DEFAULT_FRAME_DURATION,
        start_time: float | None = None,
        *,
        now: Callable[[], float] = clock.now,
        event_sink: EventSink | None = None,
) -> FrameQueue:
    """
    Build an isolated frame queue.

    start_time=None asks `now` once, at construction; reset() returns to
    that same value.
    """
    queue = FrameQueue(frame_duration, start_time, now=now, event_sink=event_sink)
    logger.debug("created %r", queue)
    return queue
