from __future__ import annotations

from dataclasses import dataclass

from raf_stub.engine import FrameQueue, StepCountError


@dataclass(frozen=True)
class FrameTrace:
    # 1-based within a single run_frames_with_trace() call
    frame: int
    time: float
    # BEFORE the pass (the snapshot the pass works from)
    pending_before: tuple[int, ...]
    fired: tuple[int, ...]
    # AFTER the pass (frames scheduled during it show up here)
    pending_after: tuple[int, ...]

    @property
    def deferred(self) -> tuple[int, ...]:
        """Handles scheduled during this frame that will fire on a later one."""
        before = set(self.pending_before)
        return tuple(h for h in self.pending_after if h not in before)


def run_frames_with_trace(
        queue: FrameQueue,
        num_frames: int,
        duration: float | None = None,
) -> list[FrameTrace]:
    """
    Advance the queue num_frames single frames, returning a per-frame trace log.

    Notes:
    - Uses FrameQueue.step_debug() for behavior (same rules) + observability.
    - Adds observability only (no rule changes).
    """
    if num_frames < 0:
        raise StepCountError(f"num_frames must be >= 0, got {num_frames}")

    log: list[FrameTrace] = []
    for n in range(1, num_frames + 1):
        before = queue.pending_handles
        frame_time, fired = queue.step_debug(duration)
        log.append(
            FrameTrace(
                frame=n,
                time=frame_time,
                pending_before=before,
                fired=tuple(fired),
                pending_after=queue.pending_handles,
            )
        )
    return log
