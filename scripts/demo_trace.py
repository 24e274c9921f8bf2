from __future__ import annotations

from raf_stub.engine import create_queue
from raf_stub.trace import run_frames_with_trace


def main() -> None:
    queue = create_queue(frame_duration=16, start_time=0)
    log: list[str] = []

    def spinner(remaining: int):
        def tick(time: float) -> None:
            log.append(f"spinner({remaining}) @ {time}")
            if remaining > 1:
                queue.schedule(spinner(remaining - 1))

        return tick

    queue.schedule(spinner(3))
    queue.schedule(lambda time: log.append(f"one-shot @ {time}"))
    doomed = queue.schedule(lambda time: log.append("never printed"))
    queue.cancel(doomed)

    for entry in run_frames_with_trace(queue, 4):
        fired = ", ".join(str(h) for h in entry.fired) or "-"
        deferred = ", ".join(str(h) for h in entry.deferred) or "-"
        print(
            f"Frame {entry.frame:2d} | t={entry.time:6.1f} | "
            f"pending={list(entry.pending_before)} fired=[{fired}] deferred=[{deferred}]"
        )

    print()
    for line in log:
        print(f"  {line}")


if __name__ == "__main__":
    main()
