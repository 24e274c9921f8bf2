from unittest.mock import Mock

import pytest

from raf_stub.engine import StepCountError
from raf_stub.trace import run_frames_with_trace
from tests._support.frame_helpers import FRAME_DURATION, START_TIME, make_queue


def test_trace_records_snapshot_fired_and_deferred_frames():
    q = make_queue()
    h1 = q.schedule(lambda t: q.schedule(Mock()))
    h2 = q.schedule(Mock())

    log = run_frames_with_trace(q, 3)

    assert [entry.frame for entry in log] == [1, 2, 3]
    assert [entry.time for entry in log] == [START_TIME + n * FRAME_DURATION for n in (1, 2, 3)]

    first, second, third = log
    assert first.pending_before == (h1, h2)
    assert first.fired == (h1, h2)
    assert first.pending_after == (3,)
    assert first.deferred == (3,)

    assert second.fired == (3,)
    assert second.deferred == ()
    assert third.pending_before == ()
    assert third.fired == ()


def test_trace_with_custom_duration():
    q = make_queue()
    q.schedule(Mock())

    (entry,) = run_frames_with_trace(q, 1, duration=500)

    assert entry.time == START_TIME + 500


def test_trace_zero_frames_leaves_queue_alone():
    q = make_queue()
    q.schedule(Mock())

    assert run_frames_with_trace(q, 0) == []
    assert q.current_time == START_TIME
    assert len(q) == 1


def test_trace_rejects_negative_frame_count():
    with pytest.raises(StepCountError):
        run_frames_with_trace(make_queue(), -1)
