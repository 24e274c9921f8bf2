from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Event vocabulary for the frame queue.
    Keep this small; add types only when tests require them.
    """

    CALLBACK_SCHEDULED = "CALLBACK_SCHEDULED"
    CALLBACK_CANCELLED = "CALLBACK_CANCELLED"
    FRAME_START = "FRAME_START"
    CALLBACK_FIRED = "CALLBACK_FIRED"
    FRAME_END = "FRAME_END"
    QUEUE_RESET = "QUEUE_RESET"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by the queue (optionally).

    frame and seq are owned by the sink, not the queue.
    frame 0 holds whatever happened before the first frame was advanced.
    """

    frame: int
    seq: int
    type: EventType
    handle: int | None = None
    data: dict[str, Any] = field(default_factory=dict)
