from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from raf_stub.events import Event, EventType


class EventSink(ABC):
    """
    Consumer of structured events.
    The queue must be able to run with event_sink=None (no events).
    """

    @abstractmethod
    def start_frame(self) -> int: ...

    @abstractmethod
    def emit(self, event_type: EventType, handle: int | None = None, **data: Any) -> None: ...


@dataclass
class InMemoryEventSink(EventSink):
    """
    Simple sink for tests/demos.
    Owns frame/seq numbering so the queue does not have to.
    """

    events: list[Event] = field(default_factory=list)
    _frame: int = field(default=0, init=False)
    _seq: int = field(default=0, init=False)

    @property
    def current_frame(self) -> int:
        return self._frame

    def start_frame(self) -> int:
        self._frame += 1
        self._seq = 0
        return self._frame

    def emit(self, event_type: EventType, handle: int | None = None, **data: Any) -> None:
        self._seq += 1
        self.events.append(
            Event(
                frame=self._frame,
                seq=self._seq,
                type=event_type,
                handle=handle,
                data=dict(data),
            )
        )

    def of_type(self, event_type: EventType) -> list[Event]:
        return [e for e in self.events if e.type == event_type]

    def clear(self) -> None:
        self.events.clear()
        self._frame = 0
        self._seq = 0
