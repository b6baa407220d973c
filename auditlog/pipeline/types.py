"""
Type definitions for pipeline stages.
"""

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from auditlog.events.types import Event


class NodeType(Enum):
    """Classification of a pipeline stage, used for composition validation."""
    SOURCE = "source"
    FILTER = "filter"
    FORMATTER = "formatter"
    SINK = "sink"


@dataclass
class StageContext:
    """
    Cancellation context handed to a stage with each event.

    A context is cancelled when ``cancel()`` has been called or its monotonic
    ``deadline`` has passed.
    """

    deadline: Optional[float] = None
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @classmethod
    def with_timeout(cls, seconds: float) -> "StageContext":
        """Create a context that expires after the given number of seconds."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def is_cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline


@runtime_checkable
class Node(Protocol):
    """Operations every pipeline stage provides."""

    def type(self) -> NodeType:
        ...

    def reopen(self) -> None:
        ...

    def process(self, ctx: Optional[StageContext], event: Optional[Event]) -> Event:
        ...
