from .bus import Emitter
from .helpers import emit_log, emit_task_event
from .types import Event, EventCategory, EventType, Subscriber
from .subscribers import StructuredLogSubscriber

__all__ = [
    "Emitter",
    "Event",
    "EventCategory",
    "EventType",
    "Subscriber",
    "StructuredLogSubscriber",
    "emit_log",
    "emit_task_event",
]
