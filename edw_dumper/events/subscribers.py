from __future__ import annotations

from typing import Iterable

from edw_dumper.common import PrintLogger, RUN_ID

from .types import Event, EventCategory, EventType, Subscriber

_LEVELS = {
    EventType.TASK_FAILURE: "WARN",
    EventType.TASK_SKIPPED: "DEBUG",
}


class StructuredLogSubscriber(Subscriber):
    """Writes structured telemetry to the PrintLogger."""

    def __init__(self, logger: PrintLogger, job_name: str) -> None:
        self.logger = logger
        self.job_name = job_name

    def interests(self) -> Iterable[EventCategory]:
        return []

    def on_event(self, event: Event) -> None:
        record = {
            "ts": event.timestamp.isoformat(timespec="milliseconds"),
            "event": event.type.value,
            "category": event.category.value,
            "job": self.job_name,
            "run_id": RUN_ID,
            "level": _LEVELS.get(event.type, "INFO"),
            **event.payload,
        }
        level = record.pop("level") or "INFO"
        if event.type is EventType.LOG:
            msg = record.pop("msg", event.type.value)
            self.logger.log(level, msg, **record)
        else:
            name = record.pop("event")
            self.logger.event(name, level=level, **record)
