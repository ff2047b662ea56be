from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable


class EventCategory(str, Enum):
    PLAN = "plan"
    TASK = "task"
    LOG = "log"


class EventType(str, Enum):
    PLAN_BUILT = "plan.built"
    TASK_START = "task.start"
    TASK_SUCCESS = "task.success"
    TASK_FAILURE = "task.failure"
    TASK_SKIPPED = "task.skipped"
    LOG = "log"

    @property
    def category(self) -> EventCategory:
        return EventCategory(self.value.split(".", 1)[0])


@dataclass
class Event:
    category: EventCategory
    type: EventType
    payload: Dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())


class Subscriber:
    """Base subscriber; override interests and on_event."""

    def interests(self) -> Iterable[EventCategory]:
        return []

    def on_event(self, event: Event) -> None:
        raise NotImplementedError
