from __future__ import annotations

from threading import RLock
from typing import Any, Dict, List

from .types import Event, EventCategory, EventType, Subscriber


class Emitter:
    """Routes plan, task and log events to the subscribers interested in them.

    A subscriber's interests are read once, when it subscribes; an empty
    interest list means every category.
    """

    def __init__(self) -> None:
        self._routes: Dict[EventCategory, List[Subscriber]] = {category: [] for category in EventCategory}
        self._lock = RLock()

    def subscribe(self, subscriber: Subscriber) -> None:
        categories = list(subscriber.interests()) or list(EventCategory)
        with self._lock:
            for category in categories:
                self._routes[EventCategory(category)].append(subscriber)

    def emit(self, event: Event) -> None:
        with self._lock:
            subscribers = list(self._routes[event.category])
        for subscriber in subscribers:
            subscriber.on_event(event)

    def publish(self, event_type: EventType, **payload: Any) -> Event:
        event = Event(category=event_type.category, type=event_type, payload=payload)
        self.emit(event)
        return event
