from __future__ import annotations

from typing import Any, Optional

from .types import EventType


def emit_task_event(
    emitter,
    event_type: EventType,
    *,
    task_id: str,
    rows: Optional[int] = None,
    predecessor: Optional[str] = None,
    error: Optional[str] = None,
    error_type: Optional[str] = None,
    **extra: Any,
) -> None:
    if emitter is None:
        return
    payload = {"task_id": task_id, **extra}
    if rows is not None:
        payload["rows"] = rows
    if predecessor is not None:
        payload["predecessor"] = predecessor
    if error is not None:
        payload["error"] = error
        payload["error_type"] = error_type
    emitter.publish(event_type, **payload)


def emit_log(
    emitter,
    *,
    level: str,
    msg: str,
    logger=None,
    **payload: Any,
) -> None:
    if emitter is not None:
        emitter.publish(EventType.LOG, level=level.upper(), msg=msg, **payload)
    elif logger is not None:
        logger.log(level.upper(), msg, **payload)
