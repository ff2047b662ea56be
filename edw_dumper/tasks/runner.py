from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..events import Emitter, EventType, emit_task_event
from ..io.sink import OutputSink
from ..tools.base import ExecutionTool
from .base import Task, TaskState


@dataclass
class TaskContext:
    tool: Optional[ExecutionTool]
    sink: OutputSink
    jdbc_options: Dict[str, Any] = field(default_factory=dict)
    emitter: Optional[Emitter] = None


@dataclass
class TaskResult:
    task_id: str
    state: TaskState
    rows: Optional[int] = None
    error: Optional[str] = None


@dataclass
class RunSummary:
    results: List[TaskResult] = field(default_factory=list)

    def count(self, state: TaskState) -> int:
        return sum(1 for result in self.results if result.state is state)

    @property
    def succeeded(self) -> int:
        return self.count(TaskState.SUCCEEDED)

    @property
    def failed(self) -> int:
        return self.count(TaskState.FAILED)

    @property
    def skipped(self) -> int:
        return self.count(TaskState.SKIPPED)

    def state_of(self, task_id: str) -> TaskState:
        for result in self.results:
            if result.task_id == task_id:
                return result.state
        return TaskState.NOT_STARTED

    def as_dict(self) -> Dict[str, Any]:
        return {"ok": self.succeeded, "failed": self.failed, "skipped": self.skipped, "total": len(self.results)}


class TaskRunner:
    """Runs a plan in order, honouring each task's predecessor condition.

    Failures are recorded and the run carries on; nothing is retried.
    """

    def __init__(self, context: TaskContext) -> None:
        self.context = context

    def run(self, tasks: Sequence[Task]) -> RunSummary:
        summary = RunSummary()
        states: Dict[str, TaskState] = {}
        for task in tasks:
            result = self._run_one(task, states)
            states[task.task_id] = result.state
            summary.results.append(result)
        return summary

    def _run_one(self, task: Task, states: Dict[str, TaskState]) -> TaskResult:
        emitter = self.context.emitter
        dependency = task.dependency
        if dependency is not None:
            if dependency.predecessor_id not in states:
                raise RuntimeError(
                    f"Task {task.task_id} depends on {dependency.predecessor_id}, which has not run yet"
                )
            if not dependency.allows(states[dependency.predecessor_id]):
                emit_task_event(
                    emitter,
                    EventType.TASK_SKIPPED,
                    task_id=task.task_id,
                    predecessor=dependency.predecessor_id,
                )
                return TaskResult(task.task_id, TaskState.SKIPPED)

        emit_task_event(emitter, EventType.TASK_START, task_id=task.task_id)
        tool = self.context.tool
        if tool is not None and hasattr(tool, "set_job_context"):
            tool.set_job_context(pool=None, group_id=task.task_id, description=task.describe())
        try:
            rows = task.run(self.context)
        except Exception as exc:
            emit_task_event(
                emitter,
                EventType.TASK_FAILURE,
                task_id=task.task_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return TaskResult(task.task_id, TaskState.FAILED, error=str(exc))
        finally:
            if tool is not None and hasattr(tool, "clear_job_context"):
                tool.clear_job_context()
        emit_task_event(emitter, EventType.TASK_SUCCESS, task_id=task.task_id, rows=rows)
        return TaskResult(task.task_id, TaskState.SUCCEEDED, rows=rows)
