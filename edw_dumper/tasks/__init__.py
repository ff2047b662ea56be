from .base import (
    RESULT_SCAN_QUERY,
    DumpMetadataTask,
    FormatTask,
    JdbcSelectTask,
    RunCondition,
    Task,
    TaskDependency,
    TaskState,
    jdbc_query_options,
)
from .runner import RunSummary, TaskContext, TaskResult, TaskRunner

__all__ = [
    "RESULT_SCAN_QUERY",
    "DumpMetadataTask",
    "FormatTask",
    "JdbcSelectTask",
    "RunCondition",
    "RunSummary",
    "Task",
    "TaskContext",
    "TaskDependency",
    "TaskResult",
    "TaskRunner",
    "TaskState",
    "jdbc_query_options",
]
