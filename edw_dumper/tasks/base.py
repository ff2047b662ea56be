from __future__ import annotations

import json
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..common import RUN_ID
from ..tools.base import QueryRequest

if TYPE_CHECKING:  # pragma: no cover
    from .runner import TaskContext

HeaderTransformer = Callable[[Sequence[str]], List[str]]

METADATA_ENTRY_NAME = "dumper-metadata.json"
FORMAT_ENTRY_NAME = "dumper-format.txt"

# JDBC readers wrap `query` in a subquery, where SHOW is rejected. A SHOW runs as
# the session init statement and its output is read back with RESULT_SCAN.
RESULT_SCAN_QUERY = "SELECT * FROM TABLE(RESULT_SCAN(LAST_QUERY_ID()))"


def is_show_command(sql: str) -> bool:
    words = sql.split(None, 1)
    return bool(words) and words[0].upper() == "SHOW"


def jdbc_query_options(sql: str, base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    options = dict(base or {})
    if is_show_command(sql):
        options["sessionInitStatement"] = sql
        options["query"] = RESULT_SCAN_QUERY
    else:
        options["query"] = sql
    return options


class TaskState(str, Enum):
    NOT_STARTED = "not_started"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class RunCondition(str, Enum):
    PREDECESSOR_FAILED = "predecessor_failed"


@dataclass(frozen=True)
class TaskDependency:
    """Directed edge to the single task this one is conditioned on."""

    predecessor_id: str
    run_if: RunCondition = RunCondition.PREDECESSOR_FAILED

    def allows(self, predecessor_state: TaskState) -> bool:
        if self.run_if is RunCondition.PREDECESSOR_FAILED:
            return predecessor_state is TaskState.FAILED
        return False  # pragma: no cover


class Task:
    """A declarative unit of work handed to the executor."""

    dependency: Optional[TaskDependency] = None

    @property
    def task_id(self) -> str:
        raise NotImplementedError

    def run(self, context: "TaskContext") -> Any:
        raise NotImplementedError

    def describe(self) -> str:
        return self.task_id


@dataclass(frozen=True)
class JdbcSelectTask(Task):
    """Run one SELECT (or SHOW) and store the rows under ``destination``."""

    destination: str
    sql: str
    header: Optional[Tuple[str, ...]] = None
    header_transformer: Optional[HeaderTransformer] = None
    dependency: Optional[TaskDependency] = None

    @property
    def task_id(self) -> str:
        return self.destination

    def with_header(self, header: Sequence[str]) -> "JdbcSelectTask":
        return replace(self, header=tuple(header), header_transformer=None)

    def with_header_transformer(self, transformer: HeaderTransformer) -> "JdbcSelectTask":
        return replace(self, header=None, header_transformer=transformer)

    def only_if_failed(self, predecessor: Task) -> "JdbcSelectTask":
        return replace(self, dependency=TaskDependency(predecessor_id=predecessor.task_id))

    def resolve_header(self, columns: Sequence[str]) -> List[str]:
        if self.header is not None:
            return list(self.header)
        if self.header_transformer is not None:
            return list(self.header_transformer(columns))
        return [str(column) for column in columns]

    def run(self, context: "TaskContext") -> int:
        options = jdbc_query_options(self.sql, context.jdbc_options)
        result = context.tool.query(QueryRequest(format="jdbc", options=options))
        header = self.resolve_header(list(result.columns))
        rows = [tuple(row) for row in result.collect()]
        context.sink.write_rows(self.destination, header, rows)
        return len(rows)

    def describe(self) -> str:
        return f"Write {self.destination} from\n        {self.sql}"


@dataclass(frozen=True)
class DumpMetadataTask(Task):
    """Stamps the output with the run's identity and mode."""

    format_name: str
    connector: str
    assessment: bool = False

    @property
    def task_id(self) -> str:
        return METADATA_ENTRY_NAME

    def payload(self) -> dict:
        return {
            "format": self.format_name,
            "connector": self.connector,
            "assessment": self.assessment,
            "run_id": RUN_ID,
            "timestamp": datetime.now().astimezone().isoformat(timespec="seconds"),
        }

    def run(self, context: "TaskContext") -> None:
        context.sink.write_text(METADATA_ENTRY_NAME, json.dumps(self.payload(), indent=2, sort_keys=True))


@dataclass(frozen=True)
class FormatTask(Task):
    """Records the dump format so readers know how to parse the output."""

    format_name: str

    @property
    def task_id(self) -> str:
        return FORMAT_ENTRY_NAME

    def run(self, context: "TaskContext") -> None:
        context.sink.write_text(FORMAT_ENTRY_NAME, self.format_name)
