from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence


@dataclass
class QueryRequest:
    format: str
    options: Dict[str, Any]


class QueryResult(Protocol):
    """Dataframe-like result: column labels plus the collected rows."""

    @property
    def columns(self) -> Sequence[str]: ...

    def collect(self) -> Sequence[Any]: ...


class ExecutionTool(Protocol):
    """Execution backend interface (Spark, plain DB-API, etc.)."""

    def query(self, request: QueryRequest) -> QueryResult: ...

    def stop(self) -> None: ...

    def set_job_context(self, *, pool: Optional[str], group_id: Optional[str], description: Optional[str]) -> None: ...

    def clear_job_context(self) -> None: ...
