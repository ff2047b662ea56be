from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from ..tasks.base import Task
    from .arguments import ConnectorArguments


@dataclass(frozen=True)
class ConnectorProperty:
    """A named ``-D``-style setting a connector accepts from run configuration."""

    name: str
    description: str


@dataclass(frozen=True)
class OverrideKeys:
    """The pair of settings that can replace or narrow one entity's query."""

    query: ConnectorProperty
    where: ConnectorProperty

    @classmethod
    def for_entity(cls, prefix: str, entity: str) -> "OverrideKeys":
        return cls(
            query=ConnectorProperty(
                name=f"{prefix}.{entity}.query",
                description=f"Custom query for metadata {entity} dump.",
            ),
            where=ConnectorProperty(
                name=f"{prefix}.{entity}.where",
                description=f"Custom where condition to append to query for metadata {entity} dump.",
            ),
        )

    def __iter__(self):
        return iter((self.query, self.where))


@runtime_checkable
class MetadataConnector(Protocol):
    """Plans the tasks that dump catalog metadata from one kind of database."""

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def format_name(self) -> str: ...

    def properties(self) -> Sequence[ConnectorProperty]: ...

    def build_plan(self, arguments: "ConnectorArguments") -> List["Task"]: ...

    def fast_path_where_overrides(self, arguments: "ConnectorArguments") -> List[str]: ...