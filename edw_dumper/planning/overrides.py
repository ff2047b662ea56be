"""Operator overrides for entity queries.

Override text is trusted input: it is neither parsed nor validated here, and a
malformed override only surfaces when the executor runs it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..connectors.base import OverrideKeys

if TYPE_CHECKING:  # pragma: no cover
    from ..connectors.arguments import ConnectorArguments


def resolve_query(arguments: "ConnectorArguments", default_sql: str, keys: OverrideKeys) -> str:
    override_query = arguments.get_definition(keys.query)
    if override_query is not None:
        return override_query

    override_where = arguments.get_definition(keys.where)
    if override_where is not None:
        return default_sql + " WHERE " + override_where

    return default_sql


class OverrideResolver:
    """Binds :func:`resolve_query` to the arguments of one run."""

    def __init__(self, arguments: "ConnectorArguments") -> None:
        self.arguments = arguments

    def resolve(self, default_sql: str, keys: OverrideKeys) -> str:
        return resolve_query(self.arguments, default_sql, keys)
