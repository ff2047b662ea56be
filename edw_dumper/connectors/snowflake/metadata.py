from __future__ import annotations

from typing import List

from ...planning import (
    CamelCaseHeader,
    CaseFormat,
    OverrideResolver,
    TaskVariant,
    compose_single,
    compose_with_fallback,
)
from ...tasks.base import DumpMetadataTask, FormatTask, JdbcSelectTask, Task
from ..arguments import ConnectorArguments
from ..base import ConnectorProperty
from .format import (
    ASSESSMENT_ENTITIES,
    FALLBACK_ENTITIES,
    FORMAT_NAME,
    HEADERS,
    MetadataEntity,
    au_zip_entry_name,
    is_zip_entry_name,
)
from .properties import connector_properties, override_keys
from .queries import (
    ACCOUNT_USAGE,
    ACCOUNT_USAGE_WHERE,
    INFORMATION_SCHEMA,
    NONEXISTENT_SCHEMA,
    default_query,
)

# SHOW commands report lower_case columns, ACCOUNT_USAGE views UPPER_CASE ones.
HEADER_SOURCE_FORMATS = {
    MetadataEntity.TABLE_STORAGE_METRICS: CaseFormat.UPPER_UNDERSCORE,
    MetadataEntity.WAREHOUSES: CaseFormat.LOWER_UNDERSCORE,
    MetadataEntity.EXTERNAL_TABLES: CaseFormat.LOWER_UNDERSCORE,
    MetadataEntity.FUNCTION_INFO: CaseFormat.LOWER_UNDERSCORE,
}


class SnowflakeMetadataConnector:
    """Dumps metadata from Snowflake."""

    description = "Dumps metadata from Snowflake."
    format_name = FORMAT_NAME

    def __init__(self, name: str = "snowflake") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def properties(self) -> List[ConnectorProperty]:
        return connector_properties()

    def build_plan(self, arguments: ConnectorArguments) -> List[Task]:
        resolver = OverrideResolver(arguments)
        info_schema = NONEXISTENT_SCHEMA if arguments.inject_info_schema_fault else INFORMATION_SCHEMA

        tasks: List[Task] = [
            DumpMetadataTask(format_name=self.format_name, connector=self.name, assessment=arguments.is_assessment()),
            FormatTask(self.format_name),
        ]
        for entity in FALLBACK_ENTITIES:
            tasks.extend(self.fallback_tasks(entity, resolver, info_schema, arguments.is_assessment()))
        if arguments.is_assessment():
            tasks.extend(self.assessment_task(entity, resolver) for entity in ASSESSMENT_ENTITIES)
        return tasks

    def fast_path_where_overrides(self, arguments: ConnectorArguments) -> List[str]:
        """Where-override settings whose only planned task cannot succeed.

        In assessment mode an entity runs solely against ACCOUNT_USAGE, whose
        query already ends in its own WHERE clause, so appending an override
        there yields invalid SQL. A query override for the same entity wins
        over the where override and is not reported.
        """
        if not arguments.is_assessment():
            return []
        names = []
        for entity in FALLBACK_ENTITIES:
            keys = override_keys(entity)
            if arguments.get_definition(keys.where) is not None and arguments.get_definition(keys.query) is None:
                names.append(keys.where.name)
        return names

    def fallback_tasks(
        self,
        entity: MetadataEntity,
        resolver: OverrideResolver,
        info_schema: str,
        assessment: bool,
    ) -> List[JdbcSelectTask]:
        return compose_with_fallback(
            HEADERS[entity],
            self.query_for(entity, resolver),
            fast_variant=TaskVariant(au_zip_entry_name(entity), ACCOUNT_USAGE, ACCOUNT_USAGE_WHERE),
            fallback_variant=TaskVariant(is_zip_entry_name(entity), info_schema),
            assessment=assessment,
        )

    def assessment_task(self, entity: MetadataEntity, resolver: OverrideResolver) -> JdbcSelectTask:
        return compose_single(
            self.query_for(entity, resolver),
            TaskVariant(au_zip_entry_name(entity), ACCOUNT_USAGE),
            CamelCaseHeader(HEADER_SOURCE_FORMATS[entity]),
        )

    def query_for(self, entity: MetadataEntity, resolver: OverrideResolver) -> str:
        keys = override_keys(entity)
        if keys is None:
            return default_query(entity)
        return resolver.resolve(default_query(entity), keys)
