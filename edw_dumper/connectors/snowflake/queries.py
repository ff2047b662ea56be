"""Default metadata queries.

``${schema}`` is the catalog a variant reads from and ``${where}`` the
variant's own trailing filter.

Docref: https://docs.snowflake.net/manuals/sql-reference/info-schema.html#list-of-views
ACCOUNT_USAGE is much faster than INFORMATION_SCHEMA and has no size limits,
but needs: GRANT IMPORTED PRIVILEGES ON DATABASE snowflake TO ROLE <role>;
"""

from __future__ import annotations

from typing import Dict

from .format import MetadataEntity

INFORMATION_SCHEMA = "INFORMATION_SCHEMA"
ACCOUNT_USAGE = "SNOWFLAKE.ACCOUNT_USAGE"
NONEXISTENT_SCHEMA = "__NONEXISTENT__"
# ACCOUNT_USAGE keeps dropped objects around.
ACCOUNT_USAGE_WHERE = " WHERE DELETED IS NULL"

DEFAULT_QUERIES: Dict[MetadataEntity, str] = {
    MetadataEntity.DATABASES: "SELECT database_name, database_owner FROM ${schema}.DATABASES${where}",
    MetadataEntity.SCHEMATA: "SELECT catalog_name, schema_name FROM ${schema}.SCHEMATA${where}",
    # Painfully slow on INFORMATION_SCHEMA.
    MetadataEntity.TABLES: (
        "SELECT table_catalog, table_schema, table_name, table_type, row_count, bytes,"
        " clustering_key FROM ${schema}.TABLES${where}"
    ),
    MetadataEntity.COLUMNS: (
        "SELECT table_catalog, table_schema, table_name, ordinal_position, column_name,"
        " data_type FROM ${schema}.COLUMNS${where}"
    ),
    MetadataEntity.VIEWS: (
        "SELECT table_catalog, table_schema, table_name, view_definition FROM ${schema}.VIEWS${where}"
    ),
    MetadataEntity.FUNCTIONS: (
        "SELECT function_schema, function_name, data_type, argument_signature FROM"
        " ${schema}.FUNCTIONS${where}"
    ),
    MetadataEntity.TABLE_STORAGE_METRICS: "SELECT * FROM ${schema}.TABLE_STORAGE_METRICS${where}",
    MetadataEntity.WAREHOUSES: "SHOW WAREHOUSES",
    MetadataEntity.EXTERNAL_TABLES: "SHOW EXTERNAL TABLES",
    MetadataEntity.FUNCTION_INFO: "SHOW FUNCTIONS",
}


def default_query(entity: MetadataEntity) -> str:
    return DEFAULT_QUERIES[entity]
