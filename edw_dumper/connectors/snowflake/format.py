"""Layout of a Snowflake metadata dump: entry names and fixed headers."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

FORMAT_NAME = "snowflake.dump.zip"


class MetadataEntity(str, Enum):
    DATABASES = "databases"
    SCHEMATA = "schemata"
    TABLES = "tables"
    COLUMNS = "columns"
    VIEWS = "views"
    FUNCTIONS = "functions"
    # assessment only
    TABLE_STORAGE_METRICS = "table_storage_metrics"
    WAREHOUSES = "warehouses"
    EXTERNAL_TABLES = "external_tables"
    FUNCTION_INFO = "function_info"


# Planned with an ACCOUNT_USAGE primary and an INFORMATION_SCHEMA fallback, in this order.
FALLBACK_ENTITIES: Tuple[MetadataEntity, ...] = (
    MetadataEntity.DATABASES,
    MetadataEntity.SCHEMATA,
    MetadataEntity.TABLES,
    MetadataEntity.COLUMNS,
    MetadataEntity.VIEWS,
    MetadataEntity.FUNCTIONS,
)

ASSESSMENT_ENTITIES: Tuple[MetadataEntity, ...] = (
    MetadataEntity.TABLE_STORAGE_METRICS,
    MetadataEntity.WAREHOUSES,
    MetadataEntity.EXTERNAL_TABLES,
    MetadataEntity.FUNCTION_INFO,
)


def is_zip_entry_name(entity: MetadataEntity) -> str:
    return f"{entity.value.replace('_', '-')}.csv"


def au_zip_entry_name(entity: MetadataEntity) -> str:
    return f"{entity.value.replace('_', '-')}-au.csv"


HEADERS: Dict[MetadataEntity, Tuple[str, ...]] = {
    MetadataEntity.DATABASES: ("DatabaseName", "DatabaseOwner"),
    MetadataEntity.SCHEMATA: ("CatalogName", "SchemaName"),
    MetadataEntity.TABLES: (
        "TableCatalog",
        "TableSchema",
        "TableName",
        "TableType",
        "RowCount",
        "Bytes",
        "ClusteringKey",
    ),
    MetadataEntity.COLUMNS: (
        "TableCatalog",
        "TableSchema",
        "TableName",
        "OrdinalPosition",
        "ColumnName",
        "DataType",
    ),
    MetadataEntity.VIEWS: ("TableCatalog", "TableSchema", "TableName", "ViewDefinition"),
    MetadataEntity.FUNCTIONS: ("FunctionSchema", "FunctionName", "DataType", "ArgumentSignature"),
}
