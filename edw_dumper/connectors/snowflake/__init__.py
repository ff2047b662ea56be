from .format import FORMAT_NAME, MetadataEntity
from .metadata import SnowflakeMetadataConnector
from .properties import OVERRIDE_KEYS, override_keys

__all__ = [
    "FORMAT_NAME",
    "MetadataEntity",
    "OVERRIDE_KEYS",
    "SnowflakeMetadataConnector",
    "override_keys",
]
