"""Connector contracts and run configuration."""

from .arguments import TEST_FLAG_INJECT_IS_FAULT, ConnectorArguments, ConnectorConfigError, validate_config
from .base import ConnectorProperty, MetadataConnector, OverrideKeys

__all__ = [
    "ConnectorArguments",
    "ConnectorConfigError",
    "ConnectorProperty",
    "MetadataConnector",
    "OverrideKeys",
    "TEST_FLAG_INJECT_IS_FAULT",
    "validate_config",
]
