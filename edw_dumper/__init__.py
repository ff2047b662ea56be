"""
Metadata dumper for database-migration assessment.

Connectors turn a run configuration into an ordered, declarative plan of
extraction tasks; the task runner executes such a plan against an execution
tool and writes the results to an output sink.
"""

from .common import RUN_ID, PrintLogger
from .connectors import ConnectorArguments, ConnectorConfigError, validate_config
from .runtime import describe_plan, plan_dump, run_config, run_dump

__all__ = [
    "RUN_ID",
    "ConnectorArguments",
    "ConnectorConfigError",
    "PrintLogger",
    "describe_plan",
    "plan_dump",
    "run_config",
    "run_dump",
    "validate_config",
]
