from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .common import PrintLogger
from .connectors import ConnectorArguments, MetadataConnector
from .connectors.snowflake import SnowflakeMetadataConnector
from .events import Emitter, EventType, StructuredLogSubscriber
from .io.sink import DirectorySink, OutputSink
from .tasks import JdbcSelectTask, RunSummary, Task, TaskContext, TaskRunner
from .tools.base import ExecutionTool

CONNECTORS = {
    "snowflake": SnowflakeMetadataConnector,
}

JDBC_OPTION_KEYS = ("url", "user", "password", "driver", "fetchsize")


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def build_connector(name: str) -> MetadataConnector:
    try:
        factory = CONNECTORS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown connector: {name}; expected one of {', '.join(sorted(CONNECTORS))}") from None
    return factory()


def jdbc_options(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Spark JDBC reader options taken from the ``jdbc`` config section."""
    jdbc_cfg = cfg.get("jdbc", {}) or {}
    options = {key: jdbc_cfg[key] for key in JDBC_OPTION_KEYS if jdbc_cfg.get(key) is not None}
    options.update(jdbc_cfg.get("options", {}) or {})
    return options


def build_logger(cfg: Dict[str, Any]) -> PrintLogger:
    runtime = cfg.get("runtime", {}) or {}
    return PrintLogger(job_name=runtime.get("job_name", "edw_dump"), file_path=runtime.get("log_file"))


def plan_dump(
    cfg: Dict[str, Any],
    logger: Optional[PrintLogger] = None,
    emitter: Optional[Emitter] = None,
) -> List[Task]:
    """Validate the run configuration and build the connector's task plan.

    Any configuration error is raised before a single task exists.
    """
    logger = logger or build_logger(cfg)
    arguments = ConnectorArguments.from_config(cfg)
    connector = build_connector(arguments.connector)
    arguments.validate_definitions(connector.properties())
    if arguments.inject_info_schema_fault:
        logger.warn("fallback_fault_injected", connector=connector.name, assessment=arguments.is_assessment())
    for name in connector.fast_path_where_overrides(arguments):
        logger.warn("where_override_on_fast_path", property=name, connector=connector.name)

    tasks = connector.build_plan(arguments)
    payload = {
        "connector": connector.name,
        "assessment": arguments.is_assessment(),
        "tasks": len(tasks),
        "fallback_tasks": sum(1 for task in tasks if task.dependency is not None),
        "overrides": sorted(arguments.definitions),
    }
    if emitter is not None:
        emitter.publish(EventType.PLAN_BUILT, **payload)
    else:
        logger.info("plan_built", **payload)
    return tasks


def describe_plan(tasks: List[Task]) -> List[Dict[str, Any]]:
    """Serializable view of a plan, for dry runs."""
    described: List[Dict[str, Any]] = []
    for task in tasks:
        entry: Dict[str, Any] = {"task_id": task.task_id, "type": type(task).__name__}
        if isinstance(task, JdbcSelectTask):
            entry["sql"] = task.sql
            entry["header"] = list(task.header) if task.header is not None else "dynamic"
        if task.dependency is not None:
            entry["run_if"] = task.dependency.run_if.value
            entry["predecessor"] = task.dependency.predecessor_id
        described.append(entry)
    return described


def run_dump(
    cfg: Dict[str, Any],
    tool: Optional[ExecutionTool],
    sink: OutputSink,
    logger: Optional[PrintLogger] = None,
) -> RunSummary:
    logger = logger or build_logger(cfg)
    emitter = Emitter()
    job_name = (cfg.get("runtime", {}) or {}).get("job_name", "edw_dump")
    emitter.subscribe(StructuredLogSubscriber(logger, job_name=job_name))

    tasks = plan_dump(cfg, logger, emitter)
    context = TaskContext(tool=tool, sink=sink, jdbc_options=jdbc_options(cfg), emitter=emitter)
    summary = TaskRunner(context).run(tasks)
    logger.info("dump_end", **summary.as_dict())
    return summary


def run_config(path: str, dry_run: bool = False) -> Optional[RunSummary]:
    """Plan, and unless ``dry_run``, execute a dump described by a JSON config file."""
    cfg = load_config(path)
    logger = build_logger(cfg)
    if dry_run:
        tasks = plan_dump(cfg, logger)
        for entry in describe_plan(tasks):
            logger.info("plan_task", **entry)
        return None

    from .tools.spark import SparkTool

    output_dir = (cfg.get("runtime", {}) or {}).get("output_dir") or "dumper-output"
    tool = SparkTool.from_config(cfg)
    try:
        return run_dump(cfg, tool, DirectorySink(output_dir), logger)
    finally:
        tool.stop()
