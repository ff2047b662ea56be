from __future__ import annotations

from typing import Any, Dict, Optional

from pyspark.sql import DataFrame, SparkSession

from .base import ExecutionTool, QueryRequest


class SparkTool(ExecutionTool):
    def __init__(self, spark: SparkSession) -> None:
        self.spark = spark
        self._current_pool: Optional[str] = None
        self._current_group: Optional[str] = None

    def query(self, request: QueryRequest) -> DataFrame:
        reader = self.spark.read.format(request.format)
        for key, value in request.options.items():
            reader = reader.option(key, value)
        return reader.load()

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "SparkTool":
        runtime = cfg.get("runtime", {})
        builder = SparkSession.builder.appName(runtime.get("app_name", "edw_dumper"))
        builder = builder.config("spark.driver.memory", str(runtime.get("driver.memory", "2g")))
        builder = builder.config("spark.sql.session.timeZone", runtime.get("timezone", "UTC"))
        master = runtime.get("master")
        if master:
            builder = builder.master(master)
        extra_jars = runtime.get("extra_jars", [])
        if extra_jars:
            builder = builder.config("spark.jars", ",".join(extra_jars))
        extra_conf: Dict[str, Any] = runtime.get("spark_conf", {})
        for key, value in extra_conf.items():
            builder = builder.config(key, value)
        spark = builder.getOrCreate()
        return cls(spark)

    def stop(self) -> None:
        if self.spark is not None:
            self.spark.stop()

    def set_job_context(self, *, pool: Optional[str], group_id: Optional[str], description: Optional[str]) -> None:
        sc = self.spark.sparkContext
        if pool:
            sc.setLocalProperty("spark.scheduler.pool", pool)
            self._current_pool = pool
        if group_id is not None or description is not None:
            sc.setJobGroup(group_id or "", description or "")
            self._current_group = group_id

    def clear_job_context(self) -> None:
        sc = self.spark.sparkContext
        sc.setLocalProperty("spark.scheduler.pool", None)
        sc.setJobGroup("", "")
        self._current_pool = None
        self._current_group = None
