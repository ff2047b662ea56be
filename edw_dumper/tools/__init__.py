from .base import ExecutionTool, QueryRequest, QueryResult

__all__ = ["ExecutionTool", "QueryRequest", "QueryResult"]
