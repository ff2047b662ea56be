from .base import TaskVariant
from .composer import compose_single, compose_with_fallback
from .headers import CamelCaseHeader, CaseFormat, HeaderDerivationError, rename_header
from .overrides import OverrideResolver, resolve_query

__all__ = [
    "CamelCaseHeader",
    "CaseFormat",
    "HeaderDerivationError",
    "OverrideResolver",
    "TaskVariant",
    "compose_single",
    "compose_with_fallback",
    "rename_header",
    "resolve_query",
]
