from __future__ import annotations

from typing import List, Sequence

from ..tasks.base import HeaderTransformer, JdbcSelectTask
from .base import TaskVariant


def compose_with_fallback(
    header: Sequence[str],
    sql_template: str,
    fast_variant: TaskVariant,
    fallback_variant: TaskVariant,
    assessment: bool,
) -> List[JdbcSelectTask]:
    """Primary task on the fast catalog, plus a fallback that runs only if it fails.

    Assessment runs only want the fast path, so no fallback is planned there.
    """
    fast_task = JdbcSelectTask(fast_variant.destination, fast_variant.format(sql_template)).with_header(header)
    if assessment:
        return [fast_task]

    fallback_task = (
        JdbcSelectTask(fallback_variant.destination, fallback_variant.format(sql_template))
        .with_header(header)
        .only_if_failed(fast_task)
    )
    return [fast_task, fallback_task]


def compose_single(sql_template: str, variant: TaskVariant, transformer: HeaderTransformer) -> JdbcSelectTask:
    return JdbcSelectTask(variant.destination, variant.format(sql_template)).with_header_transformer(transformer)
