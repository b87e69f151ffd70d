"""Path-aware ("fat") error generators."""

from .wrap import (
    enrich,
    path_context,
    wrap_operation,
    wrap_operation_async,
    wrap_path_call,
    wrap_path_call_async,
    wrap_result,
)

__all__ = [
    "enrich",
    "wrap_result",
    "wrap_operation",
    "wrap_path_call",
    "wrap_operation_async",
    "wrap_path_call_async",
    "path_context",
]
