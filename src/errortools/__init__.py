from .config import ReportConfig
from .entry import main_entry, run_main
from .fat import (
    path_context,
    wrap_operation,
    wrap_operation_async,
    wrap_path_call,
    wrap_path_call_async,
    wrap_result,
)
from .kernel import (
    MainError,
    PathAwareError,
    Result,
    describe_error,
    format_chain,
    iter_sources,
    root_cause,
)

__all__ = [
    # Core
    "Result",
    "PathAwareError",
    "MainError",
    # Fat error generators
    "wrap_result",
    "wrap_operation",
    "wrap_path_call",
    "wrap_operation_async",
    "wrap_path_call_async",
    "path_context",
    # Chain inspection
    "describe_error",
    "iter_sources",
    "root_cause",
    "format_chain",
    # Entry point
    "ReportConfig",
    "run_main",
    "main_entry",
]
