"""Kernel layer - error types and result container."""

from errortools.kernel.errors import (
    MainError,
    PathAwareError,
    describe_error,
    format_chain,
    format_report,
    iter_sources,
    root_cause,
)
from errortools.kernel.result import Result

__all__ = [
    "Result",
    "PathAwareError",
    "MainError",
    "describe_error",
    # Chain inspection
    "iter_sources",
    "root_cause",
    "format_chain",
    "format_report",
]
