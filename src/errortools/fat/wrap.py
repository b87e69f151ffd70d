"""Helpers that turn failures into path-aware ("fat") errors.

Every helper copies the path into an owned ``str`` before running anything
and rejects an empty path there, so the outcome never decides whether the
path is valid. The resulting error never depends on the caller's path
object and can be handed across ``await`` points or up any number of frames.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` always propagate untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from errortools.kernel.errors import PathAwareError, PathInput, own_path
from errortools.kernel.result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound=PathInput)


def enrich(path: PathInput, error: BaseException) -> PathAwareError:
    """Bind ``error`` to ``path``.

    An error that is already bound to the same path is returned as is, so
    re-wrapping at several layers does not repeat the prefix. A different
    path nests: ``"outer: inner: message"``.
    """
    owned = own_path(path)
    if isinstance(error, PathAwareError) and error.path == owned:
        return error
    logger.debug("Enriching %s with path %s", type(error).__name__, owned)
    return PathAwareError(owned, error)


def wrap_result(result: Result[T, Any], path: PathInput) -> Result[T, PathAwareError]:
    """Attach ``path`` to a failed result; pass a successful one through.

    Args:
        result: Outcome of a fallible operation
        path: Path the operation worked on

    Returns:
        The same result object on success, otherwise an Err holding a
        PathAwareError whose source is the original error

    Raises:
        ValueError: If the path is empty, whatever the outcome
    """
    owned = own_path(path)
    if result.is_ok:
        return result  # type: ignore[return-value]
    return Result.Err(enrich(owned, result.error))  # type: ignore[arg-type]


def wrap_operation(path: PathInput, operation: Callable[[], T]) -> Result[T, PathAwareError]:
    """Run a zero-argument operation, binding any failure to ``path``.

    Example:
        >>> wrap_operation(config_file, lambda: config_file.read_text())
    """
    owned = own_path(path)
    try:
        value = operation()
    except Exception as exc:
        return Result.Err(enrich(owned, exc))
    return Result.Ok(value)


def wrap_path_call(path: P, func: Callable[[P], T]) -> Result[T, PathAwareError]:
    """Call ``func(path)``, binding any failure to ``path``.

    Suits single-argument I/O functions such as ``open`` or
    ``os.listdir``.
    """
    return wrap_operation(path, lambda: func(path))


async def wrap_operation_async(
    path: PathInput, operation: Callable[[], Awaitable[T]]
) -> Result[T, PathAwareError]:
    """Await a zero-argument async operation, binding any failure to ``path``."""
    owned = own_path(path)
    try:
        value = await operation()
    except Exception as exc:
        return Result.Err(enrich(owned, exc))
    return Result.Ok(value)


async def wrap_path_call_async(
    path: P, func: Callable[[P], Awaitable[T]]
) -> Result[T, PathAwareError]:
    """Await ``func(path)``, binding any failure to ``path``."""
    return await wrap_operation_async(path, lambda: func(path))


@contextmanager
def path_context(path: PathInput) -> Iterator[str]:
    """Re-raise any error from the block as a PathAwareError for ``path``.

    Yields the owned path string. The original error is chained as
    ``__cause__``.
    """
    owned = own_path(path)
    try:
        yield owned
    except Exception as exc:
        enriched = enrich(owned, exc)
        if enriched is exc:
            raise
        raise enriched from exc
