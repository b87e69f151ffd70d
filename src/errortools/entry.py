"""Running a program's main function with MainError reporting."""

from __future__ import annotations

import asyncio
import inspect
import logging
import sys
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from errortools.config import ReportConfig
from errortools.kernel.errors import MainError
from errortools.kernel.result import Result

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


async def _drive(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _in_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def run_main(
    main: Callable[..., Any],
    *args: Any,
    config: ReportConfig | None = None,
    **kwargs: Any,
) -> int:
    """Run ``main`` and turn any escaping error into a printed MainError.

    ``main`` may be a plain function, a coroutine function (driven with
    ``asyncio.run``), or return a ``Result``, which is unwrapped. An async
    ``main`` called from inside a running event loop is closed unawaited and
    reported as a failure.

    Args:
        main: The program's top-level function
        *args: Positional arguments for ``main``
        config: Reporting options, defaults to ``ReportConfig()``
        **kwargs: Keyword arguments for ``main``

    Returns:
        0 on success, ``config.exit_code`` on failure
    """
    config = config or ReportConfig()
    try:
        outcome = main(*args, **kwargs)
        if inspect.isawaitable(outcome):
            if _in_running_loop():
                if inspect.iscoroutine(outcome):
                    outcome.close()
                raise RuntimeError(
                    "run_main() cannot drive an async main from inside a running event loop"
                )
            outcome = asyncio.run(_drive(outcome))
        if isinstance(outcome, Result):
            outcome.unwrap()
    except Exception as exc:
        error = MainError.from_error(exc)
        logger.debug(
            "Entry point %s failed with %s",
            getattr(main, "__name__", main),
            type(error.inner).__name__,
        )
        print(error.report(config), file=config.output())
        return config.exit_code
    return 0


def main_entry(func: F | None = None, *, config: ReportConfig | None = None) -> Any:
    """Decorate a main function so calling it exits the process.

    Usable bare (``@main_entry``) or with options
    (``@main_entry(config=ReportConfig(exit_code=2))``).
    """

    def decorate(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            sys.exit(run_main(fn, *args, config=config, **kwargs))

        return wrapper  # type: ignore[return-value]

    if func is None:
        return decorate
    return decorate(func)
