"""Error types for path enrichment and entry-point propagation."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

from errortools.config import ReportConfig

PathInput = str | bytes | os.PathLike[Any]


def describe_error(error: BaseException) -> str:
    """Return the human-readable message of an error.

    OS errors that carry ``strerror`` are described by it alone, since their
    own ``str`` already embeds the errno and the filename.

    Args:
        error: The error to describe

    Returns:
        The message text, or the class name when the error has no message
    """
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__


def own_path(path: PathInput) -> str:
    """Copy a path-like value into an owned ``str``.

    Raises:
        ValueError: If the path is empty
    """
    value = os.fspath(path)
    if isinstance(value, bytes):
        value = os.fsdecode(value)
    if not value:
        raise ValueError("path must not be empty")
    return value


class PathAwareError(Exception):
    """An error bound to the filesystem path it occurred on.

    ``str(err)`` is always ``"<path>: <source message>"``. The source error is
    kept verbatim and also chained as ``__cause__``.
    """

    def __init__(self, path: PathInput, source: BaseException) -> None:
        if not isinstance(source, BaseException):
            raise TypeError(f"source must be an exception, got {type(source).__name__}")
        owned = own_path(path)
        self._path = owned
        self._source = source
        super().__init__(f"{owned}: {describe_error(source)}")
        self.__cause__ = source

    @classmethod
    def from_os_error(cls, error: OSError, path: PathInput) -> PathAwareError:
        """Build from an OS error when the file is still known to the caller."""
        return cls(path, error)

    @property
    def path(self) -> str:
        return self._path

    @property
    def source(self) -> BaseException:
        return self._source

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._path, self._source))

    def __repr__(self) -> str:
        return f"PathAwareError(path={self._path!r}, source={self._source!r})"


class MainError(Exception):
    """Catch-all error for a program entry point.

    Any exception converts into a MainError through ``from_error``. Its
    display is exactly the display of the wrapped error.
    """

    def __init__(self, inner: BaseException) -> None:
        if not isinstance(inner, BaseException):
            raise TypeError(f"inner must be an exception, got {type(inner).__name__}")
        self._inner = inner
        super().__init__(inner)
        self.__cause__ = inner

    @classmethod
    def from_error(cls, error: BaseException | str) -> MainError:
        """Convert any error (or a bare message) into a MainError."""
        if isinstance(error, cls):
            return error
        if isinstance(error, str):
            error = Exception(error)
        return cls(error)

    @property
    def inner(self) -> BaseException:
        return self._inner

    def report(self, config: ReportConfig | None = None) -> str:
        """Render the display text followed by one line per chained cause."""
        return format_report(self, config)

    def __str__(self) -> str:
        return str(self._inner)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._inner,))

    def __repr__(self) -> str:
        return f"MainError({self._inner!r})"


def next_source(error: BaseException) -> BaseException | None:
    """Return the error directly underneath ``error``, if any.

    A PathAwareError yields its ``source`` and a MainError its ``inner``,
    whatever ``__cause__`` was reassigned to by ``raise ... from``. Other
    errors follow ``__cause__`` first, then ``__context__`` unless it was
    suppressed, the same order the traceback printer uses.
    """
    if isinstance(error, PathAwareError):
        return error.source
    if isinstance(error, MainError):
        return error.inner
    if error.__cause__ is not None:
        return error.__cause__
    if not error.__suppress_context__:
        return error.__context__
    return None


def iter_sources(error: BaseException) -> Iterator[BaseException]:
    """Yield every error below ``error`` in its source chain.

    Stops when the chain ends or loops back on itself.
    """
    seen = {id(error)}
    current = next_source(error)
    while current is not None and id(current) not in seen:
        yield current
        seen.add(id(current))
        current = next_source(current)


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost error of the chain (``error`` itself if unchained)."""
    last = error
    for last in iter_sources(error):
        pass
    return last


def _display(error: BaseException) -> str:
    return str(error) or type(error).__name__


def format_chain(error: BaseException, prefix: str = "caused by: ") -> str:
    """Render ``error`` and its sources, one ``prefix`` line per source."""
    lines = [_display(error)]
    lines.extend(f"{prefix}{_display(source)}" for source in iter_sources(error))
    return "\n".join(lines)


def format_report(error: BaseException, config: ReportConfig | None = None) -> str:
    """Render the entry-point report for ``error``.

    A MainError contributes no line of its own: the report starts at its inner
    error so the text shown to the user is exactly that error's display.
    """
    config = config or ReportConfig()
    if isinstance(error, MainError):
        error = error.inner
    if not config.show_causes:
        return _display(error)
    return format_chain(error, config.cause_prefix)
