"""Result container - pure and dependency-free."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
U = TypeVar("U")
F = TypeVar("F", bound=BaseException)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """
    Outcome of a fallible operation.

    Kinds:
    - ok: the operation produced ``value``
    - err: the operation failed with ``error`` (always an exception instance)

    ``unwrap()`` is the propagation point: it returns the value or raises the
    stored error, so a caller can hand the failure up with plain ``raise``
    semantics.
    """

    kind: Literal["ok", "err"]
    value: T | None = None
    error: E | None = None

    def __post_init__(self) -> None:
        if self.kind == "err" and not isinstance(self.error, BaseException):
            raise TypeError(f"Err requires an exception instance, got {type(self.error).__name__}")

    @staticmethod
    def Ok(value: Any = None) -> Result[Any, Any]:
        return Result(kind="ok", value=value)

    @staticmethod
    def Err(error: BaseException) -> Result[Any, Any]:
        return Result(kind="err", error=error)

    @property
    def is_ok(self) -> bool:
        return self.kind == "ok"

    @property
    def is_err(self) -> bool:
        return self.kind == "err"

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.is_err:
            return default
        return self.value  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        if self.is_err:
            return self  # type: ignore[return-value]
        return Result(kind="ok", value=fn(self.value))  # type: ignore[arg-type]

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        if self.is_ok:
            return self  # type: ignore[return-value]
        return Result(kind="err", error=fn(self.error))  # type: ignore[arg-type]
