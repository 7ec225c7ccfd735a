"""Success/failure result pattern.

Wraps the outcome of a fallible call as a value, so a chain of operations
can be composed with ``map`` / ``flat_map`` and the first failure (with its
original exception) is carried to the end::

    total = (
        Result.of(Cart.of, rows)
        .map(lambda cart: cart.total)
        .get_or_else(Decimal("0.00"))
    )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Result(ABC, Generic[T]):
    """Base of ``Success`` and ``Failure``."""

    @staticmethod
    def of(fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T]":
        """Call ``fn`` and capture its return value or exception."""
        try:
            return Success(fn(*args, **kwargs))
        except Exception as exc:
            return Failure(exc)

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    @property
    def error(self) -> Optional[Exception]:
        return self.exception if isinstance(self, Failure) else None

    @abstractmethod
    def get(self) -> T:
        """Return the success value or raise the captured exception."""

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Apply ``fn`` to a success value; exceptions become a Failure."""
        if isinstance(self, Failure):
            return self
        try:
            return Success(fn(self.get()))
        except Exception as exc:
            return Failure(exc)

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain a function that itself returns a Result."""
        if isinstance(self, Failure):
            return self
        try:
            return fn(self.get())
        except Exception as exc:
            return Failure(exc)

    def get_or_else(self, default: T) -> T:
        return self.get() if isinstance(self, Success) else default


@dataclass(frozen=True)
class Success(Result[T]):
    value: T

    def get(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Result[Any]):
    exception: Exception

    def get(self) -> Any:
        """Re-raise the captured exception."""
        raise self.exception
