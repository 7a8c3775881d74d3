"""
Success-or-failure wrapper returned by the client repositories
"""
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Result(Generic[T]):
    """Either a value or the exception that prevented getting it."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Exception] = None):
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    def get_or_none(self) -> Optional[T]:
        return self._value if self.is_success else None

    def get_or_raise(self) -> T:
        if self._error is not None:
            raise self._error
        return self._value

    def map(self, func: Callable[[T], R]) -> "Result[R]":
        if self._error is not None:
            return Result.failure(self._error)
        return Result.success(func(self._value))

    def __repr__(self):
        if self.is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"
