"""
Result Type

Outcome of a use case: either Success carrying a value or Failure carrying
an error message and an optional underlying exception. Expected business
failures travel as values instead of exceptions.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failed outcome with a human-readable error and optional cause."""

    error: str
    cause: Optional[BaseException] = None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]


def map_result(result: "Result[T]", mapper: Callable[[T], U]) -> "Result[U]":
    """
    Transform the value of a Success, passing a Failure through unchanged.

    Args:
        result: Result to transform
        mapper: Function applied to the success value

    Returns:
        New Result
    """
    if isinstance(result, Success):
        return Success(mapper(result.value))
    if isinstance(result, Failure):
        return result
    raise TypeError(f"Unknown result type: {type(result).__name__}")


def flat_map_result(result: "Result[T]", mapper: Callable[[T], "Result[U]"]) -> "Result[U]":
    """
    Chain a Result-returning function onto a Success.

    Args:
        result: Result to chain from
        mapper: Function returning a new Result

    Returns:
        The mapper's Result, or the original Failure
    """
    if isinstance(result, Success):
        return mapper(result.value)
    if isinstance(result, Failure):
        return result
    raise TypeError(f"Unknown result type: {type(result).__name__}")
