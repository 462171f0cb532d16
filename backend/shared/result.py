"""
Explicit success/failure values returned by service calls.

Services never raise for expected outcomes (bad input, missing rows,
rejected credentials). They return ``Ok(value)`` or ``Err(error)`` and the
API layer decides what the caller sees.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import StorefrontError

T = TypeVar("T")
E = TypeVar("E", bound=StorefrontError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result carrying a value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result carrying a domain error."""

    error: E


Result = Union[Ok[T], Err[E]]


def unwrap(result: "Result[T, E]") -> T:
    """
    Return the value of an ``Ok`` or raise the error held by an ``Err``.

    Only the HTTP boundary should call this; the raised error is turned
    into a response by the registered exception handlers.
    """
    if isinstance(result, Err):
        raise result.error
    return result.value
