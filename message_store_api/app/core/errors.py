"""
Error taxonomy and result values for the message store.

Store operations never raise to their callers.  Each one returns
either :class:`Ok` wrapping the produced value or :class:`Err`
wrapping a :class:`StoreError`, and callers branch on which one they
got::

    result = store.get(message_id)
    if isinstance(result, Err):
        ...handle result.error...
    else:
        message = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed store operation."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class StoreError:
    """A failed operation: its category and a human readable message."""

    kind: ErrorKind
    message: str

    @classmethod
    def invalid_argument(cls, message: str) -> "StoreError":
        return cls(ErrorKind.INVALID_ARGUMENT, message)

    @classmethod
    def not_found(cls, message: str) -> "StoreError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> "StoreError":
        return cls(ErrorKind.INTERNAL, message)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: StoreError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
