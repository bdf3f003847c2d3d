"""
Result Type Implementation.

A small Ok/Err pair used where a failure is an expected branch rather than
an error to propagate, e.g. decoding a capability cell that may or may not
be JSON.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Decoded value."""
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Decode failure with its reason."""
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise ValueError(f"Called unwrap on Err: {self.error}")


Result = Union[Ok[T], Err[E]]
