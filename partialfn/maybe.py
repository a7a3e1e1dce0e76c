# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Optional results: ``Some(value)`` or ``Nothing``.

``Maybe`` is both the value returned by lifted partial functions and the
tagged result every dispatch produces internally, so "not defined" is never
encoded as a special value of the function's own result type.

Example:
    >>> Some(3).map(lambda v: v + 1)
    Some(value=4)
    >>> Nothing.get_or_else(0)
    0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, Literal, TypeVar, Union

from ._errors import NoValueError
from ._sentinel import SingletonType

__all__ = (
    "Maybe",
    "Nothing",
    "NothingType",
    "Some",
    "from_optional",
    "is_maybe",
)

T = TypeVar("T")
R = TypeVar("R")
X = TypeVar("X")


@dataclass(slots=True, frozen=True)
class Some(Generic[T]):
    """A present value. ``Some(None)`` is a legitimate present value."""

    __match_args__ = ("value",)

    value: T

    def is_present(self) -> Literal[True]:
        return True

    def is_empty(self) -> Literal[False]:
        return False

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: Any) -> T:
        return self.value

    def or_else_call(self, default: Callable[[X], Any], x: X) -> T:
        return self.value

    def map(self, k: Callable[[T], R]) -> Some[R]:
        return Some(k(self.value))


class NothingType(SingletonType):
    """The absent value."""

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Nothing"]:
        return "Nothing"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Nothing"

    def is_present(self) -> Literal[False]:
        return False

    def is_empty(self) -> Literal[True]:
        return True

    def get(self):
        raise NoValueError()

    def get_or_else(self, default: T) -> T:
        return default

    def or_else_call(self, default: Callable[[X], R], x: X) -> R:
        return default(x)

    def map(self, k: Callable[[Any], Any]) -> NothingType:
        return self


Nothing: Final = NothingType()


Maybe = Union[Some[T], NothingType]


def from_optional(value: T | None) -> Maybe[T]:
    """Treat ``None`` as absent, anything else as present."""
    return Nothing if value is None else Some(value)


def is_maybe(value: Any) -> bool:
    return isinstance(value, (Some, NothingType))
