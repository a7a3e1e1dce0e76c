# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal

__all__ = (
    "SingletonType",
    "FallbackTokenType",
    "FallbackToken",
    "fallback",
    "is_fallback",
)


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton marker types.

    Provides consistent interface for marker values with:
    - Identity preservation across copy and deepcopy
    - Falsy boolean evaluation
    - Clear string representation
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class FallbackTokenType(SingletonType):
    """Marker returned by ``fallback`` when a dispatch falls through.

    Only ever handed to user-written ``apply_or_else`` implementations as
    the ``default`` result, and converted into ``Nothing`` before anything
    else can observe it.
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["FallbackToken"]:
        return "FallbackToken"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "FallbackToken"


FallbackToken: Final = FallbackTokenType()


def fallback(x: Any, /) -> FallbackTokenType:
    """Total function mapping every input to ``FallbackToken``."""
    return FallbackToken


def is_fallback(value: Any) -> bool:
    return isinstance(value, FallbackTokenType)
