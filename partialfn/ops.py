# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Module-level helpers that leverage the domain information of partial
functions.

Example:
    >>> from partialfn import cases
    >>> cond("abc", cases((str, lambda s: s in ("abc", "def")), (int, lambda _: True)))
    True
    >>> cond_opt(3.5, cases((int, lambda n: n)))
    Nothing
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .core import EMPTY, Lifted, PartialFunction, Unlifted, _require_callable
from .maybe import Maybe, Some

__all__ = (
    "cond",
    "cond_opt",
    "empty",
    "lift",
    "run",
    "run_with",
    "unlift",
)

A = TypeVar("A")
B = TypeVar("B")


def empty() -> PartialFunction[Any, Any]:
    """Return the partial function defined nowhere."""
    return EMPTY


def lift(pf: PartialFunction[A, B]) -> Callable[[A], Maybe[B]]:
    return pf.lift()


def unlift(
    fn: Callable[[A], Maybe[B]], *, none_as_nothing: bool = False
) -> PartialFunction[A, B]:
    """Turn a total ``Maybe``-returning function into a partial function.

    Args:
        fn: Function returning ``Some(value)`` or ``Nothing``.
        none_as_nothing: If True, ``fn`` returns plain values and ``None``
            marks inputs outside the domain.

    Returns:
        A partial function defined exactly where ``fn`` returns a value.
        Unlifting the result of ``pf.lift()`` gives back ``pf`` itself.
    """
    if isinstance(fn, Lifted):
        return fn.pf
    _require_callable(fn, "unlift")
    return Unlifted(fn, none_as_nothing)


def cond(x: A, pf: PartialFunction[A, bool]) -> bool:
    """True iff ``pf`` is defined at ``x`` and ``pf(x)`` is truthy.

    Behaves like a ``match`` statement with an implied ``case _: False``.
    """
    out = pf.dispatch(x)
    return isinstance(out, Some) and bool(out.value)


def cond_opt(x: A, pf: PartialFunction[A, B]) -> Maybe[B]:
    """``Some(pf(x))`` if ``pf`` is defined at ``x``, ``Nothing`` otherwise."""
    return pf.lift()(x)


def run(x: A, pf: PartialFunction[A, B], action: Callable[[B], Any]) -> bool:
    """Run ``action(pf(x))`` if ``pf`` is defined at ``x``; report whether it ran."""
    return pf.run_with(action)(x)


def run_with(
    action: Callable[[B], Any], pf: PartialFunction[A, B]
) -> Callable[[A], bool]:
    return pf.run_with(action)
