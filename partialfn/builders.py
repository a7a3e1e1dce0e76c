# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Constructors for partial functions.

Example:
    >>> @partial_function(lambda n: n > 0)
    ... def log10(n):
    ...     return len(str(n)) - 1
    >>> log10.is_defined_at(-1)
    False

    >>> describe = cases(
    ...     (int, lambda n: f"int {n}"),
    ...     (str, lambda s: f"str {s!r}"),
    ... )
    >>> describe("a")
    "str 'a'"
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ._errors import CompositionError
from ._sentinel import FallbackToken, is_fallback
from .core import (
    Guarded,
    PartialFunction,
    Total,
    WithDefault,
    _raise_domain_error,
    _require_callable,
)

__all__ = (
    "WILDCARD",
    "cases",
    "from_mapping",
    "partial_function",
    "total",
    "with_default",
)

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")
V = TypeVar("V")

WILDCARD = ...
"""Guard matching every input; makes a ``cases`` dispatcher total."""


def partial_function(
    predicate: Callable[[A], bool],
) -> Callable[[Callable[[A], B]], PartialFunction[A, B]]:
    """Decorator turning a body into a partial function guarded by ``predicate``."""
    _require_callable(predicate, "partial_function")

    def decorator(body: Callable[[A], B]) -> PartialFunction[A, B]:
        _require_callable(body, "partial_function")
        return Guarded(predicate, body)

    return decorator


def with_default(
    fn: Callable[[A, Callable[[A], Any]], Any] | None = None,
    *,
    predicate: Callable[[A], bool] | None = None,
):
    """Decorator for functions written as ``fn(x, default)``.

    Usable bare (``@with_default``) or with a cheap membership probe
    (``@with_default(predicate=...)``).
    """

    def decorator(f: Callable[[A, Callable[[A], Any]], Any]) -> PartialFunction:
        _require_callable(f, "with_default")
        if predicate is not None:
            _require_callable(predicate, "with_default")
        return WithDefault(f, predicate)

    if fn is None:
        return decorator
    return decorator(fn)


def total(fn: Callable[[A], B]) -> PartialFunction[A, B]:
    """Wrap a plain function as a partial function defined everywhere."""
    _require_callable(fn, "total")
    return Total(fn)


def _always(x: Any) -> bool:
    return True


def _as_guard(guard: Any) -> Callable[[Any], bool]:
    if guard is WILDCARD:
        return _always
    if isinstance(guard, type) or (
        isinstance(guard, tuple) and guard and all(isinstance(t, type) for t in guard)
    ):

        def instance_of(x: Any) -> bool:
            return isinstance(x, guard)

        return instance_of
    if callable(guard):
        return guard
    raise CompositionError.from_operand(
        guard, expected="a predicate, a type, or WILDCARD", operation="cases"
    )


def cases(*clauses: tuple[Any, Callable[[Any], Any]]) -> PartialFunction:
    """Build a pattern-style dispatcher from ``(guard, body)`` clauses.

    Guards are tried in order and each is evaluated at most once per call.
    A guard is a predicate, a type or tuple of types (``isinstance`` test),
    or ``WILDCARD``. Clauses after a ``WILDCARD`` are unreachable and are
    dropped; a dispatcher containing one is ``Total``.
    """
    compiled: list[tuple[Callable[[Any], bool], Callable[[Any], Any]]] = []
    exhaustive = False
    for clause in clauses:
        if not isinstance(clause, tuple) or len(clause) != 2:
            raise CompositionError.from_operand(
                clause, expected="a (guard, body) pair", operation="cases"
            )
        guard, body = clause
        _require_callable(body, "cases")
        compiled.append((_as_guard(guard), body))
        if guard is WILDCARD:
            exhaustive = True
            break

    matchers = tuple(compiled)

    def match(x: Any, default: Callable[[Any], Any]) -> Any:
        for guard, body in matchers:
            if guard(x):
                return body(x)
        return default(x)

    if exhaustive:

        def match_total(x: Any) -> Any:
            return match(x, _raise_domain_error)

        return Total(match_total)
    return WithDefault(match)


def from_mapping(mapping: Mapping[K, V]) -> PartialFunction[K, V]:
    """Partial function defined at the keys of ``mapping``.

    The mapping is referenced, not copied. Each dispatch does one lookup.
    Unhashable inputs are outside the domain.
    """
    if not isinstance(mapping, Mapping):
        raise CompositionError.from_operand(
            mapping, expected="a Mapping", operation="from_mapping"
        )

    def contains(key: K) -> bool:
        try:
            return key in mapping
        except TypeError:
            # unhashable keys can never be present
            return False

    def lookup(key: K, default: Callable[[K], Any]) -> Any:
        try:
            value = mapping.get(key, FallbackToken)
        except TypeError:
            return default(key)
        if is_fallback(value):
            return default(key)
        return value

    return WithDefault(lookup, contains)
