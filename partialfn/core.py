# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Partial functions and their composition algebra.

A partial function is a unary function whose domain is a subset of its input
type. Every implementation here provides one primitive, ``dispatch``, which
evaluates guard and body in a single pass and reports the outcome as a
``Maybe``. Membership tests, application with a fallback, ``or_else`` and
``and_then`` chains, and lifting are all derived from it, so no guard or body
is ever evaluated twice for one call.

Example:
    >>> even = Guarded(lambda n: n % 2 == 0, lambda n: "even")
    >>> odd = Guarded(lambda n: n % 2 == 1, lambda n: "odd")
    >>> parity = even | odd
    >>> parity(7)
    'odd'
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Final, Generic, TypeVar

from . import config
from ._errors import CompositionError, DomainError
from ._sentinel import fallback, is_fallback
from .maybe import Maybe, Nothing, Some, from_optional, is_maybe

__all__ = (
    "EMPTY",
    "AndThen",
    "Composed",
    "EmptyPartialFunction",
    "Guarded",
    "Lifted",
    "OrElse",
    "PartialFunction",
    "Total",
    "Unlifted",
    "WithDefault",
)

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
Z = TypeVar("Z")


def _raise_domain_error(x: Any) -> Any:
    settings = config.settings
    if settings.trace_dispatch:
        logger.debug("Domain error for input %r", x)
    raise DomainError.from_value(x, repr_limit=settings.repr_limit)


def _require_callable(fn: Any, operation: str) -> None:
    if not callable(fn):
        raise CompositionError.from_operand(
            fn, expected="a callable", operation=operation
        )


def _as_partial(that: Any, operation: str) -> PartialFunction:
    if isinstance(that, PartialFunction):
        return that
    if callable(that) and config.settings.coerce_callables:
        return Total(that)
    raise CompositionError.from_operand(
        that, expected="a PartialFunction", operation=operation
    )


def _traced_default(pf: Any, default: Callable[[Any], Any]):
    def traced(x):
        logger.debug("%r fell through to default for %r", pf, x)
        return default(x)

    return traced


def _chain(first: Callable[[Any], Any], then: Callable[[Any], Any]):
    def chained(x):
        return then(first(x))

    return chained


class PartialFunction(ABC, Generic[A, B]):
    """Base class for all partial functions.

    Subclasses implement ``dispatch`` and may override ``is_defined_at``
    when they can answer membership without running the body.
    """

    __slots__ = ()

    is_total: ClassVar[bool] = False
    """True when the function is defined for every input."""

    @abstractmethod
    def dispatch(self, x: A, /) -> Maybe[B]:
        """Evaluate the function at ``x`` in a single pass.

        Returns:
            ``Some(result)`` when ``x`` is in the domain, ``Nothing`` otherwise.
        """

    def is_defined_at(self, x: A, /) -> bool:
        """Check whether ``x`` is in the domain of this function."""
        return self.dispatch(x).is_present()

    def apply_or_else(self, x: A, default: Callable[[A], Z], /) -> B | Z:
        """Return the result for ``x``, or ``default(x)`` when undefined.

        ``default`` is never called when ``x`` is in the domain. Exceptions
        raised by the body propagate unchanged.
        """
        out = self.dispatch(x)
        if isinstance(out, Some):
            return out.value
        if config.settings.trace_dispatch:
            logger.debug("%r fell through to default for %r", self, x)
        return default(x)

    def apply(self, x: A, /) -> B:
        """Apply the function, raising ``DomainError`` when undefined."""
        return self.apply_or_else(x, _raise_domain_error)

    def __call__(self, x: A, /) -> B:
        return self.apply_or_else(x, _raise_domain_error)

    def or_else(self, that: PartialFunction[A, B], /) -> PartialFunction[A, B]:
        """Fall back to ``that`` where this function is not defined.

        The result is defined on the union of both domains and prefers this
        function's result where both are defined. Chains stay flat, so
        ``f.or_else(g).or_else(h)`` dispatches like one three-way chain.
        """
        that = _as_partial(that, "or_else")
        if that is EMPTY:
            return self
        return OrElse.of(self, that)

    def __or__(self, that: PartialFunction[A, B]) -> PartialFunction[A, B]:
        return self.or_else(that)

    def __ror__(self, other: Callable[[A], B]) -> PartialFunction[A, B]:
        return _as_partial(other, "or_else").or_else(self)

    def and_then(self, k: Callable[[B], C], /) -> PartialFunction[A, C]:
        """Post-process results with ``k``, keeping the same domain."""
        _require_callable(k, "and_then")
        return AndThen(self, k)

    def __rshift__(self, k: Callable[[B], C]) -> PartialFunction[A, C]:
        return self.and_then(k)

    def compose(self, g: Callable[[Z], A], /) -> PartialFunction[Z, B]:
        """Pre-process inputs with the total function ``g``.

        The result is defined at ``x`` iff this function is defined at
        ``g(x)``.
        """
        _require_callable(g, "compose")
        return Composed(self, g)

    def lift(self) -> Lifted[A, B]:
        """Turn this function into a total one returning ``Maybe``."""
        return Lifted(self)

    def run_with(self, action: Callable[[B], Any], /) -> Callable[[A], bool]:
        """Build ``x -> bool`` that runs ``action(result)`` only when defined.

        The returned callable reports whether ``action`` ran.
        """
        _require_callable(action, "run_with")

        def run(x: A) -> bool:
            out = self.dispatch(x)
            if isinstance(out, Some):
                action(out.value)
                return True
            return False

        return run


@dataclass(slots=True, frozen=True, eq=False)
class Guarded(PartialFunction[A, B]):
    """Partial function built from a membership predicate and a body.

    ``is_defined_at`` calls only the predicate. Dispatch calls the predicate
    once and, on success, the body once.
    """

    predicate: Callable[[A], bool]
    body: Callable[[A], B]

    def is_defined_at(self, x: A, /) -> bool:
        return bool(self.predicate(x))

    def dispatch(self, x: A, /) -> Maybe[B]:
        if self.predicate(x):
            return Some(self.body(x))
        return Nothing


@dataclass(slots=True, frozen=True, eq=False)
class WithDefault(PartialFunction[A, B]):
    """Partial function whose primitive operation is ``apply_or_else``.

    ``fn(x, default)`` interleaves the guard and the body and returns
    ``default(x)`` on a miss. Membership is derived by calling it once with
    an internal fallback and checking whether the fallback was taken, unless
    a cheaper ``predicate`` is given.

    Example:
        >>> def half(n, default):
        ...     return n // 2 if n % 2 == 0 else default(n)
        >>> WithDefault(half).lift()(3)
        Nothing
    """

    fn: Callable[[A, Callable[[A], Any]], Any]
    predicate: Callable[[A], bool] | None = None

    def is_defined_at(self, x: A, /) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(x))
        return not is_fallback(self.fn(x, fallback))

    def dispatch(self, x: A, /) -> Maybe[B]:
        out = self.fn(x, fallback)
        if is_fallback(out):
            return Nothing
        return Some(out)

    def apply_or_else(self, x: A, default: Callable[[A], Z], /) -> B | Z:
        if config.settings.trace_dispatch:
            default = _traced_default(self, default)
        return self.fn(x, default)


@dataclass(slots=True, frozen=True, eq=False)
class Total(PartialFunction[A, B]):
    """Partial function known to be defined everywhere.

    Membership is the constant ``True``; ``or_else`` returns ``self`` because
    the right operand can never be reached.
    """

    fn: Callable[[A], B]

    is_total: ClassVar[bool] = True

    def is_defined_at(self, x: A, /) -> bool:
        return True

    def dispatch(self, x: A, /) -> Maybe[B]:
        return Some(self.fn(x))

    def apply_or_else(self, x: A, default: Callable[[A], Z], /) -> B:
        return self.fn(x)

    def apply(self, x: A, /) -> B:
        return self.fn(x)

    def __call__(self, x: A, /) -> B:
        return self.fn(x)

    def or_else(self, that: PartialFunction[A, B], /) -> PartialFunction[A, B]:
        return self

    def and_then(self, k: Callable[[B], C], /) -> PartialFunction[A, C]:
        _require_callable(k, "and_then")
        return Total(_chain(self.fn, k))

    def compose(self, g: Callable[[Z], A], /) -> PartialFunction[Z, B]:
        _require_callable(g, "compose")
        return Total(_chain(g, self.fn))


@dataclass(slots=True, frozen=True, eq=False)
class OrElse(PartialFunction[A, B]):
    """Flat left-to-right chain built by ``or_else``.

    Each operand is dispatched at most once per call and the first hit wins.
    ``is_defined_at`` is only used by external callers; dispatch never calls
    it.
    """

    operands: tuple[PartialFunction[A, B], ...]

    @classmethod
    def of(cls, *pfs: PartialFunction[A, B]) -> PartialFunction[A, B]:
        """Build a flat chain, dropping ``EMPTY`` and anything after a Total."""
        flat: list[PartialFunction[A, B]] = []
        for pf in pfs:
            for part in pf.operands if isinstance(pf, OrElse) else (pf,):
                if part is EMPTY:
                    continue
                flat.append(part)
                if part.is_total:
                    break
            if flat and flat[-1].is_total:
                break

        if not flat:
            return EMPTY
        if len(flat) == 1:
            return flat[0]
        return cls(tuple(flat))

    def is_defined_at(self, x: A, /) -> bool:
        return any(pf.is_defined_at(x) for pf in self.operands)

    def dispatch(self, x: A, /) -> Maybe[B]:
        for pf in self.operands:
            out = pf.dispatch(x)
            if isinstance(out, Some):
                return out
        return Nothing

    def and_then(self, k: Callable[[B], C], /) -> PartialFunction[A, C]:
        _require_callable(k, "and_then")
        return OrElse.of(*(pf.and_then(k) for pf in self.operands))


@dataclass(slots=True, frozen=True, eq=False)
class AndThen(PartialFunction[A, C]):
    """``pf`` followed by the total transform ``k``."""

    pf: PartialFunction[A, B]
    k: Callable[[B], C]

    def is_defined_at(self, x: A, /) -> bool:
        return self.pf.is_defined_at(x)

    def dispatch(self, x: A, /) -> Maybe[C]:
        out = self.pf.dispatch(x)
        if isinstance(out, Some):
            return Some(self.k(out.value))
        return Nothing

    def and_then(self, k: Callable[[C], Z], /) -> PartialFunction[A, Z]:
        _require_callable(k, "and_then")
        return AndThen(self.pf, _chain(self.k, k))


@dataclass(slots=True, frozen=True, eq=False)
class Composed(PartialFunction[Z, B]):
    """``pf`` applied to the output of the total function ``g``."""

    pf: PartialFunction[A, B]
    g: Callable[[Z], A]

    def is_defined_at(self, x: Z, /) -> bool:
        return self.pf.is_defined_at(self.g(x))

    def dispatch(self, x: Z, /) -> Maybe[B]:
        return self.pf.dispatch(self.g(x))


@dataclass(slots=True, frozen=True, eq=False)
class Unlifted(PartialFunction[A, B]):
    """Partial function backed by a total ``Maybe``-returning function.

    With ``none_as_nothing`` the function returns plain values and ``None``
    means "not defined".
    """

    fn: Callable[[A], Any]
    none_as_nothing: bool = False

    def _call(self, x: A) -> Maybe[B]:
        out = self.fn(x)
        if self.none_as_nothing:
            return from_optional(out)
        if not is_maybe(out):
            raise CompositionError.from_operand(
                out, expected="Some or Nothing", operation="unlift"
            )
        return out

    def is_defined_at(self, x: A, /) -> bool:
        return self._call(x).is_present()

    def dispatch(self, x: A, /) -> Maybe[B]:
        return self._call(x)

    def lift(self) -> Callable[[A], Maybe[B]]:
        if self.none_as_nothing:
            return Lifted(self)
        return self.fn


@dataclass(slots=True, frozen=True, eq=False)
class Lifted(Generic[A, B]):
    """Total function ``x -> Maybe`` returned by ``PartialFunction.lift``."""

    pf: PartialFunction[A, B]

    def __call__(self, x: A, /) -> Maybe[B]:
        return self.pf.dispatch(x)


def _lift_empty(x: Any, /) -> Maybe[Any]:
    return Nothing


class EmptyPartialFunction(PartialFunction[Any, Any]):
    """The partial function defined nowhere; use the ``EMPTY`` instance."""

    __slots__ = ()

    _instance: ClassVar[EmptyPartialFunction | None] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "EMPTY"

    def is_defined_at(self, x: Any, /) -> bool:
        return False

    def dispatch(self, x: Any, /) -> Maybe[Any]:
        return Nothing

    def or_else(self, that: PartialFunction[A, B], /) -> PartialFunction[A, B]:
        return _as_partial(that, "or_else")

    def and_then(self, k: Callable[[Any], C], /) -> PartialFunction[Any, C]:
        _require_callable(k, "and_then")
        return self

    def compose(self, g: Callable[[Z], Any], /) -> PartialFunction[Z, Any]:
        _require_callable(g, "compose")
        return self

    def lift(self) -> Callable[[Any], Maybe[Any]]:
        return _lift_empty


EMPTY: Final = EmptyPartialFunction()
"""The partial function defined nowhere."""
