# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Property tests for the partial function algebra."""

from hypothesis import given
from hypothesis import strategies as st

from partialfn import (
    EMPTY,
    Guarded,
    Nothing,
    Some,
    Total,
    WithDefault,
    cases,
    from_mapping,
    unlift,
)

# ---------- Strategies ----------

INPUTS = st.integers(min_value=-1000, max_value=1000)


def _modulo(m, r):
    return Guarded(lambda n: n % m == r, lambda n: (m, r, n))


def _with_default(m, r):
    def fn(n, default):
        return (m, r, n) if n % m == r else default(n)

    return WithDefault(fn)


@st.composite
def partials(draw):
    """Partial functions over ints, built through several strategies."""
    m = draw(st.integers(min_value=1, max_value=7))
    r = draw(st.integers(min_value=0, max_value=m - 1))
    kind = draw(st.sampled_from(["guarded", "with_default", "cases", "mapping", "empty", "total"]))
    if kind == "guarded":
        return _modulo(m, r)
    if kind == "with_default":
        return _with_default(m, r)
    if kind == "cases":
        return cases((lambda n: n % m == r, lambda n: (m, r, n)))
    if kind == "mapping":
        keys = draw(st.sets(INPUTS, max_size=20))
        return from_mapping({k: ("key", k) for k in keys})
    if kind == "empty":
        return EMPTY
    return Total(lambda n: ("total", n))


# ---------- Properties ----------


@given(f=partials(), x=INPUTS)
def test_membership_agrees_with_lift(f, x):
    assert f.is_defined_at(x) == f.lift()(x).is_present()


@given(f=partials(), g=partials(), x=INPUTS)
def test_or_else_domain_is_union(f, g, x):
    h = f.or_else(g)
    assert h.is_defined_at(x) == (f.is_defined_at(x) or g.is_defined_at(x))


@given(f=partials(), g=partials(), x=INPUTS)
def test_or_else_is_left_biased(f, g, x):
    h = f.or_else(g)
    if f.is_defined_at(x):
        assert h(x) == f(x)
    elif g.is_defined_at(x):
        assert h(x) == g(x)
    else:
        assert h.lift()(x) is Nothing


@given(f=partials(), g=partials(), h=partials(), x=INPUTS)
def test_or_else_is_associative(f, g, h, x):
    left = f.or_else(g).or_else(h)
    right = f.or_else(g.or_else(h))
    assert left.lift()(x) == right.lift()(x)


@given(f=partials(), x=INPUTS)
def test_empty_is_two_sided_identity(f, x):
    assert EMPTY.or_else(f).lift()(x) == f.lift()(x)
    assert f.or_else(EMPTY).lift()(x) == f.lift()(x)


@given(f=partials(), x=INPUTS)
def test_and_then_law(f, x):
    h = f.and_then(repr)
    assert h.is_defined_at(x) == f.is_defined_at(x)
    if f.is_defined_at(x):
        assert h(x) == repr(f(x))


@given(f=partials(), x=INPUTS)
def test_unlift_lift_round_trip(f, x):
    lifted = f.lift()
    rebuilt = unlift(lambda n: lifted(n))
    assert rebuilt.is_defined_at(x) == f.is_defined_at(x)
    assert rebuilt.lift()(x) == f.lift()(x)


@given(f=partials(), x=INPUTS)
def test_apply_or_else_default_only_on_miss(f, x):
    calls = []

    def default(n):
        calls.append(n)
        return "default"

    out = f.apply_or_else(x, default)
    if f.is_defined_at(x):
        assert calls == []
        assert Some(out) == f.lift()(x)
    else:
        assert calls == [x]
        assert out == "default"


@given(length=st.integers(min_value=1, max_value=30), x=INPUTS)
def test_chain_cost_is_linear(length, x):
    """Each missing operand's guard runs exactly once per dispatch."""
    counts = [0] * length

    def missing(i):
        def guard(n):
            counts[i] += 1
            return False

        return Guarded(guard, lambda n: "never")

    chain = missing(0)
    for i in range(1, length):
        chain = chain.or_else(missing(i))
    chain = chain.or_else(Total(lambda n: "last"))

    assert chain(x) == "last"
    assert counts == [1] * length
