# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

from partialfn import Guarded, config


@dataclass
class CallCounter:
    """Callable stub that records how often it was invoked."""

    fn: Callable[[Any], Any]
    calls: int = 0

    def __call__(self, x):
        self.calls += 1
        return self.fn(x)


@pytest.fixture
def counting():
    """Factory for invocation-counting stubs."""
    return CallCounter


@pytest.fixture
def counted_guarded():
    """Build a Guarded function whose predicate and body both count calls."""

    def _build(predicate, body):
        guard = CallCounter(predicate)
        impl = CallCounter(body)
        return Guarded(guard, impl), guard, impl

    return _build


@pytest.fixture
def override_settings(monkeypatch):
    """Swap the library settings for the duration of a test."""

    def _override(**changes):
        new = config.settings.model_copy(update=changes)
        monkeypatch.setattr(config, "settings", new)
        return new

    return _override


@pytest.fixture
def even():
    return Guarded(lambda n: n % 2 == 0, lambda n: "even")


@pytest.fixture
def odd():
    return Guarded(lambda n: n % 2 != 0, lambda n: "odd")


@pytest.fixture
def fail_if_called():
    """Callable that fails the test when invoked."""

    def _fail(*args):
        pytest.fail(f"unexpected call with {args!r}")

    return _fail
