# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for partialfn error classes."""

import pytest

from partialfn import (
    CompositionError,
    DomainError,
    Guarded,
    NoValueError,
    PartialFunctionError,
)


class TestPartialFunctionError:
    """Tests for the base error class."""

    def test_default_initialization(self):
        error = PartialFunctionError()
        assert str(error) == "partial function error"
        assert error.message == "partial function error"
        assert error.details == {}

    def test_custom_message(self):
        error = PartialFunctionError("Custom error message")
        assert str(error) == "Custom error message"

    def test_with_cause(self):
        cause = ValueError("Original error")
        error = PartialFunctionError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict_basic(self):
        error = PartialFunctionError("Test error")
        assert error.to_dict() == {
            "error": "PartialFunctionError",
            "message": "Test error",
        }

    def test_to_dict_with_details_and_cause(self):
        error = PartialFunctionError(
            "Error", details={"field": "value"}, cause=ValueError("Root cause")
        )
        result = error.to_dict(include_cause=True)
        assert result["details"] == {"field": "value"}
        assert "Root cause" in result["cause"]

    def test_to_dict_excludes_cause_by_default(self):
        error = PartialFunctionError("Error", cause=ValueError("x"))
        assert "cause" not in error.to_dict()


class TestDomainError:
    def test_from_value(self):
        error = DomainError.from_value(7)
        assert error.value == 7
        assert error.details == {"value": 7, "type": "int"}
        assert str(error) == "Not defined at 7"

    def test_long_repr_is_truncated(self):
        error = DomainError.from_value("x" * 100, repr_limit=12)
        assert str(error) == "Not defined at 'xxxxxxxx..."
        assert error.value == "x" * 100

    def test_failing_repr_falls_back_to_default_repr(self):
        class BadRepr:
            def __repr__(self):
                raise RuntimeError("no repr")

        value = BadRepr()
        error = DomainError.from_value(value)
        assert error.value is value
        assert "BadRepr object at" in str(error)

    def test_failing_repr_still_raises_domain_error_on_apply(self):
        class BadRepr:
            def __repr__(self):
                raise RuntimeError("no repr")

        pf = Guarded(lambda x: False, str)
        with pytest.raises(DomainError):
            pf(BadRepr())

    def test_hierarchy(self):
        error = DomainError.from_value(None)
        assert isinstance(error, PartialFunctionError)
        assert isinstance(error, LookupError)

    def test_raised_by_apply_with_rejected_input(self):
        pf = Guarded(lambda s: s.isdigit(), int)
        with pytest.raises(DomainError) as exc_info:
            pf("abc")
        assert exc_info.value.value == "abc"
        assert exc_info.value.to_dict()["details"]["type"] == "str"


class TestCompositionError:
    def test_from_operand(self):
        error = CompositionError.from_operand(
            3, expected="a callable", operation="and_then"
        )
        assert isinstance(error, TypeError)
        assert str(error) == "and_then() expected a callable, got int"
        assert error.details["operand"] == 3


class TestNoValueError:
    def test_default_message(self):
        error = NoValueError()
        assert isinstance(error, LookupError)
        assert "absent" in error.message
