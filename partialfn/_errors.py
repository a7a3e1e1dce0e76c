# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "PartialFunctionError",
    "DomainError",
    "CompositionError",
    "NoValueError",
)


def _short_repr(value: Any, limit: int) -> str:
    try:
        text = repr(value)
    except Exception:
        text = object.__repr__(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


class PartialFunctionError(Exception):
    default_message: ClassVar[str] = "partial function error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class DomainError(PartialFunctionError, LookupError):
    """Raised when a partial function is applied outside its domain.

    The rejected input is available as ``value`` (and in ``details``), so
    callers can tell a rejected input apart from a failure raised by the
    function body itself.
    """

    default_message = "Input is not in the domain of the partial function"

    def __init__(self, message: str | None = None, *, value: Any = None, **kw):
        super().__init__(message, **kw)
        self.value = value

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        message: str | None = None,
        repr_limit: int = 80,
        **extra: Any,
    ) -> "DomainError":
        """Create a DomainError for a rejected input."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **extra,
        }
        if message is None:
            message = f"Not defined at {_short_repr(value, repr_limit)}"
        return cls(message, value=value, details=details)


class CompositionError(PartialFunctionError, TypeError):
    """Exception raised when a combinator receives an unusable operand."""

    default_message = "Invalid operand for partial function composition"

    @classmethod
    def from_operand(
        cls,
        operand: Any,
        *,
        expected: str,
        operation: str,
    ) -> "CompositionError":
        details = {
            "operand": operand,
            "type": type(operand).__name__,
            "expected": expected,
            "operation": operation,
        }
        return cls(
            f"{operation}() expected {expected}, got {type(operand).__name__}",
            details=details,
        )


class NoValueError(PartialFunctionError, LookupError):
    default_message = "Nothing.get() called on an absent value"
