# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    CompositionError,
    DomainError,
    NoValueError,
    PartialFunctionError,
)
from .builders import (
    WILDCARD,
    cases,
    from_mapping,
    partial_function,
    total,
    with_default,
)
from .config import PartialFnSettings, settings
from .core import (
    EMPTY,
    AndThen,
    Composed,
    EmptyPartialFunction,
    Guarded,
    Lifted,
    OrElse,
    PartialFunction,
    Total,
    Unlifted,
    WithDefault,
)
from .maybe import Maybe, Nothing, NothingType, Some, from_optional, is_maybe
from .ops import cond, cond_opt, empty, lift, run, run_with, unlift
from .version import __version__

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = (
    "__version__",
    # Core types
    "PartialFunction",
    "Guarded",
    "WithDefault",
    "Total",
    "OrElse",
    "AndThen",
    "Composed",
    "Unlifted",
    "Lifted",
    "EmptyPartialFunction",
    "EMPTY",
    # Optional values
    "Maybe",
    "Some",
    "Nothing",
    "NothingType",
    "from_optional",
    "is_maybe",
    # Module-level operations
    "empty",
    "lift",
    "unlift",
    "cond",
    "cond_opt",
    "run",
    "run_with",
    # Builders
    "WILDCARD",
    "cases",
    "from_mapping",
    "partial_function",
    "total",
    "with_default",
    # Errors
    "PartialFunctionError",
    "DomainError",
    "CompositionError",
    "NoValueError",
    # Settings
    "PartialFnSettings",
    "settings",
)
