# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("PartialFnSettings", "settings")


class PartialFnSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support.

    Every field can be set through a ``PARTIALFN_`` prefixed environment
    variable, e.g. ``PARTIALFN_TRACE_DISPATCH=1``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARTIALFN_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    repr_limit: int = Field(
        default=80,
        ge=8,
        description="Max length of a rejected input's repr in DomainError messages",
    )

    coerce_callables: bool = Field(
        default=True,
        description="Let or_else() accept plain callables, wrapped as Total",
    )

    trace_dispatch: bool = Field(
        default=False,
        description="Log a DEBUG record whenever a dispatch misses",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = PartialFnSettings()
# Store the instance in the class variable for singleton pattern
PartialFnSettings._instance = settings
