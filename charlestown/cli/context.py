"""
CLI context and configuration.

Manages CLI settings, exit codes and the input size limit.
"""

from __future__ import annotations

import os
from enum import IntEnum

import typer
from pydantic import BaseModel, Field

# Default input size limit for CLI usage (can be overridden via flag/env).
DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB
MAX_BYTES_ENV = "CHARLESTOWN_MAX_BYTES"


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0
    NOT_FOUND = 1  # Requested row, column or cell does not exist
    FATAL = 2  # Unreadable, undecodable or oversized input
    USAGE = 64  # Command line usage error


class CliContext(BaseModel):
    """Shared settings for CLI commands."""

    format: str = Field(default="terminal")
    color: bool = Field(default=True)
    headered: bool = Field(default=True)
    max_bytes: int | None = Field(default=DEFAULT_MAX_BYTES)

    model_config = {"frozen": True}


def resolve_max_bytes(max_bytes: int | None) -> int | None:
    """
    Resolve the effective size limit.

    An explicit option wins over the environment; 0 or a negative value
    means unlimited (None).
    """
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(MAX_BYTES_ENV)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise typer.BadParameter(f"{MAX_BYTES_ENV} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES
