"""
Error models for CSV parsing and table I/O.

Fatal problems (undecodable bytes, unreadable or unwritable files, oversized
input) are raised as exceptions carrying a structured ErrorDetail.
Lookup misses are not errors here: table getters return None instead.

Error codes follow the CHT-XXX-NNN taxonomy:
- CHT-ENC-*: Encoding errors
- CHT-IO-*: File and size errors
- CHT-COL-*: Header/column warnings
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Severity(Enum):
    """Error severity levels."""

    FATAL = "fatal"  # Operation aborted
    WARN = "warn"  # Table was built, but something was shadowed or ignored


class Location(BaseModel, frozen=True):
    """Where in the input an error occurred."""

    file: str | None = None
    row: int | None = None
    column: int | None = None
    offset: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.file:
            parts.append(self.file)
        if self.row is not None:
            parts.append(f"row {self.row}")
        if self.column is not None:
            parts.append(f"col {self.column}")
        if self.offset is not None:
            parts.append(f"byte {self.offset}")
        return ", ".join(parts) if parts else "<unknown>"


class ErrorDetail(BaseModel, frozen=True):
    """Structured description of a parse, I/O or header problem."""

    code: str = Field(
        pattern=r"^CHT-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'CHT-ENC-001'",
    )
    severity: Severity
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(
        default_factory=Location,
        description="Where the error occurred",
    )
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (raw bytes, limits, paths)",
    )

    @classmethod
    def fatal(
        cls,
        code: str,
        title: str,
        message: str,
        *,
        location: Location | None = None,
        context: dict[str, Any] | None = None,
    ) -> ErrorDetail:
        """Create a FATAL severity error."""
        return cls(
            code=code,
            severity=Severity.FATAL,
            title=title,
            message=message,
            location=location or Location(),
            context=context or {},
        )

    @classmethod
    def warn(
        cls,
        code: str,
        title: str,
        message: str,
        *,
        location: Location | None = None,
        context: dict[str, Any] | None = None,
    ) -> ErrorDetail:
        """Create a WARN severity error."""
        return cls(
            code=code,
            severity=Severity.WARN,
            title=title,
            message=message,
            location=location or Location(),
            context=context or {},
        )

    def __str__(self) -> str:
        """Format error for display."""
        return (
            f"[{self.code}] {self.severity.value.upper()}: {self.title} - "
            f"{self.message} ({self.location})"
        )


class CharlestownError(Exception):
    """Base class for fatal parse and I/O failures."""

    def __init__(self, detail: ErrorDetail) -> None:
        self.detail = detail
        super().__init__(str(detail))

    @property
    def code(self) -> str:
        return self.detail.code


class DecodeError(CharlestownError):
    """A cell was not valid UTF-8."""


class InputTooLargeError(CharlestownError):
    """Input exceeded the configured byte limit."""


class TableIOError(CharlestownError):
    """A CSV file could not be read or written."""


# =============================================================================
# Error Codes Registry
# =============================================================================

ERROR_CODES: dict[str, str] = {
    "CHT-ENC-001": "Invalid UTF-8 byte sequence in input",
    "CHT-IO-001": "Input exceeds maximum size",
    "CHT-IO-002": "File could not be read",
    "CHT-IO-003": "File could not be written",
    "CHT-COL-001": "Duplicate column name (last one wins)",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return ERROR_CODES.get(code)
