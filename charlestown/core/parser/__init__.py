"""
CSV Parser Core.

Turns raw CSV content into rows of text cells.

Usage:
    from charlestown.core.parser import parse_file

    rows = parse_file("people.csv")
    for row in rows:
        print(row)

API Functions:
    parse_bytes(data, filename) -> list[list[str]]
    parse_string(text) -> list[list[str]]
    parse_file(path) -> list[list[str]]
    parse_stream(stream, filename) -> list[list[str]]
    tokenize(data) -> Iterator[Token]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from .columns import balance_rows, map_columns
from .encoding import check_utf8, decode_cell, guess_encoding
from .errors import (
    CharlestownError,
    DecodeError,
    ErrorDetail,
    InputTooLargeError,
    Location,
    Severity,
    TableIOError,
    get_error_description,
)
from .rows import assemble_rows
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


def parse_bytes(
    data: bytes, filename: str = "<bytes>", *, max_bytes: int | None = None
) -> list[list[str]]:
    """
    Parse CSV content from bytes.

    Args:
        data: Raw UTF-8 CSV content
        filename: Optional filename for error messages
        max_bytes: Maximum accepted input size (None or <= 0 = unlimited)

    Returns:
        Rows of stripped cell text

    Raises:
        InputTooLargeError: If data exceeds max_bytes
        DecodeError: If data is not valid UTF-8
    """
    _check_size(len(data), filename, max_bytes)

    try:
        check_utf8(data, filename=filename)
    except DecodeError:
        # Prefer the row and column of the bad cell when one cell holds the bad bytes
        assemble_rows(tokenize(data), source=data, filename=filename)
        raise

    rows = assemble_rows(tokenize(data), source=data, filename=filename)
    logger.debug("Parsed %d bytes from %s into %d rows", len(data), filename, len(rows))
    return rows


def parse_string(text: str, filename: str = "<string>") -> list[list[str]]:
    """Parse CSV content from a string."""
    return parse_bytes(text.encode("utf-8"), filename)


def parse_file(path: Path | str, *, max_bytes: int | None = None) -> list[list[str]]:
    """
    Parse a CSV file. The whole file is read into memory first.

    Args:
        path: Path to the CSV file
        max_bytes: Maximum accepted file size (None or <= 0 = unlimited)

    Returns:
        Rows of stripped cell text

    Raises:
        TableIOError: If the file cannot be read
        InputTooLargeError: If the file exceeds max_bytes
        DecodeError: If any cell is not valid UTF-8
    """
    path = Path(path)

    try:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1) if _limited(max_bytes) else f.read()
    except OSError as e:
        raise TableIOError(
            ErrorDetail.fatal(
                code="CHT-IO-002",
                title="Read failed",
                message=f"Cannot read {path}: {e.strerror or e}",
                location=Location(file=str(path)),
                context={"errno": e.errno},
            )
        ) from e

    if _limited(max_bytes) and len(data) > max_bytes:  # type: ignore[operator]
        try:
            file_size = path.stat().st_size
        except OSError:
            file_size = len(data)
        _check_size(file_size, str(path), max_bytes)

    logger.debug("Read %d bytes from %s", len(data), path)
    return parse_bytes(data, str(path), max_bytes=max_bytes)


def parse_stream(
    stream: BinaryIO, filename: str = "<stream>", *, max_bytes: int | None = None
) -> list[list[str]]:
    """
    Parse CSV content from a binary stream, read to the end.

    Args:
        stream: Binary file-like object
        filename: Optional filename for error messages
        max_bytes: Maximum accepted input size (None or <= 0 = unlimited)

    Returns:
        Rows of stripped cell text
    """
    data = stream.read(max_bytes + 1) if _limited(max_bytes) else stream.read()

    return parse_bytes(data, filename, max_bytes=max_bytes)


def _limited(max_bytes: int | None) -> bool:
    return max_bytes is not None and max_bytes > 0


def _check_size(size: int, filename: str, max_bytes: int | None) -> None:
    if _limited(max_bytes) and size > max_bytes:  # type: ignore[operator]
        raise InputTooLargeError(
            ErrorDetail.fatal(
                code="CHT-IO-001",
                title="Input too large",
                message=f"Input exceeds maximum size of {max_bytes} bytes",
                location=Location(file=filename),
                context={"max_bytes": max_bytes, "size": size},
            )
        )


# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "CharlestownError",
    "DecodeError",
    "ErrorDetail",
    "InputTooLargeError",
    "Location",
    "Severity",
    "TableIOError",
    "Token",
    "TokenKind",
    "assemble_rows",
    "balance_rows",
    "check_utf8",
    "decode_cell",
    "get_error_description",
    "guess_encoding",
    "map_columns",
    "parse_bytes",
    "parse_file",
    "parse_stream",
    "parse_string",
    "tokenize",
]
