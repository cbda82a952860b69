"""
CSV writer.

Serializes rows with RFC 4180 escaping and writes files atomically.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from charlestown.core.parser.errors import ErrorDetail, Location, TableIOError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\r\n"
DELIMITER = ","

_NEEDS_QUOTING = ('"', ",", "\r", "\n")


def escape_cell(value: str) -> str:
    """
    Quote a cell if it contains a quote, comma, CR or LF.

    Inner quotes are doubled: a,b"c becomes "a,b""c".
    """
    if any(c in value for c in _NEEDS_QUOTING):
        return '"' + value.replace('"', '""') + '"'
    return value


def stringify_rows(rows: Iterable[Iterable[str]]) -> str:
    """Join rows with CRLF. No terminator follows the last row."""
    return LINE_TERMINATOR.join(DELIMITER.join(escape_cell(cell) for cell in row) for row in rows)


def write_text(path: Path | str, content: str) -> None:
    """
    Write content as UTF-8, replacing the file in one step.

    The content goes to a temporary file in the target directory which is
    then renamed over the destination.

    Raises:
        TableIOError: If the file cannot be written
    """
    path = Path(path)
    data = content.encode("utf-8")

    try:
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=".charlestown_",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(temp_path, path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(temp_path)
            raise
    except OSError as e:
        raise TableIOError(
            ErrorDetail.fatal(
                code="CHT-IO-003",
                title="Write failed",
                message=f"Cannot write {path}: {e.strerror or e}",
                location=Location(file=str(path)),
                context={"errno": e.errno},
            )
        ) from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
