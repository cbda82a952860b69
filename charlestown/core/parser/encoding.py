"""
Cell decoding.

Every cell is strict UTF-8. There is no fallback decoding: a single bad byte
sequence aborts the parse. When that happens, charset-normalizer is asked
what the input most likely is, so the error can point the user at the real
encoding.
"""

from __future__ import annotations

from charset_normalizer import from_bytes

from .errors import DecodeError, ErrorDetail, Location

# Size of data to use for encoding detection (8KB is usually sufficient)
DETECTION_SAMPLE_SIZE = 8192


def guess_encoding(data: bytes) -> str | None:
    """
    Guess the encoding of data that failed to decode as UTF-8.

    Returns:
        Lower-cased encoding name, or None if nothing plausible was found
    """
    results = from_bytes(data[:DETECTION_SAMPLE_SIZE])
    best = results.best()
    if best is None:
        return None
    return best.encoding.lower()


def check_utf8(data: bytes, *, filename: str | None = None) -> None:
    """
    Check that a whole input buffer is UTF-8.

    Quote bytes are removed before cells are decoded, so a sequence split by
    quotes (b'\\xc3"\\xa9"') would otherwise decode as a valid cell.

    Raises:
        DecodeError: If data is not valid UTF-8 (location has the byte offset)
    """
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(
            _invalid_utf8(
                e,
                data,
                subject="Input",
                location=Location(file=filename, offset=e.start),
                source=data,
            )
        ) from e


def decode_cell(
    raw: bytes,
    *,
    filename: str | None = None,
    row: int | None = None,
    column: int | None = None,
    offset: int | None = None,
    source: bytes | None = None,
) -> str:
    """
    Decode one raw cell as UTF-8 and strip surrounding whitespace.

    Args:
        raw: Undecoded cell bytes
        filename, row, column, offset: Position of the cell, for the error
        source: Full input, used to guess the real encoding on failure

    Returns:
        The cell text

    Raises:
        DecodeError: If raw is not valid UTF-8
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(
            _invalid_utf8(
                e,
                raw,
                subject="Cell",
                location=Location(file=filename, row=row, column=column, offset=offset),
                source=source if source is not None else raw,
            )
        ) from e
    return text.strip()


def _invalid_utf8(
    e: UnicodeDecodeError,
    raw: bytes,
    *,
    subject: str,
    location: Location,
    source: bytes,
) -> ErrorDetail:
    context: dict[str, object] = {
        "raw_value": raw[max(e.start - 8, 0) : e.end + 8].hex(" "),
        "reason": e.reason,
    }
    guessed = guess_encoding(source)
    if guessed is not None:
        context["guessed_encoding"] = guessed
    hint = f"; input looks like {guessed}" if guessed not in (None, "ascii", "utf_8") else ""
    return ErrorDetail.fatal(
        code="CHT-ENC-001",
        title="Invalid UTF-8",
        message=f"{subject} contains an invalid UTF-8 byte sequence ({e.reason}){hint}",
        location=location,
        context=context,
    )
