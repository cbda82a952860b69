"""Tests for main parser functionality."""

import io
from pathlib import Path

import pytest

from charlestown.core.parser import (
    CharlestownError,
    DecodeError,
    ErrorDetail,
    InputTooLargeError,
    Severity,
    TableIOError,
    get_error_description,
    parse_bytes,
    parse_file,
    parse_stream,
    parse_string,
)


class TestParseFile:
    """Tests for parse_file function."""

    def test_parse_simple_file(self, simple_csv: Path) -> None:
        """Test parsing a small CRLF file."""
        assert parse_file(simple_csv) == [["name", "age"], ["Ada", "36"], ["Grace", "45"]]

    def test_parse_quoted_file(self, quoted_csv: Path) -> None:
        """Test quoted cells with commas, quotes and line breaks."""
        rows = parse_file(quoted_csv)

        assert rows[1] == ["1", "contains, comma"]
        assert rows[2] == ["2", 'says "hi"']
        assert rows[3] == ["3", "two\r\nlines"]

    def test_accepts_str_path(self, simple_csv: Path) -> None:
        """Test that a string path works too."""
        assert len(parse_file(str(simple_csv))) == 3

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Test that a missing file raises TableIOError."""
        with pytest.raises(TableIOError) as exc_info:
            parse_file(tmp_path / "nonexistent_file.csv")

        assert exc_info.value.code == "CHT-IO-002"

    def test_max_bytes_exceeded(self, simple_csv: Path) -> None:
        """Test the size limit reports the real file size."""
        with pytest.raises(InputTooLargeError) as exc_info:
            parse_file(simple_csv, max_bytes=10)

        detail = exc_info.value.detail
        assert detail.code == "CHT-IO-001"
        assert detail.context["size"] == simple_csv.stat().st_size

    def test_max_bytes_zero_is_unlimited(self, simple_csv: Path) -> None:
        """Test that a non-positive limit disables the check."""
        assert len(parse_file(simple_csv, max_bytes=0)) == 3

    def test_invalid_utf8_file(self, windows1252_csv: Path) -> None:
        """Test that a non-UTF-8 file fails with a location."""
        with pytest.raises(DecodeError) as exc_info:
            parse_file(windows1252_csv)

        assert exc_info.value.detail.location.file == str(windows1252_csv)
        assert exc_info.value.detail.location.row == 1


class TestParseBytes:
    """Tests for parse_bytes and parse_string."""

    def test_empty_data(self) -> None:
        """Test parsing empty data."""
        assert parse_bytes(b"") == []

    def test_embedded_delimiter(self) -> None:
        """Test a quoted comma."""
        assert parse_bytes(b'"x,y",z') == [["x,y", "z"]]

    def test_quoted_roundtrip_value(self) -> None:
        """Test a quoted cell with an escaped quote."""
        assert parse_string('"a,b""c"') == [['a,b"c']]

    def test_unterminated_quote(self) -> None:
        """Test leniency towards a missing closing quote."""
        assert parse_string('a,"b\nc') == [["a", "b\nc"]]

    def test_size_limit(self) -> None:
        """Test max_bytes on in-memory data."""
        with pytest.raises(InputTooLargeError):
            parse_bytes(b"a,b,c", max_bytes=4)

    def test_errors_share_base_class(self) -> None:
        """Test that fatal errors can be caught together."""
        with pytest.raises(CharlestownError):
            parse_bytes(b"\xff")


class TestParseStream:
    """Tests for parse_stream function."""

    def test_reads_to_end(self) -> None:
        """Test parsing a binary stream."""
        stream = io.BytesIO(b"a,b\nc,d\n")
        assert parse_stream(stream) == [["a", "b"], ["c", "d"]]

    def test_limit_reads_one_extra_byte(self) -> None:
        """Test that an oversized stream is rejected."""
        stream = io.BytesIO(b"a" * 100)
        with pytest.raises(InputTooLargeError) as exc_info:
            parse_stream(stream, "big", max_bytes=10)

        assert exc_info.value.detail.location.file == "big"


class TestErrorCodes:
    """Tests for the error code registry."""

    def test_known_code(self) -> None:
        assert get_error_description("CHT-ENC-001") == "Invalid UTF-8 byte sequence in input"

    def test_unknown_code(self) -> None:
        assert get_error_description("CHT-XXX-999") is None


class TestErrorDetail:
    """Tests for the error model."""

    def test_severities(self) -> None:
        assert [severity.value for severity in Severity] == ["fatal", "warn"]

    def test_factories(self) -> None:
        fatal = ErrorDetail.fatal("CHT-IO-002", "Read failed", "Cannot read x.csv")
        warn = ErrorDetail.warn("CHT-COL-001", "Duplicate column", "Column 'a' repeats")

        assert fatal.severity is Severity.FATAL
        assert warn.severity is Severity.WARN
        assert str(fatal) == "[CHT-IO-002] FATAL: Read failed - Cannot read x.csv (<unknown>)"
