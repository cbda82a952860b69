"""Tests for the CSV writer."""

from pathlib import Path

import pytest

from charlestown.core.tables.writer import escape_cell, stringify_rows, write_text


class TestEscapeCell:
    """Tests for escape_cell function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            ("", ""),
            ("with space", "with space"),
            ("a,b", '"a,b"'),
            ('say "hi"', '"say ""hi"""'),
            ("line\nbreak", '"line\nbreak"'),
            ("carriage\rreturn", '"carriage\rreturn"'),
            ('a,b"c', '"a,b""c"'),
        ],
    )
    def test_escape(self, value: str, expected: str) -> None:
        assert escape_cell(value) == expected


class TestStringifyRows:
    """Tests for stringify_rows function."""

    def test_crlf_between_rows(self) -> None:
        """Test that rows are joined with CRLF and nothing follows the last row."""
        assert stringify_rows([["a", "b"], ["c"]]) == "a,b\r\nc"

    def test_no_rows(self) -> None:
        assert stringify_rows([]) == ""

    def test_empty_row(self) -> None:
        assert stringify_rows([["a"], [], ["b"]]) == "a\r\n\r\nb"


class TestWriteText:
    """Tests for write_text function."""

    def test_writes_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "out.csv"
        write_text(path, "ä,ö")
        assert path.read_bytes() == "ä,ö".encode()

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """Test that the temporary file is renamed away."""
        write_text(tmp_path / "out.csv", "x")
        assert [p.name for p in tmp_path.iterdir()] == ["out.csv"]

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.csv"
        path.write_bytes(b"previous,content\r\n" * 50)
        write_text(path, "new")
        assert path.read_bytes() == b"new"
