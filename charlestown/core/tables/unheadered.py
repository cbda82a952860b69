"""
Unheadered CSV table.

A plain list of rows with no width invariant. Lookups that miss return None
(or a list of per-row None for whole columns) instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, TypeVar

from pydantic import BaseModel, Field

from charlestown.core.parser import parse_bytes, parse_file, parse_stream, parse_string
from charlestown.core.tables.writer import stringify_rows, write_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from pathlib import Path

T = TypeVar("T")


def get_index(items: Sequence[T], index: int) -> T | None:
    """Bounds-checked indexing. Negative indices are out of range."""
    if 0 <= index < len(items):
        return items[index]
    return None


class UnheaderedTable(BaseModel):
    """
    A CSV table with no header.

    Rows may be ragged. The table owns its rows: constructors copy their
    input and getters return copies.
    """

    rows: list[list[str]] = Field(default_factory=list)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[str]]) -> UnheaderedTable:
        """Create a table from existing rows of cells."""
        return cls(rows=[list(row) for row in rows])

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "<bytes>") -> UnheaderedTable:
        """
        Parse CSV bytes into a table.

        Raises:
            DecodeError: If any cell is not valid UTF-8
        """
        return cls(rows=parse_bytes(data, filename))

    @classmethod
    def from_string(cls, text: str) -> UnheaderedTable:
        """Parse CSV text into a table."""
        return cls(rows=parse_string(text))

    @classmethod
    def from_stream(cls, stream: BinaryIO, filename: str = "<stream>") -> UnheaderedTable:
        """Parse a binary stream, read to the end, into a table."""
        return cls(rows=parse_stream(stream, filename))

    @classmethod
    def from_file(cls, path: Path | str, *, max_bytes: int | None = None) -> UnheaderedTable:
        """
        Read a table from a CSV file.

        A headered file can be read this way too; its header is then just the
        first row.

        Raises:
            TableIOError: If the file cannot be read
            InputTooLargeError: If the file exceeds max_bytes
            DecodeError: If any cell is not valid UTF-8
        """
        return cls(rows=parse_file(path, max_bytes=max_bytes))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def push_row(self, row: Iterable[str]) -> None:
        """Append a row to the table."""
        self.rows.append(list(row))

    def get_row(self, row_index: int) -> list[str] | None:
        """Get a copy of a row, or None if out of range."""
        row = get_index(self.rows, row_index)
        return list(row) if row is not None else None

    def get_column(self, column_index: int) -> list[str | None]:
        """
        Get a column across all rows.

        The result has one entry per row; rows too short to have the column
        contribute None.
        """
        return [get_index(row, column_index) for row in self.rows]

    def get_cell(self, row_index: int, column_index: int) -> str | None:
        """Get a cell, or None if either index is out of range."""
        row = get_index(self.rows, row_index)
        if row is None:
            return None
        return get_index(row, column_index)

    def number_of_rows(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def iter_rows(self) -> Iterator[list[str]]:
        """Iterate over copies of the rows."""
        for row in self.rows:
            yield list(row)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def stringify(self) -> str:
        """Serialize to CSV text (CRLF between rows, RFC 4180 quoting)."""
        return stringify_rows(self.rows)

    def to_bytes(self) -> bytes:
        """Serialize to UTF-8 CSV bytes."""
        return self.stringify().encode("utf-8")

    def save(self, path: Path | str) -> None:
        """
        Write the table to a CSV file, replacing any existing content.

        Raises:
            TableIOError: If the file cannot be written
        """
        write_text(path, self.stringify())
