"""
Headered CSV table.

The first row of an unheadered table becomes the header. The table is then
balanced: every row, header included, is padded to the widest row seen.

CRITICAL DESIGN DECISIONS:
- Padding header names are the stringified column index ("2" for column 2)
- Duplicate header names: the last occurrence wins, earlier ones are only
  reachable by index and are reported in `warnings`
- Unknown column names never raise; column lookups return one None per row
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from charlestown.core.parser.columns import balance_rows, map_columns
from charlestown.core.parser.errors import ErrorDetail
from charlestown.core.tables.unheadered import UnheaderedTable, get_index
from charlestown.core.tables.writer import write_text

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class HeaderedTable(BaseModel):
    """A CSV table whose columns are named by its first row."""

    columns: dict[str, int] = Field(
        default_factory=dict,
        description="Column name -> column index",
    )
    rows: list[list[str]] = Field(
        default_factory=list,
        description="Data rows, all exactly `width` cells long",
    )
    width: int = Field(default=0, ge=0, description="Number of physical columns")
    warnings: list[ErrorDetail] = Field(
        default_factory=list,
        description="Duplicate header names found while mapping columns",
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_unheadered(
        cls, table: UnheaderedTable, filename: str | None = None
    ) -> HeaderedTable:
        """
        Create a headered table, treating the first row as the header.

        Note that this may add header names and empty cells to balance the
        table, so it is not the exact inverse of to_unheadered().
        """
        header, body, width = balance_rows(table.rows)
        columns, warnings = map_columns(header, filename=filename)
        return cls(columns=columns, rows=body, width=width, warnings=warnings)

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "<bytes>") -> HeaderedTable:
        """Parse CSV bytes into a headered table."""
        return cls.from_unheadered(UnheaderedTable.from_bytes(data, filename), filename)

    @classmethod
    def from_string(cls, text: str) -> HeaderedTable:
        """Parse CSV text into a headered table."""
        return cls.from_unheadered(UnheaderedTable.from_string(text))

    @classmethod
    def from_file(cls, path: Path | str, *, max_bytes: int | None = None) -> HeaderedTable:
        """Read a headered table from a CSV file. The first row is the header."""
        return cls.from_unheadered(
            UnheaderedTable.from_file(path, max_bytes=max_bytes), str(path)
        )

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def column_index(self, name: str) -> int | None:
        """Resolve a column name to its index."""
        return self.columns.get(name)

    def header(self) -> list[str]:
        """
        Rebuild the header row from the name -> index mapping.

        Columns whose name was shadowed by a later duplicate get their
        stringified index, like padding columns.
        """
        names = {index: name for name, index in self.columns.items()}
        return [names.get(index, str(index)) for index in range(self.width)]

    def get_unheadered_row(self, row_index: int) -> list[str] | None:
        """
        Get a data row as a list of cells.

        Index 0 is the first row after the header.
        """
        row = get_index(self.rows, row_index)
        return list(row) if row is not None else None

    def get_headered_row(self, row_index: int) -> dict[str, str] | None:
        """Get a data row as a column name -> cell mapping."""
        row = get_index(self.rows, row_index)
        if row is None:
            return None
        return {name: row[index] for name, index in self.columns.items()}

    def get_column(self, name: str) -> list[str | None]:
        """
        Get all cells of a named column.

        An unknown name yields a list of None with one entry per row.
        """
        index = self.columns.get(name)
        if index is None:
            return [None] * len(self.rows)
        return [get_index(row, index) for row in self.rows]

    def get_cell(self, row_index: int, name: str) -> str | None:
        """Get a cell by row index and column name."""
        index = self.columns.get(name)
        if index is None:
            return None
        row = get_index(self.rows, row_index)
        if row is None:
            return None
        return get_index(row, index)

    def number_of_rows(self) -> int:
        return len(self.rows)

    def number_of_columns(self) -> int:
        """Number of distinct column names."""
        return len(self.columns)

    def __len__(self) -> int:
        return len(self.rows)

    def iter_rows(self) -> Iterator[dict[str, str]]:
        """Iterate over data rows as name -> cell mappings."""
        for row in self.rows:
            yield {name: row[index] for name, index in self.columns.items()}

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_unheadered(self) -> UnheaderedTable:
        """Turn this table back into an unheadered table, header first."""
        return UnheaderedTable.from_rows([self.header(), *self.rows])

    def stringify(self) -> str:
        """Serialize to CSV text, header included."""
        return self.to_unheadered().stringify()

    def to_bytes(self) -> bytes:
        return self.stringify().encode("utf-8")

    def save(self, path: Path | str) -> None:
        """
        Write the table to a CSV file, replacing any existing content.

        Raises:
            TableIOError: If the file cannot be written
        """
        write_text(path, self.stringify())
