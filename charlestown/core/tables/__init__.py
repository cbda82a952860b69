"""
CSV tables.

Usage:
    from charlestown.core.tables import HeaderedTable, UnheaderedTable

    table = HeaderedTable.from_file("people.csv")
    print(table.get_cell(0, "name"))
"""

from charlestown.core.tables.headered import HeaderedTable
from charlestown.core.tables.unheadered import UnheaderedTable
from charlestown.core.tables.writer import escape_cell, stringify_rows, write_text

__all__ = [
    "HeaderedTable",
    "UnheaderedTable",
    "escape_cell",
    "stringify_rows",
    "write_text",
]
