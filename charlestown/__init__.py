"""
charlestown: RFC 4180 CSV reader and writer.

Parses UTF-8 CSV bytes into tables of text cells and writes them back with
standard quoting. Tables can be used raw or with their first row as a header.

Usage:
    from charlestown import HeaderedTable
    table = HeaderedTable.from_file("people.csv")
    names = table.get_column("name")
"""

from charlestown.core.parser.errors import (
    CharlestownError,
    DecodeError,
    InputTooLargeError,
    TableIOError,
)
from charlestown.core.tables import HeaderedTable, UnheaderedTable

__version__ = "0.1.0"
__all__ = [
    "CharlestownError",
    "DecodeError",
    "HeaderedTable",
    "InputTooLargeError",
    "TableIOError",
    "UnheaderedTable",
    "__version__",
]
