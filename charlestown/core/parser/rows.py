"""
Row assembly.

Groups the tokenizer's cell tokens into rows of decoded, stripped text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .encoding import decode_cell

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .tokenizer import Token


def assemble_rows(
    tokens: Iterable[Token],
    *,
    source: bytes | None = None,
    filename: str | None = None,
) -> list[list[str]]:
    """
    Build rows from a token stream.

    MID_ROW tokens are appended to the current row; an END_OF_ROW token adds
    its cell and closes the row. Rows may differ in length. A last row that is
    never closed (input ending in a delimiter) is discarded.

    Args:
        tokens: Tokens from tokenize()
        source: The tokenized input, only used to enrich decode errors
        filename: Optional filename for error locations

    Returns:
        List of rows

    Raises:
        DecodeError: If any cell is not valid UTF-8 (row/column are 1-indexed)
    """
    table: list[list[str]] = []
    current_row: list[str] = []

    for token in tokens:
        current_row.append(
            decode_cell(
                token.raw,
                filename=filename,
                row=token.row + 1,
                column=token.column + 1,
                offset=token.offset,
                source=source,
            )
        )
        if token.ends_row:
            table.append(current_row)
            current_row = []

    return table
