"""
Byte-level CSV tokenizer.

Dialect (fixed, RFC 4180 flavoured):
- Delimiter: comma (,)
- Quote character: double quote (")
- Escape: doubled quotes ("")
- Line terminator: CRLF or bare LF; a lone CR outside quotes is cell content

The tokenizer is a two-state machine (unquoted / quoted) walking a single
cursor over the whole buffer. It never raises: an unterminated quoted field
simply runs to end of input and is flushed as the last cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

QUOTE = 0x22
COMMA = 0x2C
CR = 0x0D
LF = 0x0A


class TokenizerState(Enum):
    """State of the tokenizer state machine."""

    UNQUOTED = auto()
    QUOTED = auto()  # Inside a quoted field; delimiters and line breaks are literal


class TokenKind(Enum):
    """How a cell token was terminated."""

    MID_ROW = "mid_row"  # Terminated by a delimiter
    END_OF_ROW = "end_of_row"  # Terminated by a line break or end of input


@dataclass(frozen=True)
class Token:
    """One raw cell, still undecoded."""

    kind: TokenKind
    raw: bytes
    row: int  # 0-based record index
    column: int  # 0-based cell index within the record
    offset: int  # Byte offset where the cell started

    @property
    def ends_row(self) -> bool:
        return self.kind is TokenKind.END_OF_ROW


def tokenize(data: bytes) -> Iterator[Token]:
    """
    Tokenize a CSV byte buffer into cell tokens.

    Quoting rules:
    - A quote outside a quoted field opens one, wherever it appears.
    - Inside a quoted field, "" is a literal quote and a single " closes it.

    End of input:
    - A non-empty pending cell is emitted as END_OF_ROW, so a missing final
      newline does not lose the last row.
    - An empty pending cell is dropped, so a trailing newline adds no empty
      row. Input ending in a delimiter ("a,") never closes its last row, and
      that row is discarded.

    Args:
        data: The complete CSV content

    Yields:
        Tokens in input order
    """
    cell = bytearray()
    state = TokenizerState.UNQUOTED
    row = 0
    column = 0
    cell_start = 0

    length = len(data)
    i = 0

    while i < length:
        byte = data[i]
        i += 1

        if byte == QUOTE:
            if state is TokenizerState.UNQUOTED:
                state = TokenizerState.QUOTED
            elif i < length and data[i] == QUOTE:
                # Escaped quote
                cell.append(QUOTE)
                i += 1
            else:
                state = TokenizerState.UNQUOTED

        elif state is TokenizerState.QUOTED:
            cell.append(byte)

        elif byte == COMMA:
            yield Token(TokenKind.MID_ROW, bytes(cell), row, column, cell_start)
            cell.clear()
            column += 1
            cell_start = i

        elif byte == LF or (byte == CR and i < length and data[i] == LF):
            if byte == CR:
                i += 1
            yield Token(TokenKind.END_OF_ROW, bytes(cell), row, column, cell_start)
            cell.clear()
            row += 1
            column = 0
            cell_start = i

        else:
            # Includes a lone CR
            cell.append(byte)

    if cell:
        yield Token(TokenKind.END_OF_ROW, bytes(cell), row, column, cell_start)
