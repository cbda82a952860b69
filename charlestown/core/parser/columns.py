"""
Header handling for headered tables.

Balances a ragged table against its first row and maps header names to
column indices.
"""

from __future__ import annotations

from .errors import ErrorDetail, Location


def balance_rows(rows: list[list[str]]) -> tuple[list[str], list[list[str]], int]:
    """
    Split off the header row and pad everything to the widest row.

    The width is the maximum row length over all rows, header included.
    Missing header names become the stringified column index; missing data
    cells become empty strings. Nothing is ever truncated.

    Args:
        rows: Unheadered rows; the first one is the header

    Returns:
        Tuple of (header, data rows, width)
    """
    header = list(rows[0]) if rows else []
    width = max((len(row) for row in rows), default=0)

    while len(header) < width:
        header.append(str(len(header)))

    body = [list(row) + [""] * (width - len(row)) for row in rows[1:]]
    return header, body, width


def map_columns(
    header: list[str],
    filename: str | None = None,
) -> tuple[dict[str, int], list[ErrorDetail]]:
    """
    Map header names to column indices.

    Duplicate names are allowed: the last occurrence wins and each earlier
    one is reported as a warning.

    Args:
        header: Balanced header row
        filename: Optional filename for warning locations

    Returns:
        Tuple of (name -> index mapping, list of warnings)
    """
    columns: dict[str, int] = {}
    warnings: list[ErrorDetail] = []

    for index, name in enumerate(header):
        previous = columns.get(name)
        if previous is not None:
            warnings.append(
                ErrorDetail.warn(
                    code="CHT-COL-001",
                    title="Duplicate column",
                    message=(
                        f"Column '{name}' at index {index} shadows the same name at index {previous}"
                    ),
                    location=Location(file=filename, row=1, column=previous + 1),
                    context={"name": name, "shadowed_index": previous, "index": index},
                )
            )
        columns[name] = index

    return columns, warnings
