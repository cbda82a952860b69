"""
Terminal output adapter.

Renders tables as aligned text columns, with a bold header on color TTYs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from charlestown.cli.output.base import OutputAdapter, OutputFormat
from charlestown.core.tables import HeaderedTable

if TYPE_CHECKING:
    from charlestown.core.tables import UnheaderedTable

COLUMN_GAP = "  "
MISSING = "-"

_STYLES = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "yellow": "\033[33m",
}
_RESET = "\033[0m"


def _display(cell: str) -> str:
    """Make embedded line breaks visible so each row stays on one line."""
    return cell.replace("\r", "\\r").replace("\n", "\\n")


class TerminalOutput(OutputAdapter):
    """Plain-text table output."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_table(self, table: HeaderedTable | UnheaderedTable) -> str:
        if isinstance(table, HeaderedTable):
            header: list[str] | None = table.header()
            rows = [list(row) for row in table.rows]
        else:
            header = None
            rows = list(table.iter_rows())

        lines = self._align([header, *rows] if header is not None else rows)
        if header is not None and lines:
            lines[0] = self._style(lines[0], "bold")

        if isinstance(table, HeaderedTable):
            for warning in table.warnings:
                lines.append(self._style(f"warning: {warning.message}", "yellow"))

        summary = f"{len(rows)} row(s)"
        if isinstance(table, HeaderedTable):
            summary += f", {table.width} column(s)"
        lines.append(self._style(summary, "dim"))

        return "\n".join(lines)

    def render_column(self, name: str, values: list[str | None]) -> str:
        lines = [self._style(name, "bold")]
        lines.extend(MISSING if value is None else _display(value) for value in values)
        return "\n".join(lines)

    def _align(self, rows: list[list[str]]) -> list[str]:
        """Pad cells so columns line up. Ragged rows are padded on display only."""
        display = [[_display(cell) for cell in row] for row in rows]
        widths: list[int] = []
        for row in display:
            for index, cell in enumerate(row):
                if index == len(widths):
                    widths.append(0)
                widths[index] = max(widths[index], len(cell))

        return [
            COLUMN_GAP.join(cell.ljust(widths[index]) for index, cell in enumerate(row)).rstrip()
            for row in display
        ]

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        code = _STYLES.get(style, "")
        if code:
            return f"{code}{text}{_RESET}"
        return text
