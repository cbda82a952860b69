"""
Output adapter base classes.

Defines the interface for output adapters.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from charlestown.core.tables import HeaderedTable, UnheaderedTable


class OutputFormat(Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class OutputAdapter(ABC):
    """Base class for output adapters."""

    format: OutputFormat

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color

    @abstractmethod
    def render_table(self, table: HeaderedTable | UnheaderedTable) -> str:
        """
        Render a whole table.

        Args:
            table: Table to render

        Returns:
            Rendered string
        """
        pass

    @abstractmethod
    def render_column(self, name: str, values: list[str | None]) -> str:
        """
        Render one column.

        Args:
            name: Column name
            values: One entry per data row, None where the cell is missing

        Returns:
            Rendered string
        """
        pass


def get_output_adapter(
    format: OutputFormat | str,
    stream: TextIO | None = None,
    color: bool = True,
) -> OutputAdapter:
    """
    Get output adapter for format.

    Args:
        format: Output format
        stream: Output stream
        color: Enable colors (terminal only)

    Returns:
        Output adapter instance
    """
    if isinstance(format, str):
        format = OutputFormat(format)

    if format == OutputFormat.TERMINAL:
        from charlestown.cli.output.terminal import TerminalOutput

        return TerminalOutput(stream=stream, color=color)

    elif format == OutputFormat.JSON:
        from charlestown.cli.output.json import JsonOutput

        return JsonOutput(stream=stream)

    raise ValueError(f"Unknown output format: {format}")
