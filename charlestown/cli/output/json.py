"""
JSON output adapter.

Renders tables as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from charlestown.cli.output.base import OutputAdapter, OutputFormat
from charlestown.core.tables import HeaderedTable

if TYPE_CHECKING:
    from charlestown.core.tables import UnheaderedTable


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_table(self, table: HeaderedTable | UnheaderedTable) -> str:
        output: dict[str, Any]
        if isinstance(table, HeaderedTable):
            output = {
                "header": table.header(),
                "columns": table.columns,
                "rows": table.rows,
                "warnings": [w.model_dump(mode="json") for w in table.warnings],
            }
        else:
            output = {"rows": table.rows}

        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_column(self, name: str, values: list[str | None]) -> str:
        return json.dumps({"column": name, "values": values}, indent=self.indent, ensure_ascii=False)
