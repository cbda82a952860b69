"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from charlestown.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from charlestown.cli.output.json import JsonOutput
from charlestown.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
