"""Command-line interface for inspecting and normalizing CSV files."""

from charlestown.cli.context import CliContext, ExitCode
from charlestown.cli.main import app

__all__ = ["CliContext", "ExitCode", "app"]
