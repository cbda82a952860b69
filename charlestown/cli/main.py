"""
Main CLI application.

Entry point for the charlestown command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated, TypeVar

import typer

import charlestown
from charlestown.cli.context import CliContext, ExitCode, resolve_max_bytes
from charlestown.cli.output import OutputFormat, get_output_adapter
from charlestown.core.parser.errors import CharlestownError
from charlestown.core.tables import HeaderedTable, UnheaderedTable

TableT = TypeVar("TableT", HeaderedTable, UnheaderedTable)

MAX_BYTES_HELP = (
    "Maximum input size in bytes (0 = unlimited). "
    "Defaults to CHARLESTOWN_MAX_BYTES or 100MiB."
)

# Create main app
app = typer.Typer(
    name="charlestown",
    help="RFC 4180 CSV reader and writer",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"charlestown {charlestown.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log parser and file activity to stderr"),
    ] = False,
) -> None:
    """RFC 4180 CSV reader and writer."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load(table_cls: type[TableT], file: Path, ctx: CliContext) -> TableT:
    """Load a table, turning fatal parse errors into a FATAL exit."""
    try:
        return table_cls.from_file(file, max_bytes=ctx.max_bytes)
    except CharlestownError as e:
        typer.echo(f"Error reading file: {e.detail}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None


def _output_format(format: str) -> OutputFormat:
    try:
        return OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


# =============================================================================
# Show Command
# =============================================================================


@app.command()
def show(
    file: Annotated[Path, typer.Argument(help="CSV file to show", exists=True)],
    headered: Annotated[
        bool,
        typer.Option("--headered/--raw", help="Treat the first row as a header"),
    ] = True,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    max_bytes: Annotated[int | None, typer.Option("--max-bytes", help=MAX_BYTES_HELP)] = None,
) -> None:
    """Print a CSV file as a table."""
    ctx = CliContext(
        format=format,
        color=color,
        headered=headered,
        max_bytes=resolve_max_bytes(max_bytes),
    )
    adapter = get_output_adapter(_output_format(ctx.format), color=ctx.color)

    table = _load(HeaderedTable if ctx.headered else UnheaderedTable, file, ctx)
    typer.echo(adapter.render_table(table))


# =============================================================================
# Column / Cell Commands
# =============================================================================


@app.command()
def column(
    file: Annotated[Path, typer.Argument(help="Headered CSV file", exists=True)],
    name: Annotated[str, typer.Argument(help="Column name")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    max_bytes: Annotated[int | None, typer.Option("--max-bytes", help=MAX_BYTES_HELP)] = None,
) -> None:
    """Print every cell of a named column."""
    ctx = CliContext(format=format, color=False, max_bytes=resolve_max_bytes(max_bytes))
    adapter = get_output_adapter(_output_format(ctx.format), color=ctx.color)

    table = _load(HeaderedTable, file, ctx)

    if table.column_index(name) is None:
        typer.echo(f"Column not found: {name}", err=True)
        typer.echo(f"Available columns: {', '.join(table.header())}", err=True)
        raise typer.Exit(ExitCode.NOT_FOUND)

    typer.echo(adapter.render_column(name, table.get_column(name)))


@app.command()
def cell(
    file: Annotated[Path, typer.Argument(help="Headered CSV file", exists=True)],
    row: Annotated[int, typer.Argument(help="Data row index (0 = first row after the header)")],
    name: Annotated[str, typer.Argument(help="Column name")],
    max_bytes: Annotated[int | None, typer.Option("--max-bytes", help=MAX_BYTES_HELP)] = None,
) -> None:
    """Print a single cell."""
    ctx = CliContext(max_bytes=resolve_max_bytes(max_bytes))
    table = _load(HeaderedTable, file, ctx)

    value = table.get_cell(row, name)
    if value is None:
        typer.echo(f"No cell at row {row}, column '{name}'", err=True)
        raise typer.Exit(ExitCode.NOT_FOUND)

    typer.echo(value)


# =============================================================================
# Normalize Command
# =============================================================================


@app.command()
def normalize(
    file: Annotated[Path, typer.Argument(help="CSV file to normalize", exists=True)],
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write output to file instead of stdout"),
    ] = None,
    headered: Annotated[
        bool,
        typer.Option("--headered/--raw", help="Balance row widths against the header"),
    ] = False,
    max_bytes: Annotated[int | None, typer.Option("--max-bytes", help=MAX_BYTES_HELP)] = None,
) -> None:
    """Rewrite a CSV file with CRLF line endings, trimmed cells and minimal quoting."""
    ctx = CliContext(headered=headered, max_bytes=resolve_max_bytes(max_bytes))
    table = _load(HeaderedTable if ctx.headered else UnheaderedTable, file, ctx)

    if output is None:
        typer.echo(table.stringify())
        return

    try:
        table.save(output)
    except CharlestownError as e:
        typer.echo(f"Error writing file: {e.detail}", err=True)
        raise typer.Exit(ExitCode.FATAL) from None

    typer.echo(f"Output written to {output}", err=True)
