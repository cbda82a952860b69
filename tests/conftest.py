"""
Pytest configuration and fixtures for charlestown tests.

Provides fixtures for:
- Sample CSV files written to a temporary directory
- Large file generation
- Common test utilities
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator

# =============================================================================
# Sample Content
# =============================================================================

SIMPLE_CSV = b"name,age\r\nAda,36\r\nGrace,45\r\n"

QUOTED_CSV = (
    b'id,comment\r\n'
    b'1,"contains, comma"\r\n'
    b'2,"says ""hi"""\r\n'
    b'3,"two\r\nlines"\r\n'
)

RAGGED_CSV = b"a,b\n1,2,3\nx\n"


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def csv_dir(tmp_path: Path) -> Path:
    """Return a directory for sample files."""
    directory = tmp_path / "csv"
    directory.mkdir()
    return directory


@pytest.fixture
def simple_csv(csv_dir: Path) -> Path:
    """Two data rows with a header, CRLF line endings."""
    path = csv_dir / "simple.csv"
    path.write_bytes(SIMPLE_CSV)
    return path


@pytest.fixture
def quoted_csv(csv_dir: Path) -> Path:
    """Quoted cells with embedded commas, quotes and line breaks."""
    path = csv_dir / "quoted.csv"
    path.write_bytes(QUOTED_CSV)
    return path


@pytest.fixture
def ragged_csv(csv_dir: Path) -> Path:
    """Rows of lengths 2, 3 and 1 with bare LF line endings."""
    path = csv_dir / "ragged.csv"
    path.write_bytes(RAGGED_CSV)
    return path


@pytest.fixture
def windows1252_csv(csv_dir: Path) -> Path:
    """A file that is not UTF-8."""
    path = csv_dir / "legacy.csv"
    path.write_bytes("Kunde,Straße\r\nMüller,Hauptstraße 1\r\n".encode("windows-1252"))
    return path


# =============================================================================
# Large File Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def large_csv(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Generate a 20k row CSV file."""
    tmp_dir = tmp_path_factory.mktemp("large")
    file_path = tmp_dir / "large_20k.csv"

    _generate_large_csv(file_path, num_rows=20_000)

    yield file_path


def _generate_large_csv(path: Path, num_rows: int) -> None:
    """Write a headered CSV with quoted and unquoted cells."""
    lines = ["id,name,amount,note"]
    for i in range(1, num_rows + 1):
        note = f'"row {i}, ""quoted"""' if i % 3 == 0 else f"row {i}"
        lines.append(f"{i},Customer {i % 97},{i * 7 % 1000}.{i % 100:02d},{note}")

    path.write_bytes(("\r\n".join(lines) + "\r\n").encode("utf-8"))
