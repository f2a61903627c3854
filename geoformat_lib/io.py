# -*- coding: utf-8 -*-
"""File I/O operations for surveying files.

This module provides thin function wrappers around GeoFormatInterface.

For new code, prefer using GeoFormatInterface directly:

    from geoformat_lib.interface import GeoFormatInterface

    outcome = GeoFormatInterface.convert_file(
        Path("points.gsi"), Path("points.csv"), "gsi", "csv"
    )
"""

from collections.abc import Iterable
from pathlib import Path

from geoformat_lib.constants import DEFAULT_ENCODING
from geoformat_lib.enums import SourceFormat
from geoformat_lib.enums import TargetFormat
from geoformat_lib.interface import GeoFormatInterface
from geoformat_lib.interface import ProgressCallback
from geoformat_lib.interface import ReadOutcome
from geoformat_lib.models import ConversionOptions

__all__ = [
    "DEFAULT_ENCODING",
    "ProgressCallback",
    "ReadOutcome",
    "clear_up_file",
    "convert_file",
    "convert_files",
    "read_csv",
    "read_lines",
    "write_lines",
]


# --- Reading Functions ---


def read_lines(path: Path, *, encoding: str = DEFAULT_ENCODING) -> ReadOutcome:
    """Read a text file into lines.

    Args:
        path: File to read
        encoding: Character encoding (default: ISO-8859-1)

    Returns:
        ReadOutcome, unsuccessful if the file cannot be read
    """
    return GeoFormatInterface.read_lines(path, encoding=encoding)


def read_csv(
    path: Path,
    separator: str = ";",
    *,
    encoding: str = DEFAULT_ENCODING,
) -> ReadOutcome:
    """Read a CSV file into tokenized rows."""
    return GeoFormatInterface.read_csv(path, separator, encoding=encoding)


# --- Writing Functions ---


def write_lines(
    path: Path,
    lines: Iterable[str],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write lines to a text file.

    Args:
        path: Path to write to
        lines: Lines to write, without line separators
        encoding: Character encoding (default: ISO-8859-1)
    """
    GeoFormatInterface.write_lines(lines, path, encoding=encoding)


# --- Conversion Functions ---


def convert_file(
    input_path: Path,
    output_path: Path | None,
    source: SourceFormat | str,
    target: TargetFormat | str,
    options: ConversionOptions | None = None,
) -> ReadOutcome:
    """Convert a file from one format into another.

    Raises:
        ConversionError: If the conversion is not supported
    """
    return GeoFormatInterface.convert_file(
        input_path, output_path, source, target, options
    )


def convert_files(
    input_paths: list[Path],
    output_dir: Path,
    source: SourceFormat | str,
    target: TargetFormat | str,
    options: ConversionOptions | None = None,
    *,
    on_progress: ProgressCallback | None = None,
) -> dict[Path, ReadOutcome]:
    """Convert a batch of files; failures are reported per file."""
    return GeoFormatInterface.convert_files(
        input_paths,
        output_dir,
        source,
        target,
        options,
        on_progress=on_progress,
    )


def clear_up_file(
    input_path: Path,
    output_path: Path | None = None,
    *,
    framed: bool = False,
    clean_by_content: bool = True,
    encoding: str = DEFAULT_ENCODING,
) -> ReadOutcome:
    """Clear up a Leica System 1200 logfile."""
    return GeoFormatInterface.clear_up_file(
        input_path,
        output_path,
        framed=framed,
        clean_by_content=clean_by_content,
        encoding=encoding,
    )
