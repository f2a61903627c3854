# -*- coding: utf-8 -*-
"""Readers for delimiter based point files.

- `read_csv_rows`: generic CSV (``,`` or ``;``) into token rows
- `CadworkParser`: cadwork node.dat (three header lines, blank separated)
- `BaselStadtParser`: Basel Stadt geodata CSV rows (``;``, one header row)
- `BaselLandschaftParser`: Basel Landschaft geodata TXT (tab separated,
  one header row, 5 columns for HFP and 6 columns for LFP files)

Blank lines are skipped. Rows with too few columns are recorded in
``errors`` and skipped.
"""

import csv
import logging
import re
from collections.abc import Iterable
from collections.abc import Sequence
from typing import Any

from geoformat_lib.constants import BASEL_LANDSCHAFT_NULL
from geoformat_lib.constants import CADWORK_HEADER_LINES
from geoformat_lib.constants import CADWORK_ZERO_HEIGHT
from geoformat_lib.delimited.models import PointFile
from geoformat_lib.delimited.models import PointRecord
from geoformat_lib.enums import Separator
from geoformat_lib.enums import Severity
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def read_csv_rows(
    lines: Iterable[str],
    separator: Separator | str = Separator.SEMICOLON,
) -> list[list[str]]:
    """Tokenize CSV lines into rows.

    Args:
        lines: Raw CSV lines
        separator: Column separator

    Returns:
        List of rows; rows without any non-blank cell are skipped
    """
    delimiter = Separator(separator).value
    return [
        [cell.strip() for cell in row]
        for row in csv.reader(lines, delimiter=delimiter)
        if any(cell.strip() for cell in row)
    ]


class _PointParser:
    """Shared error bookkeeping of the point file parsers.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    def __init__(self) -> None:
        self.errors: list[ParseError] = []
        self._source: str = "<string>"

    def _add_error(self, message: str, text: str = "", line: int = 0) -> None:
        """Add an error to the error list."""
        self.errors.append(
            ParseError(
                severity=Severity.ERROR,
                message=message,
                location=SourceLocation(
                    source=self._source,
                    line=line,
                    column=0,
                    text=text,
                ),
            )
        )


class CadworkParser(_PointParser):
    """Parser for cadwork node.dat files.

    Columns after the three header lines: node id, easting, northing,
    height, code, point number.
    """

    def parse_lines_to_dict(
        self,
        lines: Sequence[str],
        source: str = "<string>",
        use_zero_heights: bool = False,
    ) -> dict[str, Any]:
        """Parse a node.dat file to dictionary.

        Args:
            lines: Raw lines including the header lines
            source: Source identifier for error messages
            use_zero_heights: Keep heights written as ``0.000000``

        Returns:
            Dictionary with "points" key containing list of point dicts
        """
        self._source = source
        columns: list[str] = []
        points = []
        for line_number, line in enumerate(lines):
            if line_number == CADWORK_HEADER_LINES - 1:
                columns = _WHITESPACE.split(line.strip())
            if line_number < CADWORK_HEADER_LINES or not line.strip():
                continue

            values = _WHITESPACE.split(line.strip())
            if len(values) < 6:
                self._add_error(
                    f"cadwork line has {len(values)} columns, 6 expected",
                    text=line,
                    line=line_number,
                )
                continue

            height: str | None = values[3]
            if height == CADWORK_ZERO_HEIGHT and not use_zero_heights:
                height = None

            points.append(
                {
                    "number": values[5],
                    "code": values[4],
                    "easting": values[1],
                    "northing": values[2],
                    "height": height,
                    "line_number": line_number,
                }
            )
        return {"columns": columns, "points": points}

    def parse_lines(
        self,
        lines: Sequence[str],
        source: str = "<string>",
        use_zero_heights: bool = False,
    ) -> list[PointRecord]:
        """Parse a node.dat file."""
        data = self.parse_lines_to_dict(lines, source, use_zero_heights)
        return PointFile.model_validate(data).points


class BaselStadtParser(_PointParser):
    """Parser for Basel Stadt geodata CSV rows.

    Columns: point number (blanks removed), type, easting, northing,
    height (optional).
    """

    def parse_rows_to_dict(
        self,
        rows: Sequence[Sequence[str]],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse tokenized rows to dictionary (first row is the header)."""
        self._source = source
        points = []
        for line_number, row in enumerate(rows[1:], start=1):
            if len(row) < 4:
                self._add_error(
                    f"Basel Stadt row has {len(row)} columns, at least 4 expected",
                    text=";".join(row),
                    line=line_number,
                )
                continue

            height = row[4].strip() if len(row) > 4 else ""
            points.append(
                {
                    "number": _WHITESPACE.sub("", row[0]),
                    "easting": row[2].strip(),
                    "northing": row[3].strip(),
                    "height": height or None,
                    "line_number": line_number,
                }
            )
        return {"points": points}

    def parse_rows(
        self,
        rows: Sequence[Sequence[str]],
        source: str = "<string>",
    ) -> list[PointRecord]:
        """Parse tokenized Basel Stadt rows."""
        return PointFile.model_validate(self.parse_rows_to_dict(rows, source)).points


class BaselLandschaftParser(_PointParser):
    """Parser for Basel Landschaft geodata TXT files.

    HFP files have 5 columns (id, number, easting, northing, height); LFP
    files have 6 columns (id, number, type, easting, northing, height) where
    the height may be ``NULL``. The type of LFP points is used as code.
    """

    def parse_lines_to_dict(
        self,
        lines: Sequence[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse a Basel Landschaft file to dictionary (first line is the header)."""
        self._source = source
        points = []
        for line_number, line in enumerate(lines):
            if line_number == 0 or not line.strip():
                continue

            values = line.strip().split("\t")
            match len(values):
                case 5:
                    point = {
                        "number": values[1],
                        "easting": values[2],
                        "northing": values[3],
                        "height": values[4],
                    }
                case 6:
                    point = {
                        "number": values[1],
                        "code": values[2],
                        "easting": values[3],
                        "northing": values[4],
                        "height": (
                            None if values[5] == BASEL_LANDSCHAFT_NULL else values[5]
                        ),
                    }
                case _:
                    self._add_error(
                        f"Basel Landschaft line has {len(values)} columns, "
                        "5 or 6 expected",
                        text=line,
                        line=line_number,
                    )
                    continue

            point["line_number"] = line_number
            points.append(point)
        return {"points": points}

    def parse_lines(
        self,
        lines: Sequence[str],
        source: str = "<string>",
    ) -> list[PointRecord]:
        """Parse a Basel Landschaft file."""
        return PointFile.model_validate(self.parse_lines_to_dict(lines, source)).points
