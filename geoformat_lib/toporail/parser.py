# -*- coding: utf-8 -*-
"""Parser for Toporail MEP and PTS files.

The first non-blank line is the header (``@MEP...`` or ``@PTS...``). PTS
rows carry the ten Toporail columns in order. MEP files mix four record
types, told apart by their first column:

    K <code> <from point> <code> <to point> <distance> <height diff> <comment>
    M <code> <point> <slope dist> <hz> <v> <target h> <long.> <lat.> <comment> ...
    P <code> <point number> <usage> <easting> <northing> <height> <comment>
    S <code> <point number> <type> <instrument h> <temp.> <pressure> <comment>

Each MEP record is mapped to GSI word indices column by column.
"""

import logging
from collections.abc import Iterable
from collections.abc import Sequence
from typing import Any

from geoformat_lib.constants import TOPORAIL_MEP_CONTROL_RECORD
from geoformat_lib.constants import TOPORAIL_MEP_MEASUREMENT_RECORD
from geoformat_lib.constants import TOPORAIL_MEP_POINT_RECORD
from geoformat_lib.constants import TOPORAIL_MEP_STATION_RECORD
from geoformat_lib.constants import TOPORAIL_SEPARATOR
from geoformat_lib.enums import Severity
from geoformat_lib.enums import ToporailFormat
from geoformat_lib.enums import ToporailSlot
from geoformat_lib.errors import FormatError
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation
from geoformat_lib.toporail.models import MepRecord
from geoformat_lib.toporail.models import ToporailFile

logger = logging.getLogger(__name__)

#: Column of the point number in every MEP record
MEP_POINT_NUMBER_COLUMN = 2

#: Column of the height difference in a control measurement record
MEP_HEIGHT_DIFFERENCE_COLUMN = 6

#: Word index per column, by MEP record type
MEP_RECORD_COLUMNS: dict[str, dict[int, int]] = {
    # distance: slope (31), horizontal (32) when a height difference is given
    TOPORAIL_MEP_CONTROL_RECORD: {
        1: 41,
        2: 71,
        3: 42,
        4: 72,
        5: 31,
        6: 33,
        7: 72,
    },
    TOPORAIL_MEP_MEASUREMENT_RECORD: {
        1: 41,
        2: 11,
        3: 31,
        4: 21,
        5: 22,
        6: 87,
        7: 71,
        8: 72,
        9: 72,
        10: 73,
        11: 74,
    },
    TOPORAIL_MEP_POINT_RECORD: {
        1: 41,
        2: 11,
        3: 71,
        4: 81,
        5: 82,
        6: 83,
        7: 72,
    },
    TOPORAIL_MEP_STATION_RECORD: {
        1: 41,
        2: 11,
        3: 71,
        4: 88,
        5: 72,
        6: 73,
        7: 74,
    },
}


class ToporailParser:
    """Parser for Toporail files.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    def __init__(self) -> None:
        self.errors: list[ParseError] = []
        self._source: str = "<string>"

    def _add_warning(self, message: str, text: str = "", line: int = 0) -> None:
        """Add a warning to the error list."""
        self.errors.append(
            ParseError(
                severity=Severity.WARNING,
                message=message,
                location=SourceLocation(
                    source=self._source,
                    line=line,
                    column=0,
                    text=text,
                ),
            )
        )

    def _parse_mep_record(
        self,
        values: Sequence[str],
        text: str,
        line_number: int,
    ) -> dict[str, Any] | None:
        record_type = values[0]
        columns = MEP_RECORD_COLUMNS.get(record_type)
        if columns is None:
            self._add_warning(
                f"Unknown MEP record type `{record_type}`",
                text=text,
                line=line_number,
            )
            return None

        if len(values) == 1:
            logger.debug("Skipping empty MEP record `%s`", record_type)
            return None

        has_height_difference = (
            len(values) > MEP_HEIGHT_DIFFERENCE_COLUMN
            and bool(values[MEP_HEIGHT_DIFFERENCE_COLUMN])
        )
        pairs: list[tuple[int, str]] = []
        for index, word_index in columns.items():
            if index == MEP_POINT_NUMBER_COLUMN or index >= len(values):
                continue
            if (
                record_type == TOPORAIL_MEP_CONTROL_RECORD
                and word_index == 31
                and has_height_difference
            ):
                word_index = 32
            pairs.append((word_index, values[index]))

        return {
            "record_type": record_type,
            "point_number": (
                values[MEP_POINT_NUMBER_COLUMN]
                if len(values) > MEP_POINT_NUMBER_COLUMN
                else ""
            ),
            "point_word_index": columns[MEP_POINT_NUMBER_COLUMN],
            "values": pairs,
        }

    def parse_lines_to_dict(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse a Toporail file to dictionary.

        Args:
            lines: Raw lines, header first
            source: Source identifier for error messages

        Returns:
            Dictionary with "format", "rows" (PTS) and "records" (MEP) keys

        Raises:
            FormatError: If the file does not start with a MEP or PTS header
        """
        self._source = source
        fmt: ToporailFormat | None = None
        rows: list[dict[str, str]] = []
        records: list[dict[str, Any]] = []

        for line_number, line in enumerate(lines):
            if not line.strip():
                continue

            if fmt is None:
                fmt = ToporailFormat.from_header(line.strip())
                if fmt is None:
                    raise FormatError(
                        "Missing Toporail header (`@MEP` or `@PTS`)",
                        location=SourceLocation(
                            source=source, line=line_number, column=0, text=line
                        ),
                    )
                continue

            values = [
                value.strip()
                for value in line.rstrip("\r\n").split(TOPORAIL_SEPARATOR)
            ]
            match fmt:
                case ToporailFormat.PTS:
                    if len(values) > len(ToporailSlot):
                        self._add_warning(
                            f"Ignoring {len(values) - len(ToporailSlot)} extra columns",
                            text=line,
                            line=line_number,
                        )
                    rows.append(
                        {
                            slot.value: value
                            for slot, value in zip(ToporailSlot, values, strict=False)
                        }
                    )
                case ToporailFormat.MEP:
                    record = self._parse_mep_record(values, line, line_number)
                    if record is not None:
                        records.append(record)

        if fmt is None:
            raise FormatError("Empty Toporail file")

        return {"format": fmt, "rows": rows, "records": records}

    def parse_lines(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> ToporailFile:
        """Parse a Toporail file.

        Raises:
            FormatError: If the file does not start with a MEP or PTS header
        """
        return ToporailFile.model_validate(self.parse_lines_to_dict(lines, source))
