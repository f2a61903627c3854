# -*- coding: utf-8 -*-
"""Parser for Caplan K coordinate files.

Comment lines (starting with ``!``) and blank lines are skipped. Point lines
with a forbidden character in the point number, or without a valid valency
and without a code, are recorded in ``errors`` and skipped.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from geoformat_lib.caplan.models import CaplanFile
from geoformat_lib.caplan.models import CaplanPoint
from geoformat_lib.constants import CAPLAN_CODE_COLUMN
from geoformat_lib.constants import CAPLAN_COMMENT_PREFIX
from geoformat_lib.constants import CAPLAN_EASTING_WIDTH
from geoformat_lib.constants import CAPLAN_HEIGHT_WIDTH
from geoformat_lib.constants import CAPLAN_NORTHING_WIDTH
from geoformat_lib.constants import CAPLAN_NUMBER_WIDTH
from geoformat_lib.constants import CAPLAN_POINT_NUMBER_REPLACEMENTS
from geoformat_lib.constants import CAPLAN_VALENCY_WIDTH
from geoformat_lib.constants import CAPLAN_VALID_VALENCIES
from geoformat_lib.enums import Severity
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation

logger = logging.getLogger(__name__)

_EASTING_START = CAPLAN_NUMBER_WIDTH + CAPLAN_VALENCY_WIDTH
_NORTHING_START = _EASTING_START + CAPLAN_EASTING_WIDTH
_HEIGHT_START = _NORTHING_START + CAPLAN_NORTHING_WIDTH
_HEIGHT_END = _HEIGHT_START + CAPLAN_HEIGHT_WIDTH


class CaplanParser:
    """Parser for Caplan K files.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    ATTRIBUTE_SEPARATOR = re.compile(r"\|+")

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

    def parse_line_to_dict(
        self,
        line: str,
        line_number: int = 0,
    ) -> dict[str, Any] | None:
        """Parse a single Caplan K line.

        Args:
            line: Raw line
            line_number: Line number (0-based) for error messages

        Returns:
            Dictionary for `CaplanPoint.model_validate()`, or None when the
            line is a comment, blank or malformed
        """
        if not line.strip() or line.startswith(CAPLAN_COMMENT_PREFIX):
            return None

        line = line.rstrip("\r\n")
        if len(line) < CAPLAN_NUMBER_WIDTH:
            self._add_error("Caplan K line is too short", text=line, line=line_number)
            return None

        number = line[:CAPLAN_NUMBER_WIDTH].strip()
        if any(char in number for char in CAPLAN_POINT_NUMBER_REPLACEMENTS):
            self._add_error(
                f"Point number `{number}` contains a forbidden character",
                text=line,
                line=line_number,
            )
            return None

        easting = line[_EASTING_START:_NORTHING_START].strip() or None
        northing = line[_NORTHING_START:_HEIGHT_START].strip() or None
        height = line[_HEIGHT_START:_HEIGHT_END].strip() or None

        code = None
        attributes: list[str] = []
        if len(line) > CAPLAN_CODE_COLUMN:
            parts = self.ATTRIBUTE_SEPARATOR.split(line[CAPLAN_CODE_COLUMN:].strip())
            code = parts[0].strip() or None
            attributes = [part.strip() for part in parts[1:] if part.strip()]

        valency = (
            (1 if easting else 0) + (2 if northing else 0) + (4 if height else 0)
        )
        if valency not in CAPLAN_VALID_VALENCIES:
            stated = line[_EASTING_START - 1 : _EASTING_START].strip()
            if code is None:
                self._add_error(
                    f"Point `{number}` has no valid valency",
                    text=line,
                    line=line_number,
                )
                return None
            valency = int(stated) if stated.isascii() and stated.isdigit() else None

        return {
            "number": number,
            "valency": valency,
            "easting": easting,
            "northing": northing,
            "height": height,
            "code": code,
            "attributes": attributes,
            "line_number": line_number,
        }

    def parse_lines_to_dict(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse all lines of a Caplan K file to dictionary.

        Returns:
            Dictionary with "points" key containing list of point dicts
        """
        self._source = source
        points = []
        for line_number, line in enumerate(lines):
            point = self.parse_line_to_dict(line, line_number)
            if point is not None:
                points.append(point)
        logger.debug("Parsed %d Caplan K points from `%s`", len(points), source)
        return {"points": points}

    def parse_lines(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> list[CaplanPoint]:
        """Parse all lines of a Caplan K file."""
        return CaplanFile.model_validate(self.parse_lines_to_dict(lines, source)).points
