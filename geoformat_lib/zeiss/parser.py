# -*- coding: utf-8 -*-
"""Parser for Zeiss REC files (R4, R5, M5 and REC500 dialects).

The dialect is detected per line from its prefix. Lines that belong to no
dialect (headers, empty lines) are skipped; lines of a known dialect with an
unreadable line number or type identifier are recorded in ``errors``.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from geoformat_lib.enums import Severity
from geoformat_lib.enums import ZeissDialect
from geoformat_lib.errors import FormatError
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation
from geoformat_lib.zeiss.models import LAYOUTS
from geoformat_lib.zeiss.models import Span
from geoformat_lib.zeiss.models import ZeissFile
from geoformat_lib.zeiss.models import ZeissLine

logger = logging.getLogger(__name__)


def _cut(line: str, span: Span) -> str:
    first, last = span
    return line[first : last + 1].strip()


class ZeissParser:
    """Parser for Zeiss REC lines.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    TYPE_IDENTIFIER = re.compile(r"^[A-Za-z][A-Za-z0-9_]?$")

    def __init__(self) -> None:
        self.errors: list[ParseError] = []
        self._source: str = "<string>"

    def decode_line_to_dict(self, line: str) -> dict[str, Any] | None:
        """Decode one REC line to dictionary.

        Args:
            line: Raw REC line

        Returns:
            Dictionary for `ZeissLine.model_validate()`, or None if the line
            belongs to no REC dialect

        Raises:
            FormatError: If the line number or a type identifier is invalid
        """
        dialect = ZeissDialect.from_line(line)
        if dialect is None:
            return None

        line = line.rstrip("\r\n")
        layout = LAYOUTS[dialect]

        line_number = None
        if layout.line_number is not None:
            raw_number = _cut(line, layout.line_number)
            if not (raw_number.isascii() and raw_number.isdigit()):
                raise FormatError(f"Invalid REC line number `{raw_number}`")
            line_number = int(raw_number)

        blocks = []
        for columns, min_length in zip(layout.blocks, layout.min_lengths, strict=True):
            if len(line) < min_length:
                break
            first = columns.type_identifier[0]
            last = (columns.unit or columns.value)[1]
            if len(line[first : last + 1].strip()) <= 1:
                continue

            type_identifier = _cut(line, columns.type_identifier)
            if not self.TYPE_IDENTIFIER.match(type_identifier):
                raise FormatError(f"Invalid REC type identifier `{type_identifier}`")

            blocks.append(
                {
                    "type_identifier": type_identifier,
                    "value": _cut(line, columns.value),
                    "unit": _cut(line, columns.unit) if columns.unit else "",
                }
            )

        return {
            "dialect": dialect,
            "line_number": line_number,
            "point_identification": _cut(line, layout.point_identification),
            "point_number": _cut(line, layout.point_number),
            "blocks": blocks,
            "error": (
                line[layout.error_start :].strip()
                if layout.error_start is not None
                else ""
            ),
        }

    def decode_lines_to_dict(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Decode all lines of a REC file to dictionary.

        Returns:
            Dictionary with "lines" key containing list of line dicts
        """
        self._source = source
        decoded = []
        for index, line in enumerate(lines):
            if not line.strip():
                continue
            try:
                entry = self.decode_line_to_dict(line)
            except FormatError as e:
                self.errors.append(
                    ParseError(
                        severity=Severity.ERROR,
                        message=e.message,
                        location=SourceLocation(
                            source=source, line=index, column=0, text=line
                        ),
                    )
                )
                continue
            if entry is None:
                logger.debug("Skipping non REC line %d of `%s`", index, source)
                continue
            decoded.append(entry)
        return {"lines": decoded}

    def decode_lines(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> list[ZeissLine]:
        """Decode all lines of a REC file."""
        return ZeissFile.model_validate(self.decode_lines_to_dict(lines, source)).lines
