# -*- coding: utf-8 -*-
"""Formatting of GSI data as Caplan K files.

Column layout of a written point line (0-based):

- 0 to 15: point number, right aligned
- 16 to 17: valency (blank and digit)
- 18 to 31: easting, 32 to 45: northing (4 decimals)
- 46 to 58: height (5 decimals)
- 59: blank, 60 onward: ``|code|attribute|...``
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from geoformat_lib.constants import CAPLAN_EASTING_WIDTH
from geoformat_lib.constants import CAPLAN_HEIGHT_WIDTH
from geoformat_lib.constants import CAPLAN_NORTHING_WIDTH
from geoformat_lib.constants import CAPLAN_RULER_LINE
from geoformat_lib.constants import CAPLAN_SEPARATOR_LINE
from geoformat_lib.constants import CAPLAN_VALENCY_WIDTH
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.validation import clean_point_number
from geoformat_lib.validation import fill_decimal_places
from geoformat_lib.validation import is_valid_point_number

logger = logging.getLogger(__name__)

_EASTING_INDICES = (81, 84)
_NORTHING_INDICES = (82, 85)
_HEIGHT_INDICES = (83, 86)
_ATTRIBUTE_INDICES = range(71, 80)


def _first_value(line: GsiLine, indices: Iterable[int]) -> str | None:
    for word_index in indices:
        block = line.get(word_index)
        if block is not None:
            return block.display_value
    return None


def comment_header(title: str) -> list[str]:
    """Comment lines written at the top of a K file."""
    return [
        CAPLAN_RULER_LINE,
        CAPLAN_SEPARATOR_LINE,
        f"! {title}",
        CAPLAN_SEPARATOR_LINE,
    ]


def format_caplan_line(
    number: str,
    easting: str | None = None,
    northing: str | None = None,
    height: str | None = None,
    code: str | None = None,
    attributes: Iterable[str] = (),
    simple_format: bool = False,
) -> str:
    """Format one Caplan K point line.

    Args:
        number: Point number (forbidden characters are replaced)
        easting: Easting
        northing: Northing
        height: Height
        code: Object type
        attributes: Additional attributes
        simple_format: Write number, valency and coordinates only

    Returns:
        Formatted line
    """
    valency = (3 if easting or northing else 0) + (4 if height else 0)
    line = clean_point_number(number)
    if not is_valid_point_number(number):
        logger.warning(
            "Point number `%s` is not valid in Caplan K, written as `%s`",
            number,
            line.strip(),
        )
    line += f" {valency}" if valency else " " * CAPLAN_VALENCY_WIDTH
    line += fill_decimal_places(easting or "", 4).rjust(CAPLAN_EASTING_WIDTH)
    line += fill_decimal_places(northing or "", 4).rjust(CAPLAN_NORTHING_WIDTH)
    line += fill_decimal_places(height or "", 5).rjust(CAPLAN_HEIGHT_WIDTH)

    attributes = list(attributes)
    if not simple_format and (code or attributes):
        line += " " + (f"|{code}" if code else "")
        line += "".join(f"|{attribute}" for attribute in attributes)
    return line.rstrip()


def gsi_to_caplan(
    lines: Iterable[GsiLine],
    simple_format: bool = False,
    write_comment_line: bool = False,
) -> list[str]:
    """Convert decoded GSI lines to Caplan K lines.

    The point number comes from word index 11, the object type from 41,
    attributes from 71 to 79 and coordinates from 81 to 86 (station
    coordinates 84 to 86 are used as fallback).
    """
    lines = list(lines)
    result = comment_header(f"{len(lines)} points") if write_comment_line else []

    for line in lines:
        number = _first_value(line, (11,)) or ""
        code = _first_value(line, (41,))
        attributes = [
            block.display_value
            for block in line.blocks
            if block.word_index in _ATTRIBUTE_INDICES
        ]
        result.append(
            format_caplan_line(
                number,
                easting=_first_value(line, _EASTING_INDICES),
                northing=_first_value(line, _NORTHING_INDICES),
                height=_first_value(line, _HEIGHT_INDICES),
                code=code,
                attributes=attributes,
                simple_format=simple_format,
            )
        )
    return result
