# -*- coding: utf-8 -*-
"""Formatting (serialization) of Leica GSI lines.

This module turns GSI models back into GSI8/GSI16 text and builds GSI
lines from the other supported formats. Built lines are numbered from 1;
the line number is stored in the information field of the point number
block (word index 11).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Sequence

from geoformat_lib.caplan.models import CaplanPoint
from geoformat_lib.constants import GSI16_LINE_PREFIX
from geoformat_lib.constants import MISSING_HEIGHT
from geoformat_lib.delimited.models import PointRecord
from geoformat_lib.enums import WidthMode
from geoformat_lib.errors import FormatError
from geoformat_lib.gsi.models import GsiBlock
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.models import sort_by_word_index
from geoformat_lib.gsi.parser import GsiParser
from geoformat_lib.gsi.word_index import WI_CODE
from geoformat_lib.gsi.word_index import WI_DATE_MONTH_DAY
from geoformat_lib.gsi.word_index import WI_DATE_YEAR
from geoformat_lib.gsi.word_index import WI_EASTING
from geoformat_lib.gsi.word_index import WI_HEIGHT
from geoformat_lib.gsi.word_index import WI_NORTHING
from geoformat_lib.gsi.word_index import WI_POINT_NUMBER
from geoformat_lib.toporail.models import MepRecord
from geoformat_lib.toporail.models import ToporailRow
from geoformat_lib.zeiss.models import ZeissLine

logger = logging.getLogger(__name__)

#: Word indices of the Caplan K attributes (comment blocks)
_ATTRIBUTE_WORD_INDICES = (72, 73, 74, 75, 76, 77, 78, 79)

#: Word index per Toporail column (the date is split into 18 and 19)
_TOPORAIL_WORD_INDICES: dict[str, int] = {
    "code": WI_CODE,
    "easting": WI_EASTING,
    "northing": WI_NORTHING,
    "height": WI_HEIGHT,
    "author": 71,
    "comment": 72,
    "overhauling": 73,
    "azimuth": 21,
}


# -----------------------------------------------------------------------------
# Serialization
# -----------------------------------------------------------------------------


def format_gsi_line(blocks: Iterable[GsiBlock], width_mode: WidthMode) -> str:
    """Format blocks as one GSI line.

    Every token is followed by a blank; GSI16 lines start with ``*``.
    """
    prefix = GSI16_LINE_PREFIX if width_mode is WidthMode.GSI16 else ""
    return prefix + "".join(f"{block.to_token(width_mode)} " for block in blocks)


def format_gsi_lines(lines: Iterable[GsiLine], width_mode: WidthMode) -> list[str]:
    return [format_gsi_line(line.blocks, width_mode) for line in lines]


def convert_gsi_width(
    lines: Iterable[str],
    width_mode: WidthMode,
    parser: GsiParser | None = None,
) -> list[str]:
    """Rewrite GSI lines in another width (GSI8 <-> GSI16).

    Args:
        lines: Raw GSI lines
        width_mode: Target width
        parser: Parser collecting decoding errors (optional)

    Returns:
        Formatted GSI lines
    """
    parser = parser or GsiParser()
    return format_gsi_lines(parser.decode_lines(lines), width_mode)


# -----------------------------------------------------------------------------
# Building GSI lines from other formats
# -----------------------------------------------------------------------------


def _build_line(
    line_number: int,
    point_number: str,
    values: Iterable[tuple[int, str | None]],
    width_mode: WidthMode,
    point_word_index: int = WI_POINT_NUMBER,
) -> GsiLine:
    blocks = [
        GsiBlock.point_number(
            point_number, line_number, width_mode, word_index=point_word_index
        )
    ]
    seen = {blocks[0].word_index}
    for word_index, value in values:
        if value is None or not value.strip() or word_index in seen:
            continue
        try:
            blocks.append(GsiBlock.from_value(word_index, value, width_mode))
        except FormatError as e:
            logger.warning("Point `%s`: %s", point_number, e)
            continue
        seen.add(word_index)
    return GsiLine(
        line_number=line_number,
        width_mode=width_mode,
        blocks=sort_by_word_index(blocks),
    )


def rows_to_gsi_lines(
    rows: Iterable[Sequence[str]],
    width_mode: WidthMode = WidthMode.GSI8,
    has_code_column: bool = False,
) -> list[GsiLine]:
    """Build GSI lines from token rows (CSV or blank separated text).

    Supported row layouts:

    - ``number height``
    - ``number code height`` (with code column) or ``number easting northing``
    - ``number easting northing height`` (height ``-9999`` means none)
    - ``number code easting northing height``

    Rows with another number of cells are skipped.
    """
    result: list[GsiLine] = []
    for row in rows:
        values = [cell.strip() for cell in row]
        match len(values):
            case 2:
                pairs = [(WI_HEIGHT, values[1])]
            case 3 if has_code_column:
                pairs = [(71, values[1]), (WI_HEIGHT, values[2])]
            case 3:
                pairs = [(WI_EASTING, values[1]), (WI_NORTHING, values[2])]
            case 4:
                height = None if values[3] == MISSING_HEIGHT else values[3]
                pairs = [
                    (WI_EASTING, values[1]),
                    (WI_NORTHING, values[2]),
                    (WI_HEIGHT, height),
                ]
            case 5:
                pairs = [
                    (71, values[1]),
                    (WI_EASTING, values[2]),
                    (WI_NORTHING, values[3]),
                    (WI_HEIGHT, values[4]),
                ]
            case _:
                logger.debug("Row with %d cells skipped", len(values))
                continue

        result.append(_build_line(len(result) + 1, values[0], pairs, width_mode))
    return result


def points_to_gsi_lines(
    points: Iterable[PointRecord],
    width_mode: WidthMode = WidthMode.GSI8,
    use_code_column: bool = False,
) -> list[GsiLine]:
    """Build GSI lines from cadwork or Basel points."""
    result: list[GsiLine] = []
    for point in points:
        pairs = [
            (71, point.code if use_code_column else None),
            (WI_EASTING, point.easting),
            (WI_NORTHING, point.northing),
            (WI_HEIGHT, point.height),
        ]
        result.append(_build_line(len(result) + 1, point.number, pairs, width_mode))
    return result


def caplan_to_gsi_lines(
    points: Iterable[CaplanPoint],
    width_mode: WidthMode = WidthMode.GSI8,
    use_code_column: bool = True,
) -> list[GsiLine]:
    """Build GSI lines from Caplan K points.

    The object type becomes the comment block 71, attributes fill the
    comment blocks 72 to 79.
    """
    result: list[GsiLine] = []
    for point in points:
        pairs: list[tuple[int, str | None]] = [
            (WI_EASTING, point.easting),
            (WI_NORTHING, point.northing),
            (WI_HEIGHT, point.height),
        ]
        if use_code_column:
            pairs.append((71, point.code))
            pairs.extend(zip(_ATTRIBUTE_WORD_INDICES, point.attributes, strict=False))
        result.append(_build_line(len(result) + 1, point.number, pairs, width_mode))
    return result


def zeiss_to_gsi_lines(
    lines: Iterable[ZeissLine],
    width_mode: WidthMode = WidthMode.GSI8,
) -> list[GsiLine]:
    """Build GSI lines from decoded REC lines.

    Consecutive REC lines with the same point number are merged into one
    GSI line. Type identifiers without a word index are skipped.
    """
    grouped: list[tuple[str, list[tuple[int, str | None]]]] = []
    for line in lines:
        if not grouped or grouped[-1][0] != line.point_number:
            grouped.append((line.point_number, []))
        for block in line.blocks:
            if block.word_index is None:
                logger.debug("REC type `%s` skipped", block.type_identifier)
                continue
            grouped[-1][1].append((block.word_index, block.value))

    return [
        _build_line(index, point_number, pairs, width_mode)
        for index, (point_number, pairs) in enumerate(grouped, start=1)
    ]


def toporail_to_gsi_lines(
    entries: Iterable[ToporailRow | MepRecord],
    width_mode: WidthMode = WidthMode.GSI8,
) -> list[GsiLine]:
    """Build GSI lines from Toporail PTS rows or MEP records.

    A ``YYYYMMDD`` date is split into word index 18 (``YY000000``) and 19
    (``MMDD0000``). MEP records already carry their word indices.
    """
    result: list[GsiLine] = []
    for entry in entries:
        line_number = len(result) + 1
        match entry:
            case MepRecord():
                result.append(
                    _build_line(
                        line_number,
                        entry.point_number,
                        entry.values,
                        width_mode,
                        point_word_index=entry.point_word_index,
                    )
                )

            case ToporailRow():
                pairs: list[tuple[int, str | None]] = [
                    (word_index, getattr(entry, column))
                    for column, word_index in _TOPORAIL_WORD_INDICES.items()
                ]
                date = entry.date
                if len(date) == 8 and date.isascii() and date.isdigit():
                    pairs.append((WI_DATE_YEAR, f"{date[2:4]}000000"))
                    pairs.append((WI_DATE_MONTH_DAY, f"{date[4:8]}0000"))
                elif date:
                    logger.warning(
                        "Point `%s`: unreadable date `%s`", entry.point_number, date
                    )
                result.append(
                    _build_line(line_number, entry.point_number, pairs, width_mode)
                )
    return result
