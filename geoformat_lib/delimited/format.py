# -*- coding: utf-8 -*-
"""Formatting of point data as delimited (CSV) lines.

Every writer returns a list of lines joined with the chosen separator. The
optional comment line holds the column names.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Sequence

from geoformat_lib.caplan.models import CaplanPoint
from geoformat_lib.constants import MISSING_HEIGHT
from geoformat_lib.delimited.models import PointRecord
from geoformat_lib.enums import Separator
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.models import collect_word_indices
from geoformat_lib.gsi.word_index import word_index_name
from geoformat_lib.zeiss.models import ZeissLine


def _join(cells: Iterable[str], separator: Separator | str) -> str:
    return Separator(separator).value.join(cells)


def gsi_to_csv(
    lines: Sequence[GsiLine],
    separator: Separator | str = Separator.SEMICOLON,
    write_comment_line: bool = False,
) -> list[str]:
    """Convert decoded GSI lines to CSV lines.

    The columns are the sorted set of all word indices found in ``lines``;
    a line without a given word index gets an empty cell.

    Args:
        lines: Decoded GSI lines
        separator: Column separator
        write_comment_line: Start with a line of word index names

    Returns:
        CSV lines
    """
    word_indices = collect_word_indices(lines)
    result: list[str] = []
    if write_comment_line:
        result.append(_join((word_index_name(wi) for wi in word_indices), separator))

    for line in lines:
        cells = []
        for word_index in word_indices:
            block = line.get(word_index)
            cells.append(block.display_value if block is not None else "")
        result.append(_join(cells, separator))
    return result


def caplan_to_csv(
    points: Iterable[CaplanPoint],
    separator: Separator | str = Separator.SEMICOLON,
    simple_format: bool = False,
    write_comment_line: bool = False,
    use_code_column: bool = False,
) -> list[str]:
    """Convert Caplan K points to CSV lines.

    Row layout is ``number[, code], easting, northing[, height][, attributes]``;
    code and attributes are written only when ``use_code_column`` is set and
    ``simple_format`` is not. Missing coordinates are left out of the row.
    """
    with_code = use_code_column and not simple_format
    result: list[str] = []
    if write_comment_line:
        if with_code:
            header = ["nr", "code", "x", "y", "z", "attribute"]
        else:
            header = ["nr", "x", "y", "z"]
        result.append(_join(header, separator))

    for point in points:
        cells = [point.number]
        if with_code:
            cells.append(point.code or "")
        cells.extend(
            value
            for value in (point.easting, point.northing, point.height)
            if value is not None
        )
        if with_code:
            cells.extend(point.attributes)
        result.append(_join(cells, separator))
    return result


def points_to_csv(
    points: Iterable[PointRecord],
    separator: Separator | str = Separator.SEMICOLON,
    use_code_column: bool = False,
    header: Sequence[str] | None = None,
    missing_height: str | None = None,
) -> list[str]:
    """Convert cadwork or Basel points to CSV lines.

    Args:
        points: Points read by one of the delimited parsers
        separator: Column separator
        use_code_column: Write the code after the point number
        header: Column names of the comment line (no comment line if None)
        missing_height: Written for points without height (omitted if None)

    Returns:
        CSV lines
    """
    result = [_join(header, separator)] if header else []
    for point in points:
        row = point.to_row(use_code_column)
        if point.height is None and missing_height is not None:
            row.append(missing_height)
        result.append(_join(row, separator))
    return result


def cadwork_to_csv(
    points: Iterable[PointRecord],
    separator: Separator | str = Separator.SEMICOLON,
    use_code_column: bool = False,
    columns: Sequence[str] | None = None,
) -> list[str]:
    """Convert cadwork points to CSV lines.

    ``columns`` are the names of the node.dat header line (node id, easting,
    northing, height, code, number); when given a comment line with the
    names in output order is written first.
    """
    header = None
    if columns is not None and len(columns) >= 6:
        header = [columns[5]]
        if use_code_column:
            header.append(columns[4])
        header.extend(columns[1:4])
    return points_to_csv(points, separator, use_code_column, header=header)


def basel_stadt_to_csv(
    points: Iterable[PointRecord],
    separator: Separator | str = Separator.SEMICOLON,
) -> list[str]:
    return points_to_csv(points, separator)


def basel_landschaft_to_csv(
    points: Iterable[PointRecord],
    separator: Separator | str = Separator.SEMICOLON,
    use_code_column: bool = False,
) -> list[str]:
    """Convert Basel Landschaft points to CSV lines.

    LFP points with a ``NULL`` height get ``-9999`` as height.
    """
    return points_to_csv(
        points, separator, use_code_column, missing_height=MISSING_HEIGHT
    )


def zeiss_to_csv(
    lines: Iterable[ZeissLine],
    separator: Separator | str = Separator.SEMICOLON,
) -> list[str]:
    """Convert decoded REC lines to CSV lines (point number then block values)."""
    return [
        _join([line.point_number, *(block.value for block in line.blocks)], separator)
        for line in lines
    ]
