# -*- coding: utf-8 -*-
"""Formatting of GSI data as Toporail MEP/PTS rows.

Each GSI line fills up to ten named slots according to the word index
lookup table. A row is written only if at least one slot is set. MEP and
PTS output share the same extraction; they differ by their header tag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from geoformat_lib.constants import DATE_CENTURY
from geoformat_lib.enums import ToporailFormat
from geoformat_lib.enums import ToporailSlot
from geoformat_lib.gsi.models import GsiBlock
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.word_index import WI_DATE_MONTH_DAY
from geoformat_lib.gsi.word_index import WI_DATE_YEAR
from geoformat_lib.gsi.word_index import toporail_slot
from geoformat_lib.toporail.models import ToporailRow

logger = logging.getLogger(__name__)


def reconstruct_date(year: GsiBlock | None, month_day: GsiBlock | None) -> str:
    """Combine the date parts of word indices 18 and 19.

    Word index 18 holds ``YYsssss`` (two digit year in front) and word
    index 19 holds ``MMDDhhmm``. With both parts present the result is
    ``YYYYMMDD``; with a single part its display value is returned.

    Args:
        year: Block with word index 18 (optional)
        month_day: Block with word index 19 (optional)

    Returns:
        Date string, empty if both parts are missing
    """
    if year is not None and month_day is not None:
        yy = year.data.rjust(8, "0")[-8:][:2]
        mmdd = month_day.data.rjust(8, "0")[-8:][:4]
        return f"{DATE_CENTURY}{yy}{mmdd}"
    if year is not None:
        return year.display_value
    if month_day is not None:
        return month_day.display_value
    return ""


def gsi_line_to_row(line: GsiLine) -> ToporailRow:
    """Fill the Toporail slots of one (word index sorted) GSI line."""
    slots: dict[str, str] = {}
    for block in line.blocks:
        slot = toporail_slot(block.word_index)
        if slot is None or slot is ToporailSlot.DATE:
            continue
        slots[slot.value] = block.display_value

    date = reconstruct_date(line.get(WI_DATE_YEAR), line.get(WI_DATE_MONTH_DAY))
    if date:
        slots[ToporailSlot.DATE.value] = date

    return ToporailRow.model_validate(slots)


def gsi_to_toporail_rows(lines: Iterable[GsiLine]) -> list[ToporailRow]:
    """Convert GSI lines to Toporail rows, dropping structurally empty lines."""
    rows = []
    for line in lines:
        row = gsi_line_to_row(line.sorted())
        if row.is_empty:
            logger.debug("Line %d has no Toporail column, dropped", line.line_number)
            continue
        rows.append(row)
    return rows


def format_toporail(
    rows: Iterable[ToporailRow],
    fmt: ToporailFormat,
    header: bool = False,
) -> list[str]:
    """Serialize Toporail rows.

    Args:
        rows: Rows to write
        fmt: MEP or PTS
        header: Write the header tag as first line

    Returns:
        Tab separated lines
    """
    result = [fmt.header_tag] if header else []
    result.extend(row.to_line() for row in rows)
    return result


def gsi_to_toporail(
    lines: Iterable[GsiLine],
    fmt: ToporailFormat = ToporailFormat.PTS,
    header: bool = False,
) -> list[str]:
    """Convert decoded GSI lines to Toporail MEP or PTS lines."""
    return format_toporail(gsi_to_toporail_rows(lines), fmt, header=header)
