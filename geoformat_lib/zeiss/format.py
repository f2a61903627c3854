# -*- coding: utf-8 -*-
"""Formatting of GSI data as Zeiss REC M5 lines."""

from __future__ import annotations

from collections.abc import Iterable

from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.word_index import WI_EASTING
from geoformat_lib.gsi.word_index import WI_HEIGHT
from geoformat_lib.gsi.word_index import WI_NORTHING
from geoformat_lib.gsi.word_index import WI_POINT_NUMBER
from geoformat_lib.validation import fill_decimal_places

_M5_BLANK_BLOCK = "|" + " " * 22


def _m5_block(type_identifier: str, value: str | None, unit: str = "m") -> str:
    if value is None:
        return _M5_BLANK_BLOCK
    return f"|{type_identifier:<2} {fill_decimal_places(value, 3):<14} {unit:<4}"


def format_m5_line(
    address: int,
    point_number: str,
    easting: str | None = None,
    northing: str | None = None,
    height: str | None = None,
) -> str:
    """Format one REC M5 coordinate line.

    Args:
        address: Line address (1 to 99999)
        point_number: Point number (PI1)
        easting: Y value
        northing: X value
        height: Z value

    Returns:
        REC M5 line
    """
    return (
        f"For M5|Adr {address:5d}|PI1 {point_number:<27}"
        f"{_m5_block('Y', easting)}"
        f"{_m5_block('X', northing)}"
        f"{_m5_block('Z', height)}| "
    )


def gsi_to_zeiss_m5(lines: Iterable[GsiLine]) -> list[str]:
    """Convert decoded GSI lines to REC M5 coordinate lines.

    Lines without any coordinate are skipped.
    """
    result: list[str] = []
    for line in lines:
        values = {}
        for word_index in (WI_POINT_NUMBER, WI_EASTING, WI_NORTHING, WI_HEIGHT):
            block = line.get(word_index)
            values[word_index] = block.display_value if block is not None else None

        if all(values[wi] is None for wi in (WI_EASTING, WI_NORTHING, WI_HEIGHT)):
            continue

        result.append(
            format_m5_line(
                len(result) + 1,
                values[WI_POINT_NUMBER] or "",
                easting=values[WI_EASTING],
                northing=values[WI_NORTHING],
                height=values[WI_HEIGHT],
            )
        )
    return result
