# -*- coding: utf-8 -*-
"""Validation and normalization utilities for point data.

This module provides helpers shared by the writers: point number checks for
Caplan K and number formatting with a fixed count of decimal places.
"""

import re
from decimal import Decimal
from decimal import InvalidOperation
from re import Pattern

from geoformat_lib.constants import CAPLAN_NUMBER_WIDTH
from geoformat_lib.constants import CAPLAN_POINT_NUMBER_REPLACEMENTS

# Point numbers: printable characters without the Caplan K separators
POINT_NUMBER_PATTERN: Pattern[str] = re.compile(r"^[^\s*,;]+$")


def is_valid_point_number(number: str) -> bool:
    """Check if a point number can be written to a Caplan K file.

    Args:
        number: Point number to validate

    Returns:
        True if the number is non-empty, has no blanks and none of ``*``,
        ``,`` or ``;``
    """
    if not number:
        return False
    return bool(POINT_NUMBER_PATTERN.match(number))


def clean_point_number(number: str) -> str:
    """Replace forbidden characters and right align to the number column.

    ``*`` becomes ``#``, ``,`` becomes ``.`` and ``;`` becomes ``:``.
    """
    for char, replacement in CAPLAN_POINT_NUMBER_REPLACEMENTS.items():
        number = number.replace(char, replacement)
    return number.rjust(CAPLAN_NUMBER_WIDTH)


def is_numeric(value: str) -> bool:
    try:
        return Decimal(value.strip()).is_finite()
    except InvalidOperation:
        return False


def fill_decimal_places(value: str, places: int) -> str:
    """Pad a number string with trailing zeros to a count of decimals.

    Values with more decimals, and values that are not numbers, are
    returned unchanged.

    Args:
        value: Number as string (``"12.3"``)
        places: Minimum count of decimal places

    Returns:
        Padded number string (``"12.3000"`` for 4 places)
    """
    value = value.strip()
    if not is_numeric(value):
        return value
    integer, _, decimals = value.partition(".")
    if len(decimals) >= places:
        return value
    return f"{integer}.{decimals.ljust(places, '0')}"
