# -*- coding: utf-8 -*-
"""GSI data models.

This module contains Pydantic models for representing Leica GSI data:
- GsiBlock: One word indexed token (word index, information, sign, data)
- GsiLine: The blocks of one physical line, sorted by word index
- GsiFile: All decoded lines of a GSI file

A token is laid out as ``<word index:2><information:4><sign:1><data>`` where
the data part is 8 (GSI8) or 16 (GSI16) characters wide and zero padded.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP
from decimal import Decimal
from decimal import InvalidOperation

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from geoformat_lib.constants import ANGLE_DECIMAL_UNITS
from geoformat_lib.constants import COORDINATE_DECIMALS
from geoformat_lib.constants import DISTANCE_DECIMALS
from geoformat_lib.constants import GSI_COORDINATE_SCALE
from geoformat_lib.constants import GSI_INFO_COORDINATE
from geoformat_lib.constants import GSI_INFO_DEFAULT
from geoformat_lib.constants import GSI_INFO_TEXT
from geoformat_lib.enums import DisplayRule
from geoformat_lib.enums import WidthMode
from geoformat_lib.errors import FormatError
from geoformat_lib.gsi.word_index import WI_POINT_NUMBER
from geoformat_lib.gsi.word_index import WordIndexRule
from geoformat_lib.gsi.word_index import get_rule

_LEADING_ZEROS = re.compile(r"^0+(?!$)")


def trim_leading_zeros(value: str) -> str:
    """Strip GSI zero padding, keeping a single ``0`` before a decimal point."""
    trimmed = _LEADING_ZEROS.sub("", value.strip(), count=1)
    if trimmed.startswith("."):
        return "0" + trimmed
    return trimmed


def _insert_decimal_point(value: str, decimals: int) -> str:
    padded = value.rjust(decimals + 1, "0")
    return f"{padded[:-decimals]}.{padded[-decimals:]}"


class GsiBlock(BaseModel):
    """A single word indexed GSI token."""

    model_config = ConfigDict(frozen=True)

    word_index: int = Field(ge=0, le=99)
    information: str = Field(min_length=4, max_length=4)
    sign: str = "+"
    data: str
    width_mode: WidthMode = WidthMode.GSI8

    @field_validator("sign")
    @classmethod
    def validate_sign(cls, v: str) -> str:
        if v not in ("+", "-"):
            raise ValueError(f"Invalid GSI sign: `{v}`")
        return v

    @property
    def rule(self) -> WordIndexRule:
        return get_rule(self.word_index)

    @property
    def is_negative(self) -> bool:
        return self.sign == "-"

    @property
    def display_value(self) -> str:
        """Human readable value with GSI padding removed.

        Numeric fields lose their leading zeros; distances, coordinates and
        heights get their decimal point back according to the unit digit
        (last character of the information string). Unknown word indices
        have an empty display value.
        """
        data = self.data.strip()
        unit = self.information[-1]

        match self.rule.display:
            case DisplayRule.TEXT:
                return trim_leading_zeros(data)

            case DisplayRule.ANGLE:
                if unit in ANGLE_DECIMAL_UNITS:
                    return trim_leading_zeros(_insert_decimal_point(data, 5))
                return data

            case DisplayRule.RAW:
                return data

            case DisplayRule.DISTANCE:
                decimals = DISTANCE_DECIMALS.get(unit, 3)
                return self._signed(
                    trim_leading_zeros(_insert_decimal_point(data, decimals))
                )

            case DisplayRule.CONSTANT:
                return self.sign + trim_leading_zeros(_insert_decimal_point(data, 4))

            case DisplayRule.COORDINATE:
                decimals = COORDINATE_DECIMALS.get(unit)
                if decimals is None:
                    return self._signed(trim_leading_zeros(data))
                return self._signed(
                    trim_leading_zeros(_insert_decimal_point(data, decimals))
                )

            case _:
                return ""

    def _signed(self, value: str) -> str:
        return f"-{value}" if self.is_negative else value

    def to_token(self, width_mode: WidthMode | None = None) -> str:
        """Serialize the block as a GSI token.

        Args:
            width_mode: Target width (defaults to the block's own width)

        Returns:
            Token string; GSI16 data is left padded with zeros, GSI8 data
            keeps its last 8 characters
        """
        width = (width_mode or self.width_mode).data_width
        data = self.data.rjust(width, "0")
        if len(data) > width:
            data = data[-width:]
        return f"{self.word_index:02d}{self.information}{self.sign}{data}"

    @classmethod
    def from_value(
        cls,
        word_index: int,
        value: str,
        width_mode: WidthMode = WidthMode.GSI8,
    ) -> GsiBlock:
        """Build a block from a human readable value.

        Coordinates (word indices 81 to 89) are stored in 1/10 mm, rounded
        half up. A leading sign is moved to the sign field.

        Raises:
            FormatError: If a coordinate value is not numeric
        """
        value = value.strip()
        sign = "+"
        if value.startswith(("+", "-")):
            sign, value = value[0], value[1:]

        if 80 < word_index < 90:
            information = GSI_INFO_COORDINATE
            try:
                number = Decimal(value)
            except InvalidOperation as e:
                raise FormatError(
                    f"Cannot convert `{value}` to a coordinate (WI {word_index})"
                ) from e
            if not number.is_finite():
                raise FormatError(
                    f"Cannot convert `{value}` to a coordinate (WI {word_index})"
                )
            if number == 0:
                value = "0"
            else:
                scaled = (number * GSI_COORDINATE_SCALE).quantize(
                    Decimal(1), rounding=ROUND_HALF_UP
                )
                value = str(scaled)
        elif word_index == 71:
            information = GSI_INFO_TEXT
        else:
            information = GSI_INFO_DEFAULT

        return cls(
            word_index=word_index,
            information=information,
            sign=sign,
            data=value.rjust(width_mode.data_width, "0"),
            width_mode=width_mode,
        )

    @classmethod
    def point_number(
        cls,
        value: str,
        line_number: int,
        width_mode: WidthMode = WidthMode.GSI8,
        word_index: int = WI_POINT_NUMBER,
    ) -> GsiBlock:
        """Build a point number block (WI 11 by default) carrying the line number."""
        return cls(
            word_index=word_index,
            information=f"{line_number % 10000:04d}",
            sign="+",
            data=value.strip().rjust(width_mode.data_width, "0"),
            width_mode=width_mode,
        )


def sort_by_word_index(blocks: Iterable[GsiBlock]) -> list[GsiBlock]:
    """Stable sort of blocks by ascending word index."""
    return sorted(blocks, key=lambda block: block.word_index)


class GsiLine(BaseModel):
    """The blocks of one physical GSI line."""

    model_config = ConfigDict(frozen=True)

    line_number: int = 0
    width_mode: WidthMode = WidthMode.GSI8
    blocks: list[GsiBlock] = Field(default_factory=list)

    @property
    def word_indices(self) -> list[int]:
        return [block.word_index for block in self.blocks]

    def get(self, word_index: int) -> GsiBlock | None:
        """Get the first block with the given word index."""
        for block in self.blocks:
            if block.word_index == word_index:
                return block
        return None

    def sorted(self) -> GsiLine:
        """Return a copy whose blocks are sorted by word index."""
        return self.model_copy(update={"blocks": sort_by_word_index(self.blocks)})


class GsiFile(BaseModel):
    """All decoded lines of a GSI file."""

    model_config = ConfigDict(populate_by_name=True)

    lines: list[GsiLine] = Field(default_factory=list)

    @property
    def word_indices(self) -> list[int]:
        """Sorted set of all word indices found in the file."""
        return collect_word_indices(self.lines)


def collect_word_indices(lines: Iterable[GsiLine]) -> list[int]:
    return sorted({wi for line in lines for wi in line.word_indices})
