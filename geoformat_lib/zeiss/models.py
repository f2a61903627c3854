# -*- coding: utf-8 -*-
"""Zeiss REC data models.

A REC line carries a point identification, a point number and up to three
value blocks, each made of a type identifier (``Y``, ``X``, ``Z``, ``Hz``,
``D``, ...), a value and a unit. Column positions depend on the dialect.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from geoformat_lib.enums import ZeissDialect

#: Inclusive (first, last) column pair
Span = tuple[int, int]


@dataclass(frozen=True)
class BlockColumns:
    """Columns of one value block."""

    type_identifier: Span
    value: Span
    unit: Span | None = None


@dataclass(frozen=True)
class ZeissLayout:
    """Fixed column layout of a REC dialect.

    Attributes:
        line_number: Columns of the line number (None if not present)
        point_identification: Columns of the point identification
        point_number: Columns of the point number
        blocks: Columns of the value blocks
        min_lengths: Minimum line length for each value block to be read
        error_start: First column of the error field (None if not present)
    """

    line_number: Span | None
    point_identification: Span
    point_number: Span
    blocks: tuple[BlockColumns, ...]
    min_lengths: tuple[int, ...] = (0, 0, 0)
    error_start: int | None = None


LAYOUTS: dict[ZeissDialect, ZeissLayout] = {
    ZeissDialect.R4: ZeissLayout(
        line_number=None,
        point_identification=(7, 8),
        point_number=(10, 16),
        blocks=(
            BlockColumns((18, 19), (21, 31), (33, 36)),
            BlockColumns((38, 39), (41, 51), (53, 56)),
            BlockColumns((58, 59), (61, 71), (73, 76)),
        ),
    ),
    ZeissDialect.R5: ZeissLayout(
        line_number=(11, 14),
        point_identification=(16, 17),
        point_number=(19, 25),
        blocks=(
            BlockColumns((27, 28), (30, 40), (42, 45)),
            BlockColumns((47, 48), (50, 60), (62, 65)),
            BlockColumns((67, 68), (70, 80), (82, 85)),
        ),
    ),
    ZeissDialect.M5: ZeissLayout(
        line_number=(11, 15),
        point_identification=(17, 19),
        point_number=(21, 47),
        blocks=(
            BlockColumns((49, 50), (52, 65), (67, 70)),
            BlockColumns((72, 73), (75, 88), (90, 93)),
            BlockColumns((95, 96), (98, 111), (113, 116)),
        ),
        error_start=118,
    ),
    ZeissDialect.REC500: ZeissLayout(
        line_number=(3, 6),
        point_identification=(22, 34),
        point_number=(8, 21),
        blocks=(
            BlockColumns((36, 37), (38, 49)),
            BlockColumns((51, 52), (53, 65)),
            BlockColumns((67, 68), (69, 77)),
        ),
        min_lengths=(0, 51, 67),
    ),
}

#: GSI word index for each REC type identifier
TYPE_WORD_INDEX: dict[str, int] = {
    "Hz": 21,
    "V1": 22,
    "hz": 24,
    "Dh": 25,
    "HV": 26,
    "v1": 27,
    "Dv": 28,
    "D": 31,
    "SD": 31,
    "E": 32,
    "HD": 32,
    "h": 33,
    "KD": 41,
    "KN": 41,
    "T": 42,
    "TI": 42,
    "TN": 42,
    "TO": 42,
    "TR": 42,
    "A": 58,
    "Y": 81,
    "X": 82,
    "Z": 83,
    "ZE": 83,
    "x": 84,
    "dy": 84,
    "y": 85,
    "dx": 85,
    "dz": 86,
    "ah": 87,
    "th": 87,
    "ih": 88,
}


class ZeissBlock(BaseModel):
    """One value block of a REC line."""

    model_config = ConfigDict(frozen=True)

    type_identifier: str
    value: str
    unit: str = ""

    @property
    def word_index(self) -> int | None:
        return TYPE_WORD_INDEX.get(self.type_identifier)


class ZeissLine(BaseModel):
    """A decoded REC line."""

    model_config = ConfigDict(frozen=True)

    dialect: ZeissDialect
    line_number: int | None = None
    point_identification: str = ""
    point_number: str = ""
    blocks: list[ZeissBlock] = Field(default_factory=list)
    error: str = ""


class ZeissFile(BaseModel):
    """All decoded lines of a REC file."""

    lines: list[ZeissLine] = Field(default_factory=list)
