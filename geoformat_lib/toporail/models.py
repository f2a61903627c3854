# -*- coding: utf-8 -*-
"""Toporail data models.

Toporail PTS (point) files use one tab separated row layout of ten columns:
numeric code, point number, easting, northing, height, date, author,
comment, overhauling and azimuth. MEP (measurement) files mix control
measurement, measurement, coordinate and station records, each read into a
``MepRecord`` of word indexed values.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from geoformat_lib.constants import TOPORAIL_SEPARATOR
from geoformat_lib.enums import ToporailFormat
from geoformat_lib.enums import ToporailSlot


class ToporailRow(BaseModel):
    """One Toporail row; missing columns are empty strings."""

    model_config = ConfigDict(frozen=True)

    code: str = ""
    point_number: str = ""
    easting: str = ""
    northing: str = ""
    height: str = ""
    date: str = ""
    author: str = ""
    comment: str = ""
    overhauling: str = ""
    azimuth: str = ""

    def cells(self) -> list[str]:
        """Column values in fixed Toporail order."""
        return [getattr(self, slot.value) for slot in ToporailSlot]

    @property
    def is_empty(self) -> bool:
        return not "".join(self.cells())

    def to_line(self, separator: str = TOPORAIL_SEPARATOR) -> str:
        return separator.join(self.cells())


class MepRecord(BaseModel):
    """One MEP record already mapped to GSI word indices.

    Attributes:
        record_type: MEP record type (``K``, ``M``, ``P`` or ``S``)
        point_number: Point number of the record
        point_word_index: Word index carrying the point number (11, or 71
            for the start point of a control measurement)
        values: Further (word index, value) pairs in column order
    """

    model_config = ConfigDict(frozen=True)

    record_type: str
    point_number: str = ""
    point_word_index: int = 11
    values: list[tuple[int, str]] = Field(default_factory=list)


class ToporailFile(BaseModel):
    """A Toporail file: PTS rows or MEP records."""

    format: ToporailFormat
    rows: list[ToporailRow] = Field(default_factory=list)
    records: list[MepRecord] = Field(default_factory=list)
