# -*- coding: utf-8 -*-
"""Caplan K data models.

A Caplan K point line is a fixed column record:

- columns 1 to 16: point number (no ``*``, ``,`` or ``;``)
- column 18: valency (1 easting + 2 northing + 4 height)
- columns 19 to 32: easting, 33 to 46: northing, 47 to 59: height
- column 62 onward: object type (code) and ``|`` separated attributes

Coordinates are kept as the strings found in the file.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from geoformat_lib.constants import CAPLAN_VALID_VALENCIES


class CaplanPoint(BaseModel):
    """A single point of a Caplan K file."""

    model_config = ConfigDict(frozen=True)

    number: str
    valency: int | None = None
    easting: str | None = None
    northing: str | None = None
    height: str | None = None
    code: str | None = None
    attributes: list[str] = Field(default_factory=list)
    line_number: int = 0

    @property
    def has_valid_valency(self) -> bool:
        return self.valency in CAPLAN_VALID_VALENCIES


class CaplanFile(BaseModel):
    """All points of a Caplan K file."""

    points: list[CaplanPoint] = Field(default_factory=list)
