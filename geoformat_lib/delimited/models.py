# -*- coding: utf-8 -*-
"""Models for delimiter based point files (cadwork, Basel Stadt/Landschaft)."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class PointRecord(BaseModel):
    """A point read from a delimiter based file.

    Values are kept as the strings found in the file.
    """

    model_config = ConfigDict(frozen=True)

    number: str
    easting: str
    northing: str
    height: str | None = None
    code: str | None = None
    line_number: int = 0

    def to_row(self, use_code_column: bool = False) -> list[str]:
        """Cells in the order number, [code], easting, northing, [height]."""
        row = [self.number]
        if use_code_column:
            row.append(self.code or "")
        row.extend([self.easting, self.northing])
        if self.height is not None:
            row.append(self.height)
        return row


class PointFile(BaseModel):
    """All points of a delimiter based file.

    Attributes:
        columns: Column names found in the file header (optional)
        points: Points in file order
    """

    columns: list[str] = Field(default_factory=list)
    points: list[PointRecord] = Field(default_factory=list)
