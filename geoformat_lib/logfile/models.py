# -*- coding: utf-8 -*-
"""Models of Leica System 1200 logfiles.

A logfile is a sequence of report blocks. Each block starts with a marker
line (``Leica System 1200 Setup, ...``) followed by a header of
``Label : value`` lines and the application specific body.
"""

from __future__ import annotations

import re

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from geoformat_lib.constants import LOGFILE_APPLICATION_START
from geoformat_lib.constants import LOGFILE_INSTRUMENT_TYPE
from geoformat_lib.constants import LOGFILE_SERIAL_NUMBER
from geoformat_lib.constants import LOGFILE_STORE_TO_JOB
from geoformat_lib.enums import BlockKind
from geoformat_lib.errors import ParseError


class LogfileBlock(BaseModel):
    """A contiguous run of logfile lines belonging to one application.

    Attributes:
        kind: Application that wrote the block
        lines: Non-blank lines, starting with the marker line
        start_line: 0-based index of the marker line in the logfile
    """

    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    lines: list[str] = Field(default_factory=list)
    start_line: int = 0

    def header_value(self, label: str) -> str | None:
        """Value of the first ``label : value`` line of the block."""
        pattern = re.compile(rf"^\s*{re.escape(label)}\s*:\s*(.*)$", re.IGNORECASE)
        for line in self.lines:
            if match := pattern.match(line):
                return match.group(1).strip()
        return None

    @property
    def instrument_type(self) -> str | None:
        return self.header_value(LOGFILE_INSTRUMENT_TYPE)

    @property
    def serial_number(self) -> str | None:
        return self.header_value(LOGFILE_SERIAL_NUMBER)

    @property
    def store_to_job(self) -> str | None:
        return self.header_value(LOGFILE_STORE_TO_JOB)

    @property
    def application_start(self) -> str | None:
        """Start of the application as ``date, time``."""
        return self.header_value(LOGFILE_APPLICATION_START)

    @property
    def application_start_date(self) -> str | None:
        if not self.application_start:
            return None
        return self.application_start.split(",")[0].strip()

    @property
    def application_start_time(self) -> str | None:
        if not self.application_start or "," not in self.application_start:
            return None
        return self.application_start.split(",", 1)[1].strip()


class LogfileAnalysis(BaseModel):
    """Result of a logfile analysis.

    Attributes:
        preamble: Lines before the first block
        blocks: Blocks in file order
        lines: Output lines (processed blocks and lines kept verbatim)
        errors: Warnings about blocks that could not be processed
    """

    preamble: list[str] = Field(default_factory=list)
    blocks: list[LogfileBlock] = Field(default_factory=list)
    lines: list[str] = Field(default_factory=list)
    errors: list[ParseError] = Field(default_factory=list)
