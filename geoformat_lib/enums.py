# -*- coding: utf-8 -*-
"""Enumerations for surveying file formats.

This module contains all enumerations used by the readers, converters and the
logfile clear-up, including GSI width modes, logfile block kinds and the
Toporail output columns.
"""

from enum import Enum

from geoformat_lib.constants import GSI8_DATA_WIDTH
from geoformat_lib.constants import GSI16_DATA_WIDTH
from geoformat_lib.constants import GSI16_LINE_PREFIX
from geoformat_lib.constants import LOGFILE_COGO_MARKER
from geoformat_lib.constants import LOGFILE_GENERAL_MARKER
from geoformat_lib.constants import LOGFILE_REFERENCE_LINE_MARKER
from geoformat_lib.constants import LOGFILE_REFERENCE_PLANE_MARKER
from geoformat_lib.constants import LOGFILE_SETUP_MARKER
from geoformat_lib.constants import LOGFILE_STAKEOUT_MARKER
from geoformat_lib.constants import LOGFILE_VOLUME_MARKER
from geoformat_lib.constants import TOPORAIL_HEADER_PREFIX
from geoformat_lib.constants import TOPORAIL_HEADER_VARIANT


class WidthMode(str, Enum):
    """Value width of a Leica GSI file.

    Attributes:
        GSI8: 8 character data blocks
        GSI16: 16 character data blocks, lines prefixed with ``*``
    """

    GSI8 = "gsi8"
    GSI16 = "gsi16"

    @property
    def data_width(self) -> int:
        """Width of the data part of a token."""
        return GSI16_DATA_WIDTH if self is WidthMode.GSI16 else GSI8_DATA_WIDTH

    @classmethod
    def from_line(cls, line: str) -> "WidthMode":
        """Detect the width mode of a raw GSI line."""
        if line.lstrip().startswith(GSI16_LINE_PREFIX):
            return cls.GSI16
        return cls.GSI8


class DisplayRule(str, Enum):
    """How the data of a GSI block is rendered as a display value.

    Attributes:
        TEXT: Leading zeros stripped (point numbers, codes, comments, dates)
        ANGLE: Decimal point inserted for gon/degree units, zeros stripped
        RAW: Data returned unchanged
        DISTANCE: Decimal point by unit digit, sign prefixed when negative
        CONSTANT: Four decimals, sign always prefixed
        COORDINATE: Decimal point by unit digit, sign prefixed when negative
        UNKNOWN: Word index without display rule (empty display value)
    """

    TEXT = "text"
    ANGLE = "angle"
    RAW = "raw"
    DISTANCE = "distance"
    CONSTANT = "constant"
    COORDINATE = "coordinate"
    UNKNOWN = "unknown"


class BlockKind(str, Enum):
    """Kinds of blocks found in a Leica System 1200 logfile.

    Members are declared in marker priority order: a marker line is
    classified as the first kind whose marker it starts with.

    Attributes:
        COGO: Coordinate geometry calculations
        REFERENCE_LINE: Reference line application
        REFERENCE_PLANE: Reference plane application
        SETUP: Station setup
        STAKEOUT: Stakeout application
        VOLUME: Volume calculations
    """

    COGO = "cogo"
    REFERENCE_LINE = "reference_line"
    REFERENCE_PLANE = "reference_plane"
    SETUP = "setup"
    STAKEOUT = "stakeout"
    VOLUME = "volume"

    @property
    def marker(self) -> str:
        """Line prefix opening a block of this kind."""
        return {
            BlockKind.COGO: LOGFILE_COGO_MARKER,
            BlockKind.REFERENCE_LINE: LOGFILE_REFERENCE_LINE_MARKER,
            BlockKind.REFERENCE_PLANE: LOGFILE_REFERENCE_PLANE_MARKER,
            BlockKind.SETUP: LOGFILE_SETUP_MARKER,
            BlockKind.STAKEOUT: LOGFILE_STAKEOUT_MARKER,
            BlockKind.VOLUME: LOGFILE_VOLUME_MARKER,
        }[self]

    @staticmethod
    def is_marker(line: str) -> bool:
        """Check if a line starts any logfile block."""
        return line.startswith(LOGFILE_GENERAL_MARKER)

    @classmethod
    def from_line(cls, line: str) -> "BlockKind | None":
        """Classify a marker line.

        Args:
            line: Raw logfile line

        Returns:
            The matching BlockKind, or None if the line is not a known marker
        """
        for kind in cls:
            if line.startswith(kind.marker):
                return kind
        return None


class ToporailFormat(str, Enum):
    """Toporail target formats.

    Attributes:
        MEP: Measurement file
        PTS: Point (coordinate) file
    """

    MEP = "MEP"
    PTS = "PTS"

    @property
    def header_tag(self) -> str:
        """Header line identifying the file type."""
        return f"{TOPORAIL_HEADER_PREFIX}{self.value}{TOPORAIL_HEADER_VARIANT}"

    @classmethod
    def from_header(cls, line: str) -> "ToporailFormat | None":
        """Get the format announced by a header line (None if unknown)."""
        for fmt in cls:
            if line.startswith(f"{TOPORAIL_HEADER_PREFIX}{fmt.value}"):
                return fmt
        return None


class ToporailSlot(str, Enum):
    """Output columns of a Toporail row, in column order.

    Attributes:
        CODE: Numeric code
        POINT_NUMBER: Point number
        EASTING: Easting coordinate
        NORTHING: Northing coordinate
        HEIGHT: Height
        DATE: Measurement date
        AUTHOR: Author
        COMMENT: Free comment
        OVERHAULING: Overhauling flag
        AZIMUTH: Azimuth
    """

    CODE = "code"
    POINT_NUMBER = "point_number"
    EASTING = "easting"
    NORTHING = "northing"
    HEIGHT = "height"
    DATE = "date"
    AUTHOR = "author"
    COMMENT = "comment"
    OVERHAULING = "overhauling"
    AZIMUTH = "azimuth"


class Separator(str, Enum):
    """Column separators of delimited text files.

    Attributes:
        COMMA: ``,``
        SEMICOLON: ``;``
        TAB: tabulator
        SPACE: single blank
    """

    COMMA = ","
    SEMICOLON = ";"
    TAB = "\t"
    SPACE = " "


class ZeissDialect(str, Enum):
    """Dialects of the Zeiss REC format.

    Attributes:
        R4: Elta R4 lines (``For R4``)
        R5: Elta R5 lines (``For R5``)
        M5: Rec M5 lines (``For M5``)
        REC500: Rec 500 lines (three leading blanks)
    """

    R4 = "R4"
    R5 = "R5"
    M5 = "M5"
    REC500 = "REC500"

    @classmethod
    def from_line(cls, line: str) -> "ZeissDialect | None":
        """Detect the dialect of a REC line (None if not a REC data line)."""
        for dialect in (cls.R4, cls.R5, cls.M5):
            if line.startswith((f"For {dialect.value}", f"For_{dialect.value}")):
                return dialect
        if line.startswith("   ") and line.strip():
            return cls.REC500
        return None


class SourceFormat(str, Enum):
    """Formats that can be read and converted.

    Attributes:
        GSI: Leica GSI8 or GSI16
        CAPLAN: Caplan K
        ZEISS: Zeiss REC (R4, R5, M5, REC500)
        CADWORK: cadwork node.dat
        CSV: Generic delimited point file
        BASEL_STADT: Basel Stadt geodata CSV
        BASEL_LANDSCHAFT: Basel Landschaft geodata TXT
        TOPORAIL: Toporail MEP or PTS
    """

    GSI = "gsi"
    CAPLAN = "caplan"
    ZEISS = "zeiss"
    CADWORK = "cadwork"
    CSV = "csv"
    BASEL_STADT = "basel_stadt"
    BASEL_LANDSCHAFT = "basel_landschaft"
    TOPORAIL = "toporail"


class TargetFormat(str, Enum):
    """Formats that can be written.

    Attributes:
        GSI8: Leica GSI8
        GSI16: Leica GSI16
        CSV: Delimited point file
        CAPLAN: Caplan K
        ZEISS: Zeiss REC M5
        TOPORAIL_MEP: Toporail measurement file
        TOPORAIL_PTS: Toporail point file
        JSON: JSON dump of the decoded GSI lines
    """

    GSI8 = "gsi8"
    GSI16 = "gsi16"
    CSV = "csv"
    CAPLAN = "caplan"
    ZEISS = "zeiss"
    TOPORAIL_MEP = "toporail_mep"
    TOPORAIL_PTS = "toporail_pts"
    JSON = "json"


class Severity(str, Enum):
    """Severity level for parse errors.

    Attributes:
        ERROR: Input that had to be skipped
        WARNING: Non-fatal warning
    """

    ERROR = "error"
    WARNING = "warning"
