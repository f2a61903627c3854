# -*- coding: utf-8 -*-
"""Constants used throughout the geoformat_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Default encoding for surveying text files (GSI, Caplan K, REC, CSV, ...)
DEFAULT_ENCODING = "iso-8859-1"

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Leica GSI
# -----------------------------------------------------------------------------

#: Number of characters of the word index prefix of a token
WORD_INDEX_WIDTH: int = 2

#: Word index (2) + information (4) + sign (1)
GSI_HEADER_WIDTH: int = 7

#: Width of the data part of a GSI8 token
GSI8_DATA_WIDTH: int = 8

#: Width of the data part of a GSI16 token
GSI16_DATA_WIDTH: int = 16

#: GSI16 lines start with this character
GSI16_LINE_PREFIX: str = "*"

#: Information string for synthesized coordinate blocks (1/10 mm)
GSI_INFO_COORDINATE: str = "..46"

#: Information string for synthesized text blocks
GSI_INFO_TEXT: str = "..46"

#: Information string for all other synthesized blocks
GSI_INFO_DEFAULT: str = "..4."

#: Coordinates are stored in 1/10 mm when synthesized
GSI_COORDINATE_SCALE: int = 10000

#: Decimal places per unit digit (last information character) of distances
DISTANCE_DECIMALS: dict[str, int] = {"0": 3, "6": 4, "8": 5}

#: Decimal places per unit digit of coordinates and heights
COORDINATE_DECIMALS: dict[str, int] = {"0": 3, "6": 4}

#: Angle payloads carry 5 decimals when the unit digit is one of these
ANGLE_DECIMAL_UNITS: tuple[str, ...] = ("2", "3")

# -----------------------------------------------------------------------------
# Toporail
# -----------------------------------------------------------------------------

#: Column separator of Toporail MEP/PTS files
TOPORAIL_SEPARATOR: str = "\t"

#: Header tag prefix
TOPORAIL_HEADER_PREFIX: str = "@"

#: Variant letter appended to the header tag
TOPORAIL_HEADER_VARIANT: str = "B"

#: MEP record types
TOPORAIL_MEP_CONTROL_RECORD: str = "K"
TOPORAIL_MEP_MEASUREMENT_RECORD: str = "M"
TOPORAIL_MEP_POINT_RECORD: str = "P"
TOPORAIL_MEP_STATION_RECORD: str = "S"

#: Century prefix used when reconstructing a date from word indices 18/19
DATE_CENTURY: str = "20"

# -----------------------------------------------------------------------------
# Caplan K
# -----------------------------------------------------------------------------

#: Comment lines start with this character
CAPLAN_COMMENT_PREFIX: str = "!"

#: Column ruler written as first comment line
CAPLAN_RULER_LINE: str = (
    "!---+----1----+----2----+----3----+----4----+----5----+----6----+----7----+----8"
)

#: Separator line written around the comment header
CAPLAN_SEPARATOR_LINE: str = "!" + "-" * 79

#: Column widths of a Caplan K point line
CAPLAN_NUMBER_WIDTH: int = 16
CAPLAN_VALENCY_WIDTH: int = 2
CAPLAN_EASTING_WIDTH: int = 14
CAPLAN_NORTHING_WIDTH: int = 14
CAPLAN_HEIGHT_WIDTH: int = 13

#: First column of the object type (code) and attributes
CAPLAN_CODE_COLUMN: int = 61

#: Characters not allowed in point numbers and their replacements
CAPLAN_POINT_NUMBER_REPLACEMENTS: dict[str, str] = {"*": "#", ",": ".", ";": ":"}

#: Valid valencies (1 easting + 2 northing + 4 height)
CAPLAN_VALID_VALENCIES: tuple[int, ...] = (3, 4, 7)

# -----------------------------------------------------------------------------
# cadwork / Basel
# -----------------------------------------------------------------------------

#: Number of header lines of a cadwork node.dat file
CADWORK_HEADER_LINES: int = 3

#: Height written by cadwork for points without height
CADWORK_ZERO_HEIGHT: str = "0.000000"

#: Basel Landschaft marker for missing heights
BASEL_LANDSCHAFT_NULL: str = "NULL"

#: Height placeholder for points without height
MISSING_HEIGHT: str = "-9999"

# -----------------------------------------------------------------------------
# Leica System 1200 Logfiles
# -----------------------------------------------------------------------------

#: Every block of a Leica System 1200 logfile starts with this prefix
LOGFILE_GENERAL_MARKER: str = "Leica System 1200"

LOGFILE_COGO_MARKER: str = "Leica System 1200 COGO,"
LOGFILE_REFERENCE_LINE_MARKER: str = "Leica System 1200 Reference Line,"
LOGFILE_REFERENCE_PLANE_MARKER: str = "Leica System 1200 Reference Plane,"
LOGFILE_SETUP_MARKER: str = "Leica System 1200 Setup,"
LOGFILE_STAKEOUT_MARKER: str = "Leica System 1200 Stakeout,"
LOGFILE_VOLUME_MARKER: str = "Leica System 1200, Volume Calculations"

#: Frame lines of logfiles exported with begin/end markers
LOGFILE_FRAME_BEGIN: str = "Logfile - Begin"
LOGFILE_FRAME_END: str = "Logfile - End"

#: Labels of the header elements of every block
LOGFILE_INSTRUMENT_TYPE: str = "Instrument Type"
LOGFILE_SERIAL_NUMBER: str = "Instrument Serial No."
LOGFILE_STORE_TO_JOB: str = "Store To Job"
LOGFILE_APPLICATION_START: str = "Start"
