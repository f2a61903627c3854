# -*- coding: utf-8 -*-
"""Surveying Format Library.

A Python library for converting line based surveying data formats (Leica
GSI8/GSI16, Caplan K, Zeiss REC, cadwork, CSV, Basel Stadt/Landschaft,
Toporail MEP/PTS) and for cleaning up Leica System 1200 logfiles.

Usage:
    # Convert a file
    from geoformat_lib import convert_file
    outcome = convert_file(Path("a.gsi"), Path("a.pts"), "gsi", "toporail_pts")

    # Or work on lines
    from geoformat_lib import GsiParser, gsi_to_toporail
    lines = GsiParser().decode_lines(raw_lines)
    rows = gsi_to_toporail(lines)
"""

__version__ = "0.1.0"

# Constants
from geoformat_lib.constants import DEFAULT_ENCODING
from geoformat_lib.constants import JSON_ENCODING

# Enums
from geoformat_lib.enums import BlockKind
from geoformat_lib.enums import Separator
from geoformat_lib.enums import Severity
from geoformat_lib.enums import SourceFormat
from geoformat_lib.enums import TargetFormat
from geoformat_lib.enums import ToporailFormat
from geoformat_lib.enums import WidthMode
from geoformat_lib.errors import ConversionError
from geoformat_lib.errors import FormatError
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import PreconditionViolation
from geoformat_lib.errors import SourceLocation
from geoformat_lib.errors import UnsupportedBlockError
from geoformat_lib.gsi.models import GsiBlock
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.models import sort_by_word_index
from geoformat_lib.gsi.parser import GsiParser
from geoformat_lib.interface import GeoFormatInterface
from geoformat_lib.interface import ReadOutcome
from geoformat_lib.io import clear_up_file
from geoformat_lib.io import convert_file
from geoformat_lib.io import read_lines
from geoformat_lib.io import write_lines
from geoformat_lib.logfile.analyzer import LogfileAnalyzer
from geoformat_lib.logfile.clearup import clear_up_logfile
from geoformat_lib.logfile.processors import process_block
from geoformat_lib.models import ConversionOptions
from geoformat_lib.toporail.format import gsi_to_toporail

__all__ = [
    # Constants
    "DEFAULT_ENCODING",
    "JSON_ENCODING",
    # Enums
    "BlockKind",
    # Errors
    "ConversionError",
    # Configuration
    "ConversionOptions",
    "FormatError",
    # I/O
    "GeoFormatInterface",
    # GSI
    "GsiBlock",
    "GsiLine",
    "GsiParser",
    # Logfiles
    "LogfileAnalyzer",
    "ParseError",
    "PreconditionViolation",
    "ReadOutcome",
    "Separator",
    "Severity",
    "SourceFormat",
    "SourceLocation",
    "TargetFormat",
    "ToporailFormat",
    "UnsupportedBlockError",
    "WidthMode",
    "clear_up_file",
    "clear_up_logfile",
    "convert_file",
    "gsi_to_toporail",
    "process_block",
    "read_lines",
    "sort_by_word_index",
    "write_lines",
]
