# -*- coding: utf-8 -*-
"""Convert command for surveying files.

Reads one of the supported source formats and writes any of the target
formats. Formats without a direct writer are converted through GSI.
"""

import argparse
import logging
from pathlib import Path

from geoformat_lib.enums import SourceFormat
from geoformat_lib.enums import TargetFormat
from geoformat_lib.enums import WidthMode
from geoformat_lib.errors import ConversionError
from geoformat_lib.io import convert_file
from geoformat_lib.models import ConversionOptions

logger = logging.getLogger(__name__)

#: Source format guessed from the file extension
EXTENSION_SOURCES: dict[str, SourceFormat] = {
    ".gsi": SourceFormat.GSI,
    ".k": SourceFormat.CAPLAN,
    ".rec": SourceFormat.ZEISS,
    ".dat": SourceFormat.CADWORK,
    ".csv": SourceFormat.CSV,
    ".txt": SourceFormat.BASEL_LANDSCHAFT,
    ".mep": SourceFormat.TOPORAIL,
    ".pts": SourceFormat.TOPORAIL,
}


def detect_source_format(path: Path) -> SourceFormat:
    """Guess the source format of a file from its extension.

    Raises:
        ConversionError: If the extension is unknown
    """
    try:
        return EXTENSION_SOURCES[path.suffix.lower()]
    except KeyError:
        raise ConversionError(
            f"Unknown file extension: `{path.suffix}`, use --source"
        ) from None


def build_options(parsed_args: argparse.Namespace) -> ConversionOptions:
    """Build the conversion options from the parsed command line."""
    return ConversionOptions(
        separator="\t" if parsed_args.separator == "tab" else parsed_args.separator,
        width_mode=(
            WidthMode.GSI16
            if parsed_args.target_format == TargetFormat.GSI16.value
            else WidthMode.GSI8
        ),
        write_comment_line=parsed_args.comment_line,
        use_code_column=parsed_args.code_column,
        use_zero_heights=parsed_args.zero_heights,
        simple_format=parsed_args.simple,
        toporail_header=parsed_args.header,
    )


def convert(args: list[str]) -> int:
    """Entry point for the convert command."""
    parser = argparse.ArgumentParser(
        prog="geoformat convert",
        description="Convert surveying files between formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geoformat convert -i points.gsi -t toporail_pts        # Toporail PTS (stdout)
  geoformat convert -i points.gsi -t gsi16 -o out.gsi    # GSI8 -> GSI16
  geoformat convert -i points.k -t csv --separator ,     # Caplan K -> CSV
  geoformat convert -i node.dat -t gsi8 --code-column    # cadwork -> GSI8
  geoformat convert -i data.csv -s basel_stadt -t csv    # Basel Stadt -> CSV

Notes:
  - The source format is guessed from the extension if not specified
  - Formats without a direct writer are converted through GSI
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Input file path",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-s",
        "--source",
        choices=[fmt.value for fmt in SourceFormat],
        default=None,
        dest="source_format",
        help="Source format (guessed from the extension if not specified)",
    )
    parser.add_argument(
        "-t",
        "--target",
        choices=[fmt.value for fmt in TargetFormat],
        required=True,
        dest="target_format",
        help="Target format",
    )
    parser.add_argument(
        "--separator",
        choices=[",", ";", "tab", " "],
        default=";",
        help="CSV column separator (default: ;)",
    )
    parser.add_argument(
        "--comment-line",
        action="store_true",
        help="Write a comment line with the column names",
    )
    parser.add_argument(
        "--code-column",
        action="store_true",
        help="Read and write the code column",
    )
    parser.add_argument(
        "--zero-heights",
        action="store_true",
        help="Keep cadwork heights of 0.000000",
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="Write Caplan K without code and attributes",
    )
    parser.add_argument(
        "--header",
        action="store_true",
        help="Write the Toporail header tag",
    )

    parsed_args = parser.parse_args(args)

    try:
        source = (
            SourceFormat(parsed_args.source_format)
            if parsed_args.source_format
            else detect_source_format(parsed_args.input_file)
        )
        outcome = convert_file(
            parsed_args.input_file,
            parsed_args.output_file,
            source,
            parsed_args.target_format,
            build_options(parsed_args),
        )

    except ConversionError:
        logger.exception("Invalid conversion")
        return 1

    if not outcome.success:
        logger.error("Error: %s", outcome.error)
        return 1

    for error in outcome.errors:
        logger.warning("%s", error)

    if parsed_args.output_file is None:
        # Print to stdout
        print("\n".join(outcome.lines))  # noqa: T201
    else:
        logger.info(
            "Converted %s -> %s (%d lines)",
            parsed_args.input_file,
            parsed_args.output_file,
            len(outcome.lines),
        )

    return 0
