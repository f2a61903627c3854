# -*- coding: utf-8 -*-
"""Clear-up command for Leica System 1200 logfiles."""

import argparse
import logging
from pathlib import Path

from geoformat_lib.io import clear_up_file

logger = logging.getLogger(__name__)


def clearup(args: list[str]) -> int:
    """Entry point for the clearup command."""
    parser = argparse.ArgumentParser(
        prog="geoformat clearup",
        description="Remove boilerplate and empty reports from a logfile",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Input logfile path",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--framed",
        action="store_true",
        help="Reports are framed by `Logfile - Begin` / `Logfile - End` lines",
    )
    parser.add_argument(
        "--keep-all",
        action="store_true",
        help="Keep the content of framed reports (framed logfiles only)",
    )

    parsed_args = parser.parse_args(args)

    outcome = clear_up_file(
        parsed_args.input_file,
        parsed_args.output_file,
        framed=parsed_args.framed,
        clean_by_content=not parsed_args.keep_all,
    )
    if not outcome.success:
        logger.error("Error: %s", outcome.error)
        return 1

    for error in outcome.errors:
        logger.warning("%s", error)

    if parsed_args.output_file is None:
        print("\n".join(outcome.lines))  # noqa: T201
    else:
        logger.info(
            "Cleared up %s -> %s", parsed_args.input_file, parsed_args.output_file
        )

    return 0
