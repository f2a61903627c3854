# -*- coding: utf-8 -*-
"""Unified interface for surveying file conversion.

This module is the only place where files are read and written. The
converters themselves work on in-memory sequences of lines:

1. Files are read into lines (or CSV rows) with a `ReadOutcome`; missing
   files and unreadable encodings are reported, not raised
2. Parsers turn the lines into models via `model_validate()`
3. Writers turn the models into output lines
4. Output lines are written to disk

Reading failures never raise, so a batch of files can be converted even
if some of them are missing or broken.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Protocol

import orjson

from geoformat_lib.caplan.format import gsi_to_caplan
from geoformat_lib.caplan.parser import CaplanParser
from geoformat_lib.constants import DEFAULT_ENCODING
from geoformat_lib.constants import JSON_ENCODING
from geoformat_lib.delimited.format import basel_landschaft_to_csv
from geoformat_lib.delimited.format import basel_stadt_to_csv
from geoformat_lib.delimited.format import cadwork_to_csv
from geoformat_lib.delimited.format import caplan_to_csv
from geoformat_lib.delimited.format import gsi_to_csv
from geoformat_lib.delimited.format import zeiss_to_csv
from geoformat_lib.delimited.models import PointFile
from geoformat_lib.delimited.parser import BaselLandschaftParser
from geoformat_lib.delimited.parser import BaselStadtParser
from geoformat_lib.delimited.parser import CadworkParser
from geoformat_lib.delimited.parser import read_csv_rows
from geoformat_lib.enums import SourceFormat
from geoformat_lib.enums import TargetFormat
from geoformat_lib.enums import ToporailFormat
from geoformat_lib.enums import WidthMode
from geoformat_lib.errors import ConversionError
from geoformat_lib.errors import FormatError
from geoformat_lib.errors import ParseError
from geoformat_lib.gsi.format import caplan_to_gsi_lines
from geoformat_lib.gsi.format import format_gsi_lines
from geoformat_lib.gsi.format import points_to_gsi_lines
from geoformat_lib.gsi.format import rows_to_gsi_lines
from geoformat_lib.gsi.format import toporail_to_gsi_lines
from geoformat_lib.gsi.format import zeiss_to_gsi_lines
from geoformat_lib.gsi.models import GsiLine
from geoformat_lib.gsi.parser import GsiParser
from geoformat_lib.logfile.clearup import clear_up_framed_logfile
from geoformat_lib.logfile.clearup import clear_up_logfile
from geoformat_lib.models import ConversionOptions
from geoformat_lib.toporail.format import gsi_to_toporail
from geoformat_lib.toporail.parser import ToporailParser
from geoformat_lib.zeiss.format import gsi_to_zeiss_m5
from geoformat_lib.zeiss.parser import ZeissParser

logger = logging.getLogger(__name__)


class ProgressCallback(Protocol):
    """Protocol for progress callbacks."""

    def __call__(
        self,
        message: str | None = None,
        completed: int | None = None,
        total: int | None = None,
    ) -> None:
        """Report progress."""
        ...


@dataclass
class ReadOutcome:
    """Result of reading or converting one file.

    Attributes:
        success: False if the file could not be read, converted or written
        lines: Lines read (or written, for conversions)
        rows: Tokenized rows (CSV reads only)
        error: Reason of the failure
        errors: Records of the lines that were skipped
    """

    success: bool
    lines: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    error: str | None = None
    errors: list[ParseError] = field(default_factory=list)


#: Targets writing the same format as the source
_SAME_FORMAT_TARGETS: dict[SourceFormat, tuple[TargetFormat, ...]] = {
    SourceFormat.CAPLAN: (TargetFormat.CAPLAN,),
    SourceFormat.CSV: (TargetFormat.CSV,),
    SourceFormat.TOPORAIL: (TargetFormat.TOPORAIL_MEP, TargetFormat.TOPORAIL_PTS),
    SourceFormat.ZEISS: (TargetFormat.ZEISS,),
}

#: Target formats producing Leica GSI
_GSI_TARGETS: dict[TargetFormat, WidthMode] = {
    TargetFormat.GSI8: WidthMode.GSI8,
    TargetFormat.GSI16: WidthMode.GSI16,
}

#: Target formats producing Toporail
_TOPORAIL_TARGETS: dict[TargetFormat, ToporailFormat] = {
    TargetFormat.TOPORAIL_MEP: ToporailFormat.MEP,
    TargetFormat.TOPORAIL_PTS: ToporailFormat.PTS,
}


class GeoFormatInterface:
    """Unified interface for surveying file I/O and conversion.

    Example:
        # Convert a GSI8 file to a Toporail point file
        outcome = GeoFormatInterface.convert_file(
            Path("points.gsi"),
            Path("points.pts"),
            source=SourceFormat.GSI,
            target=TargetFormat.TOPORAIL_PTS,
        )
        if not outcome.success:
            print(outcome.error)
    """

    # -------------------------------------------------------------------------
    # Reading and Writing
    # -------------------------------------------------------------------------

    @classmethod
    def read_lines(
        cls,
        path: Path,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> ReadOutcome:
        """Read a text file into lines.

        Args:
            path: File to read
            encoding: Character encoding (default: ISO-8859-1)

        Returns:
            ReadOutcome, unsuccessful if the file is missing or cannot be
            decoded
        """
        try:
            with path.open(encoding=encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unable to read `%s`: %s", path, e)
            return ReadOutcome(success=False, error=str(e))
        return ReadOutcome(success=True, lines=lines)

    @classmethod
    def read_csv(
        cls,
        path: Path,
        separator: str = ";",
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> ReadOutcome:
        """Read a CSV file into tokenized rows."""
        outcome = cls.read_lines(path, encoding=encoding)
        if outcome.success:
            outcome.rows = read_csv_rows(outcome.lines, separator)
        return outcome

    @classmethod
    def write_lines(
        cls,
        lines: Iterable[str],
        path: Path,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Write lines to a text file (characters the encoding lacks are replaced)."""
        with path.open(mode="w", encoding=encoding, errors="replace", newline="") as f:
            for line in lines:
                f.write(f"{line}\n")

    # -------------------------------------------------------------------------
    # Conversion (Lines → Lines)
    # -------------------------------------------------------------------------

    @classmethod
    def _to_gsi_lines(
        cls,
        source: SourceFormat,
        lines: Sequence[str],
        options: ConversionOptions,
        errors: list[ParseError],
        source_name: str,
    ) -> list[GsiLine]:
        width_mode = options.width_mode
        match source:
            case SourceFormat.GSI:
                parser = GsiParser()
                result = parser.decode_lines(lines, source_name)
            case SourceFormat.CAPLAN:
                parser = CaplanParser()
                points = parser.parse_lines(lines, source_name)
                result = caplan_to_gsi_lines(
                    points, width_mode, options.use_code_column
                )
            case SourceFormat.ZEISS:
                parser = ZeissParser()
                result = zeiss_to_gsi_lines(
                    parser.decode_lines(lines, source_name), width_mode
                )
            case SourceFormat.CADWORK:
                parser = CadworkParser()
                points = parser.parse_lines(
                    lines, source_name, options.use_zero_heights
                )
                result = points_to_gsi_lines(
                    points, width_mode, options.use_code_column
                )
            case SourceFormat.CSV:
                rows = read_csv_rows(lines, options.separator)
                return rows_to_gsi_lines(rows, width_mode, options.use_code_column)
            case SourceFormat.BASEL_STADT:
                parser = BaselStadtParser()
                points = parser.parse_rows(read_csv_rows(lines), source_name)
                result = points_to_gsi_lines(points, width_mode)
            case SourceFormat.BASEL_LANDSCHAFT:
                parser = BaselLandschaftParser()
                points = parser.parse_lines(lines, source_name)
                result = points_to_gsi_lines(
                    points, width_mode, options.use_code_column
                )
            case SourceFormat.TOPORAIL:
                parser = ToporailParser()
                toporail = parser.parse_lines(lines, source_name)
                result = toporail_to_gsi_lines(
                    [*toporail.rows, *toporail.records], width_mode
                )

        errors.extend(parser.errors)
        return result

    @classmethod
    def _to_csv(
        cls,
        source: SourceFormat,
        lines: Sequence[str],
        options: ConversionOptions,
        errors: list[ParseError],
        source_name: str,
    ) -> list[str]:
        separator = options.separator
        match source:
            case SourceFormat.CAPLAN:
                parser = CaplanParser()
                result = caplan_to_csv(
                    parser.parse_lines(lines, source_name),
                    separator,
                    simple_format=options.simple_format,
                    write_comment_line=options.write_comment_line,
                    use_code_column=options.use_code_column,
                )
            case SourceFormat.ZEISS:
                parser = ZeissParser()
                result = zeiss_to_csv(
                    parser.decode_lines(lines, source_name), separator
                )
            case SourceFormat.CADWORK:
                parser = CadworkParser()
                data = parser.parse_lines_to_dict(
                    lines, source_name, options.use_zero_heights
                )
                point_file = PointFile.model_validate(data)
                result = cadwork_to_csv(
                    point_file.points,
                    separator,
                    use_code_column=options.use_code_column,
                    columns=point_file.columns if options.write_comment_line else None,
                )
            case SourceFormat.BASEL_STADT:
                parser = BaselStadtParser()
                result = basel_stadt_to_csv(
                    parser.parse_rows(read_csv_rows(lines), source_name), separator
                )
            case SourceFormat.BASEL_LANDSCHAFT:
                parser = BaselLandschaftParser()
                result = basel_landschaft_to_csv(
                    parser.parse_lines(lines, source_name),
                    separator,
                    use_code_column=options.use_code_column,
                )
            case _:
                gsi_lines = cls._to_gsi_lines(
                    source, lines, options, errors, source_name
                )
                return gsi_to_csv(
                    gsi_lines,
                    separator,
                    write_comment_line=options.write_comment_line,
                )

        errors.extend(parser.errors)
        return result

    @classmethod
    def convert_lines(
        cls,
        source: SourceFormat | str,
        target: TargetFormat | str,
        lines: Sequence[str],
        options: ConversionOptions | None = None,
        *,
        source_name: str = "<string>",
    ) -> tuple[list[str], list[ParseError]]:
        """Convert lines of one format into lines of another format.

        Formats without a direct writer go through GSI lines, so every
        source can be written as GSI, Caplan K, Zeiss REC M5, Toporail or
        JSON.

        Args:
            source: Format of ``lines``
            target: Format to produce
            lines: Input lines
            options: Conversion options (defaults if None)
            source_name: Source identifier for error records

        Returns:
            Tuple of (output lines, records of skipped input)

        Raises:
            ConversionError: If the conversion is not supported or source and
                target are the same format
            FormatError: If a Toporail input lacks its header
        """
        source = SourceFormat(source)
        target = TargetFormat(target)
        if target in _SAME_FORMAT_TARGETS.get(source, ()):
            raise ConversionError(
                f"Invalid conversion: {source.value} => {target.value}. "
                "Source and target formats must be different."
            )

        options = options or ConversionOptions()
        errors: list[ParseError] = []

        if target is TargetFormat.CSV:
            return cls._to_csv(source, lines, options, errors, source_name), errors

        gsi_lines = cls._to_gsi_lines(source, lines, options, errors, source_name)

        match target:
            case TargetFormat.GSI8 | TargetFormat.GSI16:
                result = format_gsi_lines(gsi_lines, _GSI_TARGETS[target])
            case TargetFormat.CAPLAN:
                result = gsi_to_caplan(
                    gsi_lines,
                    simple_format=options.simple_format,
                    write_comment_line=options.write_comment_line,
                )
            case TargetFormat.ZEISS:
                result = gsi_to_zeiss_m5(gsi_lines)
            case TargetFormat.TOPORAIL_MEP | TargetFormat.TOPORAIL_PTS:
                result = gsi_to_toporail(
                    gsi_lines,
                    _TOPORAIL_TARGETS[target],
                    header=options.toporail_header,
                )
            case TargetFormat.JSON:
                payload = [line.model_dump(mode="json") for line in gsi_lines]
                json_bytes = orjson.dumps(payload, option=orjson.OPT_INDENT_2)
                result = json_bytes.decode(JSON_ENCODING).splitlines()
            case _:
                raise ConversionError(f"Unsupported target format: {target.value}")

        return result, errors

    @classmethod
    def convert_file(
        cls,
        input_path: Path,
        output_path: Path | None,
        source: SourceFormat | str,
        target: TargetFormat | str,
        options: ConversionOptions | None = None,
    ) -> ReadOutcome:
        """Convert a file.

        Args:
            input_path: File to read
            output_path: File to write (nothing is written if None)
            source: Format of the input file
            target: Format to produce
            options: Conversion options (defaults if None)

        Returns:
            ReadOutcome holding the output lines, unsuccessful if the file
            could not be read, its content not converted or the output not
            written

        Raises:
            ConversionError: If the conversion is not supported
        """
        options = options or ConversionOptions()
        outcome = cls.read_lines(input_path, encoding=options.encoding)
        if not outcome.success:
            return outcome

        try:
            lines, errors = cls.convert_lines(
                source, target, outcome.lines, options, source_name=str(input_path)
            )
        except FormatError as e:
            logger.warning("Unable to convert `%s`: %s", input_path, e)
            return ReadOutcome(success=False, error=str(e), errors=[e.to_error()])

        if output_path is not None:
            encoding = (
                JSON_ENCODING
                if TargetFormat(target) is TargetFormat.JSON
                else options.encoding
            )
            try:
                cls.write_lines(lines, output_path, encoding=encoding)
            except OSError as e:
                logger.warning("Unable to write `%s`: %s", output_path, e)
                return ReadOutcome(
                    success=False, lines=lines, error=str(e), errors=errors
                )

        return ReadOutcome(success=True, lines=lines, errors=errors)

    @classmethod
    def convert_files(
        cls,
        input_paths: Sequence[Path],
        output_dir: Path,
        source: SourceFormat | str,
        target: TargetFormat | str,
        options: ConversionOptions | None = None,
        *,
        suffix: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> dict[Path, ReadOutcome]:
        """Convert a batch of files into ``output_dir``.

        A file that cannot be read, converted or written does not stop the batch.

        Args:
            input_paths: Files to convert
            output_dir: Directory of the written files
            source: Format of the input files
            target: Format to produce
            options: Conversion options (defaults if None)
            suffix: Suffix of the written files (default: target format name)
            on_progress: Optional progress callback

        Returns:
            Outcome per input file
        """
        target = TargetFormat(target)
        suffix = suffix or f".{target.value}"
        results: dict[Path, ReadOutcome] = {}

        for completed, input_path in enumerate(input_paths):
            if on_progress:
                on_progress(
                    message=f"Converting {input_path.name}",
                    completed=completed,
                    total=len(input_paths),
                )
            output_path = output_dir / input_path.with_suffix(suffix).name
            results[input_path] = cls.convert_file(
                input_path, output_path, source, target, options
            )

        if on_progress:
            on_progress(completed=len(input_paths), total=len(input_paths))
        return results

    # -------------------------------------------------------------------------
    # Logfile Clear-up
    # -------------------------------------------------------------------------

    @classmethod
    def clear_up_file(
        cls,
        input_path: Path,
        output_path: Path | None = None,
        *,
        framed: bool = False,
        clean_by_content: bool = True,
        encoding: str = DEFAULT_ENCODING,
    ) -> ReadOutcome:
        """Clear up a Leica System 1200 logfile.

        Args:
            input_path: Logfile to read
            output_path: File to write (nothing is written if None)
            framed: The logfile uses ``Logfile - Begin/End`` frames
            clean_by_content: Trim framed reports (framed logfiles only)
            encoding: Character encoding

        Returns:
            ReadOutcome holding the cleared up lines, unsuccessful if the
            logfile could not be read or the output not written
        """
        outcome = cls.read_lines(input_path, encoding=encoding)
        if not outcome.success:
            return outcome

        if framed:
            analysis = clear_up_framed_logfile(
                outcome.lines, clean_by_content, source=str(input_path)
            )
        else:
            analysis = clear_up_logfile(outcome.lines, source=str(input_path))

        if output_path is not None:
            try:
                cls.write_lines(analysis.lines, output_path, encoding=encoding)
            except OSError as e:
                logger.warning("Unable to write `%s`: %s", output_path, e)
                return ReadOutcome(
                    success=False,
                    lines=analysis.lines,
                    error=str(e),
                    errors=analysis.errors,
                )

        return ReadOutcome(success=True, lines=analysis.lines, errors=analysis.errors)
