# -*- coding: utf-8 -*-
"""Parser for Leica GSI8 and GSI16 files.

This module implements the decoder for word indexed GSI lines. Each line is
a whitespace separated sequence of tokens; GSI16 lines are prefixed with
``*``.

Architecture: The parser produces dictionaries (like loading JSON) which are
then fed to Pydantic models via a single `model_validate()` call. This keeps
parsing logic separate from model construction.

Malformed tokens are recorded in ``errors`` and skipped; the remaining
tokens of the same line are kept.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from geoformat_lib.constants import GSI16_LINE_PREFIX
from geoformat_lib.constants import GSI_HEADER_WIDTH
from geoformat_lib.constants import WORD_INDEX_WIDTH
from geoformat_lib.enums import Severity
from geoformat_lib.enums import WidthMode
from geoformat_lib.errors import FormatError
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation
from geoformat_lib.gsi.models import GsiBlock
from geoformat_lib.gsi.models import GsiFile
from geoformat_lib.gsi.models import GsiLine

logger = logging.getLogger(__name__)


class GsiParser:
    """Parser for Leica GSI lines.

    Errors are collected rather than thrown, allowing partial parsing
    of malformed files.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    NON_WHITESPACE = re.compile(r"\S+")

    def __init__(self) -> None:
        """Initialize a new parser with empty error list."""
        self.errors: list[ParseError] = []
        self._source: str = "<string>"

    def _add(
        self,
        severity: Severity,
        message: str,
        text: str = "",
        line: int = 0,
        column: int = 0,
    ) -> None:
        self.errors.append(
            ParseError(
                severity=severity,
                message=message,
                location=SourceLocation(
                    source=self._source,
                    line=line,
                    column=column,
                    text=text,
                ),
            )
        )

    def _add_error(self, message: str, text: str = "", line: int = 0, column: int = 0):
        """Add an error to the error list."""
        self._add(Severity.ERROR, message, text, line, column)

    def _add_warning(
        self, message: str, text: str = "", line: int = 0, column: int = 0
    ):
        """Add a warning to the error list."""
        self._add(Severity.WARNING, message, text, line, column)

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_token_to_dict(raw_token: str, width_mode: WidthMode) -> dict[str, Any]:
        """Split a raw GSI token into its parts.

        Args:
            raw_token: Token such as ``11....+00000A12``
            width_mode: Width of the data part

        Returns:
            Dictionary that can be fed to `GsiBlock.model_validate()`

        Raises:
            FormatError: If the token is too short, its word index is not
                numeric or its sign is invalid
        """
        token = raw_token.strip()
        min_length = GSI_HEADER_WIDTH + width_mode.data_width
        if len(token) < min_length:
            raise FormatError(
                f"GSI token `{token}` is too short "
                f"({len(token)} < {min_length} characters)"
            )

        word_index = token[:WORD_INDEX_WIDTH]
        if not (word_index.isascii() and word_index.isdigit()):
            raise FormatError(f"GSI token `{token}` has a non-numeric word index")

        sign = token[GSI_HEADER_WIDTH - 1]
        if sign not in ("+", "-"):
            raise FormatError(f"GSI token `{token}` has an invalid sign `{sign}`")

        return {
            "word_index": int(word_index),
            "information": token[WORD_INDEX_WIDTH : GSI_HEADER_WIDTH - 1],
            "sign": sign,
            "data": token[GSI_HEADER_WIDTH:],
            "width_mode": width_mode,
        }

    @classmethod
    def parse_token(cls, raw_token: str, width_mode: WidthMode) -> GsiBlock:
        """Parse a single GSI token.

        Raises:
            FormatError: If the token does not match the GSI token layout
        """
        return GsiBlock.model_validate(cls.parse_token_to_dict(raw_token, width_mode))

    # -------------------------------------------------------------------------
    # Lines
    # -------------------------------------------------------------------------

    def decode_line_to_dict(self, line: str, line_number: int = 0) -> dict[str, Any]:
        """Decode one GSI line to dictionary.

        Malformed tokens and repeated word indices are recorded in
        ``errors`` and skipped. Blocks are sorted by word index.

        Args:
            line: Raw GSI line
            line_number: Line number (0-based) for error messages

        Returns:
            Dictionary that can be fed to `GsiLine.model_validate()`

        Raises:
            FormatError: If no token of the line could be decoded
        """
        width_mode = WidthMode.from_line(line)
        blocks: list[dict[str, Any]] = []
        seen: set[int] = set()

        for match in self.NON_WHITESPACE.finditer(line):
            token = match.group()
            column = match.start()
            if token.startswith(GSI16_LINE_PREFIX):
                token = token[len(GSI16_LINE_PREFIX) :]
                column += len(GSI16_LINE_PREFIX)
                if not token:
                    continue

            try:
                block = self.parse_token_to_dict(token, width_mode)
            except FormatError as e:
                self._add_error(e.message, text=token, line=line_number, column=column)
                continue

            if block["word_index"] in seen:
                self._add_warning(
                    f"Duplicate word index {block['word_index']} ignored",
                    text=token,
                    line=line_number,
                    column=column,
                )
                continue

            seen.add(block["word_index"])
            blocks.append(block)

        if not blocks:
            raise FormatError(
                "Line contains no valid GSI token",
                location=SourceLocation(
                    source=self._source,
                    line=line_number,
                    column=0,
                    text=line,
                ),
            )

        blocks.sort(key=lambda block: block["word_index"])
        return {
            "line_number": line_number,
            "width_mode": width_mode,
            "blocks": blocks,
        }

    def decode_line(self, line: str, line_number: int = 0) -> GsiLine:
        """Decode one GSI line.

        Raises:
            FormatError: If no token of the line could be decoded
        """
        return GsiLine.model_validate(self.decode_line_to_dict(line, line_number))

    def decode_lines_to_dict(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Decode all lines of a GSI file to dictionary.

        Blank lines are skipped; lines without any valid token are recorded
        as errors and skipped.

        Args:
            lines: Raw GSI lines
            source: Source identifier for error messages

        Returns:
            Dictionary with "lines" key containing list of line dicts
        """
        self._source = source
        decoded: list[dict[str, Any]] = []

        for line_number, line in enumerate(lines):
            if not line.strip():
                continue
            try:
                decoded.append(self.decode_line_to_dict(line, line_number))
            except FormatError as e:
                logger.debug("Skipping line %d of `%s`: %s", line_number, source, e)
                self.errors.append(e.to_error())

        return {"lines": decoded}

    def decode_lines(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> list[GsiLine]:
        """Decode all lines of a GSI file.

        Args:
            lines: Raw GSI lines
            source: Source identifier for error messages

        Returns:
            List of decoded lines, blocks sorted by word index
        """
        data = self.decode_lines_to_dict(lines, source)
        return GsiFile.model_validate(data).lines
