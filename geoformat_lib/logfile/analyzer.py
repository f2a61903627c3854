# -*- coding: utf-8 -*-
"""Segmentation of Leica System 1200 logfiles into blocks.

The analyzer scans the logfile top to bottom. A line starting with the
general marker ``Leica System 1200`` closes the open block and opens a new
one whose kind is read from the marker line. Each closed block is handed
exactly once to the processor; the block still open at the end of the
input is handed over as well. Blank lines are dropped everywhere.

Lines outside any known block (before the first marker, or after a marker
of an unknown application) are kept verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterable

from geoformat_lib.enums import BlockKind
from geoformat_lib.enums import Severity
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation
from geoformat_lib.errors import UnsupportedBlockError
from geoformat_lib.logfile.models import LogfileAnalysis
from geoformat_lib.logfile.models import LogfileBlock
from geoformat_lib.logfile.processors import process_block

logger = logging.getLogger(__name__)

BlockProcessor = Callable[[LogfileBlock], list[str]]


class LogfileAnalyzer:
    """Block classifier for Leica System 1200 logfiles.

    Attributes:
        processor: Callable turning a block into output lines
        errors: Warnings about blocks that were kept unprocessed
    """

    def __init__(self, processor: BlockProcessor | None = None) -> None:
        self.processor: BlockProcessor = processor or process_block
        self.errors: list[ParseError] = []
        self._source: str = "<string>"

    def _dispatch(self, block: LogfileBlock) -> list[str]:
        try:
            return self.processor(block)
        except UnsupportedBlockError as e:
            logger.warning("%s, block at line %d kept", e, block.start_line + 1)
            self.errors.append(
                ParseError(
                    severity=Severity.WARNING,
                    message=str(e),
                    location=SourceLocation(
                        source=self._source,
                        line=block.start_line,
                        column=0,
                        text=block.lines[0] if block.lines else "",
                    ),
                )
            )
            return list(block.lines)

    def analyze(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> LogfileAnalysis:
        """Split a logfile into blocks and process them.

        Args:
            lines: Raw logfile lines
            source: Source identifier for error messages

        Returns:
            LogfileAnalysis with the blocks and the output lines
        """
        self._source = source
        preamble: list[str] = []
        blocks: list[LogfileBlock] = []
        output: list[str] = []

        current_kind: BlockKind | None = None
        buffer: list[str] = []
        start_line = 0

        def close_block() -> None:
            if current_kind is None:
                return
            block = LogfileBlock(kind=current_kind, lines=buffer, start_line=start_line)
            blocks.append(block)
            output.extend(self._dispatch(block))

        for line_number, line in enumerate(lines):
            if not line.strip():
                continue

            if BlockKind.is_marker(line):
                close_block()
                current_kind = BlockKind.from_line(line)
                buffer = []
                start_line = line_number
                if current_kind is None:
                    logger.debug("Unknown logfile block at line %d", line_number + 1)

            if current_kind is not None:
                buffer.append(line)
                continue

            if not blocks:
                preamble.append(line)
            output.append(line)

        close_block()

        return LogfileAnalysis(
            preamble=preamble,
            blocks=blocks,
            lines=output,
            errors=list(self.errors),
        )
