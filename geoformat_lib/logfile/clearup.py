# -*- coding: utf-8 -*-
"""Clear-up of Leica System 1200 logfiles.

Two layouts are handled:

- plain logfiles, where each application report starts with a
  ``Leica System 1200 ...`` marker line (see `LogfileAnalyzer`)
- framed logfiles, where every report is enclosed by ``Logfile - Begin``
  and ``Logfile - End`` lines
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Sequence

from geoformat_lib.constants import LOGFILE_FRAME_BEGIN
from geoformat_lib.constants import LOGFILE_FRAME_END
from geoformat_lib.enums import BlockKind
from geoformat_lib.enums import Severity
from geoformat_lib.errors import ParseError
from geoformat_lib.errors import SourceLocation
from geoformat_lib.errors import UnsupportedBlockError
from geoformat_lib.logfile.analyzer import LogfileAnalyzer
from geoformat_lib.logfile.models import LogfileAnalysis
from geoformat_lib.logfile.models import LogfileBlock
from geoformat_lib.logfile.processors import process_block

logger = logging.getLogger(__name__)


def clear_up_logfile(
    lines: Iterable[str],
    source: str = "<string>",
) -> LogfileAnalysis:
    """Remove boilerplate and blocks without results from a logfile.

    Reference plane and volume blocks cannot be trimmed; they are kept
    unchanged and reported as warnings in ``errors``.
    """
    return LogfileAnalyzer(process_block).analyze(lines, source)


def _classify_frame(frame: Sequence[str]) -> BlockKind | None:
    for line in frame:
        for kind in BlockKind:
            if kind.marker in line:
                return kind
    return None


def clear_up_framed_logfile(
    lines: Sequence[str],
    clean_by_content: bool = True,
    source: str = "<string>",
) -> LogfileAnalysis:
    """Clear up a logfile whose reports are framed by begin/end lines.

    Args:
        lines: Raw logfile lines
        clean_by_content: Trim frames with the block processors; when
            False every frame is kept as is
        source: Source identifier for error messages

    Returns:
        LogfileAnalysis; lines outside of frames are kept verbatim, frames
        of unknown applications are dropped when cleaning by content
    """
    blocks: list[LogfileBlock] = []
    output: list[str] = []
    errors: list[ParseError] = []

    frame: list[str] | None = None
    start_line = 0
    for line_number, line in enumerate(lines):
        if frame is None:
            if LOGFILE_FRAME_BEGIN in line:
                frame = [line]
                start_line = line_number
            else:
                output.append(line)
            continue

        frame.append(line)
        if LOGFILE_FRAME_END not in line:
            continue

        if not clean_by_content:
            output.extend(frame)
        elif (kind := _classify_frame(frame)) is None:
            logger.debug("Frame at line %d has no known application", start_line + 1)
        else:
            block = LogfileBlock(kind=kind, lines=frame, start_line=start_line)
            blocks.append(block)
            try:
                output.extend(process_block(block))
            except UnsupportedBlockError as e:
                logger.warning("%s, frame at line %d kept", e, start_line + 1)
                errors.append(
                    ParseError(
                        severity=Severity.WARNING,
                        message=str(e),
                        location=SourceLocation(
                            source=source, line=start_line, column=0, text=frame[0]
                        ),
                    )
                )
                output.extend(frame)
        frame = None

    if frame is not None:
        logger.warning("Unterminated frame at line %d kept", start_line + 1)
        output.extend(frame)

    return LogfileAnalysis(blocks=blocks, lines=output, errors=errors)
