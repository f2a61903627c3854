# -*- coding: utf-8 -*-
"""Trimming of logfile blocks.

Every application writes its report with a fixed template: a number of
boilerplate lines before and after the body. A processor strips them and
drops the block entirely when the body holds none of the keywords that
mark real results (computed points, a set station, staked points).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from geoformat_lib.enums import BlockKind
from geoformat_lib.errors import PreconditionViolation
from geoformat_lib.errors import UnsupportedBlockError
from geoformat_lib.logfile.models import LogfileBlock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrimRule:
    """Template of one block kind.

    Attributes:
        head: Boilerplate lines at the start of the block
        tail: Boilerplate lines at the end of the block
        keywords: Any of these in the body marks the block as informative
    """

    head: int
    tail: int
    keywords: tuple[str, ...]


TRIM_RULES: dict[BlockKind, TrimRule] = {
    BlockKind.COGO: TrimRule(
        head=2,
        tail=4,
        keywords=(
            "Computed",
            "Base Point",
            "Inverse",
            "Offset Point",
            "Traverse",
            "Stakeout Diff",
        ),
    ),
    BlockKind.REFERENCE_LINE: TrimRule(
        head=2,
        tail=5,
        keywords=("Measured Point", "Stakeout Point"),
    ),
    BlockKind.SETUP: TrimRule(head=2, tail=5, keywords=("Results",)),
    BlockKind.STAKEOUT: TrimRule(head=2, tail=5, keywords=("Point ID",)),
}


def trim_lines(lines: Sequence[str], rule: TrimRule) -> list[str]:
    """Strip the boilerplate of a block.

    Returns:
        The body, or an empty list if no keyword of ``rule`` occurs in it
    """
    body = list(lines[rule.head : max(rule.head, len(lines) - rule.tail)])
    if not any(keyword in line for line in body for keyword in rule.keywords):
        return []
    return body


def process_block(block: LogfileBlock | None) -> list[str]:
    """Trim a logfile block according to its kind.

    Args:
        block: Block to process

    Returns:
        Trimmed body lines, empty if the block carries no results

    Raises:
        PreconditionViolation: If ``block`` is None
        UnsupportedBlockError: For reference plane and volume blocks
    """
    if block is None:
        raise PreconditionViolation("Logfile block is None")

    match block.kind:
        case BlockKind.REFERENCE_PLANE | BlockKind.VOLUME:
            raise UnsupportedBlockError(block.kind.value)
        case kind if kind in TRIM_RULES:
            result = trim_lines(block.lines, TRIM_RULES[kind])
        case _:
            raise UnsupportedBlockError(str(block.kind))

    if not result:
        logger.debug(
            "%s block at line %d has no results", block.kind.value, block.start_line
        )
    return result
